"""Tests for directed/undirected conversions and orientation binding."""

import numpy as np

from g2io.generators import GENERATORS, build_chain, sample_barabasi_albert
from g2io.graph.orientation import (
    OrientationRule,
    convert_graph,
    inter_edges_to_directed,
    inter_edges_to_undirected,
    to_directed,
    to_undirected,
)
from g2io.graph.types import Graph, Orientation
from g2io.linkers import LINKERS, Community, InterGraphEdge, LinkDirection


def _edge_set(graph: Graph) -> set[tuple[int, int]]:
    return {(min(a, b), max(a, b)) for a, b in graph.edges()}


class TestGraphConversion:
    """Whole-graph conversions."""

    def test_to_directed_one_edge_per_edge(self) -> None:
        g = sample_barabasi_albert(30, 3, np.random.default_rng(0))
        directed = to_directed(g, np.random.default_rng(1))
        assert directed.is_directed
        assert directed.n_nodes == g.n_nodes
        assert directed.n_edges == g.n_edges

    def test_round_trip_preserves_edge_set(self) -> None:
        g = sample_barabasi_albert(30, 3, np.random.default_rng(0))
        back = to_undirected(to_directed(g, np.random.default_rng(1)))
        assert not back.is_directed
        assert _edge_set(back) == _edge_set(g)

    def test_forward_rule_keeps_endpoint_order(self) -> None:
        g = build_chain(5, Orientation.UNDIRECTED)
        directed = to_directed(g, np.random.default_rng(0), OrientationRule.FORWARD)
        assert list(directed.edges()) == list(g.edges())

    def test_random_rule_is_reproducible(self) -> None:
        g = sample_barabasi_albert(20, 2, np.random.default_rng(0))
        a = to_directed(g, np.random.default_rng(5))
        b = to_directed(g, np.random.default_rng(5))
        assert list(a.edges()) == list(b.edges())

    def test_to_undirected_collapses_opposite_pairs(self) -> None:
        g = Graph(Orientation.DIRECTED, 3)
        g.add_edge(0, 1)
        g.add_edge(1, 0)
        g.add_edge(1, 2)
        u = to_undirected(g)
        assert u.n_edges == 2
        assert _edge_set(u) == {(0, 1), (1, 2)}

    def test_same_orientation_is_identity(self) -> None:
        g = build_chain(3, Orientation.DIRECTED)
        assert convert_graph(g, Orientation.DIRECTED, np.random.default_rng(0)) is g


class TestInterEdgeConversion:
    """Conversions of linker output."""

    def test_to_directed_keeps_count_and_endpoints(self) -> None:
        edges = [InterGraphEdge.first_to_second(i, i) for i in range(50)]
        directed = inter_edges_to_directed(edges, np.random.default_rng(0))
        assert len(directed) == 50
        assert [(e.first, e.second) for e in directed] == [(i, i) for i in range(50)]
        directions = {e.direction for e in directed}
        assert directions == {LinkDirection.FIRST_TO_SECOND, LinkDirection.SECOND_TO_FIRST}

    def test_to_undirected_dedupes(self) -> None:
        edges = [
            InterGraphEdge.first_to_second(0, 1),
            InterGraphEdge.second_to_first(0, 1),
            InterGraphEdge.first_to_second(1, 1),
        ]
        assert inter_edges_to_undirected(edges) == [edges[0], edges[2]]

    def test_reversed(self) -> None:
        e = InterGraphEdge.first_to_second(2, 3)
        assert e.reversed() == InterGraphEdge.second_to_first(2, 3)
        assert e.reversed().reversed() == e


class TestBinding:
    """Registry hooks fixing the produced orientation."""

    def test_native_undirected_generator_as_directed(self) -> None:
        generator = GENERATORS.resolve("ba/15,2", Orientation.DIRECTED)
        assert generator.orientation is Orientation.DIRECTED
        g = generator(np.random.default_rng(3))
        native = sample_barabasi_albert(15, 2, np.random.default_rng(3))
        assert g.is_directed
        assert _edge_set(g) == _edge_set(native)

    def test_orientation_agnostic_generator(self) -> None:
        generator = GENERATORS.resolve("chain/4", Orientation.UNDIRECTED)
        g = generator(np.random.default_rng(0))
        assert not g.is_directed
        assert g.n_edges == 3

    def test_directed_linker_as_undirected(self) -> None:
        linker = LINKERS.resolve("first_bi", Orientation.UNDIRECTED)
        assert linker.orientation is Orientation.UNDIRECTED
        community = Community(0, build_chain(2, Orientation.UNDIRECTED), 0)
        other = Community(1, build_chain(2, Orientation.UNDIRECTED), 2)
        assert linker(community, other, np.random.default_rng(0)) == [
            InterGraphEdge.first_to_second(0, 0)
        ]

    def test_default_orientation_is_directed(self) -> None:
        assert GENERATORS.resolve("tree/3").orientation is Orientation.DIRECTED
        assert LINKERS.resolve("first").orientation is Orientation.DIRECTED
