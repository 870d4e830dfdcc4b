"""Tests for the inner/outer orchestrator and its parallel executor."""

import logging
import threading

import numpy as np
import pytest

from g2io.config import GenerationConfig
from g2io.errors import GeneratorSizeMismatch, InvalidNode, UnknownComponent
from g2io.generators import GraphGenerator, build_chain
from g2io.graph.types import Graph, Orientation
from g2io.linkers import Community, GraphLinker, InterGraphEdge
from g2io.pipeline import (
    GenerationState,
    GenerationStep,
    InnerOuterGenerator,
    build_generator,
    generate_inner_outer,
    remap_inter_edges,
    run_indexed,
)
from g2io.reproducibility import master_rng


def _chain_generator(n: int, orientation: Orientation = Orientation.DIRECTED) -> GraphGenerator:
    return GraphGenerator(
        node_count=n,
        build=lambda o, rng: build_chain(n, o),
        orientation=orientation,
    )


def _first_linker() -> GraphLinker:
    return GraphLinker(link=lambda s, t, rng: [InterGraphEdge.first_to_second(0, 0)])


class TestRunIndexed:
    """Fork-join over indexed tasks."""

    @pytest.mark.parametrize("n_workers", [1, 2, 8, None])
    def test_results_in_index_order(self, n_workers) -> None:
        assert run_indexed(lambda i: i * i, 20, n_workers) == [i * i for i in range(20)]

    def test_zero_tasks(self) -> None:
        assert run_indexed(lambda i: i, 0, 4) == []

    def test_single_worker_runs_inline(self) -> None:
        caller = threading.get_ident()
        idents = run_indexed(lambda i: threading.get_ident(), 5, 1)
        assert set(idents) == {caller}

    def test_lowest_failing_index_reported(self) -> None:
        def task(i: int) -> int:
            if i in (3, 7, 12):
                raise ValueError(f"task {i}")
            return i

        for _ in range(10):
            with pytest.raises(ValueError, match="task 3"):
                run_indexed(task, 16, 4)

    def test_invalid_worker_count(self) -> None:
        with pytest.raises(ValueError):
            run_indexed(lambda i: i, 3, 0)


class TestRemapInterEdges:
    """Local inter-graph edges to global edges."""

    def test_directions(self) -> None:
        source = Community(0, Graph(Orientation.DIRECTED, 3), 0)
        target = Community(1, Graph(Orientation.DIRECTED, 4), 3)
        edges = [
            InterGraphEdge.first_to_second(2, 1),
            InterGraphEdge.second_to_first(2, 1),
        ]
        assert remap_inter_edges(edges, source, target) == [(2, 4), (4, 2)]

    def test_out_of_range_rejected(self) -> None:
        source = Community(0, Graph(Orientation.DIRECTED, 3), 0)
        target = Community(1, Graph(Orientation.DIRECTED, 4), 3)
        with pytest.raises(InvalidNode):
            remap_inter_edges([InterGraphEdge.first_to_second(3, 0)], source, target)
        with pytest.raises(InvalidNode):
            remap_inter_edges([InterGraphEdge.first_to_second(0, 4)], source, target)


class TestInnerOuterGenerator:
    """The three generation phases."""

    def test_chain_of_single_nodes(self) -> None:
        generator = InnerOuterGenerator(
            _chain_generator(3), _chain_generator(1), _first_linker(), n_workers=2
        )
        result = generator.run(master_rng(0))
        assert result.graph.n_nodes == 3
        assert list(result.graph.edges()) == [(0, 1), (1, 2)]

    def test_chains_linked_first_to_first(self) -> None:
        generator = InnerOuterGenerator(
            _chain_generator(3), _chain_generator(2), _first_linker()
        )
        result = generator.run(master_rng(0))
        np.testing.assert_array_equal(result.graph.offsets, [0, 2, 4, 6])
        assert list(result.graph.edges()) == [(0, 1), (2, 3), (4, 5), (0, 2), (2, 4)]

    def test_provenance_sizes(self) -> None:
        generator = InnerOuterGenerator(
            _chain_generator(4), _chain_generator(2), _first_linker()
        )
        result = generator.run(master_rng(1))
        assert result.inner_seeds.shape == (4,)
        assert result.link_seeds.shape == (3,)
        assert result.outer.n_nodes == 4
        assert result.master_seed is None

    def test_listeners_and_state(self) -> None:
        generator = InnerOuterGenerator(
            _chain_generator(2), _chain_generator(2), _first_linker()
        )
        steps: list[GenerationStep] = []
        generator.add_step_listener(steps.append)
        assert generator.state is GenerationState.INIT
        generator.run(master_rng(0))
        assert steps == [
            GenerationStep.OUTER_GENERATION,
            GenerationStep.INNER_GENERATION,
            GenerationStep.LINKING,
        ]
        assert generator.state is GenerationState.DONE

    def test_single_use(self) -> None:
        generator = InnerOuterGenerator(
            _chain_generator(2), _chain_generator(2), _first_linker()
        )
        generator.run(master_rng(0))
        with pytest.raises(RuntimeError):
            generator.run(master_rng(0))

    def test_orientations_must_agree(self) -> None:
        with pytest.raises(ValueError):
            InnerOuterGenerator(
                _chain_generator(2, Orientation.UNDIRECTED),
                _chain_generator(2),
                _first_linker(),
            )

    def test_outer_size_mismatch(self) -> None:
        lying = GraphGenerator(node_count=3, build=lambda o, rng: build_chain(2, o))
        generator = InnerOuterGenerator(lying, _chain_generator(2), _first_linker())
        with pytest.raises(GeneratorSizeMismatch):
            generator.run(master_rng(0))

    def test_inner_size_mismatch(self) -> None:
        lying = GraphGenerator(node_count=3, build=lambda o, rng: build_chain(4, o))
        generator = InnerOuterGenerator(_chain_generator(2), lying, _first_linker())
        with pytest.raises(GeneratorSizeMismatch):
            generator.run(master_rng(0))

    def test_undeclared_inner_size(self) -> None:
        """Communities of unknown size get offsets from the built graphs."""
        varying = GraphGenerator(
            node_count=None,
            build=lambda o, rng: build_chain(int(rng.integers(1, 6)), o),
        )
        generator = InnerOuterGenerator(_chain_generator(5), varying, _first_linker(), n_workers=3)
        result = generator.run(master_rng(4))
        graph = result.graph
        assert graph.n_communities == 5
        for i in range(5):
            r = graph.community_range(i)
            # each community is a chain over its own range
            inner_edges = [(a, b) for a, b in graph.edges() if a in r and b in r]
            assert len(inner_edges) == len(r) - 1
        assert graph.n_edges == (graph.n_nodes - 5) + 4

    def test_linker_failure_reported_deterministically(self) -> None:
        def link(source: Community, target: Community, rng) -> list[InterGraphEdge]:
            if source.index in (2, 4):
                return [InterGraphEdge.first_to_second(source.size, 0)]
            return [InterGraphEdge.first_to_second(0, 0)]

        for _ in range(5):
            generator = InnerOuterGenerator(
                _chain_generator(6), _chain_generator(3), GraphLinker(link=link), n_workers=4
            )
            with pytest.raises(InvalidNode, match="source community 2 "):
                generator.run(master_rng(0))


class TestReproducibility:
    """Same master seed, same graph, whatever the worker count."""

    @pytest.mark.parametrize(
        "outer,inner,linker,orientation",
        [
            ("er/8,0.4", "er/6,0.5", "random/0.3", Orientation.DIRECTED),
            ("ws/10,4,0.3", "ba/12,2", "random_bi/0.2", Orientation.DIRECTED),
            ("ba/9,2", "ws/8,2,0.5", "random/0.25", Orientation.UNDIRECTED),
            ("tree/7", "er/5,0.3", "min_incoming", Orientation.UNDIRECTED),
        ],
    )
    def test_worker_count_does_not_change_output(self, outer, inner, linker, orientation) -> None:
        graphs = []
        for n_workers in (1, 2, 4, 8):
            config = GenerationConfig(
                outer=outer,
                inner=inner,
                linker=linker,
                orientation=orientation,
                seed=1234,
                n_workers=n_workers,
            )
            graphs.append(generate_inner_outer(config).graph)
        reference = graphs[0]
        for g in graphs[1:]:
            assert g.n_nodes == reference.n_nodes
            assert list(g.edges()) == list(reference.edges())
            np.testing.assert_array_equal(g.offsets, reference.offsets)

    def test_different_seed_different_graph(self) -> None:
        base = dict(outer="er/6,0.5", inner="er/6,0.5", linker="random/0.5", n_workers=1)
        a = generate_inner_outer(GenerationConfig(seed=1, **base)).graph
        b = generate_inner_outer(GenerationConfig(seed=2, **base)).graph
        assert list(a.edges()) != list(b.edges())

    def test_fresh_seed_is_returned_and_replayable(self) -> None:
        config = GenerationConfig(outer="er/5,0.5", inner="er/4,0.5", linker="random/0.5")
        first = generate_inner_outer(config)
        assert first.master_seed is not None
        replay = generate_inner_outer(
            GenerationConfig(
                outer=config.outer,
                inner=config.inner,
                linker=config.linker,
                seed=first.master_seed,
            )
        )
        assert list(replay.graph.edges()) == list(first.graph.edges())

    def test_undirected_config_gives_undirected_graph(self) -> None:
        config = GenerationConfig(
            outer="chain/3", inner="chain/3", linker="first_bi",
            orientation=Orientation.UNDIRECTED, seed=0,
        )
        result = generate_inner_outer(config)
        assert not result.graph.is_directed
        assert result.graph.n_edges == 3 * 2 + 2

    def test_seed_self_check_logged_at_debug(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="g2io.pipeline.orchestrator")
        config = GenerationConfig(outer="chain/2", inner="chain/2", linker="first", seed=3)
        generate_inner_outer(config)
        assert "Seed derivation self-check: ok" in caplog.text


class TestBuildGenerator:
    """Resolving a configuration into an orchestrator."""

    def test_unknown_component(self) -> None:
        config = GenerationConfig(outer="chain/3", inner="nope", linker="first")
        with pytest.raises(UnknownComponent):
            build_generator(config)

    def test_orientation_applied_to_all_components(self) -> None:
        config = GenerationConfig(
            outer="ba/5,1", inner="chain/2", linker="random_bi/0.5",
            orientation=Orientation.DIRECTED,
        )
        generator = build_generator(config)
        assert generator.orientation is Orientation.DIRECTED
        assert generator.outer.orientation is Orientation.DIRECTED
        assert generator.linker.orientation is Orientation.DIRECTED
