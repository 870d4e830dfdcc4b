"""Conversions between directed and undirected component output.

A component registered with a native orientation always builds graphs (or
inter-graph edges) in that orientation. When the pipeline requests the
other one, the output is converted here:

* undirected -> directed: each edge becomes exactly one directed edge.
  Under ``OrientationRule.RANDOM`` the direction is drawn uniformly and
  independently per edge from the component's own task PRNG; under
  ``OrientationRule.FORWARD`` the stored endpoint order is kept.
* directed -> undirected: each directed edge becomes one undirected edge,
  so opposite pairs collapse into one and nothing else is lost.
"""

import dataclasses
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from g2io.graph.types import Graph, Orientation

if TYPE_CHECKING:
    from g2io.generators.base import GraphGenerator
    from g2io.linkers.base import Community, GraphLinker, InterGraphEdge
    from g2io.registry.registry import RegistryEntry


class OrientationRule(StrEnum):
    """How undirected output is turned into directed output."""

    RANDOM = "random"
    FORWARD = "forward"


def _flip_mask(n_edges: int, rule: OrientationRule, rng: np.random.Generator) -> np.ndarray:
    if rule is OrientationRule.FORWARD:
        return np.zeros(n_edges, dtype=bool)
    # one draw per edge, in edge order
    return rng.random(n_edges) < 0.5


def to_directed(
    graph: Graph,
    rng: np.random.Generator,
    rule: OrientationRule = OrientationRule.RANDOM,
) -> Graph:
    """Orient every edge of an undirected graph."""
    if graph.is_directed:
        return graph
    flips = _flip_mask(graph.n_edges, rule, rng)
    directed = Graph(Orientation.DIRECTED, graph.n_nodes)
    for (source, target), flip in zip(graph.edges(), flips):
        if flip:
            directed.add_edge(target, source)
        else:
            directed.add_edge(source, target)
    return directed


def to_undirected(graph: Graph) -> Graph:
    """Forget edge directions, collapsing opposite pairs."""
    if not graph.is_directed:
        return graph
    undirected = Graph(Orientation.UNDIRECTED, graph.n_nodes)
    for source, target in graph.edges():
        undirected.add_edge(source, target)
    return undirected


def convert_graph(
    graph: Graph,
    orientation: Orientation,
    rng: np.random.Generator,
    rule: OrientationRule = OrientationRule.RANDOM,
) -> Graph:
    """Return ``graph`` in the requested orientation."""
    if orientation is Orientation.DIRECTED:
        return to_directed(graph, rng, rule)
    return to_undirected(graph)


def inter_edges_to_directed(
    edges: list["InterGraphEdge"],
    rng: np.random.Generator,
    rule: OrientationRule = OrientationRule.RANDOM,
) -> list["InterGraphEdge"]:
    """Orient undirected inter-graph edges, one per input edge."""
    flips = _flip_mask(len(edges), rule, rng)
    return [e.reversed() if flip else e for e, flip in zip(edges, flips)]


def inter_edges_to_undirected(edges: list["InterGraphEdge"]) -> list["InterGraphEdge"]:
    """Collapse inter-graph edges that only differ by direction."""
    seen: set[tuple[int, int]] = set()
    collapsed = []
    for edge in edges:
        if (edge.first, edge.second) in seen:
            continue
        seen.add((edge.first, edge.second))
        collapsed.append(edge)
    return collapsed


def bind_generator(
    generator: "GraphGenerator",
    entry: "RegistryEntry",
    orientation: Orientation | None,
) -> "GraphGenerator":
    """Registry hook fixing the orientation a generator produces."""
    requested = Orientation(orientation or Orientation.DIRECTED)
    native = entry.native_orientation
    if native is None or native is requested:
        return dataclasses.replace(generator, orientation=requested)

    inner_build = generator.build
    rule = entry.orientation_rule

    def build(_: Orientation, rng: np.random.Generator) -> Graph:
        return convert_graph(inner_build(native, rng), requested, rng, rule)

    return dataclasses.replace(generator, build=build, orientation=requested)


def bind_linker(
    linker: "GraphLinker",
    entry: "RegistryEntry",
    orientation: Orientation | None,
) -> "GraphLinker":
    """Registry hook fixing the orientation of the edges a linker yields."""
    requested = Orientation(orientation or Orientation.DIRECTED)
    native = entry.native_orientation
    if native is None or native is requested:
        return dataclasses.replace(linker, orientation=requested)

    inner_link = linker.link
    rule = entry.orientation_rule

    if requested is Orientation.DIRECTED:
        def link(
            source: "Community", target: "Community", rng: np.random.Generator
        ) -> list["InterGraphEdge"]:
            return inter_edges_to_directed(inner_link(source, target, rng), rng, rule)
    else:
        def link(
            source: "Community", target: "Community", rng: np.random.Generator
        ) -> list["InterGraphEdge"]:
            return inter_edges_to_undirected(inner_link(source, target, rng))

    return dataclasses.replace(linker, link=link, orientation=requested)
