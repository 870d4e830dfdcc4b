"""Linkers targeting the nodes with the fewest incoming edges.

For undirected communities the plain degree is used. Every minimal node of
the source community is linked to every minimal node of the target
community.
"""

import functools

import numpy as np

from g2io.graph.types import Graph, Orientation
from g2io.linkers.base import LINKERS, Community, GraphLinker, InterGraphEdge


def min_incoming_nodes(graph: Graph) -> np.ndarray:
    """Ids of the nodes whose in-degree equals the minimum, ascending."""
    if graph.n_nodes == 0:
        return np.empty(0, dtype=np.int64)
    in_degrees = graph.in_degrees()
    return np.flatnonzero(in_degrees == in_degrees.min())


def _min_incoming_linker(bidirectional: bool) -> GraphLinker:
    # a community is linked once per incident outer edge: compute its
    # minimal nodes once
    @functools.lru_cache(maxsize=None)
    def minimal(community: Community) -> tuple[int, ...]:
        return tuple(min_incoming_nodes(community.graph).tolist())

    def link(source: Community, target: Community, rng: np.random.Generator) -> list[InterGraphEdge]:
        edges = []
        for first in minimal(source):
            for second in minimal(target):
                edges.append(InterGraphEdge.first_to_second(first, second))
                if bidirectional:
                    edges.append(InterGraphEdge.second_to_first(first, second))
        return edges

    return GraphLinker(link=link)


@LINKERS.plugin(
    "min_incoming",
    [],
    "Links the nodes of the first graph with the lowest count of incoming edges "
    "to the nodes of the second graph with the same property.",
)
def min_incoming_linker() -> GraphLinker:
    return _min_incoming_linker(bidirectional=False)


@LINKERS.plugin(
    "min_incoming_bi",
    [],
    "Links the nodes of the first graph with the lowest count of incoming edges "
    "to the nodes of the second graph with the same property, and vice-versa.",
    native_orientation=Orientation.DIRECTED,
)
def bidirectional_min_incoming_linker() -> GraphLinker:
    return _min_incoming_linker(bidirectional=True)
