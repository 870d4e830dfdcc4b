"""Linkers joining the lowest-id node of each community."""

import numpy as np

from g2io.graph.types import Orientation
from g2io.linkers.base import LINKERS, Community, GraphLinker, InterGraphEdge


def link_first_nodes(
    source: Community, target: Community, bidirectional: bool
) -> list[InterGraphEdge]:
    if source.size == 0 or target.size == 0:
        return []
    edges = [InterGraphEdge.first_to_second(0, 0)]
    if bidirectional:
        edges.append(InterGraphEdge.second_to_first(0, 0))
    return edges


@LINKERS.plugin(
    "first",
    [],
    "Links the lowest index node of the first graph to the lowest index node of the second graph.",
)
def first_to_first_linker() -> GraphLinker:
    def link(source: Community, target: Community, rng: np.random.Generator) -> list[InterGraphEdge]:
        return link_first_nodes(source, target, bidirectional=False)

    return GraphLinker(link=link)


@LINKERS.plugin(
    "first_bi",
    [],
    "Links the lowest index nodes of the two graphs in both directions.",
    native_orientation=Orientation.DIRECTED,
)
def bidirectional_first_to_first_linker() -> GraphLinker:
    def link(source: Community, target: Community, rng: np.random.Generator) -> list[InterGraphEdge]:
        return link_first_nodes(source, target, bidirectional=True)

    return GraphLinker(link=link)
