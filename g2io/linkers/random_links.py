"""Linkers adding each possible cross-community edge with probability p."""

import numpy as np

from g2io.graph.types import Orientation
from g2io.linkers.base import LINKERS, Community, GraphLinker, InterGraphEdge
from g2io.registry.parameters import ParameterType


def sample_random_links(
    source: Community,
    target: Community,
    p: float,
    bidirectional: bool,
    rng: np.random.Generator,
) -> list[InterGraphEdge]:
    """Sample Bernoulli(p) links for every (source node, target node) pair.

    Draws one row per source node, one uniform value per target node (two
    when bidirectional), so memory stays linear in the target size and the
    draw sequence only depends on the two sizes.

    Returns:
        Edges ordered by source node, then target node, forward edge
        before backward edge.
    """
    n_draws = 2 if bidirectional else 1
    edges = []
    for first in range(source.size):
        row = rng.random((target.size, n_draws)) < p
        for second, backward in zip(*(a.tolist() for a in np.nonzero(row))):
            if backward:
                edges.append(InterGraphEdge.second_to_first(first, second))
            else:
                edges.append(InterGraphEdge.first_to_second(first, second))
    return edges


@LINKERS.plugin(
    "random",
    [ParameterType.PROBABILITY],
    [
        "Links the nodes from the first graph to the ones of the second graph in a random fashion.",
        "The probability each arc is set is given by the first parameter.",
    ],
)
def random_linker(p: float) -> GraphLinker:
    def link(source: Community, target: Community, rng: np.random.Generator) -> list[InterGraphEdge]:
        return sample_random_links(source, target, p, False, rng)

    return GraphLinker(link=link)


@LINKERS.plugin(
    "random_bi",
    [ParameterType.PROBABILITY],
    [
        "Links the nodes from the first graph to the ones of the second graph "
        "in a random fashion, and vice-versa.",
        "The probability each arc is set is given by the first parameter.",
    ],
    native_orientation=Orientation.DIRECTED,
)
def bidirectional_random_linker(p: float) -> GraphLinker:
    def link(source: Community, target: Community, rng: np.random.Generator) -> list[InterGraphEdge]:
        return sample_random_links(source, target, p, True, rng)

    return GraphLinker(link=link)
