"""Barabási–Albert preferential attachment generator (undirected native)."""

import numpy as np

from g2io.errors import InvalidParameters
from g2io.generators.base import GENERATORS, GraphGenerator
from g2io.graph.types import Graph, Orientation
from g2io.registry.parameters import ParameterType


def sample_barabasi_albert(n: int, m: int, rng: np.random.Generator) -> Graph:
    """Grow an undirected graph by preferential attachment.

    Starts from a star centered on node 0 with leaves ``1..m``; every
    further node attaches to ``m`` distinct existing nodes picked with
    probability proportional to their degree.

    Args:
        n: Final number of nodes, > m.
        m: Edges added per new node, >= 1.
        rng: numpy random Generator for reproducibility.
    """
    g = Graph(Orientation.UNDIRECTED, n)
    for leaf in range(1, m + 1):
        g.add_edge(0, leaf)
    # every node appears once per incident edge
    repeated: list[int] = [0] * m + list(range(1, m + 1))
    for source in range(m + 1, n):
        chosen: list[int] = []
        seen: set[int] = set()
        while len(chosen) < m:
            target = repeated[int(rng.integers(len(repeated)))]
            if target not in seen:
                seen.add(target)
                chosen.append(target)
        for target in chosen:
            g.add_edge(source, target)
        repeated.extend(chosen)
        repeated.extend([source] * m)
    return g


@GENERATORS.plugin(
    "ba",
    [ParameterType.POSITIVE_INTEGER, ParameterType.POSITIVE_INTEGER],
    [
        "A generator following the Barabási-Albert model.",
        "First parameter gives the number of nodes, "
        "the second one the number of edges attached to each new node.",
    ],
    native_orientation=Orientation.UNDIRECTED,
)
def barabasi_albert_generator(n: int, m: int) -> GraphGenerator:
    if m == 0 or m >= n:
        raise InvalidParameters(
            f'ba: second parameter ("m") must be higher than 0 and lower '
            f'than the first one ("n"), got n={n}, m={m}'
        )

    def build(orientation: Orientation, rng: np.random.Generator) -> Graph:
        return sample_barabasi_albert(n, m, rng)

    return GraphGenerator(node_count=n, build=build)
