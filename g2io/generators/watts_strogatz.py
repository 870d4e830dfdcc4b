"""Watts–Strogatz small-world generator (undirected native)."""

import numpy as np

from g2io.errors import InvalidParameters
from g2io.generators.base import GENERATORS, GraphGenerator
from g2io.graph.types import Graph, Orientation
from g2io.registry.parameters import ParameterType


def sample_watts_strogatz(n: int, k: int, p: float, rng: np.random.Generator) -> Graph:
    """Build a ring lattice and rewire each lattice edge with probability p.

    Every node starts linked to its k/2 successors on the ring. Rewiring
    keeps the source and picks a new target uniformly among nodes that are
    neither the source nor already adjacent to it.

    Args:
        n: Number of nodes, > k.
        k: Even initial degree.
        p: Rewire probability.
        rng: numpy random Generator for reproducibility.
    """
    g = Graph(Orientation.UNDIRECTED, n)
    half = k // 2
    for j in range(1, half + 1):
        for u in range(n):
            g.add_edge(u, (u + j) % n)
    degree = np.full(n, k, dtype=np.int64)
    for j in range(1, half + 1):
        for u in range(n):
            if rng.random() >= p:
                continue
            if degree[u] >= n - 1:
                # u is adjacent to every other node
                continue
            v = (u + j) % n
            w = int(rng.integers(n))
            while w == u or g.has_edge(u, w):
                w = int(rng.integers(n))
            g.remove_edge(u, v)
            g.add_edge(u, w)
            degree[v] -= 1
            degree[w] += 1
    return g


@GENERATORS.plugin(
    "ws",
    [ParameterType.POSITIVE_INTEGER, ParameterType.POSITIVE_INTEGER, ParameterType.PROBABILITY],
    [
        "A generator following the Watts-Strogatz model.",
        "First parameter gives the number of nodes, the second one gives "
        "the initial node degree and the third is the rewire probability.",
    ],
    native_orientation=Orientation.UNDIRECTED,
)
def watts_strogatz_generator(n: int, k: int, p: float) -> GraphGenerator:
    if k % 2 == 1:
        raise InvalidParameters(f'ws: second parameter ("k") must be even, got {k}')
    if n <= k:
        raise InvalidParameters(
            f'ws: first parameter ("n") must be higher than the second one ("k"), '
            f"got n={n}, k={k}"
        )

    def build(orientation: Orientation, rng: np.random.Generator) -> Graph:
        return sample_watts_strogatz(n, k, p, rng)

    return GraphGenerator(node_count=n, build=build)
