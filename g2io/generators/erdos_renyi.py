"""Erdős–Rényi G(n, p) generator.

Each possible edge between two distinct nodes is sampled independently as
Bernoulli(p): ordered pairs for directed graphs, unordered pairs for
undirected ones.
"""

import numpy as np

from g2io.generators.base import GENERATORS, GraphGenerator
from g2io.graph.types import Graph, Orientation
from g2io.registry.parameters import ParameterType


def sample_gnp(
    n: int, p: float, orientation: Orientation, rng: np.random.Generator
) -> Graph:
    """Sample a G(n, p) graph without self-loops.

    Rows are drawn one source node at a time, ``n`` uniform values per row
    whatever the orientation, so memory stays linear in n and the draw
    sequence only depends on n.

    Args:
        n: Number of nodes.
        p: Edge probability.
        orientation: Orientation of the produced graph.
        rng: numpy random Generator for reproducibility.

    Returns:
        Graph with edges in row-major order.
    """
    g = Graph(orientation, n)
    undirected = orientation is Orientation.UNDIRECTED
    for source in range(n):
        row = rng.random(n) < p
        row[source] = False
        if undirected:
            # unordered pairs: keep the upper triangle
            row[:source] = False
        for target in np.flatnonzero(row).tolist():
            g.add_edge(source, target)
    return g


@GENERATORS.plugin(
    "er",
    [ParameterType.POSITIVE_INTEGER, ParameterType.PROBABILITY],
    [
        "A generator following the Erdős–Rényi model.",
        "First parameter gives the number of nodes of the graph, "
        "while the second one gives the probability each edge appears in the graph.",
    ],
)
def erdos_renyi_generator(n: int, p: float) -> GraphGenerator:
    def build(orientation: Orientation, rng: np.random.Generator) -> Graph:
        return sample_gnp(n, p, orientation, rng)

    return GraphGenerator(node_count=n, build=build)
