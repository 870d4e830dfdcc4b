"""Chain generator: nodes ``0..n-1`` with an edge ``(i, i+1)`` for each i."""

import numpy as np

from g2io.generators.base import GENERATORS, GraphGenerator
from g2io.graph.types import Graph, Orientation
from g2io.registry.parameters import ParameterType


def build_chain(n: int, orientation: Orientation) -> Graph:
    g = Graph(orientation, n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    return g


@GENERATORS.plugin(
    "chain",
    [ParameterType.POSITIVE_INTEGER],
    [
        "A generator producing a chain of nodes.",
        "The first parameter gives the length of the chain.",
    ],
)
def chain_generator(n: int) -> GraphGenerator:
    def build(orientation: Orientation, rng: np.random.Generator) -> Graph:
        return build_chain(n, orientation)

    return GraphGenerator(node_count=n, build=build)
