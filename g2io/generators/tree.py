"""Balanced binary tree generator."""

import numpy as np

from g2io.generators.base import GENERATORS, GraphGenerator
from g2io.graph.types import Graph, Orientation
from g2io.registry.parameters import ParameterType


def build_tree(n: int, orientation: Orientation) -> Graph:
    """Node i is the parent of nodes 2i+1 and 2i+2 (when they exist)."""
    g = Graph(orientation, n)
    for child in range(1, n):
        g.add_edge((child - 1) // 2, child)
    return g


@GENERATORS.plugin(
    "tree",
    [ParameterType.POSITIVE_INTEGER],
    [
        "A generator producing a tree.",
        "The first parameter gives the number of nodes.",
        "The tree is well balanced.",
    ],
)
def tree_generator(n: int) -> GraphGenerator:
    def build(orientation: Orientation, rng: np.random.Generator) -> Graph:
        return build_tree(n, orientation)

    return GraphGenerator(node_count=n, build=build)
