"""Graph model: mutable graphs, the global graph and orientation conversions."""

from g2io.graph.global_graph import GlobalGraph
from g2io.graph.orientation import (
    OrientationRule,
    convert_graph,
    inter_edges_to_directed,
    inter_edges_to_undirected,
    to_directed,
    to_undirected,
)
from g2io.graph.types import Edge, Graph, Orientation

__all__ = [
    "Edge",
    "GlobalGraph",
    "Graph",
    "Orientation",
    "OrientationRule",
    "convert_graph",
    "inter_edges_to_directed",
    "inter_edges_to_undirected",
    "to_directed",
    "to_undirected",
]
