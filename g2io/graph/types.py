"""Graph data structures shared by generators, linkers and the pipeline."""

from collections.abc import Iterator
from enum import StrEnum

import numpy as np
import scipy.sparse

from g2io.errors import CapacityOverflow, InvalidNode, OrientationMismatch


class Orientation(StrEnum):
    """Graph-level edge orientation."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


Edge = tuple[int, int]


class Graph:
    """Mutable graph over dense node ids ``0..n-1``.

    Edges are kept in insertion order with the endpoint order they were
    added with. Duplicates are rejected: for undirected graphs ``(a, b)``
    and ``(b, a)`` are the same edge. Self-loops are allowed.

    A graph is owned by a single thread at a time; nothing here is
    synchronized.
    """

    def __init__(
        self, orientation: Orientation = Orientation.DIRECTED, n_nodes: int = 0
    ) -> None:
        if n_nodes < 0:
            raise ValueError(f"n_nodes must be >= 0, got {n_nodes}")
        self._orientation = Orientation(orientation)
        self._n_nodes = n_nodes
        # canonical key -> edge as inserted
        self._edges: dict[Edge, Edge] = {}

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def is_directed(self) -> bool:
        return self._orientation is Orientation.DIRECTED

    @property
    def n_nodes(self) -> int:
        return self._n_nodes

    @property
    def n_edges(self) -> int:
        return len(self._edges)

    def _key(self, source: int, target: int) -> Edge:
        if self.is_directed or source <= target:
            return (source, target)
        return (target, source)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self._n_nodes:
            raise InvalidNode(
                f"node {node} out of range for a graph of {self._n_nodes} nodes"
            )

    def add_node(self) -> int:
        """Append a node and return its id."""
        self._n_nodes += 1
        return self._n_nodes - 1

    def add_nodes(self, count: int) -> range:
        """Append ``count`` nodes and return the range of their ids."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        first = self._n_nodes
        self._n_nodes += count
        return range(first, self._n_nodes)

    def add_edge(self, source: int, target: int) -> bool:
        """Add an edge; returns False if it was already present.

        Raises:
            InvalidNode: If either endpoint is not a node of this graph.
        """
        self._check_node(source)
        self._check_node(target)
        key = self._key(source, target)
        if key in self._edges:
            return False
        self._edges[key] = (source, target)
        return True

    def remove_edge(self, source: int, target: int) -> bool:
        """Remove an edge; returns False if it was absent."""
        return self._edges.pop(self._key(source, target), None) is not None

    def has_edge(self, source: int, target: int) -> bool:
        return self._key(source, target) in self._edges

    def nodes(self) -> range:
        return range(self._n_nodes)

    def edges(self) -> Iterator[Edge]:
        """Lazily iterate over edges in insertion order.

        Each call returns a new iterator. The graph must not be mutated
        while an iterator is being consumed.
        """
        return iter(self._edges.values())

    def merge(self, other: "Graph", offset: int) -> None:
        """Copy every edge of ``other`` into this graph, shifted by ``offset``.

        Local id ``i`` of ``other`` becomes ``offset + i`` here. The target
        nodes must already exist: merging never grows the graph.

        Raises:
            OrientationMismatch: If the two graphs differ in orientation.
            CapacityOverflow: If ``offset + other.n_nodes`` exceeds this
                graph's node count.
        """
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if other.orientation is not self._orientation:
            raise OrientationMismatch(
                f"cannot merge a {other.orientation} graph "
                f"into a {self._orientation} graph"
            )
        if offset + other.n_nodes > self._n_nodes:
            raise CapacityOverflow(
                f"merging {other.n_nodes} nodes at offset {offset} exceeds "
                f"capacity of {self._n_nodes} nodes"
            )
        for source, target in other.edges():
            key = self._key(source + offset, target + offset)
            self._edges.setdefault(key, (source + offset, target + offset))

    def edge_array(self) -> np.ndarray:
        """Edges as an int64 array of shape (n_edges, 2), in insertion order."""
        if not self._edges:
            return np.empty((0, 2), dtype=np.int64)
        return np.array(list(self._edges.values()), dtype=np.int64)

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Adjacency matrix (n x n); symmetric for undirected graphs."""
        edges = self.edge_array()
        rows, cols = edges[:, 0], edges[:, 1]
        if not self.is_directed:
            loops = rows == cols
            rows, cols = (
                np.concatenate([rows, cols[~loops]]),
                np.concatenate([cols, rows[~loops]]),
            )
        data = np.ones(len(rows), dtype=np.int64)
        return scipy.sparse.csr_matrix(
            (data, (rows, cols)), shape=(self._n_nodes, self._n_nodes)
        )

    def in_degrees(self) -> np.ndarray:
        """Incoming edge count per node (plain degree if undirected)."""
        return np.asarray(self.to_sparse().sum(axis=0)).ravel()

    def out_degrees(self) -> np.ndarray:
        """Outgoing edge count per node (plain degree if undirected)."""
        return np.asarray(self.to_sparse().sum(axis=1)).ravel()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._orientation.value}, "
            f"n_nodes={self._n_nodes}, n_edges={self.n_edges})"
        )
