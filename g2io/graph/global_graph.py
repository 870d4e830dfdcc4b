"""Global graph with a fixed community offset table."""

from collections.abc import Sequence

import numpy as np

from g2io.errors import GeneratorSizeMismatch, InvalidNode
from g2io.graph.types import Graph, Orientation


class GlobalGraph(Graph):
    """Final graph assembling every community into one id space.

    Community ``i`` occupies ids ``[offsets[i], offsets[i + 1])``. Offsets
    are the prefix sums of the community sizes in outer-node order and are
    fixed at construction, so ranges never overlap and cover
    ``0..n_nodes`` without gaps.
    """

    def __init__(self, orientation: Orientation, community_sizes: Sequence[int]) -> None:
        sizes = np.asarray(community_sizes, dtype=np.int64).reshape(-1)
        if (sizes < 0).any():
            raise ValueError(f"community sizes must be >= 0, got {sizes.tolist()}")
        offsets = np.zeros(len(sizes) + 1, dtype=np.int64)
        np.cumsum(sizes, out=offsets[1:])
        offsets.setflags(write=False)
        self._offsets = offsets
        super().__init__(orientation, int(offsets[-1]))

    def add_node(self) -> int:
        raise TypeError("GlobalGraph node count is fixed by its offset table")

    def add_nodes(self, count: int) -> range:
        raise TypeError("GlobalGraph node count is fixed by its offset table")

    @property
    def offsets(self) -> np.ndarray:
        """Read-only array of length n_communities + 1."""
        return self._offsets

    @property
    def n_communities(self) -> int:
        return len(self._offsets) - 1

    def community_offset(self, index: int) -> int:
        return int(self._offsets[index])

    def community_size(self, index: int) -> int:
        return int(self._offsets[index + 1] - self._offsets[index])

    def community_range(self, index: int) -> range:
        return range(int(self._offsets[index]), int(self._offsets[index + 1]))

    def community_of(self, node: int) -> int:
        """Index of the community owning a global node id."""
        if not 0 <= node < self.n_nodes:
            raise InvalidNode(
                f"node {node} out of range for a graph of {self.n_nodes} nodes"
            )
        # side="right" skips empty communities sharing the same offset
        return int(np.searchsorted(self._offsets, node, side="right")) - 1

    def merge_community(self, index: int, community: Graph) -> None:
        """Merge a community graph into its reserved id range.

        Raises:
            GeneratorSizeMismatch: If the community does not have the size
                declared for it in the offset table.
        """
        declared = self.community_size(index)
        if community.n_nodes != declared:
            raise GeneratorSizeMismatch(
                f"community {index} has {community.n_nodes} nodes, "
                f"declared {declared}"
            )
        self.merge(community, self.community_offset(index))
