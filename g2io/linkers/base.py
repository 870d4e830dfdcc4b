"""Linker contract, inter-graph edges and the linker registry."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from g2io.graph.orientation import bind_linker
from g2io.graph.types import Graph, Orientation
from g2io.registry.registry import Registry


class LinkDirection(StrEnum):
    FIRST_TO_SECOND = "first_to_second"
    SECOND_TO_FIRST = "second_to_first"


@dataclass(frozen=True, slots=True)
class InterGraphEdge:
    """An edge between the source and target communities of an outer edge.

    ``first`` is a local id in the source (first) community and ``second``
    a local id in the target (second) community, whatever the direction.
    """

    first: int
    second: int
    direction: LinkDirection = LinkDirection.FIRST_TO_SECOND

    def reversed(self) -> "InterGraphEdge":
        if self.direction is LinkDirection.FIRST_TO_SECOND:
            return InterGraphEdge(self.first, self.second, LinkDirection.SECOND_TO_FIRST)
        return InterGraphEdge(self.first, self.second, LinkDirection.FIRST_TO_SECOND)

    @classmethod
    def first_to_second(cls, first: int, second: int) -> "InterGraphEdge":
        return cls(first, second, LinkDirection.FIRST_TO_SECOND)

    @classmethod
    def second_to_first(cls, first: int, second: int) -> "InterGraphEdge":
        return cls(first, second, LinkDirection.SECOND_TO_FIRST)


@dataclass(frozen=True, slots=True)
class Community:
    """Read-only view of one community handed to a linker."""

    index: int  # outer node index
    graph: Graph  # local ids 0..size-1
    offset: int  # first global id

    @property
    def size(self) -> int:
        return self.graph.n_nodes


LinkFunction = Callable[[Community, Community, np.random.Generator], list[InterGraphEdge]]


@dataclass(frozen=True, slots=True)
class GraphLinker:
    """A configured linker.

    ``link`` must only return edges with ``0 <= first < source.size`` and
    ``0 <= second < target.size``, and be a pure function of the two
    communities and the draws it makes from its generator.
    """

    link: LinkFunction
    orientation: Orientation = Orientation.DIRECTED

    def __call__(
        self, source: Community, target: Community, rng: np.random.Generator
    ) -> list[InterGraphEdge]:
        return self.link(source, target, rng)


LINKERS = Registry("linker", bind=bind_linker)
