"""Generator contract and the generator registry."""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from g2io.graph.orientation import bind_generator
from g2io.graph.types import Graph, Orientation
from g2io.registry.registry import Registry

GraphBuilder = Callable[[Orientation, np.random.Generator], Graph]


@dataclass(frozen=True, slots=True)
class GraphGenerator:
    """A configured generator, ready to build graphs.

    ``build`` must be a pure function of its orientation and of the draws
    it makes from the generator it is given. ``node_count`` is the size
    every built graph has; None means it is only known after building.
    """

    node_count: int | None
    build: GraphBuilder
    orientation: Orientation = Orientation.DIRECTED

    def __call__(self, rng: np.random.Generator) -> Graph:
        return self.build(self.orientation, rng)


GENERATORS = Registry("generator", bind=bind_generator)
