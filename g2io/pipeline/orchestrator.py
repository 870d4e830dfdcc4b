"""Inner/outer generation pipeline.

Drives the three generation phases:

1. Outer graph: built once on the calling thread from the master PRNG.
2. Inner graphs: one community per outer node, built in parallel, each
   from its own derived seed, then merged into the global graph at offsets
   fixed by the prefix sum of community sizes.
3. Linking: one linker call per outer edge, in parallel, each from its own
   derived seed; the returned edges are remapped to global ids and
   inserted in outer-edge order.

The master PRNG is only touched on the calling thread, and seeds are
derived in index order before each phase, so the result does not depend
on the number of workers.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from g2io.config.experiment import GenerationConfig
from g2io.errors import GeneratorSizeMismatch, InvalidNode
from g2io.generators import GENERATORS, GraphGenerator
from g2io.graph.global_graph import GlobalGraph
from g2io.graph.types import Edge, Graph
from g2io.linkers import LINKERS, Community, GraphLinker, InterGraphEdge, LinkDirection
from g2io.pipeline.executor import run_indexed
from g2io.reproducibility.seed import (
    derive_seeds,
    master_rng,
    new_master_seed,
    task_rng,
    verify_seed_determinism,
)

log = logging.getLogger(__name__)


class GenerationState(IntEnum):
    """Pipeline states; transitions only move forward."""

    INIT = 0
    OUTER_GENERATED = 1
    INNER_GENERATED = 2
    LINKED = 3
    DONE = 4


class GenerationStep(IntEnum):
    """Phases announced to step listeners when they begin."""

    OUTER_GENERATION = 0
    INNER_GENERATION = 1
    LINKING = 2


StepListener = Callable[[GenerationStep], None]


@dataclass(frozen=True)
class GenerationResult:
    """Finished graph and the provenance needed to replay it.

    Omits slots=True since numpy arrays are stored alongside.
    """

    graph: GlobalGraph
    outer: Graph
    master_seed: int | None  # None when the caller supplied the master PRNG
    inner_seeds: np.ndarray  # int64, one per outer node
    link_seeds: np.ndarray  # int64, one per outer edge


def remap_inter_edges(
    edges: list[InterGraphEdge], source: Community, target: Community
) -> list[Edge]:
    """Check inter-graph edges against both ranges and map them to global ids.

    Raises:
        InvalidNode: If an edge references a local id outside its community.
    """
    remapped = []
    for edge in edges:
        if not 0 <= edge.first < source.size:
            raise InvalidNode(
                f"linker returned local node {edge.first} for source community "
                f"{source.index} of size {source.size}"
            )
        if not 0 <= edge.second < target.size:
            raise InvalidNode(
                f"linker returned local node {edge.second} for target community "
                f"{target.index} of size {target.size}"
            )
        first = source.offset + edge.first
        second = target.offset + edge.second
        if edge.direction is LinkDirection.FIRST_TO_SECOND:
            remapped.append((first, second))
        else:
            remapped.append((second, first))
    return remapped


class InnerOuterGenerator:
    """Single-use orchestrator of one inner/outer generation run.

    Args:
        outer: Generator of the outer graph.
        inner: Generator of every community graph.
        linker: Linker called once per outer edge.
        n_workers: Worker threads for the parallel phases; 1 runs
            everything on the calling thread, None lets the pool decide.
    """

    def __init__(
        self,
        outer: GraphGenerator,
        inner: GraphGenerator,
        linker: GraphLinker,
        n_workers: int | None = None,
    ) -> None:
        orientations = {outer.orientation, inner.orientation, linker.orientation}
        if len(orientations) != 1:
            raise ValueError(
                f"outer, inner and linker orientations differ: "
                f"{outer.orientation}, {inner.orientation}, {linker.orientation}"
            )
        if n_workers is not None and n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}")
        self.outer = outer
        self.inner = inner
        self.linker = linker
        self.orientation = outer.orientation
        self.n_workers = n_workers
        self._state = GenerationState.INIT
        self._listeners: list[StepListener] = []

    @property
    def state(self) -> GenerationState:
        return self._state

    def add_step_listener(self, listener: StepListener) -> None:
        """Call ``listener`` when each generation phase begins."""
        self._listeners.append(listener)

    def _enter(self, step: GenerationStep) -> None:
        for listener in self._listeners:
            listener(step)

    def _advance(self, state: GenerationState) -> None:
        assert state == self._state + 1, f"invalid transition {self._state!r} -> {state!r}"
        self._state = state

    def run(self, rng: np.random.Generator) -> GenerationResult:
        """Run all phases with ``rng`` as the master PRNG.

        Any error aborts the run and propagates; no partial graph is
        returned.

        Raises:
            RuntimeError: If this orchestrator has already been run.
        """
        if self._state is not GenerationState.INIT:
            raise RuntimeError(f"generator already used (state {self._state.name})")

        outer = self._generate_outer(rng)
        self._advance(GenerationState.OUTER_GENERATED)

        inner_seeds, communities, global_graph = self._generate_inner(outer, rng)
        self._advance(GenerationState.INNER_GENERATED)

        link_seeds = self._link(outer, communities, global_graph, rng)
        self._advance(GenerationState.LINKED)

        self._advance(GenerationState.DONE)
        log.info(
            "Generated graph: %d nodes, %d edges (%d communities)",
            global_graph.n_nodes,
            global_graph.n_edges,
            global_graph.n_communities,
        )
        return GenerationResult(
            graph=global_graph,
            outer=outer,
            master_seed=None,
            inner_seeds=inner_seeds,
            link_seeds=link_seeds,
        )

    def _generate_outer(self, rng: np.random.Generator) -> Graph:
        self._enter(GenerationStep.OUTER_GENERATION)
        outer = self.outer(rng)
        if self.outer.node_count is not None and outer.n_nodes != self.outer.node_count:
            raise GeneratorSizeMismatch(
                f"outer graph has {outer.n_nodes} nodes, declared {self.outer.node_count}"
            )
        log.info("Outer graph: %d nodes, %d edges", outer.n_nodes, outer.n_edges)
        return outer

    def _generate_inner(
        self, outer: Graph, rng: np.random.Generator
    ) -> tuple[np.ndarray, list[Community], GlobalGraph]:
        self._enter(GenerationStep.INNER_GENERATION)
        n_communities = outer.n_nodes
        seeds = derive_seeds(rng, n_communities)

        declared = self.inner.node_count
        global_graph = None
        if declared is not None:
            global_graph = GlobalGraph(self.orientation, [declared] * n_communities)

        def build(i: int) -> Graph:
            community = self.inner(task_rng(seeds[i]))
            log.debug(
                "Community %d: %d nodes, %d edges", i, community.n_nodes, community.n_edges
            )
            return community

        graphs = run_indexed(build, n_communities, self.n_workers)

        if global_graph is None:
            # size only known after building: offsets from produced sizes
            log.debug("Inner generator has no declared size, computing offsets afterwards")
            global_graph = GlobalGraph(self.orientation, [g.n_nodes for g in graphs])
        for i, community in enumerate(graphs):
            global_graph.merge_community(i, community)

        log.info(
            "Inner graphs: %d communities, %d nodes, %d edges",
            n_communities,
            global_graph.n_nodes,
            global_graph.n_edges,
        )
        communities = [
            Community(index=i, graph=g, offset=global_graph.community_offset(i))
            for i, g in enumerate(graphs)
        ]
        return seeds, communities, global_graph

    def _link(
        self,
        outer: Graph,
        communities: list[Community],
        global_graph: GlobalGraph,
        rng: np.random.Generator,
    ) -> np.ndarray:
        self._enter(GenerationStep.LINKING)
        outer_edges = list(outer.edges())
        seeds = derive_seeds(rng, len(outer_edges))

        def link(i: int) -> list[Edge]:
            source, target = (communities[j] for j in outer_edges[i])
            inter_edges = self.linker(source, target, task_rng(seeds[i]))
            log.debug(
                "Outer edge %d (%d -> %d): %d links",
                i, source.index, target.index, len(inter_edges),
            )
            return remap_inter_edges(inter_edges, source, target)

        slots = run_indexed(link, len(outer_edges), self.n_workers)
        n_before = global_graph.n_edges
        for edges in slots:
            for source, target in edges:
                global_graph.add_edge(source, target)
        log.info(
            "Linking: %d outer edges, %d new edges",
            len(outer_edges),
            global_graph.n_edges - n_before,
        )
        return seeds


def build_generator(config: GenerationConfig) -> InnerOuterGenerator:
    """Resolve the three components of a config into an orchestrator."""
    outer = GENERATORS.resolve(config.outer, config.orientation)
    inner = GENERATORS.resolve(config.inner, config.orientation)
    linker = LINKERS.resolve(config.linker, config.orientation)
    return InnerOuterGenerator(outer, inner, linker, n_workers=config.n_workers)


def generate_inner_outer(
    config: GenerationConfig, listeners: list[StepListener] | None = None
) -> GenerationResult:
    """Run a full generation from a configuration.

    When ``config.seed`` is None a fresh master seed is drawn and logged so
    the run can be reproduced; it is also stored on the result.

    Args:
        config: Generation configuration.
        listeners: Optional step listeners attached to the orchestrator.

    Returns:
        GenerationResult with the master seed that was used.
    """
    generator = build_generator(config)
    for listener in listeners or ():
        generator.add_step_listener(listener)

    seed = config.seed
    if seed is None:
        seed = new_master_seed()
        log.info("No seed given, using master seed %d", seed)
    else:
        log.info("Master seed: %d", seed)
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "Seed derivation self-check: %s",
            "ok" if verify_seed_determinism(seed) else "FAILED",
        )

    result = generator.run(master_rng(seed))
    return GenerationResult(
        graph=result.graph,
        outer=result.outer,
        master_seed=seed,
        inner_seeds=result.inner_seeds,
        link_seeds=result.link_seeds,
    )
