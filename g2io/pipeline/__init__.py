"""Inner/outer generation pipeline and its fork-join executor."""

from g2io.pipeline.executor import run_indexed
from g2io.pipeline.orchestrator import (
    GenerationResult,
    GenerationState,
    GenerationStep,
    InnerOuterGenerator,
    StepListener,
    build_generator,
    generate_inner_outer,
    remap_inter_edges,
)

__all__ = [
    "GenerationResult",
    "GenerationState",
    "GenerationStep",
    "InnerOuterGenerator",
    "StepListener",
    "build_generator",
    "generate_inner_outer",
    "remap_inter_edges",
    "run_indexed",
]
