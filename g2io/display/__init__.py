"""Output formats for generated graphs, resolved through ``RENDERERS``."""

from g2io.display.renderer import (
    RENDERERS,
    GraphRenderer,
    aspartix_renderer,
    dot_renderer,
    graphml_renderer,
    iccma_dimacs_renderer,
)

__all__ = [
    "RENDERERS",
    "GraphRenderer",
    "aspartix_renderer",
    "dot_renderer",
    "graphml_renderer",
    "iccma_dimacs_renderer",
]
