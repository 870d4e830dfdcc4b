"""Text renderers for generated graphs.

Each output format is a Jinja2 template in ``templates/`` rendered in
streaming mode, so large graphs are written chunk by chunk instead of
being built as one string.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape

from g2io.errors import OrientationMismatch
from g2io.graph.types import Graph, Orientation
from g2io.registry.registry import Registry

log = logging.getLogger(__name__)

# Template directory relative to this file
_TEMPLATE_DIR = Path(__file__).parent / "templates"

_ENV = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=select_autoescape(["xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

RENDERERS = Registry("renderer")


@dataclass(frozen=True, slots=True)
class GraphRenderer:
    """Writes a graph to a text stream using one template.

    ``orientation`` restricts the renderer to graphs of that orientation;
    None accepts both.
    """

    template_name: str
    orientation: Orientation | None = None

    def supports(self, orientation: Orientation) -> bool:
        return self.orientation is None or orientation is self.orientation

    def render(self, graph: Graph, stream: TextIO) -> None:
        """Render ``graph`` to ``stream``.

        Raises:
            OrientationMismatch: If the format does not support the graph's
                orientation.
        """
        if not self.supports(graph.orientation):
            raise OrientationMismatch(
                f"format {self.template_name!r} only supports {self.orientation} graphs"
            )
        template = _ENV.get_template(self.template_name)
        log.debug("Rendering %r with template %s", graph, self.template_name)
        stream.writelines(
            template.generate(
                directed=graph.is_directed,
                n_nodes=graph.n_nodes,
                nodes=graph.nodes(),
                edges=graph.edges(),
            )
        )

    def render_to_string(self, graph: Graph) -> str:
        buffer = io.StringIO()
        self.render(graph, buffer)
        return buffer.getvalue()


@RENDERERS.plugin("dot", [], "Output a graph using the Graphviz DOT format.")
def dot_renderer() -> GraphRenderer:
    return GraphRenderer("dot.gv")


@RENDERERS.plugin("graphml", [], "Output a graph using the GraphML format.")
def graphml_renderer() -> GraphRenderer:
    return GraphRenderer("graphml.xml")


@RENDERERS.plugin(
    "iccma_dimacs",
    [],
    [
        "Output a graph using the DIMACS-like format used at ICCMA'23.",
        "Undirected edges are written once in each direction.",
    ],
)
def iccma_dimacs_renderer() -> GraphRenderer:
    return GraphRenderer("iccma_dimacs.txt")


@RENDERERS.plugin(
    "apx",
    [],
    ["Output a graph using the Aspartix format.", "Directed graphs only."],
)
def aspartix_renderer() -> GraphRenderer:
    return GraphRenderer("apx.txt", orientation=Orientation.DIRECTED)

