"""Linkers producing the edges between communities.

Importing this package registers the built-in catalog in ``LINKERS``.
"""

from g2io.linkers.base import (
    LINKERS,
    Community,
    GraphLinker,
    InterGraphEdge,
    LinkDirection,
    LinkFunction,
)
from g2io.linkers.first_to_first import (
    bidirectional_first_to_first_linker,
    first_to_first_linker,
)
from g2io.linkers.min_incoming import (
    bidirectional_min_incoming_linker,
    min_incoming_linker,
    min_incoming_nodes,
)
from g2io.linkers.random_links import (
    bidirectional_random_linker,
    random_linker,
    sample_random_links,
)

__all__ = [
    "LINKERS",
    "Community",
    "GraphLinker",
    "InterGraphEdge",
    "LinkDirection",
    "LinkFunction",
    "bidirectional_first_to_first_linker",
    "bidirectional_min_incoming_linker",
    "bidirectional_random_linker",
    "first_to_first_linker",
    "min_incoming_linker",
    "min_incoming_nodes",
    "random_linker",
    "sample_random_links",
]
