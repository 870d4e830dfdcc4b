"""Community-structured graph generation: one inner graph per outer node."""

__version__ = "0.1.0"
