"""Graph generators for inner and outer graphs.

Importing this package registers the built-in catalog in ``GENERATORS``.
"""

from g2io.generators.base import GENERATORS, GraphBuilder, GraphGenerator
from g2io.generators.barabasi_albert import barabasi_albert_generator, sample_barabasi_albert
from g2io.generators.chain import build_chain, chain_generator
from g2io.generators.erdos_renyi import erdos_renyi_generator, sample_gnp
from g2io.generators.tree import build_tree, tree_generator
from g2io.generators.watts_strogatz import sample_watts_strogatz, watts_strogatz_generator

__all__ = [
    "GENERATORS",
    "GraphBuilder",
    "GraphGenerator",
    "barabasi_albert_generator",
    "build_chain",
    "build_tree",
    "chain_generator",
    "erdos_renyi_generator",
    "sample_barabasi_albert",
    "sample_gnp",
    "sample_watts_strogatz",
    "tree_generator",
    "watts_strogatz_generator",
]
