"""Generation configuration: frozen, hashable, serializable dataclasses."""

from g2io.config.defaults import DEFAULT_CONFIG
from g2io.config.experiment import GenerationConfig
from g2io.config.hashing import config_hash, full_config_hash, graph_config_hash
from g2io.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "GenerationConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_dict",
    "config_to_json",
    "full_config_hash",
    "graph_config_hash",
]
