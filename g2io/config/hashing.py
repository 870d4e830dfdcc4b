"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from g2io.config.experiment import GenerationConfig

# Fields that never change the generated graph.
OUTPUT_NEUTRAL_FIELDS = ("n_workers", "output_format")


def config_hash(config: Any, exclude_fields: Iterable[str] = ()) -> str:
    """SHA-256 over the compact, key-sorted JSON form of a dataclass.

    Args:
        config: Any dataclass instance.
        exclude_fields: Top-level field names left out of the hash.

    Returns:
        First 16 hex characters of the digest.
    """
    excluded = set(exclude_fields)
    d = {k: v for k, v in asdict(config).items() if k not in excluded}
    serialized = json.dumps(d, sort_keys=True, ensure_ascii=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def graph_config_hash(config: GenerationConfig) -> str:
    """Hash identifying the generated graph.

    Worker count and output format do not change the graph, so configs
    differing only there share this hash.
    """
    return config_hash(config, exclude_fields=OUTPUT_NEUTRAL_FIELDS)


def full_config_hash(config: GenerationConfig) -> str:
    return config_hash(config)
