"""JSON serialization and deserialization for generation configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from g2io.config.experiment import GenerationConfig
from g2io.graph.types import Orientation

_DACITE_CONFIG = DaciteConfig(
    cast=[Orientation],
    check_types=True,
    strict=True,
)


def config_to_json(config: GenerationConfig) -> str:
    """Serialize a GenerationConfig to indented JSON with sorted keys."""
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GenerationConfig:
    """Deserialize a JSON string to a GenerationConfig.

    Uses dacite with strict=True to reject unknown keys (catches typos in
    hand-written files) and cast=[Orientation] to turn orientation strings
    back into enum members.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: GenerationConfig) -> dict[str, Any]:
    """Convert a GenerationConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> GenerationConfig:
    """Reconstruct a GenerationConfig from a plain dictionary."""
    return from_dict(data_class=GenerationConfig, data=d, config=_DACITE_CONFIG)
