"""Tests for the generation configuration system."""

import json
import re
from dataclasses import FrozenInstanceError, replace

import pytest
from dacite import DaciteError

from g2io.config import (
    DEFAULT_CONFIG,
    GenerationConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    full_config_hash,
    graph_config_hash,
)
from g2io.graph.types import Orientation


class TestDefaultConfig:
    """DEFAULT_CONFIG holds the CLI defaults."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.outer == "chain/3"
        assert DEFAULT_CONFIG.inner == "chain/3"
        assert DEFAULT_CONFIG.linker == "first"
        assert DEFAULT_CONFIG.orientation is Orientation.DIRECTED
        assert DEFAULT_CONFIG.seed is None
        assert DEFAULT_CONFIG.n_workers is None
        assert DEFAULT_CONFIG.output_format == "dot"


class TestConfigValidation:
    """__post_init__ normalizes and rejects bad values."""

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_component_strings_stripped(self):
        config = GenerationConfig(outer=" chain/3 ", inner="tree/7\n", linker=" first")
        assert config.outer == "chain/3"
        assert config.inner == "tree/7"
        assert config.linker == "first"

    @pytest.mark.parametrize("field", ["outer", "inner", "linker", "output_format"])
    def test_empty_component_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            replace(DEFAULT_CONFIG, **{field: "  "})

    def test_negative_seed_rejected(self):
        with pytest.raises(ValueError, match="seed"):
            replace(DEFAULT_CONFIG, seed=-1)

    def test_zero_workers_rejected(self):
        with pytest.raises(ValueError, match="n_workers"):
            replace(DEFAULT_CONFIG, n_workers=0)

    def test_orientation_string_coerced(self):
        config = replace(DEFAULT_CONFIG, orientation="undirected")
        assert config.orientation is Orientation.UNDIRECTED

    def test_unknown_orientation_rejected(self):
        with pytest.raises(ValueError):
            replace(DEFAULT_CONFIG, orientation="sideways")


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_json_round_trip(self):
        config = GenerationConfig(
            outer="ba/100,5",
            inner="er/10,0.2",
            linker="random/0.1",
            orientation=Orientation.UNDIRECTED,
            seed=7,
            n_workers=4,
            output_format="graphml",
        )
        restored = config_from_json(config_to_json(config))
        assert restored == config
        assert restored.orientation is Orientation.UNDIRECTED

    def test_json_is_sorted_and_readable(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        assert list(data) == sorted(data)
        assert data["orientation"] == "directed"
        assert data == config_to_dict(DEFAULT_CONFIG)

    def test_dict_round_trip(self):
        assert config_from_dict(config_to_dict(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_missing_optional_fields_use_defaults(self):
        config = config_from_dict({"outer": "chain/2", "inner": "chain/2", "linker": "first"})
        assert config.seed is None
        assert config.output_format == "dot"

    def test_unknown_key_rejected(self):
        data = config_to_dict(DEFAULT_CONFIG)
        data["sed"] = 3
        with pytest.raises(DaciteError):
            config_from_dict(data)

    def test_wrong_type_rejected(self):
        data = config_to_dict(DEFAULT_CONFIG)
        data["seed"] = "three"
        with pytest.raises(DaciteError):
            config_from_dict(data)


class TestConfigHashing:
    """Deterministic hashes identifying runs and graphs."""

    def test_hash_format(self):
        assert re.fullmatch(r"[0-9a-f]{16}", config_hash(DEFAULT_CONFIG))

    def test_hash_deterministic(self):
        a = replace(DEFAULT_CONFIG, seed=5)
        b = replace(DEFAULT_CONFIG, seed=5)
        assert full_config_hash(a) == full_config_hash(b)

    def test_graph_hash_ignores_output_neutral_fields(self):
        a = replace(DEFAULT_CONFIG, seed=5, n_workers=1, output_format="dot")
        b = replace(DEFAULT_CONFIG, seed=5, n_workers=8, output_format="graphml")
        assert graph_config_hash(a) == graph_config_hash(b)
        assert full_config_hash(a) != full_config_hash(b)

    def test_graph_hash_sees_seed_and_components(self):
        base = replace(DEFAULT_CONFIG, seed=5)
        assert graph_config_hash(base) != graph_config_hash(replace(base, seed=6))
        assert graph_config_hash(base) != graph_config_hash(replace(base, inner="tree/3"))
        assert graph_config_hash(base) != graph_config_hash(
            replace(base, orientation=Orientation.UNDIRECTED)
        )
