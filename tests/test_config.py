"""Tests for codec configuration."""

import json

import pytest
from json_nodegraph.config import (
    CodecConfig,
    PROFILE_ARRAY_CATALOG,
    PROFILE_REPAIR_PREFIXES,
)


class TestCodecConfig:
    """Tests for CodecConfig class."""

    def test_defaults(self):
        """Test default settings."""
        config = CodecConfig()

        assert config.separator == "."
        assert config.max_depth == 256
        assert config.plural_suffix == "s"
        assert "people" in config.collection_nouns
        assert "entries" in config.array_name_hints
        assert config.container_names == ("list", "items", "array", "collection")
        assert config.array_catalog == ()
        assert config.repair_prefixes == ()
        assert config.enable_repair

    def test_lists_become_tuples(self):
        """Test list settings are stored as tuples."""
        config = CodecConfig(array_catalog=["skills"], container_names=["bag"])

        assert config.array_catalog == ("skills",)
        assert config.container_names == ("bag",)

    def test_invalid_settings(self):
        """Test configuration validation."""
        with pytest.raises(ValueError, match="separator cannot be empty"):
            CodecConfig(separator="")

        with pytest.raises(ValueError, match="max_depth must be positive"):
            CodecConfig(max_depth=0)

        with pytest.raises(ValueError, match="catalog prefixes cannot be empty"):
            CodecConfig(repair_prefixes=("skills", ""))

    def test_profile_preset(self):
        """Test the profile preset and its overrides."""
        config = CodecConfig.for_profiles(max_depth=10)

        assert config.array_catalog == PROFILE_ARRAY_CATALOG
        assert config.repair_prefixes == PROFILE_REPAIR_PREFIXES
        assert config.max_depth == 10

    def test_dict_round_trip(self):
        """Test conversion to and from camelCase dictionaries."""
        config = CodecConfig.for_profiles(enable_repair=False)
        data = config.to_dict()

        assert data["arrayCatalog"] == list(PROFILE_ARRAY_CATALOG)
        assert data["enableRepair"] is False
        assert CodecConfig.from_dict(data) == config

    def test_unknown_keys_rejected(self):
        """Test unknown keys are reported by name."""
        with pytest.raises(ValueError, match="Unknown configuration keys: colour, size"):
            CodecConfig.from_dict({"size": 1, "colour": "red"})

    def test_from_file(self, temp_dir):
        """Test loading configuration from a JSON file."""
        path = temp_dir / "codec.json"
        path.write_text(json.dumps({"separator": "/", "arrayCatalog": ["awards"]}))

        config = CodecConfig.from_file(path)

        assert config.separator == "/"
        assert config.array_catalog == ("awards",)

    def test_from_file_errors(self, temp_dir):
        """Test malformed configuration files."""
        broken = temp_dir / "broken.json"
        broken.write_text("{")
        with pytest.raises(ValueError, match="Invalid configuration file"):
            CodecConfig.from_file(broken)

        listed = temp_dir / "listed.json"
        listed.write_text("[]")
        with pytest.raises(ValueError, match="must contain a JSON object"):
            CodecConfig.from_file(listed)

    def test_replace(self):
        """Test replace returns a changed copy."""
        config = CodecConfig()
        changed = config.replace(enable_repair=False)

        assert changed.enable_repair is False
        assert config.enable_repair is True

        with pytest.raises(ValueError):
            config.replace(max_depth=-1)
