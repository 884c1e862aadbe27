"""Unit tests for configuration management module."""

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from adjgraph.config import (
    AdjGraphConfig,
    CycleStrategy,
    LoggingConfig,
    PathMode,
    TraversalConfig,
    get_config,
    load_config,
    reset_config,
)


@pytest.fixture
def valid_config_dict() -> dict[str, Any]:
    """Fixture providing valid configuration dictionary."""
    return {
        "logging": {
            "level": "DEBUG",
            "json_logs": False,
        },
        "traversal": {
            "cycle_strategy": "recursive",
            "path_mode": "legacy",
        },
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, valid_config_dict: dict[str, Any]) -> Path:
    """Fixture providing temporary YAML config file."""
    config_path = tmp_path / "config.yaml"
    with config_path.open("w") as f:
        yaml.dump(valid_config_dict, f)
    return config_path


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self):
        """Test LoggingConfig defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.json_logs is True

    def test_invalid_level(self):
        """Test LoggingConfig rejects unknown levels."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")

    def test_level_whitespace_stripped(self):
        """Test that surrounding whitespace is ignored."""
        config = LoggingConfig(level=" ERROR ")
        assert config.level == "ERROR"


class TestTraversalConfig:
    """Tests for TraversalConfig model."""

    def test_defaults(self):
        """Test TraversalConfig defaults."""
        config = TraversalConfig()
        assert config.cycle_strategy == CycleStrategy.ITERATIVE
        assert config.path_mode == PathMode.CANONICAL

    def test_values_parsed_to_enums(self):
        """Test that string values are converted to enums."""
        config = TraversalConfig(cycle_strategy="recursive", path_mode="legacy")
        assert config.cycle_strategy == CycleStrategy.RECURSIVE
        assert config.path_mode == PathMode.LEGACY

    def test_invalid_strategy(self):
        """Test TraversalConfig rejects unknown strategies."""
        with pytest.raises(ValidationError):
            TraversalConfig(cycle_strategy="breadth-first")


class TestAdjGraphConfig:
    """Tests for the main configuration model."""

    def test_defaults(self):
        """Test that every section has defaults."""
        config = AdjGraphConfig()
        assert config.logging.level == "INFO"
        assert config.traversal.cycle_strategy == CycleStrategy.ITERATIVE

    def test_from_yaml(self, temp_config_file):
        """Test loading configuration from YAML."""
        config = AdjGraphConfig.from_yaml(temp_config_file)

        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is False
        assert config.traversal.cycle_strategy == CycleStrategy.RECURSIVE
        assert config.traversal.path_mode == PathMode.LEGACY

    def test_from_yaml_missing_file(self, tmp_path):
        """Test loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            AdjGraphConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_empty_file(self, tmp_path):
        """Test loading an empty file raises ValueError."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        with pytest.raises(ValueError, match="empty"):
            AdjGraphConfig.from_yaml(config_path)

    def test_from_yaml_invalid_yaml(self, tmp_path):
        """Test loading malformed YAML raises ValueError."""
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("traversal: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AdjGraphConfig.from_yaml(config_path)

    def test_from_yaml_invalid_values(self, tmp_path):
        """Test loading invalid values raises ValidationError."""
        config_path = tmp_path / "invalid.yaml"
        config_path.write_text("traversal:\n  path_mode: shortest\n")

        with pytest.raises(ValidationError):
            AdjGraphConfig.from_yaml(config_path)

    def test_validate_config_defaults(self):
        """Test that defaults produce no warnings."""
        assert AdjGraphConfig().validate_config() == []

    def test_validate_config_warnings(self, temp_config_file):
        """Test that recursive, legacy and debug settings are flagged."""
        warnings = AdjGraphConfig.from_yaml(temp_config_file).validate_config()

        assert len(warnings) == 3
        assert any("RecursionError" in warning for warning in warnings)
        assert any("Legacy path mode" in warning for warning in warnings)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_explicit_path(self, temp_config_file):
        """Test load_config with an explicit path."""
        config = load_config(temp_config_file)
        assert config.traversal.path_mode == PathMode.LEGACY

    def test_load_missing_explicit_path(self, tmp_path):
        """Test load_config raises for a missing explicit path."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_load_config_default_location(self, tmp_path, valid_config_dict):
        """Test load_config finds adjgraph.yaml in the current directory."""
        with (tmp_path / "adjgraph.yaml").open("w") as f:
            yaml.dump(valid_config_dict, f)

        config = load_config()
        assert config.traversal.cycle_strategy == CycleStrategy.RECURSIVE

    def test_load_config_yml_extension(self, tmp_path, valid_config_dict):
        """Test load_config also finds adjgraph.yml."""
        with (tmp_path / "adjgraph.yml").open("w") as f:
            yaml.dump(valid_config_dict, f)

        config = load_config()
        assert config.logging.level == "DEBUG"

    def test_load_config_defaults_without_file(self):
        """Test load_config falls back to defaults when no file exists."""
        config = load_config()

        assert config == AdjGraphConfig()


class TestEnvironmentVariableOverrides:
    """Tests for environment variable override support."""

    def test_logging_level_override(self, temp_config_file, monkeypatch):
        """Test ADJGRAPH_LOGGING_LEVEL overrides file value."""
        monkeypatch.setenv("ADJGRAPH_LOGGING_LEVEL", "warning")

        config = load_config(temp_config_file)
        assert config.logging.level == "WARNING"

    def test_json_logs_override(self, temp_config_file, monkeypatch):
        """Test boolean environment variable override."""
        monkeypatch.setenv("ADJGRAPH_LOGGING_JSON", "yes")

        config = load_config(temp_config_file)
        assert config.logging.json_logs is True

    def test_traversal_overrides(self, temp_config_file, monkeypatch):
        """Test traversal overrides are applied case-insensitively."""
        monkeypatch.setenv("ADJGRAPH_CYCLE_STRATEGY", "ITERATIVE")
        monkeypatch.setenv("ADJGRAPH_PATH_MODE", "Canonical")

        config = load_config(temp_config_file)
        assert config.traversal.cycle_strategy == CycleStrategy.ITERATIVE
        assert config.traversal.path_mode == PathMode.CANONICAL

    def test_override_without_file(self, monkeypatch):
        """Test overrides apply on top of built-in defaults."""
        monkeypatch.setenv("ADJGRAPH_PATH_MODE", "legacy")

        config = load_config()
        assert config.traversal.path_mode == PathMode.LEGACY
        assert config.traversal.cycle_strategy == CycleStrategy.ITERATIVE

    def test_invalid_override(self, monkeypatch):
        """Test an invalid override fails validation."""
        monkeypatch.setenv("ADJGRAPH_CYCLE_STRATEGY", "sideways")

        with pytest.raises(ValidationError):
            load_config()


class TestGetConfig:
    """Tests for get_config singleton function."""

    def test_get_config_singleton(self, temp_config_file):
        """Test get_config returns same instance."""
        config1 = get_config(temp_config_file)
        config2 = get_config()

        assert config1 is config2

    def test_get_config_reload(self, temp_config_file, tmp_path, valid_config_dict):
        """Test get_config with reload parameter."""
        config1 = get_config(temp_config_file)
        assert config1.traversal.path_mode == PathMode.LEGACY

        valid_config_dict["traversal"]["path_mode"] = "canonical"
        modified_path = tmp_path / "modified.yaml"
        with modified_path.open("w") as f:
            yaml.dump(valid_config_dict, f)

        config2 = get_config(modified_path, reload=True)
        assert config2.traversal.path_mode == PathMode.CANONICAL

    def test_reset_config(self, temp_config_file):
        """Test reset_config clears cached instance."""
        config1 = get_config(temp_config_file)
        reset_config()
        config2 = get_config(temp_config_file)

        assert config1 is not config2
