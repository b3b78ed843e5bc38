"""Tests for the settings loader."""

from pathlib import Path

import pytest

from dataflow_tools.config import loader
from dataflow_tools.config.loader import ConfigError, load_config, load_settings, load_yaml
from dataflow_tools.config.models import DataFlowSettings


@pytest.fixture
def tmp_yaml(tmp_path):
    """Create a temporary YAML file."""

    def _create(content: str, filename: str = "config.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _create


class TestLoadYaml:
    def test_valid_yaml(self, tmp_yaml):
        path = tmp_yaml("default_namespace: data")
        assert load_yaml(path) == {"default_namespace": "data"}

    def test_empty_yaml(self, tmp_yaml):
        assert load_yaml(tmp_yaml("")) == {}

    def test_file_not_found(self):
        with pytest.raises(ConfigError, match="not found"):
            load_yaml(Path("/nonexistent/config.yaml"))

    def test_invalid_yaml(self, tmp_yaml):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_yaml(tmp_yaml("invalid: [yaml: {broken"))

    def test_non_mapping(self, tmp_yaml):
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml(tmp_yaml("- a\n- b\n"))


class TestLoadConfig:
    def test_validation_failure(self, tmp_yaml):
        with pytest.raises(ConfigError, match="validation failed"):
            load_config(tmp_yaml("log_level: LOUD"), DataFlowSettings)


class TestLoadSettings:
    def test_explicit_path(self, tmp_yaml):
        settings = load_settings(tmp_yaml("default_namespace: pipelines\nlog_level: debug\n"))
        assert settings.default_namespace == "pipelines"
        assert settings.log_level == "DEBUG"

    def test_explicit_missing_path_fails(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_path / "nope.yaml")
        settings = load_settings()
        assert settings == DataFlowSettings()
        assert settings.default_namespace is None
        assert settings.log_level == "WARNING"

    def test_default_file_is_read(self, tmp_yaml, monkeypatch):
        monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_yaml("default_namespace: etl"))
        assert load_settings().default_namespace == "etl"
