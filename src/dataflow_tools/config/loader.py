"""YAML settings loading with Pydantic validation."""

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .models import DataFlowSettings

T = TypeVar("T", bound=BaseModel)

DEFAULT_CONFIG_PATH = Path.home() / ".dataflow" / "config.yaml"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")
    return data


def load_config(path: Path, model_class: type[T]) -> T:
    """Load and validate a YAML config file against a Pydantic model.

    Args:
        path: Path to the YAML configuration file.
        model_class: Pydantic model class to validate against.

    Returns:
        Validated configuration model instance.

    Raises:
        ConfigError: If validation fails.
    """
    data = load_yaml(path)
    try:
        return model_class(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def load_settings(path: Path | None = None) -> DataFlowSettings:
    """Load user settings.

    Without ``path`` the default location is used, and a missing file there
    just means defaults. An explicit ``path`` must exist.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return DataFlowSettings()
        path = DEFAULT_CONFIG_PATH
    return load_config(path, DataFlowSettings)
