"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from argsplit.config.schema import Config
from argsplit.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "argsplit" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "argsplit" / "conf.d"
CONFIG_ENV_VAR = "ARGSPLIT_CONFIG"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, returning empty dict if the file does not exist."""
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(path, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    logger.debug("Loaded configuration from %s", path)
    return data


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Load and merge all YAML files from drop-in directory."""
    if not dropin_dir.is_dir():
        return {}

    result: dict[str, Any] = {}
    yaml_files = sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml"))

    for yaml_file in yaml_files:
        result = deep_merge(result, load_yaml_file(yaml_file))

    return result


def _build(data: dict[str, Any], source: Path | str | None) -> Config:
    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigError(source, str(e)) from e


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load configuration from file and drop-in directory.

    Args:
        config_path: Main config file (default: $ARGSPLIT_CONFIG, then
            ~/.config/argsplit/config.yaml)
        dropin_dir: Drop-in directory (default: ~/.config/argsplit/conf.d/)

    Returns:
        Merged configuration object

    Raises:
        ConfigError: A file is not valid YAML or violates the schema
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if dropin_dir is None:
        dropin_dir = DEFAULT_DROPIN_DIR
    dropin_dir = Path(dropin_dir)

    merged_data = deep_merge(load_yaml_file(config_path), load_dropin_directory(dropin_dir))
    return _build(merged_data, config_path)


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise ConfigError(None, str(e)) from e
    if data is not None and not isinstance(data, dict):
        raise ConfigError(None, "top level must be a mapping")
    return _build(data or {}, None)
