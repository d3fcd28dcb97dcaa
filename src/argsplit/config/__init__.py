"""Configuration loading and schema definitions."""

from argsplit.config.loader import load_config
from argsplit.config.schema import (
    ArraySettings,
    Config,
    GlobalConfig,
    Symbols,
)

__all__ = [
    "ArraySettings",
    "Config",
    "GlobalConfig",
    "Symbols",
    "load_config",
]
