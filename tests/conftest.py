"""Pytest configuration and fixtures."""

import io

import pytest

from argsplit.config.loader import load_config_from_string
from argsplit.config.schema import Config
from argsplit.core.diagnostics import Diagnostics
from argsplit.core.style import Style, reset_colors


@pytest.fixture(autouse=True)
def inactive_global_style():
    """Keep the process-wide style inactive around every test."""
    reset_colors()
    yield
    reset_colors()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration lookups at an empty temporary directory."""
    monkeypatch.setenv("ARGSPLIT_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setattr(
        "argsplit.config.loader.DEFAULT_DROPIN_DIR", tmp_path / "conf.d"
    )
    monkeypatch.delenv("ARGSPLIT_DEBUG", raising=False)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def plain_diagnostics(stream) -> Diagnostics:
    """Diagnostics writing unstyled messages to an in-memory stream."""
    return Diagnostics(style=Style.disabled(), stream=stream)


@pytest.fixture
def styled_diagnostics(stream) -> Diagnostics:
    """Diagnostics writing styled messages to an in-memory stream."""
    return Diagnostics(style=Style.enabled(), stream=stream)


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
config:
  color: never
  styles: true

arrays:
  default_capacity: 2
  growth: double
  max_capacity: 8

symbols:
  error: "x"
  info: "i"
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def fixed_config() -> Config:
    """Configuration with fixed-size arrays."""
    yaml_content = """
arrays:
  default_capacity: 2
  growth: fixed
"""
    return load_config_from_string(yaml_content)
