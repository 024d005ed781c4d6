"""Shared test fixtures for stringy."""

import logging
from pathlib import Path

import pytest

from stringy.config.loader import clear_config_cache

_STRINGY_ENV_VARS = (
    "STRINGY_DEFAULT_ENCODING",
    "STRINGY_DEFAULT_LANGUAGE",
    "STRINGY_LOG_LEVEL",
    "STRINGY_LOG_FILE",
    "STRINGY_LOG_FORMAT",
    "STRINGY_LOG_STDERR",
    "STRINGY_LOG_MAX_BYTES",
    "STRINGY_LOG_BACKUP_COUNT",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the config loader at an empty temp location.

    Keeps the developer's ~/.stringy/config.toml and STRINGY_* variables
    from leaking into tests, and resets cached defaults on both sides.
    """
    monkeypatch.setenv("STRINGY_CONFIG_PATH", str(tmp_path / "config.toml"))
    for var in _STRINGY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    yield tmp_path / "config.toml"
    clear_config_cache()


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)
