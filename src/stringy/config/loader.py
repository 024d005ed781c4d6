"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (STRINGY_*)
3. Config file (~/.stringy/config.toml)
4. Default values

Environment variables:
- STRINGY_CONFIG_PATH: Path to config file (overrides default location)
- STRINGY_DEFAULT_ENCODING: Encoding for Stringy values created without one
- STRINGY_DEFAULT_LANGUAGE: Language tag for to_ascii() and slugify()
- STRINGY_LOG_LEVEL, STRINGY_LOG_FORMAT, STRINGY_LOG_FILE: Logging overrides
- STRINGY_LOG_STDERR, STRINGY_LOG_MAX_BYTES, STRINGY_LOG_BACKUP_COUNT:
  Logging handler overrides
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

from stringy.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from stringy.config.env import EnvReader
from stringy.config.models import StringyConfig

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".stringy"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
# This prevents redundant file reads and automatically reloads on file change
_config_cache: dict[Path, tuple[dict[str, Any], float]] = {}
_config_cache_lock = threading.Lock()

# Resolved defaults, reset by clear_config_cache()
_defaults: StringyConfig | None = None


def get_default_config_path() -> Path:
    """Get the default config file path.

    Can be overridden by STRINGY_CONFIG_PATH environment variable.

    Returns:
        Path to config file.
    """
    return EnvReader().get_path("CONFIG_PATH") or DEFAULT_CONFIG_FILE


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed dictionary. Returns empty dict if file doesn't exist
        or cannot be parsed.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load TOML file %s: %s", path, e)
        return {}
    logger.debug("Loaded TOML config from %s", path)
    return config


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Results are cached with mtime-based invalidation. The cache automatically
    reloads the file if it has been modified since the last read.
    Use clear_config_cache() to force a reload regardless of mtime.

    Thread-safe: uses a lock to protect concurrent access to the cache.

    Args:
        path: Path to config file. If None, uses default location.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    # Get current mtime (or 0.0 if file doesn't exist)
    try:
        current_mtime = path.stat().st_mtime
    except FileNotFoundError:
        current_mtime = 0.0

    with _config_cache_lock:
        if path in _config_cache:
            cached_config, cached_mtime = _config_cache[path]
            if current_mtime == cached_mtime:
                return cached_config

        result = load_toml_file(path)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache and the resolved defaults.

    Call this if the config file or STRINGY_* variables may have changed
    and you need a fresh load. Primarily useful for testing.
    """
    global _defaults
    with _config_cache_lock:
        _config_cache.clear()
        _defaults = None


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    default_encoding: str | None = None,
    default_language: str | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
) -> StringyConfig:
    """Get stringy configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides STRINGY_CONFIG_PATH).
        default_encoding: CLI override for the default encoding.
        default_language: CLI override for the default language.
        env_reader: Optional EnvReader for testing (uses os.environ if None).

    Returns:
        StringyConfig with merged configuration.

    Raises:
        ValueError: If a configured value is invalid.
    """
    reader = env_reader or EnvReader()

    file_config = load_config_file(config_path)

    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config))
    builder.apply(source_from_env(reader))
    builder.apply(
        ConfigSource(
            default_encoding=default_encoding,
            default_language=default_language,
        )
    )
    return builder.build()


def _get_defaults() -> StringyConfig:
    global _defaults
    defaults = _defaults
    if defaults is None:
        defaults = get_config()
        with _config_cache_lock:
            _defaults = defaults
    return defaults


def set_default_overrides(
    default_encoding: str | None = None,
    default_language: str | None = None,
) -> StringyConfig:
    """Resolve the process-wide defaults with command-line overrides on top.

    Later calls to get_default_encoding() and get_default_language() return
    the overridden values until clear_config_cache() is called.

    Raises:
        ValueError: If an override is invalid (e.g. an unknown codec).
    """
    global _defaults
    defaults = get_config(
        default_encoding=default_encoding, default_language=default_language
    )
    with _config_cache_lock:
        _defaults = defaults
    return defaults


def get_default_encoding() -> str:
    """Return the process-wide default encoding for new Stringy values.

    Resolved once from environment and config file, then reused until
    clear_config_cache() is called.
    """
    return _get_defaults().strings.default_encoding


def get_default_language() -> str:
    """Return the process-wide default language tag for transliteration."""
    return _get_defaults().strings.default_language
