"""Configuration management for stringy.

This module provides configuration loading with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (STRINGY_*)
3. Config file (~/.stringy/config.toml)
4. Default values (lowest priority)
"""

from stringy.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from stringy.config.env import EnvReader
from stringy.config.loader import (
    clear_config_cache,
    get_config,
    get_default_config_path,
    get_default_encoding,
    get_default_language,
    load_config_file,
    load_toml_file,
    set_default_overrides,
)
from stringy.config.models import LoggingConfig, StringsConfig, StringyConfig

__all__ = [
    # Models
    "LoggingConfig",
    "StringsConfig",
    "StringyConfig",
    # Loader
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "get_default_encoding",
    "get_default_language",
    "load_config_file",
    "load_toml_file",
    "set_default_overrides",
    # Layering
    "ConfigBuilder",
    "ConfigSource",
    "EnvReader",
    "source_from_env",
    "source_from_file",
]
