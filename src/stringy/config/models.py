"""Configuration data models.

This module defines dataclasses for stringy configuration options.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class StringsConfig:
    """Defaults applied to new Stringy values."""

    # Encoding used when a Stringy is created without one
    default_encoding: str = "UTF-8"

    # Language tag used by to_ascii() and slugify() when none is given
    default_language: str = "en"

    def __post_init__(self) -> None:
        """Validate configuration."""
        try:
            codecs.lookup(self.default_encoding)
        except LookupError:
            raise ValueError(
                f"default_encoding must name a known codec, "
                f"got {self.default_encoding!r}"
            ) from None
        if not self.default_language.strip():
            raise ValueError("default_language must not be empty")


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes < 0:
            raise ValueError(f"max_bytes must be non-negative, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(
                f"backup_count must be non-negative, got {self.backup_count}"
            )


@dataclass
class StringyConfig:
    """Main configuration for the stringy package."""

    strings: StringsConfig = field(default_factory=StringsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
