"""Tests for configuration models."""

from __future__ import annotations

import pytest

from stringy.config.models import LoggingConfig, StringsConfig, StringyConfig


class TestStringsConfig:
    """Tests for StringsConfig validation."""

    def test_defaults(self) -> None:
        config = StringsConfig()
        assert config.default_encoding == "UTF-8"
        assert config.default_language == "en"

    @pytest.mark.parametrize("encoding", ["utf-8", "ISO-8859-1", "cp1252", "UTF-16"])
    def test_accepts_known_codecs(self, encoding: str) -> None:
        assert StringsConfig(default_encoding=encoding).default_encoding == encoding

    def test_rejects_unknown_codec(self) -> None:
        """Should raise ValueError for an encoding Python does not know."""
        with pytest.raises(ValueError, match="default_encoding"):
            StringsConfig(default_encoding="no-such-codec")

    def test_rejects_blank_language(self) -> None:
        with pytest.raises(ValueError, match="default_language"):
            StringsConfig(default_language="  ")


class TestLoggingConfig:
    """Tests for LoggingConfig validation."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "info"
        assert config.file is None
        assert config.format == "text"
        assert config.include_stderr is False
        assert config.max_bytes == 10_485_760
        assert config.backup_count == 5

    @pytest.mark.parametrize("level", ["debug", "INFO", "Warning", "error"])
    def test_accepts_levels_case_insensitively(self, level: str) -> None:
        assert LoggingConfig(level=level).level == level

    def test_rejects_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="level must be one of"):
            LoggingConfig(level="verbose")

    def test_rejects_invalid_format(self) -> None:
        with pytest.raises(ValueError, match="format must be one of"):
            LoggingConfig(format="xml")

    def test_rejects_negative_max_bytes(self) -> None:
        with pytest.raises(ValueError, match="max_bytes"):
            LoggingConfig(max_bytes=-1)

    def test_rejects_negative_backup_count(self) -> None:
        with pytest.raises(ValueError, match="backup_count"):
            LoggingConfig(backup_count=-1)


class TestStringyConfig:
    """Tests for the top-level StringyConfig."""

    def test_sections_are_independent(self) -> None:
        """Each instance should get its own section objects."""
        first = StringyConfig()
        second = StringyConfig()
        assert first.strings is not second.strings
        assert first.logging is not second.logging
