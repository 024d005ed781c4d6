"""Tests for ConfigBuilder module."""

from __future__ import annotations

from pathlib import Path

import pytest

from stringy.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from stringy.config.env import EnvReader


class TestConfigSource:
    """Tests for ConfigSource dataclass."""

    def test_all_fields_default_to_none(self) -> None:
        """All fields should default to None."""
        source = ConfigSource()
        assert source.default_encoding is None
        assert source.default_language is None
        assert source.logging_level is None
        assert source.logging_include_stderr is None


class TestConfigBuilder:
    """Tests for ConfigBuilder class."""

    def test_build_with_no_sources_uses_defaults(self) -> None:
        """Should use default values when no sources applied."""
        config = ConfigBuilder().build()

        assert config.strings.default_encoding == "UTF-8"
        assert config.strings.default_language == "en"
        assert config.logging.level == "info"
        assert config.logging.format == "text"
        assert config.logging.file is None

    def test_apply_overrides_defaults(self) -> None:
        """Applied source should override defaults."""
        builder = ConfigBuilder()
        builder.apply(ConfigSource(default_encoding="ISO-8859-1", logging_level="debug"))
        config = builder.build()

        assert config.strings.default_encoding == "ISO-8859-1"
        assert config.logging.level == "debug"
        # Other defaults still apply
        assert config.strings.default_language == "en"

    def test_none_values_do_not_override(self) -> None:
        """None values in source should not override existing values."""
        builder = ConfigBuilder()
        builder.apply(ConfigSource(default_language="de"))
        builder.apply(ConfigSource(default_language=None, logging_format="json"))
        config = builder.build()

        assert config.strings.default_language == "de"
        assert config.logging.format == "json"

    def test_later_sources_win(self) -> None:
        """Later sources should override earlier ones."""
        builder = ConfigBuilder()
        builder.apply(ConfigSource(default_language="de"))
        builder.apply(ConfigSource(default_language="bg"))
        builder.apply(ConfigSource(default_language="en"))

        assert builder.build().strings.default_language == "en"

    def test_false_is_a_value(self) -> None:
        """False should override an earlier True."""
        builder = ConfigBuilder()
        builder.apply(ConfigSource(logging_include_stderr=True))
        builder.apply(ConfigSource(logging_include_stderr=False))
        assert builder.build().logging.include_stderr is False

    def test_invalid_values_raise(self) -> None:
        """Model validation should reject an unknown codec."""
        builder = ConfigBuilder()
        builder.apply(ConfigSource(default_encoding="no-such-codec"))
        with pytest.raises(ValueError):
            builder.build()


class TestSourceFromFile:
    """Tests for source_from_file function."""

    def test_empty_config(self) -> None:
        """Should return all-None source for empty config."""
        source = source_from_file({})
        assert source == ConfigSource()

    def test_reads_sections(self) -> None:
        source = source_from_file(
            {
                "strings": {"default_encoding": "cp1252", "default_language": "de"},
                "logging": {
                    "level": "warning",
                    "format": "json",
                    "include_stderr": True,
                    "max_bytes": 2048,
                    "backup_count": 2,
                },
            }
        )
        assert source.default_encoding == "cp1252"
        assert source.default_language == "de"
        assert source.logging_level == "warning"
        assert source.logging_format == "json"
        assert source.logging_include_stderr is True
        assert source.logging_max_bytes == 2048
        assert source.logging_backup_count == 2

    def test_expands_log_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Should expand tilde in the log file path."""
        monkeypatch.setenv("HOME", str(tmp_path))
        source = source_from_file({"logging": {"file": "~/stringy.log"}})
        assert source.logging_file == tmp_path / "stringy.log"


class TestSourceFromEnv:
    """Tests for source_from_env function."""

    def test_empty_env(self) -> None:
        assert source_from_env(EnvReader(env={})) == ConfigSource()

    def test_reads_variables(self) -> None:
        reader = EnvReader(
            env={
                "STRINGY_DEFAULT_ENCODING": "UTF-16",
                "STRINGY_DEFAULT_LANGUAGE": "bg",
                "STRINGY_LOG_LEVEL": "error",
                "STRINGY_LOG_FILE": "/tmp/stringy.log",
                "STRINGY_LOG_FORMAT": "json",
                "STRINGY_LOG_STDERR": "yes",
                "STRINGY_LOG_MAX_BYTES": "1024",
                "STRINGY_LOG_BACKUP_COUNT": "3",
            }
        )
        source = source_from_env(reader)
        assert source.default_encoding == "UTF-16"
        assert source.default_language == "bg"
        assert source.logging_level == "error"
        assert source.logging_file == Path("/tmp/stringy.log")
        assert source.logging_format == "json"
        assert source.logging_include_stderr is True
        assert source.logging_max_bytes == 1024
        assert source.logging_backup_count == 3
