"""Tests for config loader module."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

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


class TestGetDefaultConfigPath:
    """Tests for get_default_config_path function."""

    def test_returns_default_when_env_not_set(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should return default path when STRINGY_CONFIG_PATH not set."""
        monkeypatch.delenv("STRINGY_CONFIG_PATH", raising=False)
        assert get_default_config_path() == Path.home() / ".stringy" / "config.toml"

    def test_returns_env_path_when_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should return env path when STRINGY_CONFIG_PATH is set."""
        monkeypatch.setenv("STRINGY_CONFIG_PATH", "/custom/config.toml")
        assert get_default_config_path() == Path("/custom/config.toml")


class TestLoadTomlFile:
    """Tests for load_toml_file function."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_toml_file(tmp_path / "missing.toml") == {}

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[strings]\ndefault_language = "de"\n')
        assert load_toml_file(path) == {"strings": {"default_language": "de"}}

    def test_invalid_file_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should return empty dict and warn for unparsable TOML."""
        path = tmp_path / "config.toml"
        path.write_text("[strings\n")
        assert load_toml_file(path) == {}
        assert "Failed to load TOML file" in caplog.text


class TestLoadConfigFile:
    """Tests for load_config_file caching."""

    def test_uses_default_path(self, isolated_config: Path) -> None:
        """Should read the file named by STRINGY_CONFIG_PATH."""
        isolated_config.write_text('[logging]\nlevel = "debug"\n')
        assert load_config_file() == {"logging": {"level": "debug"}}

    def test_cached_until_mtime_changes(self, tmp_path: Path) -> None:
        """Should reload only when the file's mtime changes."""
        path = tmp_path / "config.toml"
        path.write_text('[strings]\ndefault_language = "de"\n')
        first = load_config_file(path)
        assert load_config_file(path) is first

        path.write_text('[strings]\ndefault_language = "bg"\n')
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))
        assert load_config_file(path) == {"strings": {"default_language": "bg"}}

    def test_clear_forces_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("")
        first = load_config_file(path)
        clear_config_cache()
        assert load_config_file(path) is not first


class TestGetConfig:
    """Tests for get_config precedence."""

    def test_defaults_without_sources(self, tmp_path: Path) -> None:
        config = get_config(config_path=tmp_path / "none.toml", env_reader=EnvReader(env={}))
        assert config.strings.default_encoding == "UTF-8"
        assert config.strings.default_language == "en"

    def test_env_overrides_file(self, tmp_path: Path) -> None:
        """Environment variables should beat the config file."""
        path = tmp_path / "config.toml"
        path.write_text(
            '[strings]\ndefault_encoding = "cp1252"\ndefault_language = "de"\n'
        )
        reader = EnvReader(env={"STRINGY_DEFAULT_LANGUAGE": "bg"})
        config = get_config(config_path=path, env_reader=reader)
        assert config.strings.default_encoding == "cp1252"
        assert config.strings.default_language == "bg"

    def test_cli_overrides_env(self, tmp_path: Path) -> None:
        """Explicit arguments should beat environment variables."""
        reader = EnvReader(env={"STRINGY_DEFAULT_ENCODING": "cp1252"})
        config = get_config(
            config_path=tmp_path / "none.toml",
            default_encoding="UTF-16",
            env_reader=reader,
        )
        assert config.strings.default_encoding == "UTF-16"

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        reader = EnvReader(env={"STRINGY_DEFAULT_ENCODING": "no-such-codec"})
        with pytest.raises(ValueError):
            get_config(config_path=tmp_path / "none.toml", env_reader=reader)


class TestDefaults:
    """Tests for the cached process-wide defaults."""

    def test_read_from_config_file(self, isolated_config: Path) -> None:
        isolated_config.write_text(
            '[strings]\ndefault_encoding = "ISO-8859-1"\ndefault_language = "de"\n'
        )
        clear_config_cache()
        assert get_default_encoding() == "ISO-8859-1"
        assert get_default_language() == "de"

    def test_cached_until_cleared(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults should be resolved once and reused."""
        assert get_default_language() == "en"
        monkeypatch.setenv("STRINGY_DEFAULT_LANGUAGE", "bg")
        assert get_default_language() == "en"
        clear_config_cache()
        assert get_default_language() == "bg"

    def test_overrides_win_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Command-line overrides take precedence and persist until cleared."""
        monkeypatch.setenv("STRINGY_DEFAULT_LANGUAGE", "bg")
        set_default_overrides(default_language="de")

        assert get_default_language() == "de"
        assert get_default_encoding() == "UTF-8"
        clear_config_cache()
        assert get_default_language() == "bg"

    def test_invalid_override_keeps_previous_defaults(self) -> None:
        with pytest.raises(ValueError, match="known codec"):
            set_default_overrides(default_encoding="no-such-codec")
        assert get_default_encoding() == "UTF-8"
