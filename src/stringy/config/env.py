"""Typed access to the STRINGY_* environment variables.

Every setting stringy reads from the environment shares the STRINGY_
prefix, so EnvReader takes keys without it:

    reader = EnvReader()
    reader.get_str("DEFAULT_ENCODING")  # reads STRINGY_DEFAULT_ENCODING

Tests pass a plain dict instead of touching os.environ:

    reader = EnvReader(env={"STRINGY_LOG_MAX_BYTES": "1024"})
    reader.get_int("LOG_MAX_BYTES")  # 1024
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

PREFIX = "STRINGY_"

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class EnvReader:
    """Reads STRINGY_* settings, converting them to the type each one needs.

    Values are stripped, and a variable that is unset or blank reads as
    None. A value that does not parse is logged at warning level and also
    reads as None, so the next source in the config layering applies.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env

    def _raw(self, key: str) -> str | None:
        value = self._env.get(PREFIX + key, "").strip()
        return value or None

    def _invalid(self, key: str, value: str, expected: str) -> None:
        logger.warning("Ignoring %s%s=%r: expected %s", PREFIX, key, value, expected)

    def get_str(self, key: str) -> str | None:
        return self._raw(key)

    def get_int(self, key: str) -> int | None:
        value = self._raw(key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            self._invalid(key, value, "an integer")
            return None

    def get_bool(self, key: str) -> bool | None:
        """Read a flag: 1/true/yes/on or 0/false/no/off, in any case."""
        value = self._raw(key)
        if value is None:
            return None
        word = value.casefold()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        self._invalid(key, value, "a boolean")
        return None

    def get_path(self, key: str) -> Path | None:
        """Read a path, expanding a leading ~."""
        value = self._raw(key)
        return Path(value).expanduser() if value is not None else None
