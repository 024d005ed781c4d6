"""Recognizer for the legacy scalar/array serialization format.

Only the shape of the data is checked; nothing is ever unserialized.
Supported values:

    N;                          null
    b:0;  b:1;                  booleans
    i:<int>;                    integers
    d:<float>;                  floats, including NAN, INF and -INF
    s:<bytes>:"<data>";         strings, length counted in encoded bytes
    a:<count>:{<key><value>*}   arrays with int or string keys

Objects and references are not recognized.
"""

from __future__ import annotations

import re

_NULL = re.compile(rb"N;")
_BOOL = re.compile(rb"b:[01];")
_INT = re.compile(rb"i:[+-]?[0-9]+;")
_FLOAT = re.compile(
    rb"d:(?:[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|NAN|-?INF);"
)
_STRING_HEAD = re.compile(rb's:([0-9]+):"')
_ARRAY_HEAD = re.compile(rb"a:([0-9]+):\{")

# Deep nesting is rejected rather than risking RecursionError.
_MAX_DEPTH = 512


class _GrammarError(Exception):
    """Raised internally when the input does not match the grammar."""


class _Reader:
    """Recursive-descent reader over the encoded bytes."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos == len(self.data)

    def _match(self, pattern: re.Pattern[bytes]) -> re.Match[bytes] | None:
        match = pattern.match(self.data, self.pos)
        if match is not None:
            self.pos = match.end()
        return match

    def _expect(self, token: bytes) -> None:
        if not self.data.startswith(token, self.pos):
            raise _GrammarError(f"expected {token!r} at {self.pos}")
        self.pos += len(token)

    def read_string(self) -> None:
        head = self._match(_STRING_HEAD)
        if head is None:
            raise _GrammarError(f"expected string at {self.pos}")
        self.pos += int(head.group(1))
        if self.pos > len(self.data):
            raise _GrammarError("string length runs past end of input")
        self._expect(b'";')

    def read_key(self) -> None:
        if self._match(_INT) is None:
            self.read_string()

    def read_value(self, depth: int = 0) -> None:
        if depth > _MAX_DEPTH:
            raise _GrammarError("nesting too deep")
        for scalar in (_NULL, _BOOL, _INT, _FLOAT):
            if self._match(scalar) is not None:
                return
        if self.data.startswith(b"s:", self.pos):
            self.read_string()
            return
        head = self._match(_ARRAY_HEAD)
        if head is None:
            raise _GrammarError(f"unexpected input at {self.pos}")
        for _ in range(int(head.group(1))):
            self.read_key()
            self.read_value(depth + 1)
        self._expect(b"}")


def is_serialized(text: str, encoding: str) -> bool:
    """Check whether text is a complete serialized value.

    Args:
        text: Candidate string.
        encoding: Encoding used to count string lengths in bytes.

    Returns:
        True if the whole of text is one well-formed value.

    Example:
        >>> is_serialized('a:1:{s:3:"foo";s:3:"bar";}', "UTF-8")
        True
        >>> is_serialized('a:1:{s:3:"foo";s:3:"bar"}', "UTF-8")
        False
    """
    if not text:
        return False
    try:
        reader = _Reader(text.encode(encoding))
    except UnicodeEncodeError:
        return False
    try:
        reader.read_value()
    except _GrammarError:
        return False
    return reader.at_end()
