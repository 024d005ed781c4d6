"""Immutable, Unicode-aware string value type.

A Stringy pairs a text with the name of its character encoding. Every
length, offset and slice is measured in codepoints, never in bytes, and
every transformation returns a new Stringy with the same encoding, so
calls chain naturally:

    >>> Stringy("Fòô     Bàř").collapse_whitespace().swap_case().text
    'fÒÔ bÀŘ'

The encoding matters where text meets bytes (``bytes(s)``, bytes input,
serialized-format lengths) and scopes the regex helpers. When omitted it
comes from the configured default (see stringy.config).
"""

from __future__ import annotations

import base64
import binascii
import random
import re
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, SupportsIndex

from stringy.config.loader import get_default_encoding, get_default_language
from stringy.core.entities import ENT_COMPAT, decode_entities, encode_entities
from stringy.core.json_utils import parse_json_safe
from stringy.core.padding import apply_padding, split_padding
from stringy.core.patterns import (
    DEFAULT_OPTIONS,
    WHITESPACE,
    regex_replace,
    regex_split,
)
from stringy.core.serialized import is_serialized
from stringy.core.string_utils import contains_ci, ends_with_ci, starts_with_ci
from stringy.core.transliteration import transliterate
from stringy.exceptions import ImmutableError, InvalidArgumentError, OutOfRangeError

# Accepted spellings of the pad() side, including the legacy numeric codes
_PAD_TYPES: dict[Any, str] = {
    "left": "left",
    "right": "right",
    "both": "both",
    0: "left",
    1: "right",
    2: "both",
}

_BOOLEAN_WORDS: dict[str, bool] = {
    "true": True,
    "1": True,
    "on": True,
    "yes": True,
    "false": False,
    "0": False,
    "off": False,
    "no": False,
}

_NUMERIC = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")

# Letters and digits, with apostrophes allowed between them ("they're")
_TITLE_WORD = r"[^\W_]+(?:['\u2019][^\W_]+)*"

_TIDY_TABLE = str.maketrans(
    {
        "…": "...",
        "“": '"',
        "”": '"',
        "‘": "'",
        "’": "'",
        "–": "-",
        "—": "-",
    }
)

_LINE_BREAK = r"[\r\n]{1,2}"


def _text(value: object) -> str:
    """Return the textual form of a str, Stringy or other stringable value."""
    if isinstance(value, Stringy):
        return value.text
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class Stringy:
    """An immutable string with an associated encoding.

    Construction coerces text once: str and Stringy values are taken as
    is, bytes are decoded with the encoding, None becomes "" and anything
    else goes through str(). Two Stringy values are equal when both text
    and encoding are equal.

    Attributes:
        text: The string content.
        encoding: Name of the character encoding (e.g. "UTF-8").
    """

    text: str = ""
    encoding: str = ""

    def __post_init__(self) -> None:
        encoding = self.encoding or get_default_encoding()
        value: object = self.text
        if isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode(encoding)
        elif value is None:
            text = ""
        else:
            text = _text(value)
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "encoding", encoding)

    def _new(self, text: str) -> Stringy:
        return type(self)(text, self.encoding)

    # -- Python protocols -------------------------------------------------

    def __str__(self) -> str:
        return self.text

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return len(self.text)

    def __iter__(self) -> Iterator[Stringy]:
        for char in self.text:
            yield self._new(char)

    def __contains__(self, needle: object) -> bool:
        return self.contains(needle)

    def __getitem__(self, key: SupportsIndex | slice) -> Stringy:
        """Return the codepoint at an offset, or a slice, as a Stringy.

        Negative offsets count from the end.

        Raises:
            OutOfRangeError: If the offset is outside the string.
        """
        if isinstance(key, slice):
            return self._new(self.text[key])
        offset = key.__index__()
        if not self.index_exists(offset):
            raise OutOfRangeError(offset, len(self.text))
        return self._new(self.text[offset])

    def __setitem__(self, key: object, value: object) -> None:
        raise ImmutableError("assign to")

    def __delitem__(self, key: object) -> None:
        raise ImmutableError("delete from")

    # -- Size and access --------------------------------------------------

    def count(self) -> int:
        """Return the length of the string in codepoints."""
        return len(self.text)

    def length(self) -> int:
        """Return the length of the string in codepoints."""
        return len(self.text)

    def get_encoding(self) -> str:
        return self.encoding

    def to_bytes(self) -> bytes:
        """Encode the text with the instance encoding."""
        return self.text.encode(self.encoding)

    def chars(self) -> list[str]:
        """Return the codepoints of the string as plain strings."""
        return list(self.text)

    def index_exists(self, offset: int) -> bool:
        """Check whether a codepoint exists at offset.

        Negative offsets count from the end, so -1 exists for any
        non-empty string.
        """
        length = len(self.text)
        if offset >= 0:
            return offset < length
        return length >= -offset

    def at(self, index: int) -> Stringy:
        """Return the codepoint at index, or an empty Stringy if there is none."""
        return self.substr(index, 1)

    def first(self, n: int) -> Stringy:
        if n <= 0:
            return self._new("")
        return self._new(self.text[:n])

    def last(self, n: int) -> Stringy:
        if n <= 0:
            return self._new("")
        return self._new(self.text[-n:])

    def substr(self, start: int, length: int | None = None) -> Stringy:
        """Return up to length codepoints beginning at start.

        Args:
            start: First codepoint; negative values count from the end.
            length: Number of codepoints to keep. None keeps the rest of
                the string; a negative value stops that many codepoints
                before the end.

        Returns:
            The substring, empty when start lies past the end.
        """
        size = len(self.text)
        if start < 0:
            start = max(size + start, 0)
        if start > size:
            return self._new("")
        if length is None:
            end = size
        elif length < 0:
            end = max(size + length, 0)
        else:
            end = start + length
        return self._new(self.text[start:end])

    def slice(self, start: int, end: int | None = None) -> Stringy:
        """Return the codepoints from start up to, but not including, end.

        Both bounds may be negative to count from the end. An end at or
        before start gives an empty result.
        """
        size = len(self.text)
        if start < 0:
            start = max(size + start, 0)
        if end is None:
            end = size
        elif end < 0:
            end = max(size + end, 0)
        if end <= start:
            return self._new("")
        return self._new(self.text[start:end])

    def between(self, start: object, end: object, offset: int = 0) -> Stringy:
        """Return the text between the first start delimiter and the next end.

        Args:
            start: Opening delimiter.
            end: Closing delimiter.
            offset: Index from which to look for the opening delimiter.

        Returns:
            The enclosed text, or empty if either delimiter is missing.

        Example:
            >>> Stringy("{foo} and {bar}").between("{", "}", 1).text
            'bar'
        """
        start, end = _text(start), _text(end)
        start_index = self.index_of(start, offset)
        if start_index is None:
            return self._new("")

        substr_index = start_index + len(start)
        end_index = self.index_of(end, substr_index)
        if end_index is None:
            return self._new("")
        return self.substr(substr_index, end_index - substr_index)

    # -- Building ---------------------------------------------------------

    def append(self, suffix: object) -> Stringy:
        return self._new(self.text + _text(suffix))

    def prepend(self, prefix: object) -> Stringy:
        return self._new(_text(prefix) + self.text)

    def surround(self, substring: object) -> Stringy:
        """Wrap the string in substring on both sides."""
        substring = _text(substring)
        return self._new(substring + self.text + substring)

    def insert(self, substring: object, index: int) -> Stringy:
        """Insert substring before the codepoint at index.

        Negative indexes count from the end. An index outside the string
        returns it unchanged; index == len(self) appends.
        """
        size = len(self.text)
        if index < 0:
            index += size
        if index < 0 or index > size:
            return self
        return self._new(self.text[:index] + _text(substring) + self.text[index:])

    def repeat(self, multiplier: int) -> Stringy:
        """Return the string repeated multiplier times.

        Raises:
            InvalidArgumentError: If multiplier is negative.
        """
        if multiplier < 0:
            raise InvalidArgumentError(
                f"multiplier must be non-negative, got {multiplier}",
                argument="multiplier",
            )
        return self._new(self.text * multiplier)

    def reverse(self) -> Stringy:
        return self._new(self.text[::-1])

    def shuffle(self, rng: random.Random | None = None) -> Stringy:
        """Return the codepoints of the string in random order.

        Args:
            rng: Random generator to use, for reproducible results.
                Defaults to the module-level generator.
        """
        chars = list(self.text)
        (rng or random).shuffle(chars)
        return self._new("".join(chars))

    def ensure_left(self, substring: object) -> Stringy:
        """Prefix the string with substring unless it already starts with it."""
        substring = _text(substring)
        if self.text.startswith(substring):
            return self
        return self._new(substring + self.text)

    def ensure_right(self, substring: object) -> Stringy:
        """Suffix the string with substring unless it already ends with it."""
        substring = _text(substring)
        if self.text.endswith(substring):
            return self
        return self._new(self.text + substring)

    def remove_left(self, substring: object) -> Stringy:
        return self._new(self.text.removeprefix(_text(substring)))

    def remove_right(self, substring: object) -> Stringy:
        return self._new(self.text.removesuffix(_text(substring)))

    # -- Padding, trimming and truncation ---------------------------------

    def pad(self, length: int, pad_str: str = " ", pad_type: str | int = "right") -> Stringy:
        """Pad the string to length codepoints.

        Args:
            length: Desired length. Nothing is added if the string is
                already at least this long.
            pad_str: String repeated to form the padding.
            pad_type: Side to pad: "left", "right" or "both", or the
                numeric codes 0, 1 and 2 for the same.

        Raises:
            InvalidArgumentError: If pad_type is not one of the above.
        """
        side = None
        if not isinstance(pad_type, bool):
            side = _PAD_TYPES.get(pad_type)
        if side is None:
            raise InvalidArgumentError(
                f"pad_type must be 'left', 'right' or 'both', got {pad_type!r}",
                argument="pad_type",
            )
        if side == "left":
            return self.pad_left(length, pad_str)
        if side == "right":
            return self.pad_right(length, pad_str)
        return self.pad_both(length, pad_str)

    def pad_left(self, length: int, pad_str: str = " ") -> Stringy:
        padding = length - len(self.text)
        return self._new(apply_padding(self.text, padding, 0, _text(pad_str)))

    def pad_right(self, length: int, pad_str: str = " ") -> Stringy:
        padding = length - len(self.text)
        return self._new(apply_padding(self.text, 0, padding, _text(pad_str)))

    def pad_both(self, length: int, pad_str: str = " ") -> Stringy:
        """Pad both sides; an odd amount puts the extra codepoint on the right."""
        left, right = split_padding(length - len(self.text))
        return self._new(apply_padding(self.text, left, right, _text(pad_str)))

    def trim(self, chars: object = None) -> Stringy:
        """Strip whitespace, or the given characters, from both ends.

        Args:
            chars: Characters to strip; each codepoint is stripped on its
                own. None strips Unicode whitespace, "" strips nothing.
        """
        if chars is None:
            return self._new(self.text.strip())
        return self._new(self.text.strip(_text(chars)))

    def trim_left(self, chars: object = None) -> Stringy:
        if chars is None:
            return self._new(self.text.lstrip())
        return self._new(self.text.lstrip(_text(chars)))

    def trim_right(self, chars: object = None) -> Stringy:
        if chars is None:
            return self._new(self.text.rstrip())
        return self._new(self.text.rstrip(_text(chars)))

    def truncate(self, length: int, substring: object = "") -> Stringy:
        """Cut the string to length codepoints, ending with substring.

        The result, including substring, is never longer than length
        unless substring alone is.
        """
        if length >= len(self.text):
            return self
        substring = _text(substring)
        keep = max(length - len(substring), 0)
        return self._new(self.text[:keep] + substring)

    def safe_truncate(self, length: int, substring: object = "") -> Stringy:
        """Truncate like truncate(), but never split a word.

        If the cut would land inside a word, the result is cut back to
        the last space before it instead.

        Example:
            >>> Stringy("What are your plans today?").safe_truncate(22, "...").text
            'What are your plans...'
        """
        if length >= len(self.text):
            return self
        substring = _text(substring)
        length = max(length - len(substring), 0)
        truncated = self.text[:length]

        # The cut is safe when it lands exactly on a space.
        if self.text.find(" ", length - 1) != length:
            last_space = truncated.rfind(" ")
            if last_space != -1:
                truncated = truncated[:last_space]

        return self._new(truncated + substring)

    # -- Whitespace -------------------------------------------------------

    def collapse_whitespace(self) -> Stringy:
        """Trim the string and collapse each whitespace run to a single space."""
        collapsed = regex_replace(self.text, WHITESPACE + "+", " ", self.encoding, "")
        return self._new(collapsed.strip())

    def strip_whitespace(self) -> Stringy:
        """Remove all whitespace, including multibyte spaces."""
        return self._new(regex_replace(self.text, WHITESPACE + "+", "", self.encoding, ""))

    def to_spaces(self, tab_length: int = 4) -> Stringy:
        """Replace each tab with tab_length spaces."""
        return self._new(self.text.replace("\t", " " * tab_length))

    def to_tabs(self, tab_length: int = 4) -> Stringy:
        """Replace each run of tab_length spaces with a tab."""
        if tab_length <= 0:
            return self
        return self._new(self.text.replace(" " * tab_length, "\t"))

    def lines(self) -> list[Stringy]:
        """Split the string on line breaks.

        A break is one or two consecutive \\r/\\n characters, so "\\r\\n"
        and "\\n\\r" each count once. The empty string has no lines.
        """
        if not self.text:
            return []
        return self.split(_LINE_BREAK)

    # -- Search -----------------------------------------------------------

    def contains(self, needle: object, case_sensitive: bool = True) -> bool:
        needle = _text(needle)
        if case_sensitive:
            return needle in self.text
        return contains_ci(self.text, needle)

    def contains_all(self, needles: Iterable[object], case_sensitive: bool = True) -> bool:
        """Check that the string contains every needle; False for no needles."""
        needles = list(needles)
        if not needles:
            return False
        return all(self.contains(needle, case_sensitive) for needle in needles)

    def contains_any(self, needles: Iterable[object], case_sensitive: bool = True) -> bool:
        """Check that the string contains at least one needle."""
        return any(self.contains(needle, case_sensitive) for needle in needles)

    def count_substr(self, substring: object, case_sensitive: bool = True) -> int:
        """Count non-overlapping occurrences of substring.

        Raises:
            InvalidArgumentError: If substring is empty.
        """
        substring = _text(substring)
        if not substring:
            raise InvalidArgumentError("substring must not be empty", argument="substring")
        if case_sensitive:
            return self.text.count(substring)
        return self.text.upper().count(substring.upper())

    def starts_with(self, prefix: object, case_sensitive: bool = True) -> bool:
        prefix = _text(prefix)
        if case_sensitive:
            return self.text.startswith(prefix)
        return starts_with_ci(self.text, prefix)

    def starts_with_any(self, prefixes: Iterable[object], case_sensitive: bool = True) -> bool:
        return any(self.starts_with(prefix, case_sensitive) for prefix in prefixes)

    def ends_with(self, suffix: object, case_sensitive: bool = True) -> bool:
        suffix = _text(suffix)
        if case_sensitive:
            return self.text.endswith(suffix)
        return ends_with_ci(self.text, suffix)

    def ends_with_any(self, suffixes: Iterable[object], case_sensitive: bool = True) -> bool:
        return any(self.ends_with(suffix, case_sensitive) for suffix in suffixes)

    def index_of(self, needle: object, offset: int = 0) -> int | None:
        """Return the index of the first needle at or after offset.

        Args:
            needle: Substring to look for.
            offset: Index to start searching from; negative counts from
                the end.

        Returns:
            The codepoint index, or None if needle does not occur.
        """
        index = self.text.find(_text(needle), offset)
        return index if index != -1 else None

    def index_of_last(self, needle: object, offset: int = 0) -> int | None:
        """Return the index of the last needle.

        Args:
            needle: Substring to look for.
            offset: With offset >= 0 only matches starting at or after
                offset count. A negative offset limits matches to those
                starting at or before len(self) + offset.

        Returns:
            The codepoint index, or None if needle does not occur.
        """
        needle = _text(needle)
        if offset >= 0:
            index = self.text.rfind(needle, offset)
        else:
            index = self.text.rfind(needle, 0, len(self.text) + offset + len(needle))
        return index if index != -1 else None

    # -- Regular expressions ----------------------------------------------

    def regex_replace(
        self, pattern: object, replacement: object, options: str = DEFAULT_OPTIONS
    ) -> Stringy:
        """Replace every match of a regular expression.

        Args:
            pattern: Pattern in Python re syntax.
            replacement: Replacement template; \\1 and \\g<name> refer to
                groups.
            options: Option letters, see stringy.core.patterns.

        Raises:
            InvalidArgumentError: If options holds an unknown letter.
            re.error: If the pattern or replacement is malformed.
        """
        return self._new(
            regex_replace(self.text, _text(pattern), _text(replacement), self.encoding, options)
        )

    def replace(self, search: object, replacement: object) -> Stringy:
        """Replace every occurrence of search with replacement, literally."""
        return self._new(self.text.replace(_text(search), _text(replacement)))

    def split(self, pattern: object, limit: int | None = None) -> list[Stringy]:
        """Split the string around matches of a regular expression.

        Args:
            pattern: Separator pattern; "" returns the whole string.
            limit: Maximum number of pieces. None or a negative value
                means no limit, 0 returns no pieces. When the limit is
                reached, the last piece holds the rest of the string.

        Example:
            >>> [s.text for s in Stringy("foo,bar,baz").split(",", 2)]
            ['foo', 'bar,baz']
        """
        if limit == 0:
            return []
        pattern = _text(pattern)
        if not pattern or limit == 1:
            return [self]
        maxsplit = limit - 1 if limit is not None and limit > 0 else 0
        return [self._new(piece) for piece in regex_split(self.text, pattern, self.encoding, maxsplit)]

    # -- Case -------------------------------------------------------------

    def to_lower_case(self) -> Stringy:
        return self._new(self.text.lower())

    def to_upper_case(self) -> Stringy:
        return self._new(self.text.upper())

    def to_title_case(self) -> Stringy:
        """Capitalize the first letter of each word and lowercase the rest.

        Apostrophes inside a word and a leading digit do not start a new
        word, so "they're" becomes "They're" and "1st" stays "1st".
        """

        def _title(match: re.Match[str]) -> str:
            word = match.group(0).lower()
            return word[:1].title() + word[1:]

        return self._new(regex_replace(self.text, _TITLE_WORD, _title, self.encoding, ""))

    def lower_case_first(self) -> Stringy:
        return self._new(self.text[:1].lower() + self.text[1:])

    def upper_case_first(self) -> Stringy:
        return self._new(self.text[:1].upper() + self.text[1:])

    def swap_case(self) -> Stringy:
        """Invert the case of every character."""

        def _swap(match: re.Match[str]) -> str:
            char = match.group(0)
            return char.lower() if char == char.upper() else char.upper()

        return self._new(regex_replace(self.text, r"\S", _swap, self.encoding, ""))

    def camelize(self) -> Stringy:
        """Convert to lowerCamelCase.

        Leading separators are dropped, each run of "-", "_" or whitespace
        is removed and the character after it uppercased, and a character
        following digits is uppercased too.

        Example:
            >>> Stringy("string-with-2-2 numbers").camelize().text
            'stringWith22Numbers'
        """
        text = self.trim().lower_case_first().text
        text = regex_replace(text, r"^[-_]+", "", self.encoding, "")
        text = regex_replace(
            text,
            r"[-_\s]+(.)?",
            lambda m: m.group(1).upper() if m.group(1) else "",
            self.encoding,
            "",
        )
        text = regex_replace(
            text, r"[\d]+(.)?", lambda m: m.group(0).upper(), self.encoding, ""
        )
        return self._new(text)

    def upper_camelize(self) -> Stringy:
        """Convert to UpperCamelCase."""
        return self.camelize().upper_case_first()

    def delimit(self, delimiter: object) -> Stringy:
        """Lowercase the string and separate its words with delimiter.

        Words are split at uppercase ASCII letters and at runs of "-", "_"
        or whitespace. The delimiter itself is inserted as given.

        Example:
            >>> Stringy("TestDCase").delimit("-").text
            'test-d-case'
        """
        delimiter = _text(delimiter)
        text = regex_replace(self.trim().text, r"\B([A-Z])", r"-\1", self.encoding, "")
        text = text.lower()
        text = regex_replace(text, r"[-_\s]+", lambda _: delimiter, self.encoding, "")
        return self._new(text)

    def dasherize(self) -> Stringy:
        return self.delimit("-")

    def underscored(self) -> Stringy:
        return self.delimit("_")

    def titleize(self, ignore: Iterable[str] | None = None) -> Stringy:
        """Capitalize each word, except those listed in ignore.

        Example:
            >>> Stringy("i like to watch DVDs at home").titleize(["at", "to"]).text
            'I Like to Watch Dvds at Home'
        """
        ignored = {_text(word) for word in ignore} if ignore is not None else set()

        def _titleize(match: re.Match[str]) -> str:
            word = match.group(0)
            if word in ignored:
                return word
            word = word.lower()
            return word[:1].upper() + word[1:]

        return self._new(regex_replace(self.trim().text, r"\S+", _titleize, self.encoding, ""))

    def humanize(self) -> Stringy:
        """Turn an identifier into a human-readable phrase.

        Drops a "_id" marker, turns underscores into spaces, trims and
        capitalizes the first letter.
        """
        text = self.text.replace("_id", "").replace("_", " ")
        return self._new(text).trim().upper_case_first()

    # -- Predicates -------------------------------------------------------

    def is_alpha(self) -> bool:
        """True if every character is alphabetic (vacuously true when empty)."""
        return all(char.isalpha() for char in self.text)

    def is_alphanumeric(self) -> bool:
        return all(char.isalnum() for char in self.text)

    def is_blank(self) -> bool:
        return all(char.isspace() for char in self.text)

    def is_hexadecimal(self) -> bool:
        return all(char in string.hexdigits for char in self.text)

    def is_lower_case(self) -> bool:
        return all(char.islower() for char in self.text)

    def is_upper_case(self) -> bool:
        return all(char.isupper() for char in self.text)

    def has_lower_case(self) -> bool:
        return any(char.islower() for char in self.text)

    def has_upper_case(self) -> bool:
        return any(char.isupper() for char in self.text)

    def is_json(self) -> bool:
        """True if the string is a standard JSON document. "" is not."""
        if not self.text:
            return False
        return parse_json_safe(self.text, context="is_json", quiet=True).success

    def is_serialized(self) -> bool:
        """True if the string is a complete value in the legacy serialized format."""
        return is_serialized(self.text, self.encoding)

    def is_base64(self) -> bool:
        """True if the string is canonical base64. "" is valid base64."""
        try:
            decoded = base64.b64decode(self.text, validate=True)
        except (binascii.Error, ValueError):
            return False
        return base64.b64encode(decoded).decode("ascii") == self.text

    # -- Conversion -------------------------------------------------------

    def to_boolean(self) -> bool:
        """Interpret the string as a boolean.

        "true", "1", "on" and "yes" (any case) are True; "false", "0",
        "off" and "no" are False. Other numeric strings are True when
        their integer part is positive. Anything else is True when it
        holds at least one non-whitespace character.
        """
        word = _BOOLEAN_WORDS.get(self.text.lower())
        if word is not None:
            return word
        if _NUMERIC.fullmatch(self.text):
            # Integer part is positive exactly when the value is at least 1;
            # Decimal has no overflow for "1e400"
            return Decimal(self.text.strip()) >= 1
        return bool(regex_replace(self.text, WHITESPACE, "", self.encoding, ""))

    def to_ascii(self, language: str | None = None, remove_unsupported: bool = True) -> Stringy:
        """Transliterate to ASCII.

        Args:
            language: Language tag for language-specific rules, such as
                "de" for German umlauts. Defaults to the configured
                default language.
            remove_unsupported: Drop characters that have no ASCII
                replacement.
        """
        if language is None:
            language = get_default_language()
        return self._new(transliterate(self.text, language, remove_unsupported))

    def slugify(self, replacement: str = "-", language: str | None = None) -> Stringy:
        """Convert to a URL-friendly slug.

        The string is transliterated to ASCII, "@" becomes replacement,
        everything except letters, digits, whitespace, "-", "_" and
        replacement is removed, and the result is lowercased and
        delimited with replacement.

        Example:
            >>> Stringy("Using strings like fòô bàř").slugify().text
            'using-strings-like-foo-bar'
        """
        replacement = _text(replacement)
        text = self.to_ascii(language).text.replace("@", replacement)
        allowed = re.escape(replacement)
        text = regex_replace(text, rf"[^a-zA-Z\d\s\-_{allowed}]", "", self.encoding, "")
        return (
            self._new(text)
            .to_lower_case()
            .delimit(replacement)
            .remove_left(replacement)
            .remove_right(replacement)
        )

    def tidy(self) -> Stringy:
        """Replace smart quotes, ellipses and dashes with ASCII equivalents."""
        return self._new(self.text.translate(_TIDY_TABLE))

    def html_encode(self, flags: int = ENT_COMPAT) -> Stringy:
        """Convert characters to HTML entities. See stringy.core.entities for flags."""
        return self._new(encode_entities(self.text, flags))

    def html_decode(self, flags: int = ENT_COMPAT) -> Stringy:
        """Convert HTML entities back to characters."""
        return self._new(decode_entities(self.text, flags))

    # -- Comparison with another string -----------------------------------

    def longest_common_prefix(self, other: object) -> Stringy:
        other = _text(other)
        size = 0
        for mine, theirs in zip(self.text, other):
            if mine != theirs:
                break
            size += 1
        return self._new(self.text[:size])

    def longest_common_suffix(self, other: object) -> Stringy:
        other = _text(other)
        size = 0
        for mine, theirs in zip(reversed(self.text), reversed(other)):
            if mine != theirs:
                break
            size += 1
        return self._new(self.text[len(self.text) - size :])

    def longest_common_substring(self, other: object) -> Stringy:
        """Return the longest substring shared with other.

        Uses the classic dynamic-programming table, keeping one row at a
        time. Among equally long candidates the one ending earliest in
        this string wins.
        """
        other = _text(other)
        if not self.text or not other:
            return self._new("")

        best_length = 0
        best_end = 0
        previous = [0] * (len(other) + 1)
        for i, mine in enumerate(self.text, start=1):
            current = [0] * (len(other) + 1)
            for j, theirs in enumerate(other, start=1):
                if mine == theirs:
                    current[j] = previous[j - 1] + 1
                    if current[j] > best_length:
                        best_length = current[j]
                        best_end = i
            previous = current
        return self._new(self.text[best_end - best_length : best_end])


def create(text: object = "", encoding: str | None = None) -> Stringy:
    """Create a Stringy, using the configured default encoding if none is given.

    Example:
        >>> create("fòô").to_upper_case().text
        'FÒÔ'
    """
    return Stringy(text, encoding or "")
