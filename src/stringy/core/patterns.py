"""Regular expression helpers scoped to an explicit encoding.

Patterns use Python ``re`` syntax and always match in Unicode mode. The
encoding of the calling string is passed explicitly and becomes part of
the compiled-pattern cache key, so nothing here depends on process-wide
regex state.

Option letters accepted by :func:`parse_options`:

    m  multiline (``^`` and ``$`` match at line boundaries)
    s  dot matches newline
    i  ignore case
    x  verbose pattern
    r  accepted for compatibility, has no effect
"""

from __future__ import annotations

import codecs
import re
from collections.abc import Callable
from functools import lru_cache

from stringy.exceptions import InvalidArgumentError

DEFAULT_OPTIONS = "msr"

# Unicode whitespace class; in str patterns this includes NBSP, U+2000..U+200A,
# U+202F, U+205F and U+3000.
WHITESPACE = r"\s"

_OPTION_FLAGS: dict[str, re.RegexFlag] = {
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "i": re.IGNORECASE,
    "x": re.VERBOSE,
    "r": re.NOFLAG,
}


def parse_options(options: str) -> re.RegexFlag:
    """Translate an option-letter string into ``re`` flags.

    Args:
        options: Option letters, e.g. "msr" or "i".

    Returns:
        Combined flags, always including re.UNICODE.

    Raises:
        InvalidArgumentError: If an unknown letter is present.
    """
    flags = re.UNICODE
    for letter in options:
        try:
            flags |= _OPTION_FLAGS[letter]
        except KeyError:
            raise InvalidArgumentError(
                f"Unknown regex option {letter!r} in {options!r}", argument="options"
            ) from None
    return flags


@lru_cache(maxsize=256)
def compile_pattern(pattern: str, options: str, encoding: str) -> re.Pattern[str]:
    """Compile a pattern for strings of the given encoding.

    Raises:
        LookupError: If encoding is not a known codec.
        InvalidArgumentError: If options contains an unknown letter.
        re.error: If the pattern is malformed.
    """
    codecs.lookup(encoding)
    return re.compile(pattern, parse_options(options))


def regex_replace(
    text: str,
    pattern: str,
    replacement: str | Callable[[re.Match[str]], str],
    encoding: str,
    options: str = DEFAULT_OPTIONS,
) -> str:
    """Replace every match of pattern in text.

    The replacement may reference groups with ``\\1`` or ``\\g<name>``, or
    be a callable taking the match and returning the replacement text.
    """
    return compile_pattern(pattern, options, encoding).sub(replacement, text)


def regex_split(text: str, pattern: str, encoding: str, maxsplit: int = 0) -> list[str]:
    """Split text around non-empty matches of pattern.

    Unlike re.split(), capture groups are not included in the result and
    zero-width matches never split.

    Args:
        text: String to split.
        pattern: Separator pattern.
        encoding: Encoding of the string being split.
        maxsplit: Maximum number of splits; 0 means unlimited. The final
            piece holds the unsplit remainder.

    Returns:
        List of pieces.
    """
    compiled = compile_pattern(pattern, "", encoding)
    pieces: list[str] = []
    start = 0
    for match in compiled.finditer(text):
        if match.start() == match.end():
            continue
        if maxsplit and len(pieces) >= maxsplit:
            break
        pieces.append(text[start : match.start()])
        start = match.end()
    pieces.append(text[start:])
    return pieces
