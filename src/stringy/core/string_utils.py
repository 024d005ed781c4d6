"""Case-insensitive comparison helpers.

All case-insensitive operations use casefold() for proper Unicode handling,
so that e.g. a final sigma matches a capital sigma and German eszett
matches "SS".
"""

from __future__ import annotations


def compare_strings_ci(a: str, b: str) -> bool:
    """Compare strings case-insensitively.

    Args:
        a: First string.
        b: Second string.

    Returns:
        True if strings are equal (case-insensitive).

    Example:
        >>> compare_strings_ci("ΣΥΓΓΡΑΦΈΑΣ", "συγγραφέας")
        True
        >>> compare_strings_ci("HELLO", "hellö")
        False
    """
    return a.casefold() == b.casefold()


def contains_ci(haystack: str, needle: str) -> bool:
    """Check if string contains substring (case-insensitive).

    Args:
        haystack: String to search in.
        needle: Substring to search for.

    Returns:
        True if haystack contains needle (case-insensitive).

    Example:
        >>> contains_ci("Ο συγγραφέας είπε", "ΣΥΓΓΡΑΦΈΑΣ")
        True
        >>> contains_ci("Hello World", "foo")
        False
    """
    return needle.casefold() in haystack.casefold()


def starts_with_ci(text: str, prefix: str) -> bool:
    """Check if text starts with prefix (case-insensitive).

    The comparison takes the same number of codepoints from the start of
    text as prefix has, then compares the two case-insensitively.
    """
    return compare_strings_ci(text[: len(prefix)], prefix)


def ends_with_ci(text: str, suffix: str) -> bool:
    """Check if text ends with suffix (case-insensitive)."""
    if not suffix:
        return True
    return compare_strings_ci(text[-len(suffix) :], suffix)
