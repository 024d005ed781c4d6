"""Padding helpers shared by the pad family of operations."""

from __future__ import annotations

import math


def repeat_to_length(pad_str: str, length: int) -> str:
    """Repeat pad_str and cut the result to exactly length codepoints.

    Args:
        pad_str: Non-empty string to repeat.
        length: Number of codepoints wanted. Values <= 0 yield "".

    Returns:
        The repeated, truncated string.

    Example:
        >>> repeat_to_length("¬øÿ", 5)
        '¬øÿ¬ø'
    """
    if length <= 0 or not pad_str:
        return ""
    return (pad_str * math.ceil(length / len(pad_str)))[:length]


def apply_padding(text: str, left: int, right: int, pad_str: str) -> str:
    """Surround text with left and right codepoints of padding.

    Args:
        text: String to pad.
        left: Codepoints of padding to add on the left.
        right: Codepoints of padding to add on the right.
        pad_str: String whose repetition forms the padding.

    Returns:
        The padded string, or text unchanged if pad_str is empty or
        there is nothing to add.
    """
    if not pad_str or max(left, 0) + max(right, 0) == 0:
        return text
    return repeat_to_length(pad_str, left) + text + repeat_to_length(pad_str, right)


def split_padding(total: int) -> tuple[int, int]:
    """Split total padding for centring: floor on the left, ceil on the right.

    Example:
        >>> split_padding(3)
        (1, 2)
    """
    left = total // 2
    return left, total - left
