"""Custom exceptions for string operations.

Every exception also derives from the closest builtin, so callers that
already catch ``IndexError`` or ``ValueError`` keep working, while
``StringyError`` catches everything raised by this package.
"""

from __future__ import annotations


class StringyError(Exception):
    """Base exception for all stringy errors."""


class OutOfRangeError(StringyError, IndexError):
    """Raised when a codepoint offset is outside the string.

    Attributes:
        offset: The requested offset.
        length: Length of the string in codepoints.
    """

    def __init__(self, offset: int, length: int) -> None:
        """Initialize the exception.

        Args:
            offset: The requested offset.
            length: Length of the string in codepoints.
        """
        self.offset = offset
        self.length = length
        super().__init__(f"No character exists at offset {offset} (length {length})")


class ImmutableError(StringyError, TypeError):
    """Raised on an attempt to mutate a Stringy in place."""

    def __init__(self, action: str = "modify") -> None:
        self.action = action
        super().__init__(f"Stringy objects are immutable, cannot {action} them")


class InvalidArgumentError(StringyError, ValueError):
    """Raised when an operation receives a malformed argument.

    Attributes:
        argument: Name of the offending argument, if known.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the problem.
            argument: Name of the offending argument, if known.
        """
        self.argument = argument
        super().__init__(message)


class MethodNotFoundError(StringyError, AttributeError):
    """Raised when the static facade is asked for an unknown operation.

    Attributes:
        name: The operation name that was requested.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"No operation named {name!r}")
        self.name = name
