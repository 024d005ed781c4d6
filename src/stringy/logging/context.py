"""Operation context for structured logging.

Provides context propagation using contextvars, so that every log record
emitted while an operation is being dispatched carries its name.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_encoding: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "encoding", default=None
)


@contextmanager
def operation_context(
    operation: str, encoding: str | None = None
) -> Generator[None, None, None]:
    """Context manager marking the operation currently being dispatched.

    Args:
        operation: Operation name (e.g., "slugify").
        encoding: Encoding override in effect, if any.

    Example:
        with operation_context("slugify"):
            logger.debug("Dispatching")  # Record carries operation=slugify
    """
    operation_token = _operation.set(operation)
    encoding_token = _encoding.set(encoding)
    try:
        yield
    finally:
        _operation.reset(operation_token)
        _encoding.reset(encoding_token)


def get_operation_context() -> tuple[str | None, str | None]:
    """Get current operation context.

    Returns:
        Tuple of (operation, encoding), either may be None.
    """
    return _operation.get(), _encoding.get()


class OperationContextFilter(logging.Filter):
    """Logging filter that injects the operation context into log records.

    Adds operation and encoding attributes for the JSON format, and a
    compact operation_tag such as "[slugify] " for the text format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject operation context into log record.

        Returns:
            Always True (does not filter, only enriches).
        """
        operation, encoding = get_operation_context()
        record.operation = operation
        record.encoding = encoding
        record.operation_tag = f"[{operation}] " if operation else ""
        return True
