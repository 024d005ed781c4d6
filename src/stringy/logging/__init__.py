"""Structured logging module for stringy.

Provides configurable logging with JSON format support and file rotation,
plus an operation context that tags records emitted while the facade or
CLI dispatches an operation.
"""

from stringy.logging.config import configure_logging
from stringy.logging.context import (
    OperationContextFilter,
    get_operation_context,
    operation_context,
)
from stringy.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "OperationContextFilter",
    "configure_logging",
    "get_operation_context",
    "operation_context",
]
