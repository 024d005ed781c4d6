"""Safe JSON parsing with consistent error handling.

parse_json_safe returns a result object instead of raising, so callers
can treat "not JSON" as an ordinary outcome.

Example usage:
    result = parse_json_safe(raw, context="cli argument")
    if result.success:
        data = result.value
    else:
        click.echo(result.error, err=True)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Sentinel value for unset default parameter
_UNSET: object = object()


@dataclass(frozen=True)
class JsonParseResult(Generic[T]):
    """Result of a JSON parsing operation.

    Attributes:
        success: True if parsing succeeded, False otherwise.
        value: The parsed value if successful, None otherwise.
        error: Error message if parsing failed, None otherwise.
    """

    success: bool
    value: T | None
    error: str | None = None


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but are not JSON.
    raise ValueError(f"{name} is not valid JSON")


def parse_json_safe(
    raw: str | None,
    *,
    default: Any = _UNSET,
    context: str = "",
    quiet: bool = False,
) -> JsonParseResult[Any]:
    """Parse a JSON document with error handling.

    Args:
        raw: JSON text to parse. None or empty string is not a document:
            it returns default when one is given and fails otherwise.
        default: Value to return if raw is empty or parsing fails.
        context: Context string for error messages (e.g., argument name).
        quiet: Log failures at debug instead of warning level.

    Returns:
        JsonParseResult with parsed value or error information.
    """
    if raw is None or raw == "":
        if default is not _UNSET:
            return JsonParseResult(success=True, value=default, error=None)
        return JsonParseResult(success=False, value=None, error="Empty JSON document")

    context_prefix = f"{context}: " if context else ""
    log = logger.debug if quiet else logger.warning
    try:
        value = json.loads(raw, parse_constant=_reject_constant)
        return JsonParseResult(success=True, value=value, error=None)
    except json.JSONDecodeError as e:
        error_msg = f"{context_prefix}Invalid JSON at position {e.pos}: {e.msg}"
    except (TypeError, ValueError) as e:
        error_msg = f"{context_prefix}Invalid JSON: {e}"
    except RecursionError:
        error_msg = f"{context_prefix}Invalid JSON: nesting too deep"

    log(error_msg)
    if default is not _UNSET:
        return JsonParseResult(success=True, value=default, error=error_msg)
    return JsonParseResult(success=False, value=None, error=error_msg)
