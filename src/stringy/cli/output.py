"""CLI output formatting for JSON and human-readable output.

Keeps error handling and result rendering consistent across commands.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn

import click

if TYPE_CHECKING:
    from .exit_codes import ExitCode


def format_option(func):
    """Add the shared --format/-f option as output_format."""
    return click.option(
        "--format",
        "-f",
        "output_format",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        help="Output format (default: text).",
    )(func)


@dataclass
class CLIResult:
    """Result of running one operation from the command line.

    Attributes:
        operation: Operation name.
        result: Unwrapped operation result (str, bool, int, None or list).
    """

    operation: str
    result: Any

    def to_json(self) -> str:
        """Serialize to a JSON object with operation and result fields."""
        return json.dumps(
            {"operation": self.operation, "result": self.result}, ensure_ascii=False
        )

    def to_text(self) -> str:
        """Render for humans.

        Strings print verbatim, booleans as true/false, None as null and
        lists one item per line.
        """
        if isinstance(self.result, list):
            return "\n".join(_format_scalar(item) for item in self.result)
        return _format_scalar(self.result)


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Exit with formatted error message.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).
        json_output: Whether to format output as JSON.

    Note:
        This function never returns; it always calls sys.exit().
    """
    # Import here to avoid circular imports at module load
    from .exit_codes import ExitCode

    if isinstance(code, ExitCode):
        code_name = code.name
        exit_value = int(code)
    else:
        code_name = "UNKNOWN_ERROR"
        exit_value = code

    if json_output:
        click.echo(
            json.dumps(
                {
                    "status": "failed",
                    "error": {
                        "code": code_name,
                        "message": message,
                    },
                }
            ),
            err=True,
        )
    else:
        click.echo(f"Error: {message}", err=True)

    sys.exit(exit_value)


def success_output(result: CLIResult, json_output: bool = False) -> None:
    """Output successful result in appropriate format.

    Args:
        result: The CLIResult to output.
        json_output: Whether to format output as JSON.
    """
    if json_output:
        click.echo(result.to_json())
    else:
        click.echo(result.to_text())
