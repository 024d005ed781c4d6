"""Commands that run and list string operations."""

from __future__ import annotations

import json
import logging
import re
import types
import typing
from functools import lru_cache
from typing import Any

import click
from pydantic import TypeAdapter, ValidationError

from stringy import static
from stringy.cli.exit_codes import ExitCode
from stringy.cli.output import CLIResult, error_exit, format_option, success_output
from stringy.exceptions import StringyError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _expects_json(type_: Any) -> bool:
    """True if arguments of this type are given as JSON text (lists)."""
    if typing.get_origin(type_) is list:
        return True
    if isinstance(type_, types.UnionType):
        return any(_expects_json(member) for member in typing.get_args(type_))
    return False


def coerce_arguments(operation: static.Operation, raw: tuple[str, ...]) -> list[Any]:
    """Convert command-line strings to the operation's parameter types.

    List parameters are parsed from JSON text (e.g. '["a", "b"]'); other
    types use pydantic's lax coercion, so "3" becomes 3 and "false"
    becomes False.

    Raises:
        click.UsageError: If an argument does not fit its parameter.
    """
    values: list[Any] = []
    for parameter, text in zip(operation.parameters, raw):
        adapter = _adapter(parameter.type)
        try:
            if _expects_json(parameter.type):
                values.append(adapter.validate_json(text))
            else:
                values.append(adapter.validate_python(text))
        except ValidationError as e:
            first = e.errors()[0]
            raise click.UsageError(
                f"Invalid value for {parameter.name!r}: {text!r} ({first['msg']})"
            ) from e
    # Extra arguments are passed through so that the facade reports the count
    values.extend(raw[len(operation.parameters) :])
    return values


@click.command("run")
@click.argument("operation")
@click.argument("subject")
@click.argument("args", nargs=-1)
@click.option(
    "--encoding",
    "-e",
    default=None,
    help="Encoding of SUBJECT (default: configured default encoding).",
)
@format_option
def run_command(
    operation: str,
    subject: str,
    args: tuple[str, ...],
    encoding: str | None,
    output_format: str,
) -> None:
    """Run OPERATION on SUBJECT with optional ARGS.

    List arguments are given as JSON arrays. Put "--" before arguments
    that start with a dash.

    Examples:

    \b
        stringy run slugify "Fòô Bàř"
        stringy run pad_left fòô 5 ¬
        stringy run contains_any "foo bar" '["bar", "baz"]'
        stringy run -f json index_of foobar bar
    """
    json_output = output_format.casefold() == "json"

    try:
        spec = static.get_operation(operation)
        arguments = coerce_arguments(spec, args)
        result = static.call(operation, subject, *arguments, encoding=encoding)
    except click.UsageError as e:
        error_exit(e.format_message(), ExitCode.USAGE_ERROR, json_output)
    except StringyError as e:
        error_exit(str(e), ExitCode.USAGE_ERROR, json_output)
    except (re.error, LookupError, UnicodeError) as e:
        logger.debug("Operation %s failed", operation, exc_info=True)
        error_exit(f"{operation} failed: {e}", ExitCode.HOST_ERROR, json_output)

    success_output(CLIResult(operation=operation, result=result), json_output)


@click.command("operations")
@format_option
def operations_command(output_format: str) -> None:
    """List the available operations and their arguments.

    Examples:

    \b
        stringy operations
        stringy operations --format json
    """
    if output_format.casefold() == "json":
        data = [
            {
                "name": operation.name,
                "min_args": operation.min_args,
                "max_args": operation.max_args,
                "parameters": [
                    {"name": parameter.name, "required": parameter.required}
                    for parameter in operation.parameters
                ],
                "summary": operation.summary,
            }
            for operation in static.OPERATIONS.values()
        ]
        click.echo(json.dumps(data, indent=2))
        return

    width = max(len(name) for name in static.OPERATIONS)
    for operation in static.OPERATIONS.values():
        params = " ".join(
            parameter.name.upper() if parameter.required else f"[{parameter.name.upper()}]"
            for parameter in operation.parameters
        )
        signature = f"{operation.name} {params}".rstrip()
        click.echo(f"{signature:<{width + 30}}  {operation.summary}")
