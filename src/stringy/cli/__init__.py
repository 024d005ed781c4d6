"""CLI module for stringy."""

import dataclasses
import logging
from pathlib import Path

import click

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the config file, environment and CLI options.

    Options left unset keep the configured value. Rotation and stderr
    settings come only from the config file and environment.
    """
    global _logging_configured
    if _logging_configured:
        return

    from stringy.config import get_config
    from stringy.logging import configure_logging

    overrides = {
        "level": log_level,
        "file": log_file,
        "format": "json" if log_json else None,
    }
    config = dataclasses.replace(
        get_config().logging,
        **{name: value for name, value in overrides.items() if value is not None},
    )
    configure_logging(config)
    _logging_configured = True


@click.group()
@click.version_option(package_name="stringy")
@click.option(
    "--default-encoding",
    default=None,
    help="Encoding for subjects given without --encoding (default: UTF-8).",
)
@click.option(
    "--default-language",
    default=None,
    help="Language tag for to_ascii and slugify (default: en).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    default_encoding: str | None,
    default_language: str | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Stringy - Unicode-aware string operations from the command line."""
    ctx.ensure_object(dict)

    _configure_logging(log_level, log_file, log_json)

    from stringy.config import get_default_encoding, set_default_overrides

    if default_encoding is not None or default_language is not None:
        try:
            set_default_overrides(
                default_encoding=default_encoding,
                default_language=default_language,
            )
        except ValueError as e:
            raise click.UsageError(str(e)) from e

    logger.debug(
        "stringy starting: command=%s, default_encoding=%s",
        ctx.invoked_subcommand,
        get_default_encoding(),
    )


# Defer import to avoid circular dependency
def _register_commands():
    from stringy.cli.run import operations_command, run_command

    main.add_command(run_command)
    main.add_command(operations_command)


_register_commands()
