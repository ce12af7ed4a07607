"""Greeting CLI command.

Builds a :class:`~abarcloud_hello.domain.greeting.Greeting` from the
``[greeting]`` configuration section, lets options replace either field,
and prints it as plain text or JSON.

Contents:
    * :func:`cli_greet` - Render the configured greeting.
"""

from __future__ import annotations

import dataclasses
import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from abarcloud_hello.domain.enums import OutputFormat
from abarcloud_hello.domain.errors import ConfigurationError
from abarcloud_hello.domain.greeting import Greeting

from ..constants import CLICK_CONTEXT_SETTINGS, ExitCode
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)


def _load_greeting(cli_ctx: CLIContext) -> Greeting:
    """Parse the configured greeting, exiting with CONFIG_ERROR when invalid."""
    try:
        return cli_ctx.load_greeting()
    except ConfigurationError as exc:
        logger.error("Invalid greeting configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _render(greeting: Greeting, fmt: OutputFormat) -> str:
    """Return the text printed for ``greeting`` in the requested format.

    Example:
        >>> _render(Greeting("A", "B"), OutputFormat.HUMAN)
        'A\\nB'
        >>> _render(Greeting("A", "B"), OutputFormat.JSON)
        '{\\n  "title": "A",\\n  "message": "B"\\n}'
    """
    if fmt is OutputFormat.JSON:
        return orjson.dumps(greeting.as_dict(), option=orjson.OPT_INDENT_2).decode("utf-8")
    return str(greeting)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--title", type=str, default=None, help="Replace the configured title")
@click.option("--message", type=str, default=None, help="Replace the configured message")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OutputFormat.choices(), case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_greet(ctx: click.Context, title: str | None, message: str | None, output_format: str) -> None:
    """Print the configured greeting: title on the first line, message below.

    Values come from the [greeting] configuration section. --title and
    --message replace them verbatim, including with an empty string.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat.from_cli(output_format)

    extra = {"command": "greet", "format": fmt.value, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra=extra):
        greeting = _load_greeting(cli_ctx)
        replacements = {name: value for name, value in (("title", title), ("message", message)) if value is not None}
        if replacements:
            greeting = dataclasses.replace(greeting, **replacements)
        logger.info("Rendering greeting", extra={"overridden": sorted(replacements)})
        try:
            rendered = _render(greeting, fmt)
        except orjson.JSONEncodeError as exc:
            logger.error("Greeting cannot be encoded as JSON", extra={"error": str(exc)})
            click.echo(f"\nError: cannot write greeting as JSON: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(rendered)


__all__ = ["cli_greet"]
