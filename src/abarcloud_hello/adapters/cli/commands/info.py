"""Small fixed-output commands: ``info``, ``hello`` and ``fail``."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from abarcloud_hello import __init__conf__
from abarcloud_hello.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version and homepage of the installed package."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the message of the built-in AbarCloud greeting.

    Configuration is not consulted; use ``greet`` for the configured one.
    """
    greeting = build_greeting()
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello", "title": greeting.title}):
        logger.info("Printing built-in greeting")
        click.echo(greeting.message)


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Exit through the error handler; add --traceback to see the stack."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Raising on request")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_hello", "cli_info"]
