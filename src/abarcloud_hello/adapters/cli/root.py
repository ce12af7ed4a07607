"""The ``abarcloud-hello`` command group.

Global options are resolved here once per run: the profile selects which
configuration files are read, ``--set`` overrides are layered on top, and
logging is started from the result before any subcommand executes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from abarcloud_hello import __init__conf__
from abarcloud_hello.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from abarcloud_hello.composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read every layer for ``profile`` and apply ``--set``; bad overrides are usage errors."""
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full traceback instead of a one-line error",
)
@click.option(
    "--profile",
    default=None,
    help="Read configuration from profile/<NAME>/ in every layer",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run; repeatable, e.g. greeting.title=Hi",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Greet with AbarCloud's welcome and manage its configuration.

    Example:
        >>> from click.testing import CliRunner
        >>> from abarcloud_hello.composition import build_production
        >>> CliRunner().invoke(cli, ["hello"], obj=build_production).exit_code
        0
    """
    services = _services_from(ctx)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Deferred: command modules import the cli package, which imports this module.
    from .commands import (
        cli_config,
        cli_config_deploy,
        cli_config_generate_examples,
        cli_fail,
        cli_greet,
        cli_hello,
        cli_info,
        cli_logdemo,
    )

    commands = (
        cli_greet,
        cli_hello,
        cli_info,
        cli_config,
        cli_config_deploy,
        cli_config_generate_examples,
        cli_logdemo,
        cli_fail,
    )
    for command in commands:
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
