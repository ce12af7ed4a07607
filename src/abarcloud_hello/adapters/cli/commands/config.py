"""Commands that show, deploy and document the layered configuration.

Contents:
    * :func:`cli_config` - ``config``: print the merged configuration.
    * :func:`cli_config_deploy` - ``config-deploy``: install the defaults file.
    * :func:`cli_config_generate_examples` - ``config-generate-examples``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config, generate_examples

from abarcloud_hello import __init__conf__
from abarcloud_hello.adapters.config.overrides import apply_overrides
from abarcloud_hello.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS, ExitCode
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)

_PROFILE_HELP = "Use this profile instead of the one given to the root command"


class OctalMode(click.ParamType):
    """File or directory mode written as ``750`` or ``0o750``, at most ``7777``."""

    name = "mode"
    max_mode = 0o7777

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            mode = value
        else:
            text = str(value).strip()
            digits = text[2:] if text.lower().startswith("0o") else text
            try:
                mode = int(digits, 8)
            except ValueError:
                self.fail(f"Invalid octal mode: {text}", param, ctx)
        if not 0 <= mode <= self.max_mode:
            self.fail(f"Invalid octal mode: {oct(mode)} is outside 0..0o7777", param, ctx)
        return mode


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Return the configuration and profile a subcommand should use.

    A subcommand ``--profile`` rereads every layer and reapplies the root
    ``--set`` overrides; otherwise the root's configuration is reused.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OutputFormat.choices(), case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human: TOML with the source of every value; json: plain JSON",
)
@click.option("--section", default=None, help="Print only this top-level table, e.g. 'greeting'")
@click.option("--profile", default=None, help=_PROFILE_HELP)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the configuration exactly as the other commands see it.

    Layers are merged as defaults, app, host, user, .env, environment, then
    --set overrides.
    """
    cli_ctx = get_cli_context(ctx)
    config, effective_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat.from_cli(output_format)

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _echo_deployed(paths: list[Path], profile: str | None, set_permissions: bool) -> None:
    if not paths:
        click.echo("\nNo files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")
        return
    notes = f" (profile: {profile})" if profile else ""
    if not set_permissions:
        notes += " (permissions not set)"
    click.echo(f"\nConfiguration deployed successfully{notes}:")
    for path in paths:
        click.echo(f"  ✓ {path}")


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice(DeployTarget.choices(), case_sensitive=False),
    multiple=True,
    required=True,
    help="Layer to write to; repeat for several",
)
@click.option("--force", is_flag=True, help="Replace files that already exist")
@click.option("--profile", default=None, help=_PROFILE_HELP)
@click.option(
    "--permissions/--no-permissions",
    "set_permissions",
    default=True,
    help="Apply 755/644 (app, host) or 700/600 (user) modes",
)
@click.option("--dir-mode", type=OctalMode(), default=None, help="Directory mode for every target, e.g. 750")
@click.option("--file-mode", type=OctalMode(), default=None, help="File mode for every target, e.g. 0o640")
@click.pass_context
def cli_config_deploy(
    ctx: click.Context,
    targets: tuple[str, ...],
    force: bool,
    profile: str | None,
    set_permissions: bool,
    dir_mode: int | None,
    file_mode: int | None,
) -> None:
    r"""Install the bundled defaults as an editable config.toml.

    \b
    app   system-wide, for every host (needs root)
    host  system-wide, for this host only (needs root)
    user  the current user's configuration directory

    Existing files are left alone unless --force is given.
    """
    cli_ctx = get_cli_context(ctx)
    effective_profile = profile or cli_ctx.profile
    deploy_targets = tuple(DeployTarget.from_cli(raw) for raw in targets)

    extra = {
        "command": "config-deploy",
        "targets": [target.value for target in deploy_targets],
        "force": force,
        "profile": effective_profile,
    }
    with lib_log_rich.runtime.bind(job_id="cli-config-deploy", extra=extra):
        logger.info("Deploying configuration")
        try:
            written = cli_ctx.services.deploy_configuration(
                targets=deploy_targets,
                force=force,
                profile=effective_profile,
                set_permissions=set_permissions,
                dir_mode=dir_mode,
                file_mode=file_mode,
            )
        except PermissionError as exc:
            logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
            click.echo(f"\nError: Permission denied. {exc}", err=True)
            click.echo("Hint: System-wide deployment (--target app/host) may require sudo.", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        except Exception as exc:
            logger.error("Failed to deploy configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"\nError: Failed to deploy configuration: {exc}", err=True)
            raise SystemExit(ExitCode.GENERAL_ERROR) from exc
        _echo_deployed(written, effective_profile, set_permissions)


@click.command("config-generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--destination",
    type=click.Path(file_okay=False),
    required=True,
    help="Directory that receives the example files",
)
@click.option("--force", is_flag=True, help="Replace example files that already exist")
def cli_config_generate_examples(destination: str, force: bool) -> None:
    """Write commented example files for every configuration layer."""
    extra = {"command": "config-generate-examples", "destination": destination, "force": force}
    with lib_log_rich.runtime.bind(job_id="cli-config-generate-examples", extra=extra):
        logger.info("Generating example configuration files")
        try:
            written = generate_examples(
                destination=destination,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                force=force,
            )
        except Exception as exc:
            logger.error("Failed to generate examples", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.GENERAL_ERROR) from exc

    if not written:
        click.echo("\nNo files generated (all already exist). Use --force to overwrite.")
        return
    click.echo(f"\nGenerated {len(written)} example file(s):")
    for path in written:
        click.echo(f"  {path}")


__all__ = ["cli_config", "cli_config_deploy", "cli_config_generate_examples"]
