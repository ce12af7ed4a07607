"""``logdemo``: preview how log events look in the console themes."""

from __future__ import annotations

import lib_log_rich
import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--theme",
    type=str,
    default="classic",
    show_default=True,
    help="Console theme to render the sample events with",
)
def cli_logdemo(theme: str) -> None:
    """Emit one sample event per level so console settings can be tuned.

    The demo runs its own short-lived runtime, so the one started by the
    root group is shut down first.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    outcome = lib_log_rich.logdemo(theme=theme)
    click.echo(f"\nLog demo completed (theme: {outcome.theme})")


__all__ = ["cli_logdemo"]
