"""Per-invocation CLI state and the shared traceback switches.

The root group builds one :class:`CLIContext` per run and stores it as the
Click ``obj``; subcommands read it back with :func:`get_cli_context`.
Traceback output is controlled through ``lib_cli_exit_tools.config``, which
is process-global, so :func:`main` snapshots and restores it around a run.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from abarcloud_hello.domain.greeting import Greeting

if TYPE_CHECKING:
    from abarcloud_hello.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as held by lib_cli_exit_tools."""


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group resolved before handing over to a subcommand.

    ``config`` already carries the ``--set`` overrides; ``set_overrides``
    keeps the raw strings so a subcommand-level ``--profile`` reload can
    reapply them.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def load_greeting(self) -> Greeting:
        """Parse ``[greeting]`` from :attr:`config` through the services port.

        Raises:
            ConfigurationError: The section holds unusable values.
        """
        return self.services.load_greeting_from_dict(self.config.as_dict())


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace the services factory in ``ctx.obj`` with the resolved state."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by :func:`store_cli_context`.

    Raises:
        RuntimeError: The root group has not run for this context.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        False
    """
    state = ctx.obj
    if not isinstance(state, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return state


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for error reporting.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return bool(getattr(config, "traceback", False)), bool(getattr(config, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


@contextmanager
def preserved_traceback_state(*, restore: bool = True) -> Iterator[TracebackState]:
    """Yield the current traceback state and put it back afterwards.

    With ``restore=False`` whatever the run switched on stays on.
    """
    previous = snapshot_traceback_state()
    try:
        yield previous
    finally:
        if restore:
            restore_traceback_state(previous)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
