"""Run the Click group and turn its outcome into a process exit status."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from abarcloud_hello import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT, ExitCode
from .context import apply_traceback_preferences, preserved_traceback_state

if TYPE_CHECKING:
    from abarcloud_hello.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # lib_cli_exit_tools.run_cli has no way to pass ``obj``.
    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_failure(exc)
    return ExitCode.SUCCESS


def _shutdown_logging() -> None:
    # Worker threads may still be logging through the shared runtime.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``abarcloud-hello`` with ``argv`` and return the exit status.

    Click usage errors keep Click's own status (2); ``SystemExit`` raised by a
    command keeps its code (for example 78 for a broken ``[greeting]``
    section); any other exception is printed by lib_cli_exit_tools, truncated
    unless ``--traceback`` was given.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback switches back as they were.
        services_factory: Builds the :class:`AppServices` for this run,
            normally ``build_production``.

    Raises:
        ValueError: ``services_factory`` was not given.

    Example:
        >>> from abarcloud_hello.composition import build_production
        >>> main(["greet"], services_factory=build_production)  # doctest: +SKIP
        Welcome to AbarCloud
        Hello World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        with preserved_traceback_state(restore=restore_traceback):
            return _invoke(argv, services_factory)
    finally:
        _shutdown_logging()


__all__ = ["main"]
