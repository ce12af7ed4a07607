"""Command-line surface of abarcloud_hello.

Import :data:`cli` to invoke commands through Click's test runner and
:func:`main` to run the full entry point with exit-code translation. The
traceback helpers are re-exported for callers that embed the CLI and need to
leave ``lib_cli_exit_tools`` settings as they found them.
"""

from __future__ import annotations

from .constants import ExitCode
from .context import (
    TracebackState,
    apply_traceback_preferences,
    preserved_traceback_state,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "main",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
