"""Values shared by the root group, the commands and :func:`main`.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h`` as an alias for ``--help``.
    * :data:`TRACEBACK_SUMMARY_LIMIT` / :data:`TRACEBACK_VERBOSE_LIMIT` -
      characters of error output kept without and with ``--traceback``.
    * :class:`ExitCode` - process exit statuses of the command error paths.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


class ExitCode(IntEnum):
    """Exit statuses raised as ``SystemExit`` by the commands.

    Numbers follow errno and sysexits.h so shell scripts can tell a rejected
    argument (``EINVAL``) from a broken ``[greeting]`` section (``EX_CONFIG``).

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
        >>> ExitCode(22).name
        'INVALID_ARGUMENT'
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
]
