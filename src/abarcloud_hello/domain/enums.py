"""Choice enums shared by the greeting and configuration commands."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_C = TypeVar("_C", bound="_CliChoice")


class _CliChoice(str, Enum):
    """String enum whose members double as case-insensitive Click choices."""

    @classmethod
    def choices(cls) -> list[str]:
        """Return member values in declaration order, for ``click.Choice``."""
        return [member.value for member in cls]

    @classmethod
    def from_cli(cls: type[_C], raw: str) -> _C:
        """Look up a member from user input, ignoring case.

        Raises:
            ValueError: If ``raw`` names no member.
        """
        return cls(raw.strip().lower())


class OutputFormat(_CliChoice):
    """How ``greet`` and ``config`` render their result.

    ``HUMAN`` prints the greeting as two plain lines (or the configuration as
    TOML); ``JSON`` prints an indented JSON document.

    Example:
        >>> OutputFormat.from_cli("JSON") is OutputFormat.JSON
        True
        >>> OutputFormat.choices()
        ['human', 'json']
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(_CliChoice):
    """Configuration layer a default file can be deployed to.

    ``APP`` and ``HOST`` are system-wide and usually need elevated rights;
    ``USER`` lands in the per-user configuration directory.

    Example:
        >>> DeployTarget.from_cli("User")
        <DeployTarget.USER: 'user'>
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "OutputFormat",
]
