"""Callable Protocols the CLI depends on instead of concrete adapters.

A port is a Protocol with a single ``__call__``; any module-level function
with a matching signature satisfies it structurally, so production adapters
and their in-memory doubles are interchangeable inside
:class:`~abarcloud_hello.composition.AppServices`.

``Config`` is imported for type checking only; nothing in this layer touches
lib_layered_config at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import DeployTarget, OutputFormat
from ..domain.greeting import Greeting

if TYPE_CHECKING:
    from lib_layered_config import Config

# -- greeting ---------------------------------------------------------------


class LoadGreetingFromDict(Protocol):
    """Turn a merged configuration mapping into a :class:`Greeting`.

    Missing keys fall back to the canonical greeting; an unusable
    ``[greeting]`` section raises
    :class:`~abarcloud_hello.domain.errors.ConfigurationError`.
    """

    def __call__(self, config_dict: Mapping[str, Any]) -> Greeting: ...


# -- configuration ----------------------------------------------------------


class GetConfig(Protocol):
    """Read the layered configuration, optionally for a named profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Render a configuration (or one section of it) to the console."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class DeployConfiguration(Protocol):
    """Copy the bundled defaults into configuration layers; return new files."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
        set_permissions: bool = ...,
        dir_mode: int | None = ...,
        file_mode: int | None = ...,
    ) -> list[Path]: ...


# -- logging ----------------------------------------------------------------


class InitLogging(Protocol):
    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadGreetingFromDict",
]
