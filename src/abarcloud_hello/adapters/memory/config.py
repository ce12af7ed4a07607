"""Configuration ports backed by a fixed in-memory ``Config``.

Nothing here reads or writes files: the configuration is always the
canonical ``[greeting]`` table, deployment reports that nothing was written,
and display prints nothing.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...domain.behaviors import CANONICAL_GREETING
from ...domain.enums import DeployTarget, OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Ignore ``profile`` and ``start_dir`` and return ``[greeting]`` only.

    Example:
        >>> get_config_in_memory().get("greeting")["message"]
        'Hello World!'
    """
    return Config({"greeting": CANONICAL_GREETING.as_dict()}, {})


def get_default_config_path_in_memory() -> Path:
    # Only the name matters to callers; the file is never created.
    return Path(tempfile.gettempdir()) / "abarcloud_hello" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    return None


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
