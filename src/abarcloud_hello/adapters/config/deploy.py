r"""Copy the bundled defaults into the app, host or user configuration layer.

Deployed files give users a ready-made ``config.toml`` with the
``[greeting]`` and ``[lib_log_rich]`` tables to edit, at the path
lib_layered_config will read it from, e.g.
``~/.config/abarcloud-hello/config.toml`` (Linux user layer) or
``%APPDATA%\AbarCloud\AbarCloud Hello\config.toml`` (Windows user layer).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from abarcloud_hello import __init__conf__
from abarcloud_hello.adapters.config.loader import get_default_config_path, validate_profile
from abarcloud_hello.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def _written_paths(results: Iterable[Any]) -> Iterator[Path]:
    """Yield destinations that were created or overwritten, ``.d`` files included."""
    for result in results:
        if result.action in _WRITTEN:
            yield result.destination
        for companion in result.dot_d_results:
            if companion.action in _WRITTEN:
                yield companion.destination


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    """Deploy ``defaultconfig.toml`` to each target layer.

    Args:
        targets: Layers to write; ``APP`` and ``HOST`` usually need root.
        force: Overwrite files that already exist instead of skipping them.
        profile: Write below ``profile/<name>/`` in every layer.
        set_permissions: Apply 755/644 (app, host) or 700/600 (user).
        dir_mode: Directory mode used for every target instead of the default.
        file_mode: File mode used for every target instead of the default.

    Returns:
        Files actually written; empty when everything existed and ``force``
        was off.

    Raises:
        PermissionError: A system-wide layer is not writable.
        ValueError: ``profile`` is not a valid profile name.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
        set_permissions=set_permissions,
        dir_mode=dir_mode,
        file_mode=file_mode,
    )
    written = list(_written_paths(results))
    logger.debug("Deployed configuration files", extra={"count": len(written)})
    return written


__all__ = ["deploy_configuration"]
