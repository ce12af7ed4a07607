"""Read the layered configuration once per profile and keep it for the process.

Layers are merged by lib_layered_config in the order
defaults, app, host, user, dotenv, environment; the bundled
``defaultconfig.toml`` next to this module is the lowest layer and supplies
the canonical ``[greeting]``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from abarcloud_hello import __init__conf__

_DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


class ConfigLoaderProtocol(Protocol):
    """``get_config`` plus the ``cache_clear`` hook tests rely on."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe as a directory component.

    Empty names, names longer than ``max_length`` (64 by default), path
    separators, leading ``-`` or ``_`` and Windows device names all fail.

    Raises:
        ValueError: The name is not acceptable.

    Example:
        >>> validate_profile("staging")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Args:
        profile: Reads every layer from its ``profile/<name>/`` subdirectory
            instead of the base directory.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Raises:
        ValueError: ``profile`` fails :func:`validate_profile`.

    Example:
        >>> get_config().get("greeting.message")  # doctest: +SKIP
        'Hello World!'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
