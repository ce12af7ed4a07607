"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config.

Values are read as JSON when possible (``true``, ``42``, ``["a"]``) and kept
as plain text otherwise, so ``--set greeting.title=Welcome back`` needs no
quoting while ``--set lib_log_rich.queue_enabled=false`` yields a boolean.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Anything :func:`coerce_value` can return."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` argument after parsing."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as JSON, or return it unchanged when it is not JSON.

    Examples:
        >>> coerce_value("false"), coerce_value("8192"), coerce_value("null")
        (False, 8192, None)
        >>> coerce_value("Welcome back")
        'Welcome back'
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` separates path and value, so the value itself may
    contain ``=`` and ``.``.

    Raises:
        ValueError: No ``=``, no dot in the path, or an empty path component.

    Examples:
        >>> parse_override("greeting.message=a=b")
        ConfigOverride(section='greeting', key_path=('message',), value='a=b')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").key_path
        ('payload_limits', 'message_max_chars')
    """
    path, separator, value = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, key = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key.split("."))
    if "" in key_path:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, object], override: ConfigOverride) -> None:
    """Place ``override.value`` at its path inside ``tree``.

    Raises:
        TypeError: An earlier override already put a scalar on the path.

    Example:
        >>> tree: dict[str, object] = {}
        >>> _merge_into(tree, parse_override("greeting.title=Hi"))
        >>> tree
        {'greeting': {'title': 'Hi'}}
    """
    node = tree
    for part in (override.section, *override.key_path[:-1]):
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every override deep-merged in, later ones winning.

    ``config`` is returned as is when there is nothing to apply.

    Raises:
        ValueError: An override is malformed.
        TypeError: Two overrides disagree on whether a key is a table.

    Example:
        >>> base = Config({"greeting": {"title": "A", "message": "B"}}, {})
        >>> apply_overrides(base, ("greeting.title=C",)).as_dict()
        {'greeting': {'title': 'C', 'message': 'B'}}
    """
    if not raw_overrides:
        return config

    tree: dict[str, object] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
