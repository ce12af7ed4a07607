"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can render metadata without
querying the installed distribution at runtime.

Contents:
    * Distribution identifiers (``name``, ``version``, ``shell_command``).
    * lib_layered_config identifiers (vendor, app, slug).
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "abarcloud_hello"
#: Human-readable summary shown in CLI help output.
title = "AbarCloud greeting value object with a layered-config CLI"
#: Current release version.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/abarcloud/abarcloud_hello"
#: Author attribution.
author = "AbarCloud"
#: Contact email surfaced in metadata.
author_email = "info@abarcloud.com"
#: Console-script name published by the package.
shell_command = "abarcloud-hello"

#: Vendor segment of platform configuration paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "AbarCloud"
#: Application segment of platform configuration paths (macOS/Windows).
LAYEREDCONF_APP: str = "AbarCloud Hello"
#: Directory slug used on Linux (XDG) and for environment variable prefixes.
LAYEREDCONF_SLUG: str = "abarcloud-hello"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for abarcloud_hello:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
