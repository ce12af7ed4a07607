"""Render the merged configuration through lib_layered_config's Rich printer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredOutputFormat
from lib_layered_config import display_config as render_layered_config
from rich.console import Console

from abarcloud_hello.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` as annotated TOML or as JSON.

    Queued log events are flushed first so they cannot land in the middle of
    the rendered document.

    Args:
        config: Configuration to show, usually with ``--set`` overrides applied.
        output_format: ``HUMAN`` for TOML with provenance comments, ``JSON``
            for a plain document.
        section: Restrict output to one top-level table such as ``greeting``.
        console: Rich console to print to; tests pass a recording console.
        profile: Profile name echoed in the provenance comments.

    Raises:
        ValueError: ``section`` is not present in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    render_layered_config(
        config,
        output_format=LayeredOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
