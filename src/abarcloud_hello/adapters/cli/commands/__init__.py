"""Subcommands attached to the root group in :mod:`..root`."""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .greet import cli_greet
from .info import cli_fail, cli_hello, cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_fail",
    "cli_greet",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
