"""Test doubles for every port in :mod:`abarcloud_hello.application.ports`.

:func:`abarcloud_hello.composition.build_testing` wires these in place of
the production adapters.
"""

from __future__ import annotations

from .config import (
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .greeting import GreetingLoaderSpy, load_greeting_from_dict_in_memory
from .logging import init_logging_in_memory

__all__ = [
    "GreetingLoaderSpy",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_greeting_from_dict_in_memory",
]
