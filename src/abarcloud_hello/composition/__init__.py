"""Pick the adapters each port is served by.

:func:`build_production` is what the console script and ``python -m`` pass to
the CLI; :func:`build_testing` swaps in the in-memory adapters so command
tests run without reading config files or starting lib_log_rich.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.greeting.config import load_greeting_from_dict
from ..adapters.logging.setup import init_logging
from ..application.ports import (
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadGreetingFromDict,
)

if TYPE_CHECKING:
    from ..adapters.memory.greeting import GreetingLoaderSpy


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, fixed for the lifetime of a CLI run."""

    load_greeting_from_dict: LoadGreetingFromDict
    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    deploy_configuration: DeployConfiguration
    init_logging: InitLogging


def build_production() -> AppServices:
    return AppServices(
        load_greeting_from_dict=load_greeting_from_dict,
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        deploy_configuration=deploy_configuration,
        init_logging=init_logging,
    )


def build_testing(*, spy: GreetingLoaderSpy | None = None) -> AppServices:
    """Services that never touch disk or the logging runtime.

    Pass a :class:`GreetingLoaderSpy` to record the configuration mappings
    commands hand to the greeting loader.
    """
    from ..adapters import memory

    return AppServices(
        load_greeting_from_dict=spy.load if spy is not None else memory.load_greeting_from_dict_in_memory,
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        display_config=memory.display_config_in_memory,
        deploy_configuration=memory.deploy_configuration_in_memory,
        init_logging=memory.init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
