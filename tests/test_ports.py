"""Port contracts for the in-memory adapters and composition wiring.

Production adapters are exercised through the CLI tests; static conformance
to the Protocols is checked by pyright.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from abarcloud_hello.adapters.memory import (
    GreetingLoaderSpy,
    deploy_configuration_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_greeting_from_dict_in_memory,
)
from abarcloud_hello.composition import AppServices, build_production, build_testing
from abarcloud_hello.domain.behaviors import CANONICAL_GREETING
from abarcloud_hello.domain.enums import DeployTarget
from abarcloud_hello.domain.greeting import Greeting

if TYPE_CHECKING:
    from abarcloud_hello.application.ports import GetConfig, LoadGreetingFromDict


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def load_greeting_impl() -> LoadGreetingFromDict:
    return load_greeting_from_dict_in_memory


# ======================== in-memory adapters ========================


@pytest.mark.os_agnostic
def test_in_memory_config_holds_canonical_greeting(get_config_impl: GetConfig) -> None:
    config = get_config_impl(profile="ignored")

    assert config.as_dict() == {"greeting": {"title": "Welcome to AbarCloud", "message": "Hello World!"}}


@pytest.mark.os_agnostic
def test_in_memory_default_config_path_is_toml() -> None:
    assert get_default_config_path_in_memory().suffix == ".toml"


@pytest.mark.os_agnostic
def test_in_memory_deploy_creates_nothing() -> None:
    assert deploy_configuration_in_memory(targets=[DeployTarget.USER], force=True) == []


@pytest.mark.os_agnostic
def test_in_memory_init_logging_accepts_any_config() -> None:
    init_logging_in_memory(Config({}, {}))


@pytest.mark.os_agnostic
def test_in_memory_loader_parses_with_real_model(load_greeting_impl: LoadGreetingFromDict) -> None:
    assert load_greeting_impl({"greeting": {"title": "A", "message": "B"}}) == Greeting("A", "B")
    assert load_greeting_impl({}) == CANONICAL_GREETING


# ======================== composition ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_factories_populate_every_port_with_a_callable(factory: object) -> None:
    services = factory()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    for name in services.__dataclass_fields__:
        assert callable(getattr(services, name))


@pytest.mark.os_agnostic
def test_build_testing_reads_greeting_through_in_memory_config() -> None:
    services = build_testing()

    greeting = services.load_greeting_from_dict(services.get_config().as_dict())

    assert greeting == CANONICAL_GREETING


@pytest.mark.os_agnostic
def test_build_testing_routes_greeting_loads_through_spy() -> None:
    spy = GreetingLoaderSpy()
    services = build_testing(spy=spy)

    services.load_greeting_from_dict({"greeting": {"title": "A"}})

    assert spy.calls == [{"greeting": {"title": "A"}}]


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    services = build_testing()

    with pytest.raises(AttributeError):
        services.get_config = get_config_in_memory  # type: ignore[misc]
