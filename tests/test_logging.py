"""``[lib_log_rich]`` parsing and RuntimeConfig construction.

``init_logging`` itself runs in every CLI test through the production
services factory.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from abarcloud_hello import __init__conf__
from abarcloud_hello.adapters.logging.setup import LoggingConfigModel


@pytest.mark.os_agnostic
def test_unknown_keys_are_kept_as_extras() -> None:
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    assert parsed.model_extra == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_empty_section_uses_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "data",
    [{}, {"greeting": {"title": "A"}}, {"lib_log_rich": "not a table"}],
)
def test_from_config_without_usable_section_uses_defaults(data: dict[str, object]) -> None:
    parsed = LoggingConfigModel.from_config(Config(data, {}))

    assert parsed == LoggingConfigModel()


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_package_name_for_service() -> None:
    runtime_config = LoggingConfigModel.from_config(Config({}, {})).to_runtime_config()

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service_and_environment() -> None:
    config = Config({"lib_log_rich": {"service": "greeter", "environment": "staging"}}, {})

    runtime_config = LoggingConfigModel.from_config(config).to_runtime_config()

    assert runtime_config.service == "greeter"
    assert runtime_config.environment == "staging"
