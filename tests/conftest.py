"""Fixtures shared by the CLI, configuration and module-entry tests.

Services factories are built from ``build_production`` with single ports
replaced, so a test swaps exactly the piece it wants to observe and every
other command path stays real.
"""

from __future__ import annotations

import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config

if TYPE_CHECKING:
    from abarcloud_hello.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_PROJECT_ENV = Path(__file__).resolve().parent.parent / ".env"

if _PROJECT_ENV.is_file():
    load_dotenv(_PROJECT_ENV)


def pytest_configure(config: pytest.Config) -> None:
    # Coverage keeps an SQLite file; network-mounted checkouts lack the locking it needs.
    os.environ.setdefault("COVERAGE_FILE", str(Path(tempfile.gettempdir()) / ".coverage.abarcloud_hello"))


def _factory_replacing(**ports: Any) -> ServicesFactory:
    from abarcloud_hello.composition import build_production

    services = dataclasses.replace(build_production(), **ports)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """Fresh runner; read ``result.stdout`` for command output, logs go to stderr."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from abarcloud_hello.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with tracebacks off and put ``lib_cli_exit_tools.config`` back afterwards."""
    cli_config = lib_cli_exit_tools.config
    saved = {field.name: getattr(cli_config, field.name) for field in dataclasses.fields(cli_config)}
    lib_cli_exit_tools.reset_config()
    cli_config.traceback = False
    cli_config.traceback_force_color = False
    try:
        yield
    finally:
        for name, value in saved.items():
            setattr(cli_config, name, value)


@pytest.fixture
def clear_config_cache() -> None:
    """Drop cached layer reads so the test sees the files as they are now."""
    from abarcloud_hello.adapters.config import loader

    loader.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    return lambda data: Config(data, {})


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], ServicesFactory]:
    """Turn a plain dict into a services factory whose ``get_config`` returns it.

    Example:
        factory = config_cli_context({"greeting": {"title": "A", "message": "B"}})
        result = cli_runner.invoke(cli, ["greet"], obj=factory)
    """

    def _create(data: dict[str, Any]) -> ServicesFactory:
        config = Config(data, {})
        return _factory_replacing(get_config=lambda **_kwargs: config)

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], ServicesFactory]:
    """Like ``config_cli_context`` but records each ``profile`` it is asked for."""

    def _inject(config: Config, captured: list[str | None]) -> ServicesFactory:
        def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        return _factory_replacing(get_config=_get_config)

    return _inject


@pytest.fixture
def inject_deploy_configuration() -> Callable[[Callable[..., list[Path]]], ServicesFactory]:
    """Replace the deploy port, typically with a spy that records its kwargs."""

    def _inject(deploy: Callable[..., list[Path]]) -> ServicesFactory:
        return _factory_replacing(deploy_configuration=deploy)

    return _inject
