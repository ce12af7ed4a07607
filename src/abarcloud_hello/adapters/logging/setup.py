"""lib_log_rich start-up driven by the ``[lib_log_rich]`` configuration table.

Every way of starting the program (console script, ``python -m``, the test
suite) goes through :func:`init_logging` from the root CLI group, after
``--profile`` and ``--set`` have been applied, so logging always sees the
same merged configuration as the commands.
"""

from __future__ import annotations

from collections.abc import Mapping

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from abarcloud_hello import __init__conf__


class LoggingConfigModel(BaseModel):
    """``[lib_log_rich]`` as read from configuration.

    Only ``service`` and ``environment`` are interpreted here; any other key
    (``console_level``, ``queue_enabled`` ...) is kept as an extra and handed
    to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel.model_validate({"console_level": "DEBUG"}).model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    @classmethod
    def from_config(cls, config: Config) -> LoggingConfigModel:
        section = config.get("lib_log_rich", default=None)
        return cls.model_validate(section if isinstance(section, Mapping) else {})

    def to_runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        """Build the runtime settings; ``service`` falls back to the package name."""
        passthrough = self.model_dump(exclude={"service", "environment"}, exclude_none=True)
        return lib_log_rich.runtime.RuntimeConfig(
            service=self.service or __init__conf__.name,
            environment=self.environment,
            **passthrough,
        )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    ``.env`` files are loaded first so ``LOG_*`` variables override the
    configuration file, then stdlib ``logging`` is bridged so module loggers
    (``logging.getLogger(__name__)``) reach the runtime.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(LoggingConfigModel.from_config(config).to_runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
