"""The Greeting value object and everything it needs, free of I/O.

Nothing in this package imports an adapter, Click or lib_layered_config.
"""

from __future__ import annotations

from .behaviors import CANONICAL_GREETING, build_greeting
from .enums import DeployTarget, OutputFormat
from .errors import ConfigurationError
from .greeting import Greeting

__all__ = [
    "CANONICAL_GREETING",
    "ConfigurationError",
    "DeployTarget",
    "Greeting",
    "OutputFormat",
    "build_greeting",
]
