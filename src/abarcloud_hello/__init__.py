"""Public package surface exposing the greeting, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: the Greeting value object and its canonical instance
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .domain.greeting import Greeting

__all__ = [
    "CANONICAL_GREETING",
    "Greeting",
    "build_greeting",
    "get_config",
    "print_info",
]
