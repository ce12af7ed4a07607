"""lib_log_rich start-up for CLI runs."""

from __future__ import annotations

from .setup import init_logging

__all__ = ["init_logging"]
