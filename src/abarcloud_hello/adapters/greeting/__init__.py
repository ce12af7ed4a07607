"""Validation of the ``[greeting]`` configuration table."""

from __future__ import annotations

from .config import GreetingConfigModel, load_greeting_from_dict

__all__ = ["GreetingConfigModel", "load_greeting_from_dict"]
