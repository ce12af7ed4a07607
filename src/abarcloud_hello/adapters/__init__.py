"""Implementations of the application ports plus the Click CLI that drives them."""

from __future__ import annotations

__all__: list[str] = []
