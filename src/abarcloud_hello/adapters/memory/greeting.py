"""Greeting loaders for tests.

Both delegate to the production pydantic model, so an invalid ``[greeting]``
table fails the same way it does in a real run.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.greeting import Greeting
from ..greeting.config import load_greeting_from_dict


@dataclass
class GreetingLoaderSpy:
    """Loader that remembers every mapping it was asked to parse.

    Example:
        >>> spy = GreetingLoaderSpy()
        >>> spy.load({"greeting": {"title": "A", "message": "B"}}).title
        'A'
        >>> len(spy.calls)
        1
    """

    calls: list[Mapping[str, Any]] = field(default_factory=list)

    def load(self, config_dict: Mapping[str, Any]) -> Greeting:
        self.calls.append(config_dict)
        return load_greeting_from_dict(config_dict)


load_greeting_from_dict_in_memory = load_greeting_from_dict


__all__ = [
    "GreetingLoaderSpy",
    "load_greeting_from_dict_in_memory",
]
