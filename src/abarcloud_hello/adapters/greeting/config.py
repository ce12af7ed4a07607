"""Greeting configuration model and loader.

Turns the ``[greeting]`` section of the layered configuration into a
domain :class:`~abarcloud_hello.domain.greeting.Greeting`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from abarcloud_hello.domain.behaviors import CANONICAL_GREETING
from abarcloud_hello.domain.errors import ConfigurationError
from abarcloud_hello.domain.greeting import Greeting


class GreetingConfigModel(BaseModel):
    """Validated, immutable ``[greeting]`` section.

    Missing keys fall back to the canonical greeting. Unknown keys are
    ignored.

    Example:
        >>> GreetingConfigModel().title
        'Welcome to AbarCloud'
        >>> GreetingConfigModel(message="Hi").message
        'Hi'
    """

    model_config = ConfigDict(frozen=True)

    title: str = CANONICAL_GREETING.title
    message: str = CANONICAL_GREETING.message

    @field_validator("title", "message", mode="before")
    @classmethod
    def _coerce_scalars_to_str(cls, v: Any) -> Any:
        """Render numbers as text.

        ``--set greeting.title=2024`` and numeric environment values reach
        the model as int/float after JSON coercion; they are still meant as
        text. Booleans, lists, and tables are left for pydantic to reject.

        Examples:
            >>> GreetingConfigModel._coerce_scalars_to_str(2024)
            '2024'
            >>> GreetingConfigModel._coerce_scalars_to_str(True)
            True
        """
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def to_greeting(self) -> Greeting:
        """Return the domain value object for this section."""
        return Greeting(title=self.title, message=self.message)


def load_greeting_from_dict(config_dict: Mapping[str, Any]) -> Greeting:
    """Build a Greeting from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.
            Only the ``greeting`` key is read.

    Returns:
        Greeting with configured values, canonical values where unset.

    Raises:
        ConfigurationError: If the ``greeting`` section is not a table or a
            field has an unusable type.

    Example:
        >>> load_greeting_from_dict({"greeting": {"title": "A", "message": "B"}})
        Greeting(title='A', message='B')
        >>> load_greeting_from_dict({}) == CANONICAL_GREETING
        True
    """
    section: Any = config_dict.get("greeting")
    if section is None:
        section = {}
    try:
        parsed = GreetingConfigModel.model_validate(section)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [greeting] configuration: {exc}") from exc
    return parsed.to_greeting()


__all__ = [
    "GreetingConfigModel",
    "load_greeting_from_dict",
]
