"""Greeting value object - pure domain type with no I/O dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Greeting:
    """Immutable pair of a title and a message.

    Both strings are stored exactly as given. Empty strings and arbitrary
    text are accepted; there is no validation or normalisation.

    Attributes:
        title: Headline shown above the message.
        message: Body text of the greeting.

    Example:
        >>> greeting = Greeting("Welcome to AbarCloud", "Hello World!")
        >>> greeting.title
        'Welcome to AbarCloud'
        >>> greeting.message
        'Hello World!'
        >>> greeting == Greeting("Welcome to AbarCloud", "Hello World!")
        True
    """

    title: str
    message: str

    def as_dict(self) -> dict[str, str]:
        """Return the fields as a plain dict for JSON rendering.

        Example:
            >>> Greeting("A", "B").as_dict()
            {'title': 'A', 'message': 'B'}
        """
        return {"title": self.title, "message": self.message}

    def __str__(self) -> str:
        return f"{self.title}\n{self.message}"


__all__ = ["Greeting"]
