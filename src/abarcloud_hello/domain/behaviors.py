"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .greeting import Greeting

CANONICAL_GREETING = Greeting("Welcome to AbarCloud", "Hello World!")


def build_greeting(title: str | None = None, message: str | None = None) -> Greeting:
    r"""Return the canonical greeting, optionally replacing either field.

    ``None`` keeps the canonical value; any string, including the empty
    string, replaces it verbatim.

    Args:
        title: Replacement title, or None for the canonical one.
        message: Replacement message, or None for the canonical one.

    Returns:
        A new or canonical :class:`Greeting`.

    Example:
        >>> build_greeting().title
        'Welcome to AbarCloud'
        >>> build_greeting(message="Hi").message
        'Hi'
        >>> build_greeting(title="").title
        ''
    """
    if title is None and message is None:
        return CANONICAL_GREETING
    return Greeting(
        title=CANONICAL_GREETING.title if title is None else title,
        message=CANONICAL_GREETING.message if message is None else message,
    )


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
