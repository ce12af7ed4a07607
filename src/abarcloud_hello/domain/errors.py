"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be turned into a domain
    object, for example a ``[greeting]`` section whose title is not a
    string. Typically caught at CLI boundaries to provide user-friendly
    error messages.

    Example:
        >>> from abarcloud_hello.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeting.title must be a string")
        >>> str(err)
        'greeting.title must be a string'
    """


__all__ = ["ConfigurationError"]
