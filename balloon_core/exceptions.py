"""
Balloon Exceptions
==================
Exception classes for parameter, configuration and encoding errors.
"""

from typing import Any, Iterable, Optional


class BalloonError(Exception):
    """Base exception for all balloon hashing errors."""
    pass


class InvalidParameterError(BalloonError, ValueError):
    """Raised when a cost parameter is not a positive integer."""

    def __init__(self, parameter: str, value: Any, message: Optional[str] = None):
        self.parameter = parameter
        self.value = value
        super().__init__(message or f"{parameter} must be a positive integer, got {value!r}")


class ConfigurationError(BalloonError):
    """Raised when the library is misconfigured."""
    pass


class HashFunctionError(ConfigurationError):
    """Raised when an unknown hash primitive is requested."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown hash function '{name}'. "
            f"Available: {', '.join(self.available) or 'none'}"
        )


class EncodingError(BalloonError, TypeError):
    """Raised when a hash input part cannot be serialized."""
    pass
