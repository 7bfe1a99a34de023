"""Geocoin exception hierarchy."""

from __future__ import annotations


class GeocoinError(Exception):
    """Base class for all geocoin-specific exceptions."""


class ConfigurationError(GeocoinError, ValueError):
    """Raised when a configuration value is invalid.

    Accepts either a generic message or a parameter name plus reason::

        raise ConfigurationError("bad config")
        raise ConfigurationError("tile_width", "must be positive")
    """

    def __init__(self, param_name: str | None = None, reason: str | None = None) -> None:
        if param_name and reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name: str | None = param_name
        else:
            message = param_name if param_name else "Invalid configuration"
            self.param_name = None
        super().__init__(message)


class InvariantViolation(GeocoinError, RuntimeError):
    """An internal invariant no longer holds (e.g. a coin serial was minted twice)."""


class CacheNotFound(GeocoinError, KeyError):
    """No cache exists at the requested cell."""

    def __init__(self, i: int, j: int) -> None:
        self.i = i
        self.j = j
        super().__init__(f"No cache at cell ({i}, {j})")

    def __str__(self) -> str:
        return str(self.args[0])
