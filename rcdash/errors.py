"""Exception hierarchy for rcdash.

Transport failures from the Kubernetes API are not wrapped: they reach the
caller as the client library raised them.
"""

from __future__ import annotations


class RcdashError(Exception):
    """Base class for errors raised by rcdash itself."""


class SelectorError(RcdashError, ValueError):
    """A label key or value cannot form a valid selector requirement."""

    def __init__(self, message: str, key: str = "", value: str | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


class ConfigError(RcdashError, ValueError):
    """An RCDASH_* environment variable holds an invalid value."""
