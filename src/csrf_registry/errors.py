"""Exceptions raised by the token registry and its collaborators."""

from __future__ import annotations


class CsrfRegistryError(Exception):
    """Base class for registry-specific failures."""


class ConfigurationError(CsrfRegistryError, ValueError):
    """Raised when entropy or capacity is not a positive integer."""


class EntropySourceFailure(CsrfRegistryError, RuntimeError):
    """Raised when the secure random source cannot supply bytes."""


class TokenDecodeError(CsrfRegistryError, ValueError):
    """Raised when a token is not valid URL-safe Base64."""


__all__ = [
    "CsrfRegistryError",
    "ConfigurationError",
    "EntropySourceFailure",
    "TokenDecodeError",
]
