"""Bounded in-memory registry of single-use anti-forgery tokens."""

from __future__ import annotations

from csrf_registry.errors import (
    ConfigurationError,
    CsrfRegistryError,
    EntropySourceFailure,
    TokenDecodeError,
)
from csrf_registry.infrastructure.state.token_registry import InMemoryTokenRegistry

__all__ = [
    "ConfigurationError",
    "CsrfRegistryError",
    "EntropySourceFailure",
    "InMemoryTokenRegistry",
    "TokenDecodeError",
]
