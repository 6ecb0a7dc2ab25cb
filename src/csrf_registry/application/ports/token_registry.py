"""Port describing the anti-forgery token registry."""

from __future__ import annotations

from typing import Protocol


class TokenRegistryPort(Protocol):
    """Issues single-use tokens and verifies callers against the live set."""

    @property
    def entropy_bytes(self) -> int:
        """Default number of random bytes behind each generated token."""

    @property
    def max_tokens(self) -> int:
        """Upper bound on concurrently live tokens."""

    def generate(self, entropy_bytes: int | None = None) -> str:
        """Create, register and return a new token."""

    def verify(self, token: str, remove: bool = True) -> bool:
        """Return ``True`` when ``token`` is live, consuming it when ``remove`` is set."""

    def size(self) -> int:
        """Return the number of live tokens."""

    def clear(self) -> None:
        """Drop every live token."""

    def is_empty(self) -> bool:
        """Return ``True`` when no token is live."""


__all__ = ["TokenRegistryPort"]
