"""Port describing the secure random byte source."""

from __future__ import annotations

from typing import Protocol


class EntropySourcePort(Protocol):
    """Supplies cryptographically secure random bytes."""

    def token_bytes(self, nbytes: int) -> bytes:
        """Return exactly ``nbytes`` random bytes or raise ``EntropySourceFailure``."""


__all__ = ["EntropySourcePort"]
