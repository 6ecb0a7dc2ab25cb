"""In-memory implementation of the token registry port."""

from __future__ import annotations

import hmac
import logging
from collections import deque
from threading import Lock

from csrf_registry.application.ports.entropy_source import EntropySourcePort
from csrf_registry.application.ports.token_registry import TokenRegistryPort
from csrf_registry.domain.token import (
    DEFAULT_ENTROPY_BYTES,
    DEFAULT_MAX_TOKENS,
    encode_token,
    require_positive,
)
from csrf_registry.errors import EntropySourceFailure
from csrf_registry.infrastructure.entropy import SystemEntropySource

logger = logging.getLogger("csrf_registry.tokens")


class InMemoryTokenRegistry(TokenRegistryPort):
    """Keeps at most ``max_tokens`` live tokens, evicting the oldest first.

    Tokens live for the lifetime of the owning object (typically one user
    session). Mutations are serialized so a shared instance keeps its size
    bound under concurrent requests.
    """

    def __init__(
        self,
        entropy_bytes: int = DEFAULT_ENTROPY_BYTES,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        *,
        entropy_source: EntropySourcePort | None = None,
    ) -> None:
        self._entropy_bytes = require_positive("entropy_bytes", entropy_bytes)
        self._max_tokens = require_positive("max_tokens", max_tokens)
        self._source = entropy_source or SystemEntropySource()
        # oldest on the left, newest on the right
        self._tokens: deque[str] = deque()
        self._lock = Lock()

    @property
    def entropy_bytes(self) -> int:
        return self._entropy_bytes

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    def generate(self, entropy_bytes: int | None = None) -> str:
        nbytes = (
            self._entropy_bytes
            if entropy_bytes is None
            else require_positive("entropy_bytes", entropy_bytes)
        )
        raw = self._source.token_bytes(nbytes)
        if len(raw) != nbytes:
            raise EntropySourceFailure(
                f"entropy source returned {len(raw)} bytes, expected {nbytes}"
            )
        token = encode_token(raw)

        with self._lock:
            evicted = len(self._tokens) >= self._max_tokens
            if evicted:
                self._tokens.popleft()
            self._tokens.append(token)
            size = len(self._tokens)

        if evicted:
            logger.debug(
                "csrf.token.evicted",
                extra={"data": {"size": size, "max_tokens": self._max_tokens}},
            )
        logger.debug(
            "csrf.token.generated",
            extra={"data": {"entropy_bytes": nbytes, "size": size}},
        )
        return token

    def verify(self, token: str, remove: bool = True) -> bool:
        if not isinstance(token, str):
            return False
        presented = token.encode("utf-8", "surrogatepass")

        with self._lock:
            for index, candidate in enumerate(self._tokens):
                if hmac.compare_digest(candidate.encode("ascii"), presented):
                    if remove:
                        del self._tokens[index]
                    size = len(self._tokens)
                    break
            else:
                size = None

        if size is None:
            logger.debug("csrf.token.rejected", extra={"data": {"size": len(self)}})
            return False
        logger.debug(
            "csrf.token.verified",
            extra={"data": {"consumed": remove, "size": size}},
        )
        return True

    def size(self) -> int:
        with self._lock:
            return len(self._tokens)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._tokens)
            self._tokens.clear()
        logger.debug("csrf.tokens.cleared", extra={"data": {"dropped": dropped}})

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entropy_bytes={self._entropy_bytes}, "
            f"max_tokens={self._max_tokens}, size={self.size()})"
        )


__all__ = ["InMemoryTokenRegistry"]
