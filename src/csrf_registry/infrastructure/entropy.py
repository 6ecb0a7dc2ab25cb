"""Operating-system backed entropy source."""

from __future__ import annotations

import logging
import secrets

from csrf_registry.application.ports.entropy_source import EntropySourcePort
from csrf_registry.errors import EntropySourceFailure

logger = logging.getLogger("csrf_registry.entropy")


class SystemEntropySource(EntropySourcePort):
    """Draws bytes from the OS CSPRNG through ``secrets``."""

    def token_bytes(self, nbytes: int) -> bytes:
        try:
            return secrets.token_bytes(nbytes)
        except OSError as exc:
            logger.error(
                "csrf.entropy.unavailable",
                extra={"data": {"nbytes": nbytes, "error": str(exc)}},
            )
            raise EntropySourceFailure(f"secure random source failed for {nbytes} bytes") from exc


__all__ = ["SystemEntropySource"]
