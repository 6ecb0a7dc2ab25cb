"""Runtime wiring for token registries."""

from __future__ import annotations

import logging

from csrf_registry.application.ports.entropy_source import EntropySourcePort
from csrf_registry.config.registry import TokenRegistrySettings
from csrf_registry.infrastructure.state.token_registry import InMemoryTokenRegistry
from csrf_registry.observability.logging import configure_logging as apply_log_config

logger = logging.getLogger("csrf_registry.runtime")


def build_token_registry(
    settings: TokenRegistrySettings | None = None,
    *,
    entropy_source: EntropySourcePort | None = None,
    configure_logging: bool = False,
) -> InMemoryTokenRegistry:
    """Return a registry configured from ``settings`` (or the environment).

    With ``configure_logging`` set, the shared log config is applied first so
    the registry's events go through ``ExtrasFormatter``.
    """
    if configure_logging:
        apply_log_config()
    resolved = settings or TokenRegistrySettings.load()
    registry = InMemoryTokenRegistry(
        resolved.entropy_bytes,
        resolved.max_tokens,
        entropy_source=entropy_source,
    )
    logger.debug(
        "csrf.registry.built",
        extra={
            "data": {
                "entropy_bytes": registry.entropy_bytes,
                "max_tokens": registry.max_tokens,
                "entropy_source": type(entropy_source).__name__ if entropy_source else "system",
            }
        },
    )
    return registry


__all__ = ["build_token_registry"]
