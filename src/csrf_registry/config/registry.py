"""Token registry configuration resolved from the environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from csrf_registry.domain.token import DEFAULT_ENTROPY_BYTES, DEFAULT_MAX_TOKENS


class TokenRegistrySettings(BaseSettings):
    """Entropy and capacity for per-session token registries."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    entropy_bytes: int = Field(
        default=DEFAULT_ENTROPY_BYTES,
        gt=0,
        alias="CSRF_TOKEN_ENTROPY_BYTES",
        description="Random bytes drawn for each generated token.",
    )
    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        gt=0,
        alias="CSRF_MAX_TOKENS",
        description="Live tokens kept before the oldest is evicted.",
    )

    @classmethod
    def load(cls) -> TokenRegistrySettings:
        return cls()


__all__ = ["TokenRegistrySettings"]
