"""Token text codec and registry defaults."""

from __future__ import annotations

import base64
import binascii
import re

from csrf_registry.errors import ConfigurationError, TokenDecodeError

DEFAULT_ENTROPY_BYTES = 32
DEFAULT_MAX_TOKENS = 10

_TOKEN_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode_token(raw: bytes) -> str:
    """Encode ``raw`` as URL-safe Base64 without ``=`` padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode_token(token: str) -> bytes:
    """Return the raw bytes behind ``token``.

    Only the unpadded URL-safe alphabet produced by ``encode_token`` is
    accepted; anything else raises ``TokenDecodeError``.
    """
    if _TOKEN_ALPHABET.fullmatch(token) is None:
        raise TokenDecodeError("token contains characters outside the base64url alphabet")
    if len(token) % 4 == 1:
        raise TokenDecodeError(f"token length {len(token)} is not valid base64url")
    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as exc:
        raise TokenDecodeError("token is not valid base64url") from exc


def require_positive(name: str, value: object) -> int:
    """Return ``value`` when it is a positive int, else raise ``ConfigurationError``."""
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


__all__ = [
    "DEFAULT_ENTROPY_BYTES",
    "DEFAULT_MAX_TOKENS",
    "decode_token",
    "encode_token",
    "require_positive",
]
