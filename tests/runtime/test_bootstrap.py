from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from csrf_registry.config.registry import TokenRegistrySettings
from csrf_registry.domain.token import decode_token
from csrf_registry.runtime import bootstrap
from csrf_registry.runtime.bootstrap import build_token_registry
from fakes import CountingEntropySource


def test_settings_default_to_documented_values() -> None:
    settings = TokenRegistrySettings.load()

    assert settings.entropy_bytes == 32
    assert settings.max_tokens == 10


def test_settings_load_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("CSRF_TOKEN_ENTROPY_BYTES", "48")
    monkeypatch.setenv("CSRF_MAX_TOKENS", "3")

    settings = TokenRegistrySettings.load()

    assert settings.entropy_bytes == 48
    assert settings.max_tokens == 3


@pytest.mark.parametrize("name", ["CSRF_TOKEN_ENTROPY_BYTES", "CSRF_MAX_TOKENS"])
def test_settings_reject_non_positive_values(monkeypatch, name: str) -> None:
    monkeypatch.setenv(name, "0")

    with pytest.raises(ValidationError):
        TokenRegistrySettings.load()


def test_build_token_registry_applies_settings(entropy_source: CountingEntropySource) -> None:
    settings = TokenRegistrySettings(entropy_bytes=12, max_tokens=2)

    registry = build_token_registry(settings, entropy_source=entropy_source)
    token = registry.generate()

    assert registry.entropy_bytes == 12
    assert registry.max_tokens == 2
    assert decode_token(token) == b"\x01" * 12


def test_build_token_registry_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CSRF_MAX_TOKENS", "4")

    registry = build_token_registry()

    assert registry.max_tokens == 4
    assert registry.entropy_bytes == 32


def test_build_token_registry_applies_log_config_when_requested(monkeypatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(bootstrap, "apply_log_config", lambda: calls.append("configured"))

    build_token_registry(TokenRegistrySettings())
    assert calls == []

    build_token_registry(TokenRegistrySettings(), configure_logging=True)
    assert calls == ["configured"]


def test_build_token_registry_logs_configuration(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="csrf_registry.runtime"):
        build_token_registry(TokenRegistrySettings(max_tokens=5))

    (record,) = [r for r in caplog.records if r.name == "csrf_registry.runtime"]
    assert record.getMessage() == "csrf.registry.built"
    assert record.data == {"entropy_bytes": 32, "max_tokens": 5, "entropy_source": "system"}
