from __future__ import annotations

import pytest

from fakes import CountingEntropySource


@pytest.fixture
def entropy_source() -> CountingEntropySource:
    return CountingEntropySource()


@pytest.fixture(autouse=True)
def clear_registry_env(monkeypatch) -> None:
    monkeypatch.delenv("CSRF_TOKEN_ENTROPY_BYTES", raising=False)
    monkeypatch.delenv("CSRF_MAX_TOKENS", raising=False)
