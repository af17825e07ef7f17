from __future__ import annotations

import httpx

from orchestrator_providers.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults():
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig(http_timeout_seconds=60.0, connect_timeout_seconds=10.0)  # nosec B101 - assert is appropriate in unit tests


def test_env_overrides_refresh_cache(monkeypatch):
    first = get_timeout_config()
    monkeypatch.setenv("ORCH_PROVIDERS_HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("ORCH_PROVIDERS_CONNECT_TIMEOUT_SECONDS", "2")
    cfg = get_timeout_config()
    assert cfg is not first  # nosec B101 - assert is appropriate in unit tests
    assert cfg.http_timeout_seconds == 12.5  # nosec B101 - assert is appropriate in unit tests
    assert cfg.connect_timeout_seconds == 2.0  # nosec B101 - assert is appropriate in unit tests
    assert get_timeout_config() is cfg  # nosec B101 - assert is appropriate in unit tests


def test_invalid_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("ORCH_PROVIDERS_HTTP_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("ORCH_PROVIDERS_CONNECT_TIMEOUT_SECONDS", "-3")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 60.0  # nosec B101 - assert is appropriate in unit tests
    assert cfg.connect_timeout_seconds == 10.0  # nosec B101 - assert is appropriate in unit tests


def test_to_httpx():
    timeout = TimeoutConfig(http_timeout_seconds=30.0, connect_timeout_seconds=5.0).to_httpx()
    assert isinstance(timeout, httpx.Timeout)  # nosec B101 - assert is appropriate in unit tests
    assert timeout.read == 30.0  # nosec B101 - assert is appropriate in unit tests
    assert timeout.connect == 5.0  # nosec B101 - assert is appropriate in unit tests
