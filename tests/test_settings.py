from __future__ import annotations

from fastapi.testclient import TestClient

from user_registry.main import create_app
from user_registry.settings import Settings, get_settings


def test_defaults_bind_localhost_8080(monkeypatch) -> None:
    for var in ("USER_REGISTRY_HOST", "USER_REGISTRY_PORT", "USER_REGISTRY_LOG_LEVEL", "USER_REGISTRY_SEED"):
        monkeypatch.delenv(var, raising=False)

    s = get_settings()
    assert (s.host, s.port) == ("localhost", 8080)
    assert s.log_level == "INFO"
    assert s.seed is True


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("USER_REGISTRY_PORT", "9090")
    monkeypatch.setenv("USER_REGISTRY_LOG_LEVEL", "debug")

    s = get_settings()
    assert s.port == 9090
    assert s.log_level == "DEBUG"


def test_unseeded_app_starts_empty() -> None:
    client = TestClient(create_app(settings=Settings(seed=False)))

    r = client.get("/users")
    assert r.status_code == 200
    assert r.json() == []
