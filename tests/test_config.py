from __future__ import annotations

import pytest

from fieldcard.config import load_settings

ENV_KEYS = [
    "FIELDCARD_BACKEND",
    "FIELDCARD_MODEL",
    "FIELDCARD_TEMPERATURE",
    "FIELDCARD_TIMEOUT",
    "FIELDCARD_HOST",
    "FIELDCARD_PORT",
    "FIELDCARD_LOG_LEVEL",
    "OLLAMA_BASE_URL",
    "OPENAI_COMPAT_BASE_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)


def test_defaults_target_local_ollama():
    s = load_settings()
    assert s.backend == "ollama"
    assert s.base_url == "http://127.0.0.1:11434"
    assert s.model == "llama3:8b"
    assert s.temperature == 0.2
    assert (s.host, s.port) == ("127.0.0.1", 8787)
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FIELDCARD_BACKEND", "openai_compat")
    monkeypatch.setenv("OPENAI_COMPAT_BASE_URL", "http://127.0.0.1:1234/v1/")
    monkeypatch.setenv("FIELDCARD_MODEL", "qwen2.5:7b")
    monkeypatch.setenv("FIELDCARD_PORT", "9000")
    monkeypatch.setenv("FIELDCARD_LOG_LEVEL", "debug")

    s = load_settings()
    assert s.backend == "openai_compat"
    assert s.base_url == "http://127.0.0.1:1234/v1"
    assert s.model == "qwen2.5:7b"
    assert s.api_key_env == "OPENAI_COMPAT_API_KEY"
    assert s.port == 9000
    assert s.log_level == "DEBUG"


def test_unknown_backend_rejected(monkeypatch):
    monkeypatch.setenv("FIELDCARD_BACKEND", "gpt-cloud")
    with pytest.raises(ValueError, match="Unknown FIELDCARD_BACKEND"):
        load_settings()
