from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, cast

from fieldcard.llm.providers.providers import PROVIDERS, ProviderName


@dataclass(frozen=True)
class Settings:
    backend: ProviderName
    base_url: str
    model: str
    api_key_env: Optional[str]
    temperature: float = 0.2
    timeout: float = 120.0
    host: str = "127.0.0.1"
    port: int = 8787
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Env:
      FIELDCARD_BACKEND      ollama | openai_compat (default ollama)
      FIELDCARD_MODEL        model id (default: provider default)
      FIELDCARD_TEMPERATURE  sampling temperature (default 0.2)
      FIELDCARD_TIMEOUT      backend timeout in seconds (default 120)
      FIELDCARD_HOST / FIELDCARD_PORT   relay bind address (127.0.0.1:8787)
      FIELDCARD_LOG_LEVEL    logging level name (default INFO)
    Optional base URL override per provider:
      OLLAMA_BASE_URL, OPENAI_COMPAT_BASE_URL
    """
    backend = os.environ.get("FIELDCARD_BACKEND", "ollama").strip().lower()
    if backend not in PROVIDERS:
        raise ValueError(f"Unknown FIELDCARD_BACKEND: {backend!r} (expected one of {sorted(PROVIDERS)})")
    provider = cast(ProviderName, backend)
    cfg = PROVIDERS[provider]

    return Settings(
        backend=provider,
        base_url=os.environ.get(f"{provider.upper()}_BASE_URL", cfg.base_url).rstrip("/"),
        model=os.environ.get("FIELDCARD_MODEL") or cfg.default_model,
        api_key_env=cfg.api_key_env,
        temperature=float(os.environ.get("FIELDCARD_TEMPERATURE", "0.2")),
        timeout=float(os.environ.get("FIELDCARD_TIMEOUT", "120")),
        host=os.environ.get("FIELDCARD_HOST", "127.0.0.1"),
        port=int(os.environ.get("FIELDCARD_PORT", "8787")),
        log_level=os.environ.get("FIELDCARD_LOG_LEVEL", "INFO").upper(),
    )
