from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

ProviderName = Literal["ollama", "openai_compat"]

@dataclass(frozen=True)
class ProviderConfig:
    name: ProviderName
    base_url: str                  # e.g. http://127.0.0.1:11434 or http://127.0.0.1:8080/v1
    api_key_env: Optional[str]     # env var name; local servers usually need none
    default_model: str

PROVIDERS: Dict[ProviderName, ProviderConfig] = {
    "ollama": ProviderConfig(
        name="ollama",
        base_url="http://127.0.0.1:11434",
        api_key_env=None,
        default_model="llama3:8b",
    ),
    "openai_compat": ProviderConfig(
        name="openai_compat",
        base_url="http://127.0.0.1:8080/v1",
        api_key_env="OPENAI_COMPAT_API_KEY",
        default_model="llama3:8b",
    ),
}
