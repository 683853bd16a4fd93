from __future__ import annotations

from fieldcard.config import Settings

from .base import BaseBackend
from .ollama_client import OllamaBackend
from .openai_compat_client import OpenAICompatBackend


def make_backend(settings: Settings) -> BaseBackend:
    if settings.backend == "ollama":
        return OllamaBackend(
            base_url=settings.base_url,
            model=settings.model,
            temperature=settings.temperature,
            timeout=settings.timeout,
        )
    if settings.backend == "openai_compat":
        return OpenAICompatBackend(
            base_url=settings.base_url,
            model=settings.model,
            temperature=settings.temperature,
            timeout=settings.timeout,
            api_key_env=settings.api_key_env,
        )
    raise ValueError(f"Unknown backend: {settings.backend}")
