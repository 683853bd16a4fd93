from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .base import BackendError, BaseBackend

logger = logging.getLogger(__name__)


class OllamaBackend(BaseBackend):
    """
    Non-streaming completion against a local Ollama server (/api/generate).
    """

    name = "ollama"

    def __init__(
        self,
        base_url: str,
        model: str,
        temperature: float = 0.2,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/generate"

    async def complete(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": float(self.temperature)},
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                r = await client.post(self.url, json=payload)
            except httpx.HTTPError as e:
                raise BackendError(f"Ollama request to {self.url} failed: {e}") from e

            if not r.is_success:
                raise BackendError(f"Ollama error {r.status_code}: {r.text}")

            try:
                data = r.json()
            except ValueError as e:
                raise BackendError(f"Ollama returned non-JSON body from {self.url}") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            logger.debug("Ollama response had no 'response' text; treating as empty")
            return ""
        return text
