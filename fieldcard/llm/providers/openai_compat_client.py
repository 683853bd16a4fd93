from __future__ import annotations

import os
from typing import Any, Dict, Optional

import httpx

from .base import BackendError, BaseBackend


def get_message_text(resp: Dict[str, Any]) -> str:
    """
    Robustly extract assistant text from OpenAI-compatible responses.
    Some local servers return message.content as null or as a list of parts.
    """
    try:
        choice0 = (resp.get("choices") or [])[0] or {}
    except (IndexError, TypeError, AttributeError):
        choice0 = {}

    msg = choice0.get("message") or {}
    content = msg.get("content", None)

    # 1) Standard: content is a string
    if isinstance(content, str):
        return content

    # 2) List-of-parts
    if isinstance(content, list):
        parts = []
        for p in content:
            if isinstance(p, str):
                parts.append(p)
            elif isinstance(p, dict):
                parts.append(p.get("text") or p.get("content") or "")
        return "".join(parts)

    # 3) content is null; try reasoning-style fields
    for k in ("reasoning_content", "reasoning", "output_text", "text"):
        v = msg.get(k)
        if isinstance(v, str) and v.strip():
            return v

    # 4) Legacy completions shape
    v = choice0.get("text")
    if isinstance(v, str) and v.strip():
        return v

    return ""


class OpenAICompatBackend(BaseBackend):
    """
    Chat-completions backend for local servers that speak the OpenAI API
    (llama.cpp server, vLLM, LM Studio, Ollama's /v1).
    """

    name = "openai_compat"

    def __init__(
        self,
        base_url: str,
        model: str,
        temperature: float = 0.2,
        timeout: float = 120.0,
        api_key_env: Optional[str] = None,
        max_tokens: int = 1200,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.api_key = os.environ.get(api_key_env, "") if api_key_env else ""
        self._transport = transport

    @property
    def url(self) -> str:
        if self.base_url.endswith("/v1"):
            return f"{self.base_url}/chat/completions"
        return f"{self.base_url}/v1/chat/completions"

    async def chat_completions(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                r = await client.post(self.url, headers=headers, json=payload)
            except httpx.HTTPError as e:
                raise BackendError(f"Request to {self.url} failed: {e}") from e
            try:
                r.raise_for_status()
            except httpx.HTTPStatusError as e:
                # include response body for debugging (servers return JSON errors)
                raise BackendError(f"HTTP {r.status_code} from {self.url}: {r.text}") from e
            try:
                return r.json()
            except ValueError as e:
                raise BackendError(f"Non-JSON body from {self.url}") from e

    async def complete(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "temperature": float(self.temperature),
            "max_tokens": int(self.max_tokens),
            "messages": [{"role": "user", "content": prompt}],
        }
        resp = await self.chat_completions(payload)
        return get_message_text(resp if isinstance(resp, dict) else {})
