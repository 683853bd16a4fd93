"""Relay service: browser extension -> prompt -> local model -> job card."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from fieldcard.config import Settings, load_settings
from fieldcard.llm.providers.base import BaseBackend
from fieldcard.llm.providers.factory import make_backend
from fieldcard.orch.pipeline import build_fallback, generate_job_card
from fieldcard.schemas.job_card import JobCardRequest

logger = logging.getLogger(__name__)


class JobCardHTTPRequest(JobCardRequest):
    # user-supplied video link; overrides the card's placeholder when set
    youtube_link: Optional[str] = None


def create_app(settings: Optional[Settings] = None, backend: Optional[BaseBackend] = None) -> FastAPI:
    settings = settings or load_settings()

    application = FastAPI(title="fieldcard relay", version="0.1.0")
    application.state.backend = backend or make_backend(settings)
    logger.info(
        "Job card relay ready: backend=%s model=%s",
        application.state.backend.name, application.state.backend.model,
    )

    # The extension calls from a chrome-extension:// origin
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health(request: Request) -> Dict[str, Any]:
        b: BaseBackend = request.app.state.backend
        return {"ok": True, "backend": b.name, "model": b.model}

    @application.post("/jobcard")
    async def jobcard(req: JobCardHTTPRequest, request: Request) -> Dict[str, Any]:
        b: BaseBackend = request.app.state.backend
        try:
            result: Dict[str, Any] = dict(await generate_job_card(req, b))
        except Exception as e:  # noqa: BLE001
            logger.exception("Job card generation failed unexpectedly")
            result = {
                "job_card": build_fallback(req.title, req.url),
                "warning": f"Used fallback (job card generation failed): {e}",
            }

        link = (req.youtube_link or "").strip()
        if link:
            result["job_card"]["youtube_link"] = link
        return result

    return application
