from __future__ import annotations

import logging
import time
from typing import Any, Optional

from fieldcard.llm.normalizer import normalize_response
from fieldcard.llm.prompt_builder import build_prompt
from fieldcard.llm.providers.base import BackendError, BaseBackend
from fieldcard.orch.schema import JobCardResult
from fieldcard.schemas.job_card import YOUTUBE_PLACEHOLDER, JobCard, JobCardRequest

logger = logging.getLogger(__name__)

FALLBACK_WHEN_TO_USE = "Before performing this task, or when reviewing the procedure on-site."
FALLBACK_TOOLS_PPE = ["TBD"]
FALLBACK_STEPS = ["Review the procedure and confirm the work area is safe."]
FALLBACK_COMMON_MISTAKES = ["Skipping checks because the task feels routine."]
FALLBACK_SAFETY_NOTES = ["Follow site safety rules and stop if conditions differ."]
FALLBACK_ACCEPTANCE_CHECKS = ["Work completed to spec and documented."]


def build_fallback(title: Optional[Any] = None, url: Optional[Any] = None) -> JobCard:
    """
    Safety-first card derived only from the request. Built fresh per call.
    """
    return {
        "task_name": str(title) if title else "Untitled Task",
        "source_title": str(title) if title else "Unknown Source",
        "source_url": str(url) if url else "",
        "when_to_use": FALLBACK_WHEN_TO_USE,
        "tools_ppe": list(FALLBACK_TOOLS_PPE),
        "steps": list(FALLBACK_STEPS),
        "common_mistakes": list(FALLBACK_COMMON_MISTAKES),
        "safety_notes": list(FALLBACK_SAFETY_NOTES),
        "acceptance_checks": list(FALLBACK_ACCEPTANCE_CHECKS),
        "youtube_link": YOUTUBE_PLACEHOLDER,
        "needs_review": True,
    }


async def generate_job_card(request: JobCardRequest, backend: BaseBackend) -> JobCardResult:
    """
    Prompt -> one backend call -> normalize.

    Backend failure is not raised: the fallback card is returned with a
    `warning` carrying the underlying error message. No retry.
    """
    fallback = build_fallback(request.title, request.url)
    prompt = build_prompt(request.title, request.url, request.text)
    logger.debug("Built prompt (%d chars) for backend %s/%s", len(prompt), backend.name, backend.model)

    t0 = time.perf_counter()
    try:
        response_text = await backend.complete(prompt)
    except BackendError as e:
        logger.warning("Backend call failed after %.2fs, using fallback: %s", time.perf_counter() - t0, e)
        return {
            "job_card": fallback,
            "warning": f"Used fallback (local model call failed): {e}",
        }

    logger.info(
        "Backend %s answered in %.2fs (%d chars)",
        backend.name, time.perf_counter() - t0, len(response_text),
    )
    return {"job_card": normalize_response(response_text, fallback)}
