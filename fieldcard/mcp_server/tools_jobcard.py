from __future__ import annotations

from typing import Any, Dict, Optional

from fieldcard.config import load_settings
from fieldcard.llm.providers.factory import make_backend
from fieldcard.orch.pipeline import generate_job_card as run_pipeline
from fieldcard.orch.qc import qc_job_card as run_qc
from fieldcard.orch.schema import JobCardResult, QCResult
from fieldcard.render import to_notes_text
from fieldcard.schemas.job_card import JobCardRequest


async def generate_job_card(
    title: Optional[str] = None,
    url: Optional[str] = None,
    text: Optional[str] = None,
) -> JobCardResult:
    """
    Turn one captured page (title, url, text) into a job card using the
    configured local model backend.

    Returns:
      {job_card} or, when the backend call failed, {job_card, warning}
    """
    backend = make_backend(load_settings())
    return await run_pipeline(JobCardRequest(title=title, url=url, text=text), backend)


def qc_job_card(job_card: Dict[str, Any]) -> QCResult:
    """
    Check a job card against the authoring rules (step and list counts,
    step length, needs_review, placeholders). Does not modify the card.
    """
    return run_qc(job_card)


def render_job_card_notes(job_card: Dict[str, Any]) -> str:
    """
    Render a job card as the plain-text block pasted into field notes.
    """
    return to_notes_text(job_card)
