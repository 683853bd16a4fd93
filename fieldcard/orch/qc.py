from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from fieldcard.orch.schema import QCResult
from fieldcard.schemas.job_card import LIST_FIELDS, YOUTUBE_PLACEHOLDER

# Authoring ranges requested in the prompt (inclusive)
ITEM_RANGES: Dict[str, Tuple[int, int]] = {
    "steps": (6, 10),
    "safety_notes": (3, 6),
    "common_mistakes": (3, 6),
    "acceptance_checks": (3, 6),
}

MAX_STEP_WORDS = 14


def _is_tbd(item: Any) -> bool:
    return str(item).strip().upper().startswith("TBD")


def qc_job_card(job_card: Mapping[str, Any]) -> QCResult:
    """
    Check a normalized card against the authoring rules. Read-only:
    the card is not modified and nothing here is enforced.
    """
    issues: List[str] = []
    counts: Dict[str, int] = {}

    for k in LIST_FIELDS:
        v = job_card.get(k)
        counts[k] = len(v) if isinstance(v, list) else 0

    for k, (lo, hi) in ITEM_RANGES.items():
        n = counts[k]
        if not lo <= n <= hi:
            issues.append(f"{k}_count:{n} (expected {lo}-{hi})")

    long_steps: List[int] = []
    steps = job_card.get("steps")
    for i, step in enumerate(steps if isinstance(steps, list) else [], start=1):
        if len(str(step).split()) > MAX_STEP_WORDS:
            long_steps.append(i)
    if long_steps:
        issues.append(f"steps_too_long:{long_steps}")

    if job_card.get("needs_review") is not True:
        issues.append("needs_review_not_true")

    if job_card.get("youtube_link") == YOUTUBE_PLACEHOLDER:
        issues.append("youtube_link_placeholder")

    tools = job_card.get("tools_ppe")
    if isinstance(tools, list) and tools and all(_is_tbd(t) for t in tools):
        issues.append("tools_ppe_tbd")

    return {
        "status": "pass" if not issues else "fail",
        "issues": issues,
        "counts": counts,
        "long_steps": long_steps,
    }
