from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from fieldcard.llm.json_extract import parse_json_staged
from fieldcard.schemas.job_card import (
    JOB_CARD_FIELDS,
    LIST_FIELDS,
    MAX_LENGTHS,
    STRING_FIELDS,
    JobCard,
)

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    # falsy values (None, "", 0, False, empty containers) count as missing
    return str(value) if value else ""


def _clean_list(items: List[Any]) -> List[str]:
    out = []
    for item in items:
        s = _as_text(item)
        if s:
            out.append(s)
    return out


def validate_job_card(obj: Any, fallback: Mapping[str, Any]) -> JobCard:
    """
    Merge an extracted object onto the fallback card, field by field.

    - non-dict input: the fallback is returned unchanged
    - list fields: a non-list value is replaced by the fallback's list;
      elements are stringified and empty ones dropped
    - string fields: stringified; empty falls back
    - task_name / source_title / source_url are length-capped
    - needs_review is passed through as given

    Keys outside the job card schema are dropped.
    """
    if not isinstance(obj, dict):
        return fallback  # type: ignore[return-value]

    merged: Dict[str, Any] = {**fallback, **obj}
    out: Dict[str, Any] = {k: merged[k] for k in JOB_CARD_FIELDS if k in merged}

    for k in LIST_FIELDS:
        items = out.get(k)
        if not isinstance(items, list):
            items = fallback.get(k)
            if not isinstance(items, list):
                items = []
        out[k] = _clean_list(items)

    for k in STRING_FIELDS:
        s = _as_text(out.get(k))
        if not s:
            s = _as_text(fallback.get(k))
        out[k] = s

    for k, limit in MAX_LENGTHS.items():
        out[k] = out[k][:limit]

    return out  # type: ignore[return-value]


def normalize_response(text: str, fallback: Mapping[str, Any]) -> JobCard:
    """
    Raw backend completion -> valid job card. Never raises.
    """
    parsed, stage = parse_json_staged(text)
    if stage == "none":
        logger.debug("No JSON found in backend output (%d chars); using fallback", len(text or ""))
    elif not isinstance(parsed, dict):
        logger.debug("Backend JSON is %s, not an object; using fallback", type(parsed).__name__)
    else:
        logger.debug("Parsed backend JSON via %s stage (%d keys)", stage, len(parsed))
    return validate_job_card(parsed, fallback)
