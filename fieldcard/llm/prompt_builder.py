from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional

from fieldcard.schemas.job_card import YOUTUBE_PLACEHOLDER

PROMPTS_DIR = Path(__file__).parent / "prompts"

PROMPTS = {
    "job_card_v1": PROMPTS_DIR / "job_card_v1.txt",
}

DEFAULT_PROMPT = "job_card_v1"

# Hard character cutoffs for the source fields embedded in the prompt
TITLE_LIMIT = 200
URL_LIMIT = 500
TEXT_LIMIT = 8000

_PLACEHOLDER_RE = re.compile(r"\{\{(TITLE|URL|TEXT|YOUTUBE_PLACEHOLDER)\}\}")


def safe_slice(value: Any, limit: int) -> str:
    """
    None -> "", anything else -> str, trimmed, then cut at `limit` characters.
    The cut is not word-aware and may land mid-word.
    """
    return str(value or "").strip()[:limit]


def _load_template(prompt_name: str) -> str:
    template = PROMPTS[prompt_name].read_text(encoding="utf-8")
    for key in ("{{TITLE}}", "{{URL}}", "{{TEXT}}"):
        assert key in template, f"Prompt template {prompt_name} missing {key}"
    return template


def build_prompt(
    title: Optional[Any] = None,
    url: Optional[Any] = None,
    text: Optional[Any] = None,
    prompt_name: str = DEFAULT_PROMPT,
) -> str:
    """
    Build the single instruction string sent to the backend for one page capture.

    Substitution is a single pass, so placeholder-like text inside the page
    capture is never expanded a second time.
    """
    values: Dict[str, str] = {
        "TITLE": safe_slice(title, TITLE_LIMIT),
        "URL": safe_slice(url, URL_LIMIT),
        "TEXT": safe_slice(text, TEXT_LIMIT),
        "YOUTUBE_PLACEHOLDER": YOUTUBE_PLACEHOLDER,
    }
    template = _load_template(prompt_name)
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)
