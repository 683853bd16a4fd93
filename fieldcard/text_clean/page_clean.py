import re
from typing import Optional


MIN_SELECTION_CHARS = 80
MAX_BODY_CHARS = 12000


def normalize_whitespace(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def select_page_text(
    selection: Optional[str],
    body: Optional[str],
    min_selection: int = MIN_SELECTION_CHARS,
    max_chars: int = MAX_BODY_CHARS,
) -> str:
    """
    A highlighted selection longer than `min_selection` characters is what the
    user meant to capture; otherwise take the page body, cut at `max_chars`.
    """
    sel = (selection or "").strip()
    if len(sel) > min_selection:
        return sel
    return (body or "")[:max_chars]
