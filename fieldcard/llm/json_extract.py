from __future__ import annotations

import json
from typing import Any, Literal, Optional, Tuple

ExtractStage = Literal["direct", "braces", "none"]


def outer_braces(text: str) -> Optional[str]:
    """
    Substring from the first '{' to the last '}' (inclusive), or None when
    there is no such span.
    """
    t = text or ""
    start = t.find("{")
    end = t.rfind("}")
    if start >= 0 and end > start:
        return t[start : end + 1]
    return None


def parse_json_staged(text: str) -> Tuple[Optional[Any], ExtractStage]:
    """
    Returns: (value_or_none, stage)
    - stage "direct": the whole text parsed as JSON (any JSON value)
    - stage "braces": the outermost {...} span parsed as JSON
    - stage "none": nothing parsed; value is None
    """
    raw = text or ""

    # First try as-is
    try:
        return json.loads(raw), "direct"
    except (ValueError, RecursionError):
        pass

    # JSON embedded in prose or fences
    candidate = outer_braces(raw)
    if candidate is not None:
        try:
            return json.loads(candidate), "braces"
        except (ValueError, RecursionError):
            pass

    return None, "none"


def extract_json(text: str) -> Optional[Any]:
    value, _ = parse_json_staged(text)
    return value
