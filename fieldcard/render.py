from __future__ import annotations

from typing import Any, List, Mapping


def _items(job_card: Mapping[str, Any], key: str) -> List[str]:
    v = job_card.get(key)
    return [str(x) for x in v] if isinstance(v, list) else []


def _bullets(items: List[str]) -> str:
    return "- " + "\n- ".join(items)


def to_notes_text(job_card: Mapping[str, Any]) -> str:
    """
    Plain-text summary appended to a field-notes tab.
    """
    steps = "\n".join(f"{i}. {s}" for i, s in enumerate(_items(job_card, "steps"), start=1))
    return (
        f"JOB CARD: {job_card.get('task_name') or ''}\n"
        f"When to use: {job_card.get('when_to_use') or ''}\n"
        "\n"
        f"Tools/PPE:\n{_bullets(_items(job_card, 'tools_ppe'))}\n"
        "\n"
        f"Steps:\n{steps}\n"
        "\n"
        f"Safety:\n{_bullets(_items(job_card, 'safety_notes'))}\n"
        "\n"
        f"Mistakes:\n{_bullets(_items(job_card, 'common_mistakes'))}\n"
        "\n"
        f"Acceptance:\n{_bullets(_items(job_card, 'acceptance_checks'))}\n"
        "\n"
        f"Video: {job_card.get('youtube_link') or ''}\n"
        "\n"
        f"Source: {job_card.get('source_url') or ''}"
    )


def to_markdown(job_card: Mapping[str, Any]) -> str:
    title = job_card.get("task_name") or "Untitled Task"
    src_title = job_card.get("source_title") or "Source"
    src_url = job_card.get("source_url") or ""
    video = job_card.get("youtube_link") or ""

    lines = []
    lines.append(f"# {title}\n")
    lines.append(f"From: [{src_title}]({src_url})\n" if src_url else f"From: {src_title}\n")

    lines.append("## When to use\n")
    lines.append(f"{job_card.get('when_to_use') or 'TBD'}\n")

    sections = [
        ("Tools / PPE", "tools_ppe", False),
        ("Steps", "steps", True),
        ("Safety notes", "safety_notes", False),
        ("Common mistakes", "common_mistakes", False),
        ("Acceptance checks", "acceptance_checks", False),
    ]
    for heading, key, ordered in sections:
        lines.append(f"## {heading}\n")
        items = _items(job_card, key)
        if not items:
            lines.append("TBD")
        for i, item in enumerate(items, start=1):
            lines.append(f"{i}. {item}" if ordered else f"- {item}")
        lines.append("")

    lines.append("## Video link\n")
    lines.append(f"{video or 'TBD'}\n")
    lines.append("_Training aid • Needs review • Local-only_")
    return "\n".join(lines) + "\n"
