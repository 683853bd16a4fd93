from __future__ import annotations

from typing import List, Optional

from typing_extensions import TypedDict

from pydantic import BaseModel


class JobCardRequest(BaseModel):
    """
    One page capture sent by the browser extension.
    Every field may be missing; the prompt builder treats absent as "".
    """

    title: Optional[str] = None
    url: Optional[str] = None
    text: Optional[str] = None


class JobCard(TypedDict, total=False):
    task_name: str
    source_title: str
    source_url: str
    when_to_use: str
    tools_ppe: List[str]
    steps: List[str]
    common_mistakes: List[str]
    safety_notes: List[str]
    acceptance_checks: List[str]
    youtube_link: str
    needs_review: bool


# Canonical key order of a job card
JOB_CARD_FIELDS = [
    "task_name",
    "source_title",
    "source_url",
    "when_to_use",
    "tools_ppe",
    "steps",
    "common_mistakes",
    "safety_notes",
    "acceptance_checks",
    "youtube_link",
    "needs_review",
]

LIST_FIELDS = ["tools_ppe", "steps", "common_mistakes", "safety_notes", "acceptance_checks"]

STRING_FIELDS = ["task_name", "source_title", "source_url", "when_to_use", "youtube_link"]

# Output length caps applied after merge
MAX_LENGTHS = {
    "task_name": 120,
    "source_title": 200,
    "source_url": 600,
}

YOUTUBE_PLACEHOLDER = "https://www.youtube.com/watch?v=VIDEO_ID_TBD"
