from __future__ import annotations

from typing import Dict, List, Literal

from typing_extensions import TypedDict

from fieldcard.schemas.job_card import JobCard


# ----------------------------
# Pipeline output
# ----------------------------

class _JobCardResultBase(TypedDict, total=True):
    job_card: JobCard


class JobCardResult(_JobCardResultBase, total=False):
    # present only when the backend call failed and the fallback was used
    warning: str


# ----------------------------
# Quality control output
# ----------------------------

class QCResult(TypedDict, total=True):
    status: Literal["pass", "fail"]
    issues: List[str]                 # human-readable reasons
    counts: Dict[str, int]            # items per list field
    long_steps: List[int]             # 1-based indexes of steps over the word limit
