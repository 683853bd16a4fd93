from __future__ import annotations

from fieldcard.orch.pipeline import build_fallback
from fieldcard.orch.qc import qc_job_card


def _good_card() -> dict:
    return {
        "task_name": "Reset Breaker",
        "source_title": "Guide",
        "source_url": "https://x",
        "when_to_use": "After a trip.",
        "tools_ppe": ["Insulated gloves"],
        "steps": ["Identify breaker", "Check circuit", "Switch off", "Switch on", "Confirm power", "Log reset"],
        "common_mistakes": ["a", "b", "c"],
        "safety_notes": ["a", "b", "c"],
        "acceptance_checks": ["a", "b", "c"],
        "youtube_link": "https://youtu.be/real",
        "needs_review": True,
    }


def test_conforming_card_passes():
    qc = qc_job_card(_good_card())
    assert qc["status"] == "pass"
    assert qc["issues"] == []
    assert qc["counts"]["steps"] == 6


def test_fallback_card_reports_every_gap():
    qc = qc_job_card(build_fallback("t", "u"))
    assert qc["status"] == "fail"
    assert "steps_count:1 (expected 6-10)" in qc["issues"]
    assert "safety_notes_count:1 (expected 3-6)" in qc["issues"]
    assert "youtube_link_placeholder" in qc["issues"]
    assert "tools_ppe_tbd" in qc["issues"]


def test_long_steps_and_needs_review():
    card = _good_card()
    card["steps"][2] = " ".join(["word"] * 15)
    card["needs_review"] = False
    qc = qc_job_card(card)
    assert qc["long_steps"] == [3]
    assert "steps_too_long:[3]" in qc["issues"]
    assert "needs_review_not_true" in qc["issues"]


def test_qc_does_not_modify_card():
    card = _good_card()
    card["steps"] = card["steps"] * 2
    before = dict(card)
    qc_job_card(card)
    assert card == before
