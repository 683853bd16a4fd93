from __future__ import annotations

import argparse
import asyncio
import json
import re
import time
from pathlib import Path
from typing import Any

from playwright.sync_api import sync_playwright

from fieldcard.config import load_settings
from fieldcard.llm.providers.factory import make_backend
from fieldcard.log import setup_logging
from fieldcard.orch.pipeline import generate_job_card
from fieldcard.orch.qc import qc_job_card
from fieldcard.render import to_markdown, to_notes_text
from fieldcard.schemas.job_card import JobCardRequest
from fieldcard.scrape.page import capture_page, to_dict
from fieldcard.text_clean.page_clean import normalize_whitespace

ARTIFACTS_DIR = Path("data/artifacts")


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


def _slug(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", s.lower()).strip("-")[:60] or "job-card"


def _capture(url: str, selector: str | None, headless: bool) -> JobCardRequest:
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        page = browser.new_page()
        cap = capture_page(page, url, selector=selector)
        browser.close()
    print(f"Captured {len(cap.text)} chars from: {cap.url}")
    return JobCardRequest(**to_dict(cap))


async def run(req: JobCardRequest, out_dir: Path) -> None:
    settings = load_settings()
    backend = make_backend(settings)

    t0 = time.time()
    result = await generate_job_card(req, backend)
    card = result["job_card"]
    qc = qc_job_card(card)

    job_dir = out_dir / _slug(card.get("task_name", ""))
    _write_json(job_dir / "request.json", req.model_dump())
    _write_json(job_dir / "job_card.json", card)
    _write_json(job_dir / "qc.json", qc)
    _write_text(job_dir / "notes.txt", to_notes_text(card))
    _write_text(job_dir / "job_card.md", to_markdown(card))

    if "warning" in result:
        print("⚠️ ", result["warning"])
    print(f"✅ {card.get('task_name')} qc={qc['status']} ({time.time() - t0:.1f}s) -> {job_dir}")


def main() -> None:
    ap = argparse.ArgumentParser(description="Generate one job card from a web page or a saved text capture.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--url", help="page to capture with Playwright")
    src.add_argument("--text-file", help="plain-text capture (e.g. a transcribed voice note)")
    ap.add_argument("--title", default=None, help="title for --text-file captures (default: file stem)")
    ap.add_argument("--source-url", default=None, help="source url recorded for --text-file captures")
    ap.add_argument("--selector", default=None, help="CSS selector to capture instead of the whole body")
    ap.add_argument("--headed", action="store_true")
    ap.add_argument("--out-dir", default=str(ARTIFACTS_DIR))
    args = ap.parse_args()

    setup_logging(load_settings().log_level)

    if args.url:
        req = _capture(args.url, args.selector, headless=not args.headed)
    else:
        path = Path(args.text_file)
        text = normalize_whitespace(path.read_text(encoding="utf-8", errors="ignore"))
        req = JobCardRequest(title=args.title or path.stem, url=args.source_url, text=text)

    asyncio.run(run(req, Path(args.out_dir)))


if __name__ == "__main__":
    main()
