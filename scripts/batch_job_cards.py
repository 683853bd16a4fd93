from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

import tqdm

from fieldcard.config import load_settings
from fieldcard.llm.providers.factory import make_backend
from fieldcard.log import setup_logging
from fieldcard.orch.pipeline import generate_job_card
from fieldcard.schemas.job_card import JobCardRequest
from fieldcard.text_clean.page_clean import normalize_whitespace


async def run(in_dir: Path, out_dir: Path) -> None:
    backend = make_backend(load_settings())
    out_dir.mkdir(parents=True, exist_ok=True)

    processed = set(p.stem for p in out_dir.glob("*.json"))
    paths = [p for p in sorted(in_dir.glob("*.txt")) if p.stem not in processed]

    warned = 0
    for path in tqdm.tqdm(paths, desc="Generating job cards"):
        text = normalize_whitespace(path.read_text(encoding="utf-8", errors="ignore"))
        result = await generate_job_card(JobCardRequest(title=path.stem, text=text), backend)

        if "warning" in result:
            warned += 1
            tqdm.tqdm.write(f"⚠️  {path.name}: {result['warning']}")
            # keep fallback cards out of the done set so a rerun retries them
            continue

        save_path = out_dir / f"{path.stem}.json"
        save_path.write_text(json.dumps(result["job_card"], indent=2, ensure_ascii=False), encoding="utf-8")
        tqdm.tqdm.write(f"Saved {save_path}")

    print(f"Done. {len(paths) - warned}/{len(paths)} generated, {len(processed)} skipped.")


def main() -> None:
    ap = argparse.ArgumentParser(description="Generate job cards for every *.txt capture in a folder.")
    ap.add_argument("--in-dir", required=True)
    ap.add_argument("--out-dir", default="data/processed/job_cards")
    args = ap.parse_args()

    setup_logging(load_settings().log_level)
    asyncio.run(run(Path(args.in_dir), Path(args.out_dir)))


if __name__ == "__main__":
    main()
