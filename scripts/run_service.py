from __future__ import annotations

import argparse

import uvicorn

from fieldcard.config import load_settings
from fieldcard.log import setup_logging
from fieldcard.service.app import create_app


def main() -> None:
    settings = load_settings()

    ap = argparse.ArgumentParser(description="Run the local job card relay service.")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    args = ap.parse_args()

    setup_logging(settings.log_level)
    print(f"Job Card service: http://{args.host}:{args.port}")
    print(f"Using {settings.backend} at: {settings.base_url} (model {settings.model})")

    uvicorn.run(create_app(settings), host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
