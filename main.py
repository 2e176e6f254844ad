"""ASGI entrypoint for running the Content Scraper API with Uvicorn."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import uvicorn

# Ensure the src directory is on the Python path so the contentscraper package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from contentscraper.api.app import app  # noqa: E402  (import after path setup)
from contentscraper.config import ServiceConfig  # noqa: E402

__all__ = ("app",)


def main() -> None:
    """Serve the API on the configured address."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = ServiceConfig.from_env()
    logging.info("Starting server on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
