"""Convenience script for scraping page metadata locally."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the contentscraper package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from contentscraper.config import ServiceConfig  # noqa: E402  (import after path setup)
from contentscraper.services.scraper import ContentScraper, ScrapeError  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Scrape every URL given on the command line and print the results as JSON."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("urls", nargs="+", metavar="URL", help="page to scrape")
    parser.add_argument("--config", help="path to a JSON service configuration file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config = ServiceConfig.from_file(args.config) if args.config else ServiceConfig.from_env()
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Could not load service configuration: %s", exc)
        return 1

    scraper = ContentScraper(config)

    results = []
    failed = False
    for url in args.urls:
        try:
            content = scraper.scrape(url)
        except ScrapeError as exc:
            logging.error("Failed to scrape %s: %s", url, exc)
            results.append({"url": url, "error": str(exc)})
            failed = True
            continue
        results.append({"url": url, **content.model_dump()})

    print(json.dumps(results, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
