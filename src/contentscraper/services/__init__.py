"""Service layer entry points for Content Scraper."""

from __future__ import annotations

from .extractor import PageContent, extract, parse_document  # noqa: F401
from .scraper import ContentScraper, FetchFailed, InvalidUrl, ScrapeError  # noqa: F401

__all__ = [
    "ContentScraper",
    "FetchFailed",
    "InvalidUrl",
    "PageContent",
    "ScrapeError",
    "extract",
    "parse_document",
]
