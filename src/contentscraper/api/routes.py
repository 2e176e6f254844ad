"""API routes exposing the ``GetContent`` operation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool

from contentscraper.models import Content, ContentRequest
from contentscraper.services.scraper import ContentScraper, FetchFailed, ScrapeError

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_FAILED_MESSAGE = "HTML could not be retrieved from provided url."


def _scraper(request: Request) -> ContentScraper:
    return request.app.state.scraper


async def get_content(scraper: ContentScraper, url: str) -> Content:
    """Scrape ``url`` and translate scrape failures into HTTP errors."""

    try:
        return await run_in_threadpool(scraper.scrape, url)
    except FetchFailed as exc:
        raise HTTPException(status_code=404, detail=f"{FETCH_FAILED_MESSAGE} {exc.cause}") from exc
    except ScrapeError as exc:
        logger.info("Rejected url %r: %s", url, exc.cause)
        raise HTTPException(status_code=400, detail=str(exc.cause)) from exc


@router.post("/content", response_model=Content)
async def get_content_for_payload(payload: ContentRequest, request: Request) -> Content:
    """Return the title, preview image and favicon of the requested page."""

    return await get_content(_scraper(request), payload.url)


@router.get("/content", response_model=Content)
async def get_content_for_query(
    request: Request,
    url: str = Query(..., description="Address of the page to scrape"),
) -> Content:
    """Query-string variant of ``POST /content``."""

    return await get_content(_scraper(request), url)
