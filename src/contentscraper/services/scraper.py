"""Fetch a page and extract its metadata."""

from __future__ import annotations

import logging
from typing import Mapping

import requests

from contentscraper.config import ServiceConfig
from contentscraper.models import ExtractionResult
from contentscraper.services.extractor import PageContent, parse_document
from contentscraper.urls import BaseUrl, UrlError

__all__ = ["ContentScraper", "FetchError", "FetchFailed", "InvalidUrl", "ScrapeError", "fetch_html"]

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the HTML of a page could not be retrieved."""


class ScrapeError(Exception):
    """Base class for failures that stop a scrape."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


class InvalidUrl(ScrapeError):
    """The requested URL is not a valid absolute URL."""


class FetchFailed(ScrapeError):
    """The requested page could not be fetched."""


def fetch_html(
    url: str,
    *,
    timeout: tuple[float, float],
    headers: Mapping[str, str] | None = None,
    session: requests.Session | None = None,
) -> str:
    """Return the body of ``url`` as text.

    Network failures and non-success statuses are raised as :class:`FetchError`.
    """

    get = session.get if session is not None else requests.get
    try:
        response = get(url, headers=dict(headers or {}), timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc

    return response.text


class ContentScraper:
    """Scrape title, preview image and favicon from remote pages.

    Holds configuration only, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config or ServiceConfig()
        self._session = session

    def fetch_html(self, url: str) -> str:
        return fetch_html(
            url,
            timeout=self._config.timeout,
            headers=self._config.headers,
            session=self._session,
        )

    def scrape(self, url: str) -> ExtractionResult:
        """Fetch ``url`` and extract its metadata.

        Raises :class:`InvalidUrl` before any network access when ``url`` does
        not validate, and :class:`FetchFailed` when the page cannot be fetched.
        """

        try:
            base = BaseUrl.parse(url)
        except UrlError as exc:
            raise InvalidUrl(exc) from exc

        logger.info("Scraping %s", base)
        try:
            html = self.fetch_html(url)
        except FetchError as exc:
            logger.warning("Failed to fetch %s: %s", url, exc)
            raise FetchFailed(exc) from exc

        return PageContent(base, parse_document(html)).extract()
