"""Tests for the HTTP surface in :mod:`contentscraper.api`."""

from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from contentscraper.api.app import create_app
from contentscraper.config import ServiceConfig
from contentscraper.models import ExtractionResult
from contentscraper.services.scraper import ContentScraper, FetchError, FetchFailed, InvalidUrl
from contentscraper.urls import UrlError


class StubScraper:
    def __init__(self, result: ExtractionResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.urls: list[str] = []

    def scrape(self, url: str) -> ExtractionResult:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.result


def _client(scraper: StubScraper) -> TestClient:
    return TestClient(create_app(ServiceConfig(), scraper=scraper))


def test_get_content_returns_extracted_fields() -> None:
    """The POST endpoint returns the scraped fields."""

    scraper = StubScraper(
        ExtractionResult(
            title="Three new Star Wars movies are on the way",
            icon="https://www.theverge.com/icons/favicon.ico",
        )
    )

    response = _client(scraper).post("/api/content", json={"url": "https://www.theverge.com/"})

    assert response.status_code == 200
    assert response.json() == {
        "title": "Three new Star Wars movies are on the way",
        "image": None,
        "icon": "https://www.theverge.com/icons/favicon.ico",
    }
    assert scraper.urls == ["https://www.theverge.com/"]


def test_get_content_accepts_query_string() -> None:
    """The GET endpoint takes the URL from the query string."""

    scraper = StubScraper(ExtractionResult(title="Hello"))

    response = _client(scraper).get("/api/content", params={"url": "https://example.com/a?b=c"})

    assert response.status_code == 200
    assert response.json()["title"] == "Hello"
    assert scraper.urls == ["https://example.com/a?b=c"]


def test_fetch_failure_maps_to_not_found() -> None:
    """Fetch failures are reported as 404 with the cause."""

    scraper = StubScraper(error=FetchFailed(FetchError("Connection refused")))

    response = _client(scraper).post("/api/content", json={"url": "https://unreachable.example"})

    assert response.status_code == 404
    assert response.json()["detail"] == "HTML could not be retrieved from provided url. Connection refused"


def test_invalid_url_maps_to_bad_request() -> None:
    """Invalid URLs are reported as 400 with the parser message."""

    scraper = StubScraper(error=InvalidUrl(UrlError("relative URL without a base")))

    response = _client(scraper).post("/api/content", json={"url": "nope"})

    assert response.status_code == 400
    assert response.json()["detail"] == "relative URL without a base"


def test_invalid_url_end_to_end_never_fetches() -> None:
    """The real scraper rejects bad URLs without fetching."""

    app = create_app(ServiceConfig())
    client = TestClient(app)

    with patch("contentscraper.services.scraper.requests.get") as mock_get:
        response = client.get("/api/content", params={"url": "definitely not a url"})

    assert response.status_code == 400
    assert "relative URL without a base" in response.json()["detail"]
    mock_get.assert_not_called()


def test_missing_url_is_a_validation_error() -> None:
    """A request without a URL fails validation."""

    response = _client(StubScraper()).post("/api/content", json={})

    assert response.status_code == 422


def test_app_uses_a_single_shared_scraper() -> None:
    """The app creates one scraper for all requests."""

    app = create_app(ServiceConfig())

    assert isinstance(app.state.scraper, ContentScraper)


def test_healthcheck_reports_app_name() -> None:
    """The health check reports the configured app name."""

    client = TestClient(create_app(ServiceConfig(app_name="Scraper Test")))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "Scraper Test"}
