"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI

from contentscraper.api.routes import router
from contentscraper.config import ServiceConfig
from contentscraper.services.scraper import ContentScraper


def create_app(
    config: ServiceConfig | None = None,
    scraper: ContentScraper | None = None,
) -> FastAPI:
    config = config or ServiceConfig.from_env()

    app = FastAPI(title=config.app_name, description="Page metadata scraping API")
    # Created once and shared by every request; it holds no mutable state.
    app.state.scraper = scraper or ContentScraper(config)
    app.include_router(router, prefix="/api")

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": config.app_name}

    return app


app = create_app()
