"""Domain models used across the application."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExtractionResult(BaseModel):
    """Metadata extracted from a single page.

    Each field is independent of the others. ``image`` and ``icon`` are always
    absolute URLs when present.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None


# Wire name of the result returned by the ``GetContent`` operation.
Content = ExtractionResult


class ContentRequest(BaseModel):
    """Payload accepted by ``GetContent``."""

    url: str = Field(..., description="Address of the page to scrape")
