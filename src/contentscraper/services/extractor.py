"""Selection of page metadata from parsed HTML documents.

Every :class:`MetadataKind` maps to one fixed :class:`LookupRule` in
:data:`LOOKUP_RULES`. Lookups take the first element in document order and
never raise: a missing element, a missing attribute or an unresolvable asset
path leaves the corresponding field empty.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, ConfigDict

from contentscraper.models import ExtractionResult
from contentscraper.urls import BaseUrl, UrlError, resolve

__all__ = [
    "LOOKUP_RULES",
    "LookupRule",
    "MetadataKind",
    "PageContent",
    "ParsedDocument",
    "extract",
    "extract_kind",
    "parse_document",
]

logger = logging.getLogger(__name__)


class MetadataKind(str, Enum):
    """Metadata values that can be extracted from a page."""

    TITLE = "title"
    IMAGE = "image"
    ICON = "icon"


class LookupRule(BaseModel):
    """Where a metadata value lives in a document."""

    model_config = ConfigDict(frozen=True)

    selector: str
    attribute: str
    absolutize: bool = False


LOOKUP_RULES: Dict[MetadataKind, LookupRule] = {
    MetadataKind.TITLE: LookupRule(selector='meta[property="og:title"]', attribute="content"),
    MetadataKind.IMAGE: LookupRule(
        selector='meta[property="og:image"]', attribute="content", absolutize=True
    ),
    MetadataKind.ICON: LookupRule(selector='link[rel="shortcut icon"]', attribute="href", absolutize=True),
}


class ParsedDocument:
    """Read-only view of a parsed HTML document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    def select_first(self, selector: str) -> Optional[Tag]:
        """Return the first element matching the CSS ``selector`` in document order."""

        return self._soup.select_one(selector)


def parse_document(html: str) -> ParsedDocument:
    """Parse ``html`` leniently; malformed markup is recovered, never rejected."""

    # Keep ``rel`` and friends as plain strings so ``rel="shortcut icon"`` matches exactly.
    soup = BeautifulSoup(html, "lxml", multi_valued_attributes=None)
    return ParsedDocument(soup)


def extract_kind(document: ParsedDocument, base: BaseUrl, kind: MetadataKind) -> Optional[str]:
    """Run the lookup rule for ``kind`` against ``document``."""

    rule = LOOKUP_RULES[kind]
    element = document.select_first(rule.selector)
    if element is None:
        return None

    value = element.get(rule.attribute)
    if value is None:
        return None

    if not rule.absolutize:
        return value

    try:
        return resolve(value, base)
    except UrlError as exc:
        logger.debug("Ignoring unresolvable %s %r on %s: %s", kind.value, value, base, exc)
        return None


def extract(document: ParsedDocument, base: BaseUrl) -> ExtractionResult:
    """Extract every :class:`MetadataKind` from ``document``."""

    return ExtractionResult(**{kind.value: extract_kind(document, base, kind) for kind in MetadataKind})


class PageContent:
    """A page URL paired with its parsed document."""

    def __init__(self, base: BaseUrl, document: ParsedDocument) -> None:
        self.base = base
        self.document = document

    @classmethod
    def from_html(cls, url: str, html: str) -> "PageContent":
        """Validate ``url`` and parse ``html``. Raises :class:`UrlError` for a bad URL."""

        return cls(BaseUrl.parse(url), parse_document(html))

    def title(self) -> Optional[str]:
        return extract_kind(self.document, self.base, MetadataKind.TITLE)

    def image(self) -> Optional[str]:
        return extract_kind(self.document, self.base, MetadataKind.IMAGE)

    def icon(self) -> Optional[str]:
        return extract_kind(self.document, self.base, MetadataKind.ICON)

    def extract(self) -> ExtractionResult:
        return extract(self.document, self.base)
