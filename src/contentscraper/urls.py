"""Validation of page URLs and resolution of asset paths against them."""

from __future__ import annotations

import re
from typing import Annotated
from urllib.parse import SplitResult, quote, urljoin, urlsplit

from pydantic import AnyUrl, BaseModel, ConfigDict, TypeAdapter, UrlConstraints, ValidationError

__all__ = ["BaseUrl", "PageUrl", "UrlError", "resolve"]

# Schemes whose URLs are meaningless without a host.
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

# Reserved characters and existing escapes survive quoting of joined URLs.
_SAFE_URL_CHARS = ":/?#[]@!$&'()*+,;=%~"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

# Like ``HttpUrl`` but without its 2083 character cap.
PageUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]

_page_url_adapter = TypeAdapter(PageUrl)
_any_url_adapter = TypeAdapter(AnyUrl)


class UrlError(ValueError):
    """Raised when a string is not a valid or resolvable URL."""


def _validation_message(exc: ValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else str(exc)


class BaseUrl(BaseModel):
    """Absolute URL of the document being scraped."""

    model_config = ConfigDict(frozen=True)

    url: PageUrl

    @classmethod
    def parse(cls, raw: str) -> "BaseUrl":
        """Validate ``raw`` as an absolute http(s) URL.

        Raises :class:`UrlError` with the parser's message when validation fails.
        """

        try:
            url = _page_url_adapter.validate_python(raw)
        except ValidationError as exc:
            raise UrlError(_validation_message(exc)) from exc

        return cls(url=url)

    def join(self, path: str) -> str:
        """Join ``path`` onto this URL using standard URL-join rules."""

        return quote(urljoin(str(self), path), safe=_SAFE_URL_CHARS)

    def __str__(self) -> str:
        return str(self.url)


def _split(candidate: str) -> SplitResult:
    if _CONTROL_CHARS.search(candidate):
        raise UrlError("invalid control character in URL")

    try:
        parts = urlsplit(candidate)
        # Accessing ``port`` validates it.
        parts.port
    except ValueError as exc:
        raise UrlError(str(exc)) from exc

    return parts


def resolve(candidate: str, base: BaseUrl) -> str:
    """Return ``candidate`` as an absolute URL.

    A candidate with its own scheme is returned unchanged, even when it points
    at another host. A candidate without a scheme is joined onto ``base``.
    Anything else that fails to parse raises :class:`UrlError`.
    """

    candidate = candidate.strip()
    parts = _split(candidate)

    if not parts.scheme:
        return base.join(candidate)

    if parts.scheme.lower() in HIERARCHICAL_SCHEMES:
        if not parts.hostname:
            raise UrlError("empty host")
        try:
            _any_url_adapter.validate_python(candidate)
        except ValidationError as exc:
            raise UrlError(_validation_message(exc)) from exc

    return candidate
