from __future__ import annotations

from pathlib import Path

import pytest

ASSETS = Path(__file__).resolve().parent / "assets"


@pytest.fixture
def verge_html() -> str:
    return (ASSETS / "verge-article.html").read_text(encoding="utf-8")
