"""Configuration model and helpers for the Content Scraper service."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Mapping

from pydantic import BaseModel, Field, ValidationError

__all__ = ["ServiceConfig", "DEFAULT_CONFIG_PATH", "DEFAULT_HEADERS", "ENV_PREFIX"]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "service.json"

ENV_PREFIX = "CONTENT_SCRAPER_"

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


class ServiceConfig(BaseModel):
    """Settings for binding the API and fetching remote pages."""

    app_name: str = Field(default="Content Scraper", description="Name reported by the API")
    host: str = Field(default="0.0.0.0", description="Address the API server binds to")
    port: int = Field(default=50051, ge=0, le=65535, description="Port the API server binds to")
    connect_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for the remote server to accept a connection",
    )
    read_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait between bytes of the remote response",
    )
    headers: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_HEADERS),
        description="Headers sent with every page fetch",
    )

    @property
    def timeout(self) -> tuple[float, float]:
        """Return the ``(connect, read)`` timeout pair understood by ``requests``."""

        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "ServiceConfig":
        """Load configuration data from a JSON file.

        When no explicit ``path`` is given and the default file does not exist,
        the built-in defaults are returned.
        """

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            if path is None:
                return cls()
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Load the configuration file and apply ``CONTENT_SCRAPER_*`` overrides."""

        env = os.environ if environ is None else environ
        config = cls.from_file(env.get(f"{ENV_PREFIX}CONFIG") or None)

        overrides = {}
        for field in ("host", "port", "connect_timeout", "read_timeout"):
            value = env.get(f"{ENV_PREFIX}{field.upper()}")
            if value is not None and value.strip():
                overrides[field] = value.strip()

        if not overrides:
            return config

        try:
            return cls.model_validate({**config.model_dump(), **overrides})
        except ValidationError as exc:
            raise ValueError(f"Invalid {ENV_PREFIX}* environment override\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
