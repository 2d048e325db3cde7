"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from stockquotes.data.twelvedata import DEFAULT_BASE_URL
from stockquotes.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    """Immutable settings, built once per request and passed into the core."""

    twelvedata_api_key: str = ""
    twelvedata_base_url: str = DEFAULT_BASE_URL
    request_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    log_file: str | None = None
    host: str = "127.0.0.1"
    port: int = 7071

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        try:
            settings = cls(
                twelvedata_api_key=str(os.getenv("TWELVEDATA_API_KEY", "")).strip(),
                twelvedata_base_url=str(
                    os.getenv("TWELVEDATA_BASE_URL", DEFAULT_BASE_URL)
                ).strip(),
                request_timeout_seconds=float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10")),
                log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
                log_file=str(os.getenv("LOG_FILE", "")).strip() or None,
                host=str(os.getenv("HOST", "127.0.0.1")).strip(),
                port=int(os.getenv("PORT", "7071")),
            )
        except ValueError as exc:
            raise ConfigError(
                "One or more numeric environment variables are invalid. "
                "Check REQUEST_TIMEOUT_SECONDS and PORT in your .env file."
            ) from exc
        return settings.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def validate(self) -> Self:
        """Validate settings fields."""
        if self.request_timeout_seconds <= 0:
            raise ConfigError("REQUEST_TIMEOUT_SECONDS must be a positive number.")
        if not 0 < self.port < 65536:
            raise ConfigError("PORT must be between 1 and 65535.")
        if not self.twelvedata_base_url.startswith(("http://", "https://")):
            raise ConfigError("TWELVEDATA_BASE_URL must be an http(s) URL.")
        return self
