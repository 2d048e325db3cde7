"""HTTP adapter exposing the quote and time-series handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI

from stockquotes.config import Settings
from stockquotes.core.classifier import GENERIC_FAILURE_MESSAGE
from stockquotes.core.normalizer import envelope_to_dict, error_envelope
from stockquotes.data.base import UpstreamClient
from stockquotes.domain.models import ProviderError, QuoteResult, TimeSeriesPoint
from stockquotes.errors import ConfigError
from stockquotes.service import get_stock_quote, get_time_series

logger = logging.getLogger("stockquotes.api")


def create_app(
    settings_factory: Callable[[], Settings] = Settings.from_env,
    client_factory: Callable[[Settings], UpstreamClient] | None = None,
) -> FastAPI:
    """Build the app. Settings are read once per request and always answer 200.

    Without a ``client_factory`` each handler builds its own Twelve Data client
    and closes it when the request ends.
    """
    app = FastAPI(title="Stock Quotes", version="0.1.0")

    def _config_error(
        exc: ConfigError, empty_payload: QuoteResult | list[TimeSeriesPoint]
    ) -> dict[str, Any]:
        logger.error("Configuration error: %s", exc)
        return envelope_to_dict(
            error_envelope(ProviderError(message=GENERIC_FAILURE_MESSAGE), empty_payload)
        )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/GetStockQuote")
    def stock_quote(symbol: str | None = None, realtime: str | None = None) -> dict[str, Any]:
        try:
            settings = settings_factory()
        except ConfigError as exc:
            return _config_error(exc, QuoteResult())
        envelope = get_stock_quote(
            symbol,
            realtime == "1",
            settings=settings,
            client=client_factory(settings) if client_factory else None,
        )
        return envelope_to_dict(envelope)

    @app.get("/api/GetTimeSeries")
    def time_series(symbol: str | None = None) -> dict[str, Any]:
        try:
            settings = settings_factory()
        except ConfigError as exc:
            return _config_error(exc, [])
        envelope = get_time_series(
            symbol,
            settings=settings,
            client=client_factory(settings) if client_factory else None,
        )
        return envelope_to_dict(envelope)

    return app


app = create_app()
