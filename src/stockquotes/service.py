"""Request handlers for single quotes and intraday time series.

These are the typed entry points the HTTP and CLI adapters call. Every
failure, including unexpected exceptions, comes back as an error envelope.
"""

from __future__ import annotations

import threading
from datetime import date

from stockquotes.config import Settings
from stockquotes.core.classifier import GENERIC_FAILURE_MESSAGE, fetch_and_classify
from stockquotes.core.fallback import DateFallbackDriver
from stockquotes.core.normalizer import error_envelope, normalize_quote, normalize_time_series
from stockquotes.data.base import UpstreamClient
from stockquotes.data.twelvedata import TwelveDataClient
from stockquotes.domain.models import EndpointKind, ProviderError, QuoteResult, ResultEnvelope
from stockquotes.logging.logger import RequestLogger

MISSING_SYMBOL_MESSAGE = "Please provide a value for 'symbol' parameter."


def build_client(settings: Settings) -> TwelveDataClient:
    return TwelveDataClient(
        api_key=settings.twelvedata_api_key,
        base_url=settings.twelvedata_base_url,
        timeout=settings.request_timeout_seconds,
    )


def _has_symbol(symbol: str | None) -> bool:
    return symbol is not None and bool(symbol.strip())


def get_stock_quote(
    symbol: str | None,
    realtime: bool = False,
    *,
    settings: Settings | None = None,
    client: UpstreamClient | None = None,
) -> ResultEnvelope:
    """Fetch one quote, or only the latest price when ``realtime`` is set."""
    log = RequestLogger("GetStockQuote")
    log.request_received(symbol)
    if not _has_symbol(symbol):
        log.unexpected_error(
            MISSING_SYMBOL_MESSAGE, "Request did not contain symbol to use for quote."
        )
        return error_envelope(ProviderError(message=MISSING_SYMBOL_MESSAGE), QuoteResult())

    kind = EndpointKind.REALTIME_PRICE if realtime else EndpointKind.QUOTE
    owned = None if client is not None else build_client(settings or Settings())
    upstream = client or owned
    try:
        outcome = fetch_and_classify(upstream, kind, symbol.strip())
        envelope = normalize_quote(kind, outcome)
    except Exception as exc:
        log.unexpected_error(
            GENERIC_FAILURE_MESSAGE,
            f"Exception caught trying to get or parse JSON data. Exception is:\n{exc!r}",
        )
        return error_envelope(ProviderError(message=GENERIC_FAILURE_MESSAGE), QuoteResult())
    finally:
        if owned is not None:
            owned.close()

    if outcome.kind == "provider_error":
        log.provider_error(outcome.error)
    elif outcome.kind == "unrecognized":
        log.unexpected_error(outcome.message, outcome.detail)
    return envelope


def get_time_series(
    symbol: str | None,
    *,
    settings: Settings | None = None,
    client: UpstreamClient | None = None,
    today: date | None = None,
    cancel_event: threading.Event | None = None,
) -> ResultEnvelope:
    """Fetch 5-minute closes for the most recent day the market was open."""
    log = RequestLogger("GetTimeSeries")
    log.request_received(symbol)
    if not _has_symbol(symbol):
        log.unexpected_error(
            MISSING_SYMBOL_MESSAGE, "Request did not contain symbol to use for quote."
        )
        return error_envelope(ProviderError(message=MISSING_SYMBOL_MESSAGE), [])

    owned = None if client is not None else build_client(settings or Settings())
    upstream = client or owned
    driver = DateFallbackDriver(
        upstream,
        symbol.strip(),
        start_date=today,
        cancel_event=cancel_event,
    )
    try:
        state = driver.run()
        envelope = normalize_time_series(state)
    except Exception as exc:
        log.unexpected_error(
            GENERIC_FAILURE_MESSAGE,
            f"Exception caught trying to get or parse JSON data. Exception is:\n{exc!r}",
        )
        return error_envelope(ProviderError(message=GENERIC_FAILURE_MESSAGE), [])
    finally:
        if owned is not None:
            owned.close()

    if state.kind == "exhausted":
        log.market_closed(driver.symbol, state.attempts)
    elif state.kind == "failed":
        if state.error.status:
            log.provider_error(state.error)
        else:
            log.unexpected_error(state.error.message, state.detail)
    return envelope
