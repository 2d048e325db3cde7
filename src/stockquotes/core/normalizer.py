"""Map classified provider responses onto the uniform result envelope."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pandas as pd

from stockquotes.core.fallback import TerminalState
from stockquotes.data.schemas import QuotePayload, RealtimePricePayload, TimeSeriesPayload
from stockquotes.domain.models import (
    EndpointKind,
    Outcome,
    ProviderError,
    QuoteResult,
    ResultEnvelope,
    TimeSeriesPoint,
)
from stockquotes.errors import NormalizationError

MARKET_CLOSED_MESSAGE = "Unable to find a day that market was open."


def parse_price(value: str | None, field_name: str) -> float:
    """Parse a provider price string, raising ``NormalizationError`` on junk."""
    if value is None:
        raise NormalizationError(f"Provider response has no {field_name} value.")
    try:
        return float(value)
    except ValueError as exc:
        raise NormalizationError(f"Provider {field_name} {value!r} is not a number.") from exc


def localize_epoch(seconds: int | None) -> datetime:
    """Convert provider epoch seconds (UTC) to naive local time."""
    if seconds is None:
        return datetime.min
    return datetime.fromtimestamp(seconds)


def quote_from_payload(payload: QuotePayload) -> QuoteResult:
    return QuoteResult(
        symbol=payload.symbol or "",
        name=payload.name or "",
        price=parse_price(payload.close, "close"),
        timestamp=localize_epoch(payload.timestamp),
    )


def realtime_from_payload(payload: RealtimePricePayload) -> QuoteResult:
    return QuoteResult(price=parse_price(payload.price, "price"))


def points_from_payload(payload: TimeSeriesPayload) -> list[TimeSeriesPoint]:
    """Build chart points in provider order (ascending, as requested)."""
    frame = pd.DataFrame(
        [{"label": value.datetime or "", "close": value.close} for value in payload.values],
        columns=["label", "close"],
    )
    if frame.empty:
        return []
    closes = pd.to_numeric(frame["close"], errors="coerce")
    invalid = closes.isna()
    if invalid.any():
        bad_value = frame.loc[invalid, "close"].iloc[0]
        raise NormalizationError(f"Provider close {bad_value!r} is not a number.")
    return [
        TimeSeriesPoint(label=str(label), value=float(close))
        for label, close in zip(frame["label"], closes, strict=True)
    ]


def error_envelope(
    error: ProviderError,
    empty_payload: QuoteResult | list[TimeSeriesPoint],
) -> ResultEnvelope:
    return ResultEnvelope.failure(error, empty_payload)


def normalize_quote(kind: EndpointKind, outcome: Outcome) -> ResultEnvelope:
    """Envelope for a quote or real-time price outcome."""
    if outcome.kind == "success":
        if kind == EndpointKind.REALTIME_PRICE:
            return ResultEnvelope.success(realtime_from_payload(outcome.value))
        return ResultEnvelope.success(quote_from_payload(outcome.value))
    if outcome.kind == "provider_error":
        return error_envelope(outcome.error, QuoteResult())
    return error_envelope(ProviderError(message=outcome.message), QuoteResult())


def normalize_time_series(state: TerminalState) -> ResultEnvelope:
    """Envelope for a terminal date-fallback state."""
    if state.kind == "found":
        return ResultEnvelope.success(points_from_payload(state.payload))
    if state.kind == "exhausted":
        return error_envelope(ProviderError(message=MARKET_CLOSED_MESSAGE), [])
    if state.kind == "failed":
        return error_envelope(state.error, [])
    raise TypeError(f"Not a terminal time series state: {state!r}")


def envelope_to_dict(envelope: ResultEnvelope) -> dict[str, Any]:
    """Serializable form of the envelope sent back to callers."""
    if isinstance(envelope.payload, QuoteResult):
        payload: dict[str, Any] | list[dict[str, Any]] = {
            "symbol": envelope.payload.symbol,
            "name": envelope.payload.name,
            "price": envelope.payload.price,
            "timestamp": envelope.payload.timestamp.isoformat(),
        }
    else:
        payload = [{"label": point.label, "value": point.value} for point in envelope.payload]
    return {
        "payload": payload,
        "error": {
            "code": envelope.error.code,
            "message": envelope.error.message,
            "status": envelope.error.status,
        },
        "isError": envelope.is_error,
    }
