"""Twelve Data response bodies, parsed leniently.

``from_body`` never raises: a missing or mistyped field becomes ``None`` so
the classifier can treat absence as a signal rather than a parse fault.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = _as_text(value)
    if text is None:
        return None
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None


@dataclass(frozen=True)
class QuotePayload:
    """Subset of the ``/quote`` body used for normalization."""

    symbol: str | None = None
    name: str | None = None
    close: str | None = None
    timestamp: int | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> QuotePayload:
        return cls(
            symbol=_as_text(body.get("symbol")),
            name=_as_text(body.get("name")),
            close=_as_text(body.get("close")),
            timestamp=_as_int(body.get("timestamp")),
        )

    def has_success_fields(self) -> bool:
        return bool(self.symbol)


@dataclass(frozen=True)
class RealtimePricePayload:
    """The ``/price`` body: a single price string."""

    price: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> RealtimePricePayload:
        return cls(price=_as_text(body.get("price")))

    def has_success_fields(self) -> bool:
        return bool(self.price)


@dataclass(frozen=True)
class TimeSeriesValue:
    """One bar from ``values``; only the fields we report are kept."""

    datetime: str | None = None
    close: str | None = None


@dataclass(frozen=True)
class TimeSeriesPayload:
    """The ``/time_series`` body."""

    meta: dict[str, Any] | None = None
    values: list[TimeSeriesValue] = field(default_factory=list)
    status: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> TimeSeriesPayload:
        meta = body.get("meta")
        raw_values = body.get("values")
        values: list[TimeSeriesValue] = []
        if isinstance(raw_values, list):
            for item in raw_values:
                if not isinstance(item, dict):
                    # kept as an empty bar so normalization rejects the series
                    values.append(TimeSeriesValue())
                    continue
                values.append(
                    TimeSeriesValue(
                        datetime=_as_text(item.get("datetime")),
                        close=_as_text(item.get("close")),
                    )
                )
        return cls(
            meta=meta if isinstance(meta, dict) else None,
            values=values,
            status=_as_text(body.get("status")),
        )

    def has_success_fields(self) -> bool:
        return self.meta is not None and self.status != "error"


@dataclass(frozen=True)
class ErrorPayload:
    """Provider error schema: ``{"code", "message", "status"}``."""

    code: int | None = None
    message: str | None = None
    status: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> ErrorPayload:
        return cls(
            code=_as_int(body.get("code")),
            message=_as_text(body.get("message")),
            status=_as_text(body.get("status")),
        )

    def is_provider_error(self) -> bool:
        return bool(self.status)
