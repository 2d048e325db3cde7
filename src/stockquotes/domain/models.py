"""Core quote domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any, Literal


class EndpointKind(StrEnum):
    """Provider endpoints, keyed by URL path."""

    QUOTE = "quote"
    REALTIME_PRICE = "price"
    TIME_SERIES = "time_series"


@dataclass(frozen=True)
class QuoteResult:
    """Single quote returned to callers.

    Real-time lookups only populate ``price``; the other fields keep their
    zero values.
    """

    symbol: str = ""
    name: str = ""
    price: float = 0.0
    timestamp: datetime = datetime.min


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One sampled interval: display time and closing price."""

    label: str
    value: float


@dataclass(frozen=True)
class ProviderError:
    """Error details surfaced in the envelope."""

    code: int = 0
    message: str = ""
    status: str = ""

    def is_empty(self) -> bool:
        return self.code == 0 and not self.message and not self.status


EMPTY_ERROR = ProviderError()


@dataclass(frozen=True)
class ResultEnvelope:
    """Uniform response: either a payload or an error, never both."""

    payload: QuoteResult | list[TimeSeriesPoint]
    error: ProviderError = EMPTY_ERROR
    is_error: bool = False

    @classmethod
    def success(cls, payload: QuoteResult | list[TimeSeriesPoint]) -> ResultEnvelope:
        return cls(payload=payload, error=EMPTY_ERROR, is_error=False)

    @classmethod
    def failure(
        cls,
        error: ProviderError,
        empty_payload: QuoteResult | list[TimeSeriesPoint],
    ) -> ResultEnvelope:
        return cls(payload=empty_payload, error=error, is_error=True)


@dataclass(frozen=True)
class FetchAttempt:
    """One dated time-series request made by the date-fallback driver."""

    date: date
    ordinal: int


@dataclass(frozen=True)
class Success:
    """Response carried the success fields for its endpoint."""

    value: Any
    kind: Literal["success"] = "success"


@dataclass(frozen=True)
class ProviderErrorMatch:
    """Provider answered with its documented error schema."""

    error: ProviderError
    kind: Literal["provider_error"] = "provider_error"


@dataclass(frozen=True)
class Unrecognized:
    """Neither a success nor a provider error.

    ``message`` is caller-facing; ``detail`` is for the log only.
    """

    message: str
    detail: str = ""
    kind: Literal["unrecognized"] = "unrecognized"


Outcome = Success | ProviderErrorMatch | Unrecognized
