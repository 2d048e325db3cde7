"""Walk back one day at a time until the time-series endpoint has data.

The provider answers "no data" for days the market was closed (weekends,
holidays, pre-market). The driver starts at today and moves one day back
per "no data" reply, giving up after ``MAX_DATE_FALLBACKS`` retrogressions.
Any other error ends the walk at once so an unknown symbol is not masked.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal

from stockquotes.core.classifier import fetch_and_classify
from stockquotes.data.base import UpstreamClient
from stockquotes.data.schemas import TimeSeriesPayload
from stockquotes.domain.models import EndpointKind, FetchAttempt, Outcome, ProviderError

NO_DATA_MESSAGE = (
    "No data is available on the specified dates. Try setting different start/end dates."
)
MAX_DATE_FALLBACKS = 4
MAX_ATTEMPTS = MAX_DATE_FALLBACKS + 1
CANCELLED_MESSAGE = "Request was cancelled."

logger = logging.getLogger("stockquotes.core.fallback")


@dataclass(frozen=True)
class Trying:
    attempt: FetchAttempt
    kind: Literal["trying"] = "trying"


@dataclass(frozen=True)
class Found:
    payload: TimeSeriesPayload
    attempt: FetchAttempt
    kind: Literal["found"] = "found"


@dataclass(frozen=True)
class ClosedMarketExhausted:
    attempts: int
    kind: Literal["exhausted"] = "exhausted"


@dataclass(frozen=True)
class Failed:
    """Terminal failure; ``detail`` is log-only context."""

    error: ProviderError
    detail: str = ""
    kind: Literal["failed"] = "failed"


DriverState = Trying | Found | ClosedMarketExhausted | Failed
TerminalState = Found | ClosedMarketExhausted | Failed


def advance(state: Trying, outcome: Outcome) -> DriverState:
    """Transition from ``state`` given the classified outcome of its fetch."""
    if outcome.kind == "success":
        return Found(payload=outcome.value, attempt=state.attempt)

    if outcome.kind == "provider_error":
        if outcome.error.message != NO_DATA_MESSAGE:
            return Failed(error=outcome.error)
        if state.attempt.ordinal >= MAX_ATTEMPTS:
            return ClosedMarketExhausted(attempts=state.attempt.ordinal)
        return Trying(
            attempt=FetchAttempt(
                date=state.attempt.date - timedelta(days=1),
                ordinal=state.attempt.ordinal + 1,
            )
        )

    return Failed(error=ProviderError(message=outcome.message), detail=outcome.detail)


class DateFallbackDriver:
    """Run the date-fallback state machine for one symbol."""

    def __init__(
        self,
        client: UpstreamClient,
        symbol: str,
        start_date: date | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.client = client
        self.symbol = symbol
        self.start_date = start_date or date.today()
        self.cancel_event = cancel_event

    def run(self) -> TerminalState:
        state: DriverState = Trying(attempt=FetchAttempt(date=self.start_date, ordinal=1))
        while state.kind == "trying":
            if self.cancel_event is not None and self.cancel_event.is_set():
                return Failed(
                    error=ProviderError(message=CANCELLED_MESSAGE),
                    detail=f"Cancelled before attempt {state.attempt.ordinal} for {self.symbol}.",
                )
            logger.debug(
                "time series attempt %s/%s for %s on %s",
                state.attempt.ordinal,
                MAX_ATTEMPTS,
                self.symbol,
                state.attempt.date.isoformat(),
            )
            outcome = fetch_and_classify(
                self.client,
                EndpointKind.TIME_SERIES,
                self.symbol,
                state.attempt.date,
            )
            state = advance(state, outcome)
        return state
