"""Upstream client contract and fetch results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal, Protocol

from stockquotes.data.schemas import (
    QuotePayload,
    RealtimePricePayload,
    TimeSeriesPayload,
)
from stockquotes.domain.models import EndpointKind

_SCHEMAS = {
    EndpointKind.QUOTE: QuotePayload,
    EndpointKind.REALTIME_PRICE: RealtimePricePayload,
    EndpointKind.TIME_SERIES: TimeSeriesPayload,
}


@dataclass(frozen=True)
class RawResponse:
    """A 2xx answer with its JSON object body (empty when not decodable)."""

    kind: EndpointKind
    body: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200
    ok: Literal[True] = True

    def parse(self) -> QuotePayload | RealtimePricePayload | TimeSeriesPayload:
        """Deserialize against the schema expected for this endpoint."""
        return _SCHEMAS[self.kind].from_body(self.body)


@dataclass(frozen=True)
class TransportFailure:
    """A non-2xx answer."""

    status_code: int
    reason: str
    ok: Literal[False] = False

    def describe(self) -> str:
        return (
            "Unable to Process Request. "
            f"HTTP Response Status Code: {self.status_code} "
            f"HTTP Response Message: {self.reason}"
        )


FetchResult = RawResponse | TransportFailure


class UpstreamClient(Protocol):
    """Interface for a single provider GET."""

    def fetch(
        self,
        kind: EndpointKind,
        symbol: str,
        on_date: date | None = None,
    ) -> FetchResult:
        """Perform one GET and return the decoded result."""
