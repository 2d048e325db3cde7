"""Twelve Data HTTP client for quotes, real-time prices and intraday series."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import requests

from stockquotes.data.base import FetchResult, RawResponse, TransportFailure
from stockquotes.domain.models import EndpointKind
from stockquotes.errors import UpstreamRequestError

DEFAULT_BASE_URL = "https://api.twelvedata.com"
TIME_SERIES_INTERVAL = "5min"
TIME_SERIES_ORDER = "ASC"


class TwelveDataClient:
    """Single-shot GET client; retries are the caller's business."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logging.getLogger("stockquotes.data.twelvedata")

    def url_for(self, kind: EndpointKind) -> str:
        return f"{self.base_url}/{kind.value}"

    def build_params(
        self,
        kind: EndpointKind,
        symbol: str,
        on_date: date | None = None,
    ) -> dict[str, str]:
        """Query parameters for one request; requests percent-encodes the values."""
        params = {"apikey": self.api_key or "", "symbol": symbol}
        if kind == EndpointKind.TIME_SERIES:
            if on_date is None:
                raise ValueError("time series requests need a date")
            params.update(
                {
                    "interval": TIME_SERIES_INTERVAL,
                    "order": TIME_SERIES_ORDER,
                    "date": on_date.isoformat(),
                }
            )
        return params

    def fetch(
        self,
        kind: EndpointKind,
        symbol: str,
        on_date: date | None = None,
    ) -> FetchResult:
        params = self.build_params(kind, symbol, on_date)
        try:
            response = self.session.get(self.url_for(kind), params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamRequestError(f"Twelve Data request failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            self.logger.debug(
                "Twelve Data %s returned HTTP %s for %s", kind.value, response.status_code, symbol
            )
            return TransportFailure(
                status_code=response.status_code,
                reason=str(response.reason or ""),
            )
        return RawResponse(
            kind=kind,
            body=self._decode(response),
            status_code=response.status_code,
        )

    @staticmethod
    def _decode(response: requests.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    def close(self) -> None:
        self.session.close()
