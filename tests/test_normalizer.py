from __future__ import annotations

from datetime import date, datetime

import pytest

from stockquotes.core.fallback import ClosedMarketExhausted, Failed, Found
from stockquotes.core.normalizer import (
    MARKET_CLOSED_MESSAGE,
    envelope_to_dict,
    normalize_quote,
    normalize_time_series,
    parse_price,
)
from stockquotes.data.schemas import QuotePayload, RealtimePricePayload, TimeSeriesPayload
from stockquotes.domain.models import (
    EMPTY_ERROR,
    EndpointKind,
    FetchAttempt,
    ProviderError,
    ProviderErrorMatch,
    QuoteResult,
    Success,
    TimeSeriesPoint,
    Unrecognized,
)
from stockquotes.errors import NormalizationError


def test_quote_success_maps_symbol_name_price_and_local_time() -> None:
    payload = QuotePayload.from_body(
        {"symbol": "AAPL", "name": "Apple Inc.", "close": "150.25", "timestamp": 1700000000}
    )

    envelope = normalize_quote(EndpointKind.QUOTE, Success(value=payload))

    assert not envelope.is_error
    assert envelope.error == EMPTY_ERROR
    assert envelope.payload == QuoteResult(
        symbol="AAPL",
        name="Apple Inc.",
        price=150.25,
        timestamp=datetime.fromtimestamp(1700000000),
    )


def test_price_parse_round_trips_provider_string() -> None:
    for text in ["150.25", "0.0001", "48213.50000", "7"]:
        assert parse_price(text, "close") == pytest.approx(float(text))
        assert float(f"{parse_price(text, 'close')}") == pytest.approx(float(text))


def test_realtime_success_only_sets_price() -> None:
    payload = RealtimePricePayload.from_body({"price": "151.10"})

    envelope = normalize_quote(EndpointKind.REALTIME_PRICE, Success(value=payload))

    assert envelope.payload.price == pytest.approx(151.10)
    assert envelope.payload.symbol == ""
    assert envelope.payload.name == ""
    assert envelope.payload.timestamp == datetime.min


def test_quote_errors_keep_provider_code_or_use_zero() -> None:
    provider = ProviderError(code=404, message="not found", status="error")

    matched = normalize_quote(EndpointKind.QUOTE, ProviderErrorMatch(error=provider))
    unknown = normalize_quote(EndpointKind.QUOTE, Unrecognized(message="Unable to Process Request."))

    assert matched.is_error and matched.error == provider
    assert matched.payload == QuoteResult()
    assert unknown.is_error and unknown.error.code == 0
    assert unknown.error.message == "Unable to Process Request."


def test_unparseable_close_raises() -> None:
    payload = QuotePayload.from_body({"symbol": "AAPL", "close": "n/a", "timestamp": 1})

    with pytest.raises(NormalizationError):
        normalize_quote(EndpointKind.QUOTE, Success(value=payload))


def test_time_series_points_keep_provider_order() -> None:
    payload = TimeSeriesPayload.from_body(
        {
            "meta": {"symbol": "AAPL"},
            "values": [
                {"datetime": "2024-03-08 09:30:00", "close": "170.10"},
                {"datetime": "2024-03-08 09:35:00", "close": "169.90"},
                {"datetime": "2024-03-08 09:40:00", "close": "170.55"},
            ],
            "status": "ok",
        }
    )
    state = Found(payload=payload, attempt=FetchAttempt(date=date(2024, 3, 8), ordinal=1))

    envelope = normalize_time_series(state)

    assert not envelope.is_error
    assert envelope.payload == [
        TimeSeriesPoint(label="2024-03-08 09:30:00", value=170.10),
        TimeSeriesPoint(label="2024-03-08 09:35:00", value=169.90),
        TimeSeriesPoint(label="2024-03-08 09:40:00", value=170.55),
    ]


def test_time_series_bad_close_raises() -> None:
    payload = TimeSeriesPayload.from_body(
        {"meta": {}, "values": [{"datetime": "t", "close": "abc"}], "status": "ok"}
    )

    with pytest.raises(NormalizationError, match="abc"):
        normalize_time_series(Found(payload=payload, attempt=FetchAttempt(date.today(), 1)))


def test_time_series_terminal_failures() -> None:
    exhausted = normalize_time_series(ClosedMarketExhausted(attempts=5))
    failed = normalize_time_series(
        Failed(error=ProviderError(code=400, message="Invalid symbol", status="error"))
    )

    assert exhausted.is_error and exhausted.payload == []
    assert exhausted.error == ProviderError(message=MARKET_CLOSED_MESSAGE)
    assert failed.error.code == 400
    assert failed.payload == []


def test_envelope_to_dict_shapes() -> None:
    quote = normalize_quote(
        EndpointKind.REALTIME_PRICE,
        Success(value=RealtimePricePayload.from_body({"price": "151.10"})),
    )
    series = normalize_time_series(ClosedMarketExhausted(attempts=5))

    assert envelope_to_dict(quote) == {
        "payload": {
            "symbol": "",
            "name": "",
            "price": 151.10,
            "timestamp": "0001-01-01T00:00:00",
        },
        "error": {"code": 0, "message": "", "status": ""},
        "isError": False,
    }
    assert envelope_to_dict(series) == {
        "payload": [],
        "error": {"code": 0, "message": MARKET_CLOSED_MESSAGE, "status": ""},
        "isError": True,
    }


def test_time_series_with_non_object_bar_raises() -> None:
    payload = TimeSeriesPayload.from_body(
        {
            "meta": {},
            "values": [{"datetime": "2024-03-08 09:30:00", "close": "170.1"}, 42],
            "status": "ok",
        }
    )

    with pytest.raises(NormalizationError):
        normalize_time_series(Found(payload=payload, attempt=FetchAttempt(date.today(), 1)))
