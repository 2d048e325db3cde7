from __future__ import annotations

from stockquotes.data.schemas import (
    ErrorPayload,
    QuotePayload,
    RealtimePricePayload,
    TimeSeriesPayload,
)


def test_quote_payload_reads_success_fields() -> None:
    payload = QuotePayload.from_body(
        {"symbol": "AAPL", "name": "Apple Inc.", "close": "150.25", "timestamp": 1700000000}
    )

    assert payload.has_success_fields()
    assert payload.close == "150.25"
    assert payload.timestamp == 1700000000


def test_quote_payload_missing_symbol_is_a_signal_not_a_fault() -> None:
    payload = QuotePayload.from_body({"code": 400, "message": "boom", "status": "error"})

    assert payload.symbol is None
    assert not payload.has_success_fields()


def test_realtime_payload_accepts_numeric_price() -> None:
    assert RealtimePricePayload.from_body({"price": 151.1}).price == "151.1"
    assert not RealtimePricePayload.from_body({}).has_success_fields()


def test_time_series_payload_keeps_non_object_values_as_empty_bars() -> None:
    payload = TimeSeriesPayload.from_body(
        {
            "meta": {"symbol": "AAPL"},
            "values": [{"datetime": "2024-01-02 09:30:00", "close": "185.1"}, "junk"],
            "status": "ok",
        }
    )

    assert payload.has_success_fields()
    assert len(payload.values) == 2
    assert payload.values[0].close == "185.1"
    assert payload.values[1].close is None
    assert payload.values[1].datetime is None


def test_time_series_payload_with_error_status_is_not_success() -> None:
    payload = TimeSeriesPayload.from_body({"meta": {}, "status": "error"})

    assert not payload.has_success_fields()


def test_error_payload_tolerates_string_code_and_missing_status() -> None:
    parsed = ErrorPayload.from_body({"code": "401", "message": "bad key", "status": "error"})
    unknown = ErrorPayload.from_body({"unexpected": True})

    assert parsed.code == 401
    assert parsed.is_provider_error()
    assert not unknown.is_provider_error()


def test_non_finite_numbers_do_not_raise() -> None:
    error = ErrorPayload.from_body({"code": float("inf"), "message": "m", "status": "error"})
    quote = QuotePayload.from_body({"symbol": "AAPL", "close": "1", "timestamp": "-Infinity"})
    nan_code = ErrorPayload.from_body({"code": float("nan"), "status": "error"})

    assert error.code is None
    assert error.is_provider_error()
    assert quote.timestamp is None
    assert nan_code.code is None
