"""Classification, date fallback and normalization."""

from .classifier import classify, fetch_and_classify
from .fallback import (
    MAX_DATE_FALLBACKS,
    NO_DATA_MESSAGE,
    ClosedMarketExhausted,
    DateFallbackDriver,
    Failed,
    Found,
    Trying,
    advance,
)
from .normalizer import envelope_to_dict, normalize_quote, normalize_time_series

__all__ = [
    "MAX_DATE_FALLBACKS",
    "NO_DATA_MESSAGE",
    "ClosedMarketExhausted",
    "DateFallbackDriver",
    "Failed",
    "Found",
    "Trying",
    "advance",
    "classify",
    "envelope_to_dict",
    "fetch_and_classify",
    "normalize_quote",
    "normalize_time_series",
]
