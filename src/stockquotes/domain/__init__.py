"""Domain models and classification outcomes."""

from .models import (
    EMPTY_ERROR,
    EndpointKind,
    FetchAttempt,
    Outcome,
    ProviderError,
    ProviderErrorMatch,
    QuoteResult,
    ResultEnvelope,
    Success,
    TimeSeriesPoint,
    Unrecognized,
)

__all__ = [
    "EMPTY_ERROR",
    "EndpointKind",
    "FetchAttempt",
    "Outcome",
    "ProviderError",
    "ProviderErrorMatch",
    "QuoteResult",
    "ResultEnvelope",
    "Success",
    "TimeSeriesPoint",
    "Unrecognized",
]
