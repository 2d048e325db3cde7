"""Upstream provider client and response schemas."""

from .base import FetchResult, RawResponse, TransportFailure, UpstreamClient
from .twelvedata import TwelveDataClient

__all__ = [
    "FetchResult",
    "RawResponse",
    "TransportFailure",
    "TwelveDataClient",
    "UpstreamClient",
]
