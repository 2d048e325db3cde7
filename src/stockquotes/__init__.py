"""Normalized stock quotes and time series from Twelve Data."""

from .service import get_stock_quote, get_time_series

__all__ = ["get_stock_quote", "get_time_series"]

__version__ = "0.1.0"
