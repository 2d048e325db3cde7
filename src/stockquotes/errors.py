"""Custom exceptions for clearer error handling across the package."""


class StockQuotesError(Exception):
    """Base exception for all package-specific errors."""


class ConfigError(StockQuotesError):
    """Raised when environment configuration is invalid."""


class UpstreamRequestError(StockQuotesError):
    """Raised when a GET against the provider fails below the HTTP layer."""


class NormalizationError(StockQuotesError):
    """Raised when a provider field cannot be converted to the output contract."""
