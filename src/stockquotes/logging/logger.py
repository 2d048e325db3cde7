"""Central logging configuration and per-request diagnostic lines."""

from __future__ import annotations

import logging
import os

from stockquotes.domain.models import ProviderError

PACKAGE_LOGGER = "stockquotes"
CONSOLE_HANDLER = "stockquotes.console"
FILE_HANDLER = "stockquotes.file"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _named_handler(logger: logging.Logger, name: str) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logger(log_level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure and return the ``stockquotes`` logger.

    Request handlers log under ``stockquotes.service.<function>`` and reach these
    handlers through propagation. Calling again updates the level and swaps the
    file handler when ``log_file`` changes; the console handler is added once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    if _named_handler(logger, CONSOLE_HANDLER) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(_FORMATTER)
        logger.addHandler(console_handler)

    current_file = _named_handler(logger, FILE_HANDLER)
    if current_file is not None and (
        not log_file or getattr(current_file, "baseFilename", None) != os.path.abspath(log_file)
    ):
        logger.removeHandler(current_file)
        current_file.close()
        current_file = None
    if log_file and current_file is None:
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(_FORMATTER)
        logger.addHandler(file_handler)

    return logger


class RequestLogger:
    """Fixed line types for one request handler (``GetStockQuote``, ``GetTimeSeries``)."""

    def __init__(self, function_name: str) -> None:
        self.function_name = function_name
        self._logger = logging.getLogger(f"{PACKAGE_LOGGER}.service.{function_name}")

    def request_received(self, symbol: str | None) -> None:
        self._logger.info("%s processed a request | symbol %s", self.function_name, symbol)

    def provider_error(self, error: ProviderError) -> None:
        self._logger.info(
            "%s encountered an error from Twelve Data | %s (code: %s, status: %s)",
            self.function_name,
            error.message,
            error.code,
            error.status,
        )

    def unexpected_error(self, message: str, message_to_log: str | None = None) -> None:
        """Log internal detail; the caller-facing message stands in when none is given."""
        self._logger.info(
            "%s encountered an unexpected error | %s",
            self.function_name,
            message_to_log or message,
        )

    def market_closed(self, symbol: str, attempts: int) -> None:
        self._logger.info(
            "%s found no open market day for %s after %s attempts",
            self.function_name,
            symbol,
            attempts,
        )
