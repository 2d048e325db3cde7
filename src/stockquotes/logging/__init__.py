"""Logging helpers."""

from .logger import RequestLogger, setup_logger

__all__ = ["RequestLogger", "setup_logger"]
