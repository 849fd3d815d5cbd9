"""Utilities for the garage search service."""

from .logging import SearchLogger, search_logger, setup_logging

__all__ = ["SearchLogger", "search_logger", "setup_logging"]
