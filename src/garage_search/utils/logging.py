"""Structured logging for plate search and the plate cache."""

import logging
import sys
from typing import Optional

import structlog

from ..config.settings import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup structured logging configuration."""
    settings = settings or get_settings()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO)
    )

    # Configure structlog
    if settings.log_format.lower() == "json":
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ]
    else:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer()
        ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


class SearchLogger:
    """Logger for plate search operations."""

    def __init__(self):
        self.logger = structlog.get_logger()

    def log_search_start(self,
                         search_term: str,
                         mode: str,
                         threshold: float,
                         max_results: int) -> None:
        """Log start of a plate search."""
        self.logger.debug(
            "Vehicle search started",
            search_term=search_term,
            mode=mode,
            threshold=threshold,
            max_results=max_results
        )

    def log_search_rejected(self, search_term, errors) -> None:
        """Log a search term that failed validation."""
        self.logger.info(
            "Vehicle search rejected",
            search_term=search_term if isinstance(search_term, str) else repr(search_term),
            errors=errors
        )

    def log_search_result(self, statistics: dict, candidates_evaluated: int) -> None:
        """Log search result statistics."""
        self.logger.info(
            "Vehicle search completed",
            candidates_evaluated=candidates_evaluated,
            **statistics
        )

    def log_operation_error(self, operation: str, error: str) -> None:
        """Log a failed collaborator lookup."""
        self.logger.error(
            "Search operation failed",
            operation=operation,
            error=error
        )

    def log_cache_refresh(self, record_count: int, load_time_ms: float) -> None:
        """Log a wholesale plate cache rebuild."""
        self.logger.info(
            "Plate cache refreshed",
            record_count=record_count,
            load_time_ms=load_time_ms
        )

    def log_cache_hit(self, record_count: int) -> None:
        """Log cache hit."""
        self.logger.debug(
            "Plate cache hit",
            record_count=record_count
        )

    def log_cache_cleared(self) -> None:
        """Log explicit cache invalidation."""
        self.logger.info("Plate cache cleared")


# Global logger instance
search_logger = SearchLogger()
