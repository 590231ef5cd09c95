"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from legalaid.observability.correlation import correlation_scope, get_correlation_id
from legalaid.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "correlation_scope",
]
