"""
Observability module.

Provides logging configuration, safe structured logging helpers,
correlation ID tracking and request logging middleware.
"""

from gm_tracker.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
