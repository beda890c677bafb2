"""Structured logging infrastructure.

Centralized logging configuration and utilities for the localization
engine using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_log_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_log_context(): Clear all scoped context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_log_context,
    get_correlation_id,
    clear_log_context,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_log_context",
    "get_correlation_id",
    "clear_log_context",
]
