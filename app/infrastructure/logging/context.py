"""Context binding for structured logging.

Binds change-request scoped context to logs so every entry emitted while a
language change is in flight carries the same correlation ID and the
requested language.

Usage:
    from infrastructure.logging import bind_log_context

    with bind_log_context(requested_language="ko"):
        logger.info("language_change_requested")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_log_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind scoped context to all logs within the context manager.

    Context variables are task-local under asyncio, so concurrent change
    requests running in separate tasks do not see each other's context.

    Args:
        correlation_id: Unique identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        # Restores the values bound by an enclosing block, if any
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_log_context() -> None:
    """Clear all scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
