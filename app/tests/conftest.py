"""Shared fixtures for the test suite."""

import pytest
import structlog

from infrastructure.services.providers import get_i18n_service, get_settings


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached application singletons around each test."""
    get_settings.cache_clear()
    get_i18n_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_i18n_service.cache_clear()


@pytest.fixture(autouse=True)
def clear_log_contextvars():
    """Prevent structlog context leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
