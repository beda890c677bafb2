"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import I18nService, create_i18n_service


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests reset it with ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_i18n_service() -> I18nService:
    """
    Get application-scoped localization service singleton.

    The service is created unloaded; run ``await service.initialize()`` once
    at startup. Tests reset it with ``get_i18n_service.cache_clear()``.

    Returns:
        I18nService: Cached service configured from application settings.
    """
    return create_i18n_service(settings=get_settings())
