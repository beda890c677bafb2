"""
Application-scoped service providers.
"""

from infrastructure.services.providers import (
    get_settings,
    get_i18n_service,
)

__all__ = [
    "get_settings",
    "get_i18n_service",
]
