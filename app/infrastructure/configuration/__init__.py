"""Infrastructure configuration module - public API.

Centralized configuration management for the localization engine using
Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization engine settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    storage_key = settings.i18n.storage_key
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
