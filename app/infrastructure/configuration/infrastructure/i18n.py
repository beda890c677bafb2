"""Localization engine settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Localization engine configuration.

    Environment Variables:
        I18N_BASE_LANGUAGE: Base/fallback language code (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding catalog files
            (default: auto-discover app/locales)
        I18N_CATALOG_FORMAT: Catalog file format, 'yaml' or 'json' (default: yaml)
        I18N_STORAGE_KEY: Key under which the active language is persisted
            (default: worldland_language)
        I18N_PREFERENCE_FILE: JSON file used to persist the preference.
            When unset the preference is kept in memory only.
        I18N_PRELOAD: Preload every supported catalog at startup (default: True)

    Example:
        ```python
        from infrastructure.i18n import create_i18n_service
        from infrastructure.services import get_settings

        # initialize() preloads every catalog unless I18N_PRELOAD=false
        service = create_i18n_service(settings=get_settings())
        await service.initialize()
        ```
    """

    base_language: str = Field(
        default="en",
        alias="I18N_BASE_LANGUAGE",
        description="Base/fallback language code",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing catalog files",
    )
    catalog_format: str = Field(
        default="yaml",
        alias="I18N_CATALOG_FORMAT",
        description="Catalog file format: 'yaml' or 'json'",
    )
    storage_key: str = Field(
        default="worldland_language",
        alias="I18N_STORAGE_KEY",
        description="Durable storage key for the active language code",
    )
    preference_file: Optional[str] = Field(
        default=None,
        alias="I18N_PREFERENCE_FILE",
        description="JSON file for the persisted language preference",
    )
    preload: bool = Field(
        default=True,
        alias="I18N_PRELOAD",
        description="Preload all supported catalogs at startup",
    )

    @field_validator("catalog_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("yaml", "json"):
            raise ValueError(f"Unsupported catalog format: {value}")
        return value
