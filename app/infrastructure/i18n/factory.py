"""Factory functions for creating i18n components.

Provides convenience functions for wiring the localization service from
application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.loader import CatalogLoader, JSONCatalogLoader, YAMLCatalogLoader
from infrastructure.i18n.models import Language
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger
from infrastructure.persistence import (
    InMemoryPreferenceStore,
    JSONFilePreferenceStore,
    PreferenceStore,
)

logger = get_module_logger()


def default_translations_dir() -> Path:
    """Return the bundled catalogs directory (app/locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_catalog_loader(
    translations_dir: Optional[Path] = None,
    catalog_format: str = "yaml",
) -> CatalogLoader:
    """Create the catalog loader for a directory and file format.

    Args:
        translations_dir: Directory of catalog files (default: app/locales).
        catalog_format: 'yaml' or 'json'.

    Returns:
        CatalogLoader instance.

    Raises:
        ValueError: If the format is unknown or the directory does not exist.
    """
    directory = Path(translations_dir) if translations_dir else default_translations_dir()
    if catalog_format == "yaml":
        return YAMLCatalogLoader(directory)
    if catalog_format == "json":
        return JSONCatalogLoader(directory)
    raise ValueError(f"Unsupported catalog format: {catalog_format}")


def create_i18n_service(
    settings: Optional[Settings] = None,
    loader: Optional[CatalogLoader] = None,
    preferences: Optional[PreferenceStore] = None,
    locale_resolver: Optional[LocaleResolver] = None,
) -> I18nService:
    """Create and configure an I18nService instance.

    Components not passed explicitly are built from ``settings.i18n``.
    Nothing is loaded here; call ``initialize()`` on the result at startup.

    Args:
        settings: Settings instance (default: built from the environment).
        loader: Catalog loader (default: per I18N_TRANSLATIONS_DIR and
            I18N_CATALOG_FORMAT).
        preferences: Preference store (default: JSON file when
            I18N_PREFERENCE_FILE is set, in-memory otherwise).
        locale_resolver: System locale hint source.

    Returns:
        I18nService: Configured service.

    Raises:
        UnsupportedLanguageError: If I18N_BASE_LANGUAGE is not supported.
        ValueError: If the translations directory does not exist.

    Usage:
        service = create_i18n_service()
        await service.initialize()
    """
    settings = settings or Settings()
    config = settings.i18n

    base_language = Language.from_string(config.base_language)

    if loader is None:
        translations_dir = Path(config.translations_dir) if config.translations_dir else None
        loader = create_catalog_loader(translations_dir, config.catalog_format)

    if preferences is None:
        if config.preference_file:
            preferences = JSONFilePreferenceStore(Path(config.preference_file))
        else:
            preferences = InMemoryPreferenceStore()

    service = I18nService(
        store=CatalogStore(loader),
        preferences=preferences,
        base_language=base_language,
        storage_key=config.storage_key,
        locale_resolver=locale_resolver,
        preload=config.preload,
    )
    logger.info(
        "i18n_service_created",
        base_language=base_language.value,
        loader=type(loader).__name__,
        preferences=type(preferences).__name__,
        preload=config.preload,
    )
    return service
