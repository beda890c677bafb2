"""i18n system - client-side localization engine.

Tracks the active language, loads and caches per-language catalogs,
persists the user's choice, notifies subscribers on change, and resolves
lookup keys with fallback and placeholder interpolation.

Main components:
- models: Language, LanguageDescriptor, TranslationCatalog, ActiveLanguageState
- loader: CatalogLoader, YAMLCatalogLoader, JSONCatalogLoader
- store: CatalogStore with deduplicated loads
- preloader: preload_all for concurrent startup loading
- state: LanguageStateManager (last-call-wins change requests)
- listeners: LanguageChangeListeners registry
- translator: Translator key resolver and interpolate()
- resolvers: LocaleResolver for system locale hints
- service: I18nService facade
"""

from infrastructure.i18n.errors import (
    CatalogLoadError,
    I18nError,
    PersistenceError,
    UnsupportedLanguageError,
)
from infrastructure.i18n.factory import create_catalog_loader, create_i18n_service
from infrastructure.i18n.listeners import LanguageChangeListeners
from infrastructure.i18n.loader import CatalogLoader, JSONCatalogLoader, YAMLCatalogLoader
from infrastructure.i18n.models import (
    SUPPORTED_LANGUAGES,
    ActiveLanguageState,
    Language,
    LanguageDescriptor,
    TranslationCatalog,
)
from infrastructure.i18n.preloader import preload_all
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.state import LanguageStateManager
from infrastructure.i18n.store import CatalogStore
from infrastructure.i18n.translator import Translator, interpolate

__all__ = [
    "Language",
    "LanguageDescriptor",
    "SUPPORTED_LANGUAGES",
    "TranslationCatalog",
    "ActiveLanguageState",
    "CatalogLoader",
    "YAMLCatalogLoader",
    "JSONCatalogLoader",
    "CatalogStore",
    "preload_all",
    "LanguageStateManager",
    "LanguageChangeListeners",
    "Translator",
    "interpolate",
    "LocaleResolver",
    "I18nService",
    "create_i18n_service",
    "create_catalog_loader",
    "I18nError",
    "UnsupportedLanguageError",
    "CatalogLoadError",
    "PersistenceError",
]
