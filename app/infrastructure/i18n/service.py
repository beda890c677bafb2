"""Localization service facade.

Provides the consumer-facing API of the localization engine on top of the
catalog store, state manager, listener registry and translator.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from infrastructure.i18n.listeners import LanguageChangeListener, LanguageChangeListeners
from infrastructure.i18n.models import (
    SUPPORTED_LANGUAGES,
    Language,
    LanguageDescriptor,
    get_descriptor,
)
from infrastructure.i18n.preloader import preload_all
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.state import DEFAULT_STORAGE_KEY, LanguageStateManager
from infrastructure.i18n.store import CatalogStore
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.persistence import PreferenceStore

logger = get_module_logger()


class I18nService:
    """Class-based localization service.

    Construct once at startup (see ``create_i18n_service``) and share it.
    ``reset()`` returns it to its initial state for tests.

    Usage:
        service = create_i18n_service()
        await service.initialize()

        service.subscribe(on_language_changed)
        result = await service.set_language("ko")
        if not result.is_success:
            # roll back any optimistic display state
            ...

        title = service.t("wallet.send.title")
        label = service.t("wallet.balance", {"amount": "1.5", "symbol": "WLC"})
    """

    def __init__(
        self,
        store: CatalogStore,
        preferences: PreferenceStore,
        base_language: Language = Language.EN,
        storage_key: str = DEFAULT_STORAGE_KEY,
        locale_resolver: Optional[LocaleResolver] = None,
        preload: bool = True,
    ):
        """Initialize localization service.

        Args:
            store: CatalogStore backed by a catalog loader.
            preferences: Durable storage for the chosen language.
            base_language: Fallback language.
            storage_key: Key the active language is persisted under.
            locale_resolver: Source of the system locale hint.
            preload: Whether initialize() loads every catalog by default.
        """
        self.store = store
        self.preload = preload
        self.listeners = LanguageChangeListeners()
        self.locale_resolver = locale_resolver or LocaleResolver()
        self.state_manager = LanguageStateManager(
            store=store,
            listeners=self.listeners,
            preferences=preferences,
            storage_key=storage_key,
            base_language=base_language,
            locale_resolver=self.locale_resolver,
        )
        self.translator = Translator(
            store=store,
            state=self.state_manager.state,
            base_language=base_language,
        )

    @property
    def base_language(self) -> Language:
        return self.state_manager.base_language

    @property
    def is_changing(self) -> bool:
        return self.state_manager.is_changing

    def get_current_language(self) -> Language:
        return self.state_manager.get_current_language()

    async def set_language(self, code: Any) -> OperationResult:
        """Change the active language. See LanguageStateManager.set_language."""
        return await self.state_manager.set_language(code)

    def get_supported_languages(self) -> Tuple[LanguageDescriptor, ...]:
        return SUPPORTED_LANGUAGES

    def is_supported(self, code: Any) -> bool:
        return Language.is_supported(code)

    def get_language_name(self, code: Any) -> str:
        """Return the native name of ``code``, or ``code`` itself if unsupported."""
        descriptor = get_descriptor(code)
        return descriptor.native_name if descriptor else str(code)

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.translator.t(key, params)

    def subscribe(self, listener: LanguageChangeListener) -> None:
        self.listeners.subscribe(listener)

    def unsubscribe(self, listener: LanguageChangeListener) -> None:
        self.listeners.unsubscribe(listener)

    async def preload_all(self) -> Dict[Language, OperationResult]:
        return await preload_all(self.store)

    async def load_saved_language(self) -> Language:
        return await self.state_manager.load_saved_language()

    def detect_system_language(self) -> Language:
        """Return the system locale hint if supported, else the base language."""
        return self.locale_resolver.detect_system_language() or self.base_language

    async def initialize(self, preload: Optional[bool] = None) -> Language:
        """Run the startup sequence: preload catalogs, then apply the saved language.

        Args:
            preload: Whether to load every catalog first (default: the
                ``preload`` value given at construction).

        Returns:
            The initial active language.
        """
        if preload is None:
            preload = self.preload
        if preload:
            await self.preload_all()
        language = await self.load_saved_language()
        logger.info("i18n_initialized", language=language.value)
        return language

    def reset(self) -> None:
        """Clear listeners, cached catalogs and state (for tests)."""
        self.listeners.clear()
        self.store.clear()
        self.state_manager.reset()
