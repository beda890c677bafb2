"""Active language state management.

The LanguageStateManager owns the active language. It persists the user's
choice, notifies listeners, and arbitrates overlapping change requests with
a last-call-wins policy: catalog loads can finish out of order, and only the
most recently requested language is ever applied.

Each change request moves through ``Idle -> Loading -> Applied | Rejected``.
"""

import asyncio
from typing import Any, Optional

from infrastructure.i18n.errors import PersistenceError, UnsupportedLanguageError
from infrastructure.i18n.listeners import LanguageChangeListeners
from infrastructure.i18n.models import (
    DEFAULT_BASE_LANGUAGE,
    ActiveLanguageState,
    Language,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import bind_log_context, get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.persistence import PreferenceStore

logger = get_module_logger()

DEFAULT_STORAGE_KEY = "worldland_language"


class LanguageStateManager:
    """Owns the active language and applies change requests.

    Attributes:
        store: CatalogStore that change requests load from.
        listeners: Registry notified after each applied change.
        preferences: Durable storage for the chosen language.
        storage_key: Key the language code is persisted under.
        base_language: Fallback language, loaded before any change completes.
        state: The ActiveLanguageState read by the key resolver.
    """

    def __init__(
        self,
        store: CatalogStore,
        listeners: LanguageChangeListeners,
        preferences: PreferenceStore,
        storage_key: str = DEFAULT_STORAGE_KEY,
        base_language: Language = DEFAULT_BASE_LANGUAGE,
        locale_resolver: Optional[LocaleResolver] = None,
    ):
        self.store = store
        self.listeners = listeners
        self.preferences = preferences
        self.storage_key = storage_key
        self.base_language = base_language
        self.locale_resolver = locale_resolver or LocaleResolver()
        self.state = ActiveLanguageState(current_code=base_language)
        self._latest_requested: Optional[Language] = None
        self._pending = 0
        self._apply_lock = asyncio.Lock()

    def get_current_language(self) -> Language:
        return self.state.current_code

    @property
    def is_changing(self) -> bool:
        return self.state.is_changing

    async def set_language(self, code: Any) -> OperationResult:
        """Request a change of the active language.

        On success the new language is applied, persisted and announced to
        listeners, in that order, before this coroutine returns. Requests
        apply one at a time. A request overtaken by a newer one is discarded
        without notifying; if the newer request arrives while this one is
        persisting, the previous language is restored and written back.

        Args:
            code: Requested language code.

        Returns:
            OperationResult. ``is_success`` is True only when ``code`` is the
            active language on return. Failures carry error_code
            UNSUPPORTED_LANGUAGE, LOAD_ERROR or SUPERSEDED.
        """
        try:
            language = Language.from_string(code)
        except UnsupportedLanguageError as e:
            logger.warning("unsupported_language_requested", requested=str(code))
            return OperationResult.permanent_error(
                str(e), error_code="UNSUPPORTED_LANGUAGE"
            )

        # Asking for the active language also cancels the intent of any
        # change still loading
        self._latest_requested = language
        if language == self.state.current_code:
            return OperationResult.success(
                data=language, message="language already active"
            )

        self._pending += 1
        self.state.is_changing = True
        try:
            with bind_log_context(requested_language=language.value):
                return await self._change(language)
        finally:
            self._pending -= 1
            self.state.is_changing = self._pending > 0

    async def _change(self, language: Language) -> OperationResult:
        logger.info(
            "language_change_requested",
            current_language=self.state.current_code.value,
        )

        if not self.store.is_loaded(language):
            result = await self.store.load_catalog(language)
            if not result.is_success:
                logger.error("language_change_failed", error=result.message)
                return result

        await self._ensure_base_attempted()

        # Apply, persist and notify one request at a time so writes land in
        # request order
        async with self._apply_lock:
            if self._latest_requested != language:
                return self._superseded(language)

            if self.state.current_code == language:
                # An identical concurrent request already applied it
                return OperationResult.success(
                    data=language, message="language already active"
                )

            previous = self.state.current_code
            self.state.current_code = language
            await self._persist(language)

            if self._latest_requested != language:
                # A newer request arrived during the write: undo without
                # notifying and leave the change to that request
                logger.info(
                    "language_change_rolled_back",
                    restored_language=previous.value,
                )
                self.state.current_code = previous
                await self._persist(previous)
                return self._superseded(language)

            self.listeners.notify(language)

        logger.info(
            "language_changed",
            previous_language=previous.value,
            current_language=language.value,
        )
        return OperationResult.success(data=language, message="language changed")

    def _superseded(self, language: Language) -> OperationResult:
        logger.info(
            "language_change_superseded",
            latest_requested=(
                self._latest_requested.value if self._latest_requested else None
            ),
        )
        return OperationResult.superseded(
            "a newer language change took precedence", data=language
        )

    async def _ensure_base_attempted(self) -> None:
        base = self.base_language
        if not self.store.is_loaded(base) and not self.store.has_attempted(base):
            result = await self.store.load_catalog(base)
            if not result.is_success:
                logger.warning("base_catalog_unavailable", language=base.value)

    async def _persist(self, language: Language) -> None:
        try:
            await self.preferences.set(self.storage_key, language.value)
        except PersistenceError as e:
            logger.warning(
                "language_persist_failed", language=language.value, error=str(e)
            )

    async def load_saved_language(self) -> Language:
        """Apply the initial language at startup.

        Resolution order:
        1. Persisted preference (if supported)
        2. System locale hint (if supported)
        3. Base language

        The chosen catalog is loaded only if it is not cached yet; if that
        load fails the base language is used instead. Listeners are not
        notified, this is initialization rather than a change.

        Returns:
            The language now active.
        """
        saved = self.preferences.get(self.storage_key)
        language: Optional[Language] = None
        source = "default"

        if saved:
            if Language.is_supported(saved):
                language = Language.from_string(saved)
                source = "storage"
            else:
                logger.warning("saved_language_unsupported", saved_language=saved)

        if language is None:
            detected = self.locale_resolver.detect_system_language()
            if detected is not None:
                language = detected
                source = "system"
            else:
                language = self.base_language

        if not self.store.is_loaded(language):
            result = await self.store.load_catalog(language)
            if not result.is_success and language != self.base_language:
                logger.warning(
                    "saved_language_unavailable",
                    language=language.value,
                    fallback_language=self.base_language.value,
                )
                language = self.base_language
                source = "default"

        await self._ensure_base_attempted()

        self.state.current_code = language
        self._latest_requested = language
        logger.info("initial_language_applied", language=language.value, source=source)
        return language

    def reset(self) -> None:
        """Return to the base language with no pending requests (for tests)."""
        self.state.current_code = self.base_language
        self.state.is_changing = False
        self._latest_requested = None
        self._pending = 0
        self._apply_lock = asyncio.Lock()
