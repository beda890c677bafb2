"""In-memory catalog cache with deduplicated loading.

The store keeps one TranslationCatalog per language for the lifetime of the
process. Concurrent requests to load the same language share a single
in-flight task, so the loader is called at most once per language at a time.
"""

import asyncio
from typing import Dict, List, Optional, Set

from infrastructure.i18n.errors import CatalogLoadError
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import Language, TranslationCatalog
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()


class CatalogStore:
    """Cache of loaded catalogs keyed by language.

    Attributes:
        loader: CatalogLoader used to fetch catalogs.
    """

    def __init__(self, loader: CatalogLoader):
        self.loader = loader
        self._catalogs: Dict[Language, TranslationCatalog] = {}
        self._in_flight: Dict[Language, "asyncio.Task[OperationResult]"] = {}
        self._attempted: Set[Language] = set()

    def get_catalog(self, language: Language) -> Optional[TranslationCatalog]:
        """Return the cached catalog, or None if it is not loaded."""
        return self._catalogs.get(language)

    def is_loaded(self, language: Language) -> bool:
        return language in self._catalogs

    def has_attempted(self, language: Language) -> bool:
        """True once a load of ``language`` has settled, whatever the outcome."""
        return language in self._attempted

    def is_loading(self, language: Language) -> bool:
        return language in self._in_flight

    def loaded_languages(self) -> List[Language]:
        return list(self._catalogs.keys())

    async def load_catalog(self, language: Language) -> OperationResult:
        """Load ``language``'s catalog into the store.

        A call made while a load for the same language is pending awaits the
        pending task instead of calling the loader again. A successful load
        replaces any previous catalog for the language; a failed one leaves
        it untouched.

        Args:
            language: Language to load.

        Returns:
            OperationResult with the catalog as data on success, or a
            TRANSIENT_ERROR result with error_code LOAD_ERROR.
        """
        task = self._in_flight.get(language)
        if task is None:
            task = asyncio.ensure_future(self._load(language))
            self._in_flight[language] = task
            task.add_done_callback(lambda _: self._in_flight.pop(language, None))
        else:
            logger.debug("catalog_load_joined", language=language.value)
        # Shield so a cancelled waiter does not cancel the shared load
        return await asyncio.shield(task)

    async def _load(self, language: Language) -> OperationResult:
        try:
            catalog = await self.loader.load(language)
        except CatalogLoadError as e:
            logger.warning(
                "catalog_load_failed", language=language.value, error=e.reason
            )
            return OperationResult.transient_error(str(e), error_code="LOAD_ERROR")
        except Exception as e:
            logger.error(
                "catalog_load_failed",
                language=language.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            return OperationResult.transient_error(
                f"Failed to load catalog for {language.value}: {e}",
                error_code="LOAD_ERROR",
            )
        finally:
            self._attempted.add(language)

        self._catalogs[language] = catalog
        logger.info(
            "catalog_loaded", language=language.value, key_count=len(catalog)
        )
        return OperationResult.success(data=catalog, message="catalog loaded")

    def clear(self) -> None:
        """Drop every cached catalog (for tests)."""
        self._catalogs.clear()
        self._attempted.clear()
