"""Concurrent catalog preloading."""

import asyncio
from typing import Dict, Iterable, Optional

from infrastructure.i18n.models import Language
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()


async def preload_all(
    store: CatalogStore,
    languages: Optional[Iterable[Language]] = None,
) -> Dict[Language, OperationResult]:
    """Load every catalog concurrently and wait for all attempts to settle.

    One language failing does not stop the others. Loads already in flight
    are joined rather than repeated.

    Args:
        store: CatalogStore to fill.
        languages: Languages to load (default: every supported language).

    Returns:
        Dict mapping each language to the outcome of its load.
    """
    targets = list(languages) if languages is not None else list(Language)
    results = await asyncio.gather(
        *(store.load_catalog(language) for language in targets)
    )
    outcome = dict(zip(targets, results))

    failed = [language.value for language, result in outcome.items() if not result.is_success]
    if failed:
        logger.warning(
            "preload_partially_failed",
            loaded=len(targets) - len(failed),
            failed=failed,
        )
    else:
        logger.info("preload_completed", loaded=len(targets))
    return outcome
