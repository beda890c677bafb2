"""Catalog loading interface and implementations.

Defines the contract for fetching a language's catalog and provides YAML and
JSON directory loaders. File access runs in a worker thread so the event
loop is never blocked while a catalog is read.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from infrastructure.i18n.errors import CatalogLoadError
from infrastructure.i18n.models import Language, TranslationCatalog, flatten_messages
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define where a language's resources live and how they
    are parsed. They never cache; caching belongs to the CatalogStore.
    """

    @abstractmethod
    async def load(self, language: Language) -> TranslationCatalog:
        """Fetch and parse the catalog for a language.

        Args:
            language: Language to load.

        Returns:
            TranslationCatalog with flattened messages.

        Raises:
            CatalogLoadError: If the resource is missing or cannot be parsed.
        """
        pass

    def available_languages(self) -> List[Language]:
        """Languages this loader has resources for.

        Returns:
            All supported languages unless the implementation knows better.
        """
        return list(Language)


class FileCatalogLoader(CatalogLoader):
    """Shared behaviour for loaders reading from a translations directory.

    Attributes:
        translations_dir: Path to directory containing catalog files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize file catalog loader.

        Args:
            translations_dir: Path to directory with catalog files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_catalog_loader",
            loader=type(self).__name__,
            translations_dir=str(self.translations_dir),
        )

    async def load(self, language: Language) -> TranslationCatalog:
        return await asyncio.to_thread(self._read_catalog, language)

    @abstractmethod
    def _files_for(self, language: Language) -> List[Path]:
        """Return the files holding ``language``'s messages, in merge order."""
        pass

    @abstractmethod
    def _parse(self, path: Path) -> Any:
        """Parse one file and return its raw document."""
        pass

    def available_languages(self) -> List[Language]:
        return [language for language in Language if self._files_for(language)]

    def _read_catalog(self, language: Language) -> TranslationCatalog:
        files = self._files_for(language)
        if not files:
            raise CatalogLoadError(
                language.value,
                f"no catalog files found in {self.translations_dir}",
            )

        messages: Dict[str, str] = {}
        for path in files:
            try:
                data = self._parse(path)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.error("catalog_parse_error", file=str(path), error=str(e))
                raise CatalogLoadError(language.value, f"{path.name}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                raise CatalogLoadError(
                    language.value, f"{path.name}: expected a mapping at top level"
                )
            messages.update(flatten_messages(data))

        logger.info(
            "loaded_catalog_files",
            language=language.value,
            file_count=len(files),
            key_count=len(messages),
        )
        return TranslationCatalog(language=language, messages=messages)


class YAMLCatalogLoader(FileCatalogLoader):
    """Loader for YAML catalog files.

    Expects files named ``<code>.yml`` or ``<domain>.<code>.yml``. All files
    for a language are merged, later files (sorted by name) overriding
    earlier ones.

    Expected format:
        wallet:
          send:
            title: Send WLC
            amount: "Amount ({symbol})"
    """

    def _files_for(self, language: Language) -> List[Path]:
        files = set(self.translations_dir.glob(f"*.{language.value}.yml"))
        files.update(self.translations_dir.glob(f"{language.value}.yml"))
        return sorted(files)

    def _parse(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)


class JSONCatalogLoader(FileCatalogLoader):
    """Loader for ``<code>.json`` catalog files with nested objects."""

    def _files_for(self, language: Language) -> List[Path]:
        path = self.translations_dir / f"{language.value}.json"
        return [path] if path.exists() else []

    def _parse(self, path: Path) -> Any:
        return json.loads(path.read_text(encoding="utf-8"))
