"""Durable key-value storage for user preferences.

The localization engine persists the active language code under a single
key. Reads are synchronous; writes are coroutines so file-backed stores can
run them off the event loop.
"""

import asyncio
import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class PersistenceError(Exception):
    """Raised when a preference cannot be written."""


class PreferenceStore(ABC):
    """Abstract base class for preference storage backends."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the stored value for ``key``.

        Args:
            key: Preference key.

        Returns:
            Stored string or None if absent.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        Args:
            key: Preference key.
            value: Value to store.

        Raises:
            PersistenceError: If the value could not be written.
        """
        pass


class InMemoryPreferenceStore(PreferenceStore):
    """Process-local preference store (development, testing)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()


class JSONFilePreferenceStore(PreferenceStore):
    """Preference store backed by a small JSON object on disk.

    Writes replace the file atomically (temp file + rename) so a crash never
    leaves a half-written document behind.

    Attributes:
        path: Location of the JSON document.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return str(value) if value is not None else None

    async def set(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._write, key, value)
        except OSError as e:
            raise PersistenceError(f"Could not write {self.path}: {e}") from e

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(
                "preference_file_unreadable", path=str(self.path), error=str(e)
            )
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class LayeredPreferenceStore(PreferenceStore):
    """Combines several stores in priority order.

    Reads return the first layer holding a value. Writes go to every layer;
    each layer is attempted even if an earlier one fails, and a single
    PersistenceError is raised afterwards listing the failures.
    """

    def __init__(self, layers: Sequence[PreferenceStore]):
        if not layers:
            raise ValueError("LayeredPreferenceStore needs at least one layer")
        self.layers: List[PreferenceStore] = list(layers)

    def get(self, key: str) -> Optional[str]:
        for layer in self.layers:
            value = layer.get(key)
            if value:
                return value
        return None

    async def set(self, key: str, value: str) -> None:
        failures = []
        for layer in self.layers:
            try:
                await layer.set(key, value)
            except PersistenceError as e:
                logger.warning(
                    "preference_layer_write_failed",
                    layer=type(layer).__name__,
                    error=str(e),
                )
                failures.append(str(e))
        if failures:
            raise PersistenceError("; ".join(failures))
