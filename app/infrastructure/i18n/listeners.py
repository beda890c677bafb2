"""Language change listener registry.

Callbacks are called synchronously, in registration order, with the new
language whenever the active language changes.
"""

from typing import Callable, List

from infrastructure.i18n.models import Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LanguageChangeListener = Callable[[Language], None]


class LanguageChangeListeners:
    """Ordered registry of language change callbacks.

    The same callback may be registered more than once; it is then called
    once per registration. Notification iterates over a snapshot, so
    callbacks may subscribe or unsubscribe (themselves or others) while a
    notification is running without affecting the current pass.
    """

    def __init__(self):
        self._listeners: List[LanguageChangeListener] = []

    def subscribe(self, listener: LanguageChangeListener) -> None:
        self._listeners.append(listener)
        logger.debug(
            "registered_language_listener",
            listener=getattr(listener, "__name__", repr(listener)),
            total_listeners=len(self._listeners),
        )

    def unsubscribe(self, listener: LanguageChangeListener) -> None:
        """Remove every registration of ``listener``. Unknown callbacks are ignored."""
        self._listeners = [cb for cb in self._listeners if cb != listener]

    def notify(self, language: Language) -> int:
        """Call each registered listener with ``language``.

        A listener that raises is logged and skipped; the remaining listeners
        still run.

        Args:
            language: The newly active language.

        Returns:
            Number of listeners that completed without raising.
        """
        snapshot = list(self._listeners)
        delivered = 0
        for listener in snapshot:
            try:
                listener(language)
                delivered += 1
            except Exception as e:
                logger.error(
                    "language_listener_failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    language=language.value,
                    error=str(e),
                )
        return delivered

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
