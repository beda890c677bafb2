"""Key resolution and placeholder interpolation.

Resolves dotted keys against whatever catalogs are currently cached. A
lookup never loads anything and never fails: a key missing from both the
active and the base catalog resolves to the key itself.
"""

import re
from typing import Any, Mapping, Optional

from infrastructure.i18n.models import ActiveLanguageState, Language
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# {{name}} (legacy catalogs) or {name}
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}|\{(\w+)\}")


def interpolate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute ``{name}`` and ``{{name}}`` placeholders from ``params``.

    Values are converted with str(). Placeholders without a matching entry
    are left in the output unchanged.

    Args:
        template: Message template.
        params: Placeholder values.

    Returns:
        The interpolated message.
    """
    if not params:
        return template

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1) or match.group(2)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


class Translator:
    """Resolves keys for the active language with base language fallback.

    Attributes:
        store: CatalogStore holding loaded catalogs.
        state: Shared ActiveLanguageState, read on every lookup.
        base_language: Language consulted when the active catalog lacks a key.
    """

    def __init__(
        self,
        store: CatalogStore,
        state: ActiveLanguageState,
        base_language: Language,
    ):
        self.store = store
        self.state = state
        self.base_language = base_language

    def resolve(self, key: str) -> Optional[str]:
        """Return the raw template for ``key``, or None if no catalog has it."""
        active = self.state.current_code
        catalog = self.store.get_catalog(active)
        message = catalog.get_message(key) if catalog else None

        if message is None and active != self.base_language:
            fallback_catalog = self.store.get_catalog(self.base_language)
            message = fallback_catalog.get_message(key) if fallback_catalog else None
            if message is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_language=active.value,
                    fallback_language=self.base_language.value,
                )
        return message

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate ``key`` for the active language.

        Args:
            key: Dotted lookup key (e.g., "wallet.send.title").
            params: Optional placeholder values.

        Returns:
            The interpolated message, or ``key`` when no catalog has it.
        """
        message = self.resolve(key)
        if message is None:
            logger.warning(
                "translation_not_found",
                key=key,
                language=self.state.current_code.value,
                fallback_language=self.base_language.value,
            )
            return key
        return interpolate(message, params)

    def has_message(self, key: str, language: Optional[Language] = None) -> bool:
        """Check if ``language``'s catalog (default: active) holds ``key``.

        Does not consider the fallback catalog.
        """
        catalog = self.store.get_catalog(language or self.state.current_code)
        return catalog.has_message(key) if catalog else False
