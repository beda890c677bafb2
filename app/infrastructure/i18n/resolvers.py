"""Locale resolution from host hints.

Maps the host's preferred locale (environment variables, the C library
locale, or an Accept-Language style preference list) onto a supported
Language. Consulted only when no language preference has been persisted.
"""

import locale
import os
from typing import Iterable, Mapping, Optional

from infrastructure.i18n.models import Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Same lookup order as gettext
LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def normalize_language_tag(tag: Optional[str]) -> Optional[Language]:
    """Map a locale tag onto a supported Language.

    Handles BCP 47 and POSIX forms: ``ko-KR``, ``ko_KR.UTF-8``,
    ``zh-Hant-TW``, ``sr@latin``. Only the primary language subtag is
    compared.

    Args:
        tag: Locale tag, possibly empty.

    Returns:
        Matching Language, or None if the tag is empty or unsupported.
    """
    raw = (tag or "").strip().lower().replace("_", "-")
    if not raw:
        return None
    raw = raw.split(".", 1)[0].split("@", 1)[0]
    primary = raw.split("-", 1)[0]
    if primary in ("c", "posix", "*"):
        return None
    try:
        return Language(primary)
    except ValueError:
        return None


class LocaleResolver:
    """Resolves the preferred language from host hints.

    Fallback chain:
    1. Locale environment variables (LANGUAGE, LC_ALL, LC_MESSAGES, LANG)
    2. The process locale reported by the C library
    3. None, leaving the caller to apply its default
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Initialize locale resolver.

        Args:
            environ: Environment mapping to read (default: os.environ).
        """
        self._environ = environ

    def detect_system_language(self) -> Optional[Language]:
        """Return the host's preferred supported language, if any."""
        environ = self._environ if self._environ is not None else os.environ
        for name in LOCALE_ENV_VARS:
            value = environ.get(name)
            if not value:
                continue
            # LANGUAGE holds a colon separated priority list
            detected = self.resolve_from_hints(value.split(":"))
            if detected:
                logger.debug(
                    "resolved_from_environment", variable=name, language=detected.value
                )
                return detected

        try:
            system_tag = locale.getlocale()[0]
        except ValueError:
            system_tag = None
        detected = normalize_language_tag(system_tag)
        if detected:
            logger.debug("resolved_from_system_locale", language=detected.value)
        return detected

    def resolve_from_hints(self, hints: Iterable[Optional[str]]) -> Optional[Language]:
        """Return the first supported language among ``hints``."""
        for hint in hints:
            detected = normalize_language_tag(hint)
            if detected:
                return detected
        return None

    def resolve_from_header(self, accept_language: Optional[str]) -> Optional[Language]:
        """Resolve a language from an Accept-Language style string.

        Parses ``"ko-KR,ko;q=0.9,en;q=0.8"`` and returns the supported
        language with the highest quality value. Entries with a malformed
        quality count as 1.0; ``q=0`` entries are ignored.

        Args:
            accept_language: Preference list, possibly empty.

        Returns:
            Best supported Language, or None if nothing matches.
        """
        if not accept_language:
            return None

        preferences = []
        for position, part in enumerate(accept_language.split(",")):
            lang_range = part.split(";")[0].strip()
            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0
            if quality > 0:
                preferences.append((lang_range, quality, position))

        # Sort by quality (descending); ties keep their original order
        preferences.sort(key=lambda item: (-item[1], item[2]))
        resolved = self.resolve_from_hints(lang for lang, _, _ in preferences)
        if resolved:
            logger.info("resolved_from_header", language=resolved.value)
        else:
            logger.info("no_matching_language_in_header")
        return resolved
