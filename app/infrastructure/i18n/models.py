"""Translation models for the localization engine.

Defines the supported languages, their descriptors, per-language catalogs
and the active language state.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from infrastructure.i18n.errors import UnsupportedLanguageError


class Language(str, Enum):
    """Supported language codes (ISO 639-1)."""

    EN = "en"
    KO = "ko"
    ZH = "zh"
    RU = "ru"
    JA = "ja"
    ES = "es"
    FR = "fr"
    AR = "ar"

    @classmethod
    def from_string(cls, code: Any) -> "Language":
        """Convert a code to a Language enum.

        Accepts Language members and plain strings. Matching is exact apart
        from surrounding whitespace and case; use the resolvers module to map
        region-qualified tags such as ``ko-KR``.

        Args:
            code: Language code (e.g., "en", "ko").

        Returns:
            Matching Language enum value.

        Raises:
            UnsupportedLanguageError: If the code is not supported.
        """
        if isinstance(code, cls):
            return code
        if not isinstance(code, str):
            raise UnsupportedLanguageError(code)
        try:
            return cls(code.strip().lower())
        except ValueError as e:
            raise UnsupportedLanguageError(code) from e

    @classmethod
    def is_supported(cls, code: Any) -> bool:
        try:
            cls.from_string(code)
        except UnsupportedLanguageError:
            return False
        return True


@dataclass(frozen=True)
class LanguageDescriptor:
    """Metadata record for a supported language.

    Attributes:
        code: Language code.
        english_name: Name of the language in English.
        native_name: Name of the language in that language.
    """

    code: Language
    english_name: str
    native_name: str


SUPPORTED_LANGUAGES: Tuple[LanguageDescriptor, ...] = (
    LanguageDescriptor(Language.EN, "English", "English"),
    LanguageDescriptor(Language.KO, "Korean", "한국어"),
    LanguageDescriptor(Language.ZH, "Chinese", "中文"),
    LanguageDescriptor(Language.RU, "Russian", "Русский"),
    LanguageDescriptor(Language.JA, "Japanese", "日本語"),
    LanguageDescriptor(Language.ES, "Spanish", "Español"),
    LanguageDescriptor(Language.FR, "French", "Français"),
    LanguageDescriptor(Language.AR, "Arabic", "العربية"),
)

DEFAULT_BASE_LANGUAGE = Language.EN


def get_descriptor(code: Any) -> Optional[LanguageDescriptor]:
    """Return the descriptor for ``code``, or None if unsupported."""
    if not Language.is_supported(code):
        return None
    language = Language.from_string(code)
    for descriptor in SUPPORTED_LANGUAGES:
        if descriptor.code == language:
            return descriptor
    return None


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten a nested mapping into dotted keys.

    ``{"wallet": {"send": {"title": "Send"}}}`` becomes
    ``{"wallet.send.title": "Send"}``. Scalar leaves are converted to str;
    ``None`` leaves and list values are skipped.

    Args:
        data: Nested mapping as parsed from a catalog file.
        prefix: Key prefix used during recursion.

    Returns:
        Flat dict of dotted key to template string.
    """
    flat: Dict[str, str] = {}
    for raw_key, value in data.items():
        key = f"{prefix}.{raw_key}" if prefix else str(raw_key)
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, key))
        elif isinstance(value, (str, int, float, bool)):
            flat[key] = str(value)
    return flat


@dataclass(frozen=True)
class TranslationCatalog:
    """Translations for a single language.

    Catalogs are never mutated once built. Reloading a language produces a
    new catalog that replaces the old one in the store.

    Attributes:
        language: The Language this catalog is for.
        messages: Flat dict {dotted_key: template_string}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    language: Language
    messages: Mapping[str, str] = field(default_factory=dict)
    loaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a template string by dotted key.

        Returns:
            Template string, or None if not found.
        """
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)


@dataclass
class ActiveLanguageState:
    """Process-wide active language state.

    Mutated only by the LanguageStateManager.

    Attributes:
        current_code: The active language.
        is_changing: True while at least one change request is loading.
    """

    current_code: Language = DEFAULT_BASE_LANGUAGE
    is_changing: bool = False
