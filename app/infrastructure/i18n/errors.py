"""Exceptions raised by the localization engine.

None of these are fatal to the process. The state manager and catalog store
convert them into failed OperationResult values; the resolver never raises.
"""

from infrastructure.persistence.preferences import PersistenceError


class I18nError(Exception):
    """Base class for localization engine errors."""


class UnsupportedLanguageError(I18nError, ValueError):
    """Raised when a language code is outside the supported set."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unsupported language: {code}")


class CatalogLoadError(I18nError):
    """Raised when a catalog cannot be fetched or parsed."""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Failed to load catalog for {code}: {reason}")


__all__ = [
    "I18nError",
    "UnsupportedLanguageError",
    "CatalogLoadError",
    "PersistenceError",
]
