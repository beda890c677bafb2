"""Persistence layer for user preferences.

Provides storage backends for the persisted language choice.
"""

from infrastructure.persistence.preferences import (
    InMemoryPreferenceStore,
    JSONFilePreferenceStore,
    LayeredPreferenceStore,
    PersistenceError,
    PreferenceStore,
)

__all__ = [
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JSONFilePreferenceStore",
    "LayeredPreferenceStore",
    "PersistenceError",
]
