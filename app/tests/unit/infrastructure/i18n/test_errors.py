"""Tests for infrastructure.i18n.errors module."""

import pytest

from infrastructure import persistence
from infrastructure.i18n import errors


@pytest.mark.unit
class TestErrorHierarchy:
    """Tests for the exceptions exported by the engine."""

    @pytest.mark.parametrize(
        "error",
        [errors.UnsupportedLanguageError("xx"), errors.CatalogLoadError("ko", "missing")],
    )
    def test_engine_errors_are_i18n_errors(self, error):
        assert isinstance(error, errors.I18nError)

    def test_unsupported_language_is_value_error(self):
        with pytest.raises(ValueError, match="Unsupported language: xx"):
            raise errors.UnsupportedLanguageError("xx")

    def test_catalog_load_error_keeps_reason(self):
        error = errors.CatalogLoadError("ko", "missing")
        assert error.code == "ko"
        assert error.reason == "missing"
        assert str(error) == "Failed to load catalog for ko: missing"

    def test_persistence_error_is_shared_with_persistence_layer(self):
        """The engine re-exports the persistence layer's class, not a copy."""
        assert errors.PersistenceError is persistence.PersistenceError
        assert not issubclass(errors.PersistenceError, errors.I18nError)

    def test_persistence_error_is_caught_by_engine_name(self):
        with pytest.raises(errors.PersistenceError):
            raise persistence.PersistenceError("disk full")
