"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FakeCatalogLoader,
    default_catalog_data,
    make_i18n_service,
    make_locale_resolver,
    make_translation_catalog,
)

__all__ = [
    "FakeCatalogLoader",
    "default_catalog_data",
    "make_i18n_service",
    "make_locale_resolver",
    "make_translation_catalog",
]
