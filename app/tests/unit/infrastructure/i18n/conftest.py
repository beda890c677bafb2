"""Feature-level fixtures for i18n system tests.

Provides catalog directories, loaders and wired services for locale
switching and translation scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import CatalogStore, Language, YAMLCatalogLoader
from infrastructure.persistence import InMemoryPreferenceStore
from tests.factories.i18n import FakeCatalogLoader, make_i18n_service


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalog files.

    Returns a directory structure like:
    - wallet.en.yml
    - settings.en.yml
    - wallet.ko.yml
    """
    wallet_en = {
        "wallet": {
            "send": {
                "title": "Send WLC",
                "amount": "Amount ({symbol})",
            },
            "receive": {"title": "Receive"},
        }
    }
    with open(tmp_path / "wallet.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(wallet_en, f, allow_unicode=True)

    settings_en = {"settings": {"language": "Language", "cancel": "Cancel"}}
    with open(tmp_path / "settings.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(settings_en, f, allow_unicode=True)

    wallet_ko = {
        "wallet": {
            "send": {
                "title": "WLC 보내기",
                "amount": "금액 ({symbol})",
            },
        }
    }
    with open(tmp_path / "wallet.ko.yml", "w", encoding="utf-8") as f:
        yaml.dump(wallet_ko, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLCatalogLoader for temporary translations directory."""
    return YAMLCatalogLoader(temp_translations_dir)


@pytest.fixture
def fake_loader():
    """In-memory loader with catalogs for every supported language."""
    return FakeCatalogLoader()


@pytest.fixture
def store(fake_loader):
    """Empty CatalogStore backed by the fake loader."""
    return CatalogStore(fake_loader)


@pytest.fixture
def preferences():
    """Empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture
def service(fake_loader, preferences):
    """I18nService wired to the fake loader, with no system locale hint."""
    return make_i18n_service(loader=fake_loader, preferences=preferences)


@pytest.fixture
def received():
    """Listener that records every language it is notified with."""

    class _Recorder:
        def __init__(self):
            self.languages = []

        def __call__(self, language: Language) -> None:
            self.languages.append(language)

    return _Recorder()
