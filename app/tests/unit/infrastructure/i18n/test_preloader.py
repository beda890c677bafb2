"""Tests for infrastructure.i18n.preloader module."""

import asyncio

import pytest

from infrastructure.i18n import CatalogStore, Language, preload_all
from tests.factories.i18n import FakeCatalogLoader


class TestPreloadAll:
    """Tests for preload_all()."""

    @pytest.mark.asyncio
    async def test_loads_every_language(self, store):
        """preload_all() loads a catalog for every supported language."""
        outcome = await preload_all(store)

        assert set(outcome) == set(Language)
        assert all(result.is_success for result in outcome.values())
        assert set(store.loaded_languages()) == set(Language)

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_others(self):
        """One failing language does not prevent the rest from loading."""
        store = CatalogStore(FakeCatalogLoader(failing=[Language.RU]))

        outcome = await preload_all(store)

        assert not outcome[Language.RU].is_success
        assert outcome[Language.RU].error_code == "LOAD_ERROR"
        assert not store.is_loaded(Language.RU)
        for language in Language:
            if language != Language.RU:
                assert store.is_loaded(language)

    @pytest.mark.asyncio
    async def test_unexpected_exception_does_not_stop_others(self):
        """A loader raising something other than CatalogLoadError is isolated too."""
        loader = FakeCatalogLoader(raising={Language.RU: OSError("network down")})
        store = CatalogStore(loader)

        outcome = await preload_all(store)

        assert set(outcome) == set(Language)
        assert outcome[Language.RU].error_code == "LOAD_ERROR"
        assert set(store.loaded_languages()) == set(Language) - {Language.RU}

    @pytest.mark.asyncio
    async def test_loads_start_concurrently(self, store, fake_loader):
        """Every load is started before any of them completes."""
        gate = fake_loader.hold(Language.EN)

        task = asyncio.create_task(preload_all(store))
        for _ in range(5):
            await asyncio.sleep(0)

        assert sorted(fake_loader.calls) == sorted(Language)
        assert not task.done()

        gate.set()
        await task
        assert store.is_loaded(Language.EN)

    @pytest.mark.asyncio
    async def test_subset_of_languages(self, store, fake_loader):
        outcome = await preload_all(store, [Language.KO, Language.JA])

        assert list(outcome) == [Language.KO, Language.JA]
        assert sorted(fake_loader.calls) == sorted([Language.KO, Language.JA])

    @pytest.mark.asyncio
    async def test_joins_load_already_in_flight(self, store, fake_loader):
        """A preload overlapping a pending load does not fetch twice."""
        gate = fake_loader.hold(Language.KO)
        pending = asyncio.create_task(store.load_catalog(Language.KO))
        await asyncio.sleep(0)

        preload = asyncio.create_task(preload_all(store))
        await asyncio.sleep(0)
        gate.set()
        await asyncio.gather(pending, preload)

        assert fake_loader.call_count(Language.KO) == 1
