"""Tests for infrastructure.i18n.listeners module."""

from infrastructure.i18n import Language, LanguageChangeListeners


class TestLanguageChangeListeners:
    """Tests for LanguageChangeListeners."""

    def test_notify_calls_in_registration_order(self):
        listeners = LanguageChangeListeners()
        calls = []
        listeners.subscribe(lambda lang: calls.append(("first", lang)))
        listeners.subscribe(lambda lang: calls.append(("second", lang)))

        delivered = listeners.notify(Language.KO)

        assert delivered == 2
        assert calls == [("first", Language.KO), ("second", Language.KO)]

    def test_duplicate_subscription_called_twice(self, received):
        listeners = LanguageChangeListeners()
        listeners.subscribe(received)
        listeners.subscribe(received)

        listeners.notify(Language.JA)

        assert received.languages == [Language.JA, Language.JA]
        assert len(listeners) == 2

    def test_unsubscribe_removes_every_registration(self, received):
        listeners = LanguageChangeListeners()
        listeners.subscribe(received)
        listeners.subscribe(received)

        listeners.unsubscribe(received)
        listeners.notify(Language.JA)

        assert received.languages == []
        assert len(listeners) == 0

    def test_unsubscribe_unknown_listener_is_ignored(self, received):
        listeners = LanguageChangeListeners()
        listeners.unsubscribe(received)
        assert len(listeners) == 0

    def test_failing_listener_does_not_block_others(self, received):
        """A raising listener is skipped and the rest are still notified."""
        listeners = LanguageChangeListeners()

        def broken(language):
            raise RuntimeError("listener exploded")

        listeners.subscribe(broken)
        listeners.subscribe(received)

        delivered = listeners.notify(Language.ES)

        assert delivered == 1
        assert received.languages == [Language.ES]

    def test_unsubscribe_during_notify_uses_snapshot(self, received):
        """Listeners removed mid-notification still receive the current pass."""
        listeners = LanguageChangeListeners()

        def remove_other(language):
            listeners.unsubscribe(received)

        listeners.subscribe(remove_other)
        listeners.subscribe(received)

        listeners.notify(Language.FR)
        assert received.languages == [Language.FR]

        listeners.notify(Language.AR)
        assert received.languages == [Language.FR]

    def test_subscribe_during_notify_waits_for_next_pass(self, received):
        listeners = LanguageChangeListeners()

        def add_other(language):
            listeners.subscribe(received)

        listeners.subscribe(add_other)
        listeners.notify(Language.ZH)
        assert received.languages == []

        listeners.notify(Language.RU)
        assert received.languages == [Language.RU]

    def test_clear(self, received):
        listeners = LanguageChangeListeners()
        listeners.subscribe(received)
        listeners.clear()
        assert listeners.notify(Language.EN) == 0
