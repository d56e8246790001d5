"""Tests for the Event observer list."""

from unittest.mock import MagicMock

import pytest

from nmeastream.nmea import Event, EventHandler


class TestEvent:
    """Tests for Event registration and calling."""

    def test_handlers_run_in_registration_order(self):
        calls = []
        event = Event()
        event.register_handler(lambda x: calls.append(("first", x)))
        event.register_handler(lambda x: calls.append(("second", x)))
        event(7)
        assert calls == [("first", 7), ("second", 7)]

    def test_iadd_keeps_the_same_event(self):
        event = Event()
        original = event
        event += MagicMock()
        assert event is original
        assert len(event) == 1

    def test_tokens_have_unique_ids(self):
        event = Event()
        first = event.register_handler(MagicMock())
        second = event.register_handler(MagicMock())
        assert isinstance(first, EventHandler)
        assert first.id != second.id

    def test_remove_by_token(self):
        handler = MagicMock()
        event = Event()
        token = event.register_handler(handler)
        assert event.remove_handler(token) is True
        event()
        handler.assert_not_called()

    def test_remove_by_id_with_isub(self):
        handler = MagicMock()
        event = Event()
        token = event.register_handler(handler)
        event -= token.id
        event()
        handler.assert_not_called()

    def test_remove_missing_returns_false(self):
        assert Event().remove_handler(12345) is False

    def test_reregistering_token_is_noop(self):
        handler = MagicMock()
        event = Event()
        token = event.register_handler(handler)
        assert event.register_handler(token) is token
        event()
        handler.assert_called_once_with()

    def test_disabled_event_does_not_call(self):
        handler = MagicMock()
        event = Event()
        event += handler
        event.enabled = False
        event()
        handler.assert_not_called()

    def test_clear(self):
        event = Event()
        event += MagicMock()
        event.clear()
        assert len(event) == 0

    def test_handler_exception_stops_later_handlers(self):
        later = MagicMock()
        event = Event()
        event += MagicMock(side_effect=RuntimeError("boom"))
        event += later
        with pytest.raises(RuntimeError):
            event()
        later.assert_not_called()
