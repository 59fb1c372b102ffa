"""Tests for observables and relinkable handles."""

import gc

import pytest

from equityflow.errors import MissingMarketData
from equityflow.observable import Handle, Observable, RelinkableHandle
from equityflow.quotes import SimpleQuote
from equityflow.settings import saved_settings


class Counter:
    def __init__(self) -> None:
        self.calls = 0

    def update(self) -> None:
        self.calls += 1


def test_notify_calls_each_observer_once() -> None:
    """Registering the same callback twice still yields one call per notification."""
    subject = Observable()
    counter = Counter()
    subject.register_observer(counter.update)
    subject.register_observer(counter.update)
    subject.notify_observers()
    assert counter.calls == 1
    assert subject.observer_count == 1


def test_unregister_stops_notifications() -> None:
    subject = Observable()
    counter = Counter()
    subject.register_observer(counter.update)
    subject.unregister_observer(counter.update)
    subject.notify_observers()
    assert counter.calls == 0


def test_observers_are_held_weakly() -> None:
    """A dependent that goes away drops out of the notification graph."""
    subject = Observable()
    counter = Counter()
    subject.register_observer(counter.update)
    del counter
    gc.collect()
    assert subject.observer_count == 0
    subject.notify_observers()


def test_plain_function_observer() -> None:
    calls = []
    subject = Observable()
    subject.register_observer(lambda: calls.append(1))
    subject.notify_observers()
    assert calls == [1]


def test_empty_handle_cannot_be_dereferenced() -> None:
    handle: Handle = Handle()
    assert handle.empty
    with pytest.raises(MissingMarketData, match="empty Handle"):
        handle.link


def test_relink_notifies_synchronously() -> None:
    handle = RelinkableHandle(SimpleQuote(1.0))
    counter = Counter()
    handle.register_observer(counter.update)
    handle.link_to(SimpleQuote(2.0))
    assert counter.calls == 1
    assert handle.link.value() == 2.0
    handle.link_to(None)
    assert counter.calls == 2
    assert handle.empty


def test_relink_to_same_object_is_silent() -> None:
    quote = SimpleQuote(1.0)
    handle = RelinkableHandle(quote)
    counter = Counter()
    handle.register_observer(counter.update)
    handle.link_to(quote)
    assert counter.calls == 0


def test_handle_forwards_linked_quote_changes() -> None:
    quote = SimpleQuote(1.0)
    handle = RelinkableHandle(quote)
    counter = Counter()
    handle.register_observer(counter.update)
    quote.set_value(1.5)
    assert counter.calls == 1


def test_handle_stops_forwarding_after_relink() -> None:
    """Once relinked, changes to the old quote no longer reach dependents."""
    old = SimpleQuote(1.0)
    handle = RelinkableHandle(old)
    counter = Counter()
    handle.register_observer(counter.update)
    handle.link_to(SimpleQuote(2.0))
    old.set_value(3.0)
    assert counter.calls == 1


def test_simple_quote_set_value_returns_change() -> None:
    quote = SimpleQuote(100.0)
    assert quote.set_value(101.5) == 1.5
    quote.reset()
    assert not quote.is_valid()
    with pytest.raises(ValueError, match="invalid SimpleQuote"):
        quote.value()


def test_evaluation_date_change_notifies() -> None:
    import datetime

    counter = Counter()
    with saved_settings() as settings:
        settings.register_observer(counter.update)
        settings.evaluation_date = datetime.date(2030, 1, 2)
        settings.evaluation_date = datetime.date(2030, 1, 2)
        assert counter.calls == 1
        settings.unregister_observer(counter.update)
