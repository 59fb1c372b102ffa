"""
Change notification and relinkable market-data handles.

Everything that can move (quotes, curves, the evaluation date, fixing
histories) is an `Observable`. Dependents register a zero-argument callback
and are called back synchronously whenever the observable changes, before the
mutating call returns.

Bound-method callbacks are held through `weakref.WeakMethod`: an observable
never keeps its dependents alive, so a cash flow that goes out of scope simply
drops out of the notification graph.

A `Handle` is the shared indirection cell in front of a term structure or
quote. Pricers and indexes hold handles, never the objects themselves, so a
`RelinkableHandle.link_to(...)` swaps market data under every dependent at
once and invalidates their cached results.
"""

from __future__ import annotations

import inspect
import logging
import weakref
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from equityflow.errors import MissingMarketData

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[], None]


def _callback_key(callback: Callback) -> Any:
    if inspect.ismethod(callback):
        return (id(callback.__self__), callback.__func__)
    return id(callback)


class Observable:
    """Holds the set of callbacks to run when this object changes."""

    def __init__(self) -> None:
        self._observers: dict[Any, Callable[[], Callback | None]] = {}

    def register_observer(self, callback: Callback) -> None:
        """Subscribe `callback`; registering the same callback twice is a no-op."""
        if inspect.ismethod(callback):
            ref: Callable[[], Callback | None] = weakref.WeakMethod(callback)
        else:
            ref = lambda: callback  # noqa: E731
        self._observers[_callback_key(callback)] = ref

    def unregister_observer(self, callback: Callback) -> None:
        self._observers.pop(_callback_key(callback), None)

    @property
    def observer_count(self) -> int:
        """Number of live subscribers."""
        return sum(1 for ref in self._observers.values() if ref() is not None)

    def notify_observers(self) -> None:
        """Call every live subscriber; dead weak references are pruned."""
        # Callbacks may (un)register while we iterate.
        for key, ref in list(self._observers.items()):
            callback = ref()
            if callback is None:
                self._observers.pop(key, None)
                continue
            callback()


class Handle(Generic[T]):
    """
    Read-only reference to a term structure or quote.

    The handle is itself observable: it notifies when it is relinked and
    forwards notifications raised by the linked object (e.g. a quote whose
    value is set).
    """

    def __init__(self, link: T | None = None) -> None:
        self._link: T | None = None
        self._notifier = Observable()
        self._set_link(link)

    def _set_link(self, link: T | None) -> None:
        if isinstance(self._link, Observable):
            self._link.unregister_observer(self._forward)
        self._link = link
        if isinstance(link, Observable):
            link.register_observer(self._forward)

    def _forward(self) -> None:
        self._notifier.notify_observers()

    @property
    def empty(self) -> bool:
        return self._link is None

    @property
    def link(self) -> T:
        """The linked object. Raises MissingMarketData when the handle is empty."""
        if self._link is None:
            raise MissingMarketData("empty Handle cannot be dereferenced")
        return self._link

    def register_observer(self, callback: Callback) -> None:
        self._notifier.register_observer(callback)

    def unregister_observer(self, callback: Callback) -> None:
        self._notifier.unregister_observer(callback)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._link!r})"


class RelinkableHandle(Handle[T]):
    """Handle whose target can be swapped after construction."""

    def link_to(self, link: T | None) -> None:
        """Point the handle at `link` (None empties it) and notify dependents."""
        if link is self._link:
            return
        logger.debug("relinking %r to %r", self, link)
        self._set_link(link)
        self._notifier.notify_observers()
