"""Market quotes."""

from __future__ import annotations

import math

from equityflow.observable import Observable


class SimpleQuote(Observable):
    """Quote holding a value that can be set; setting it notifies dependents."""

    def __init__(self, value: float | None = None) -> None:
        super().__init__()
        self._value = value

    def value(self) -> float:
        if self._value is None:
            raise ValueError("invalid SimpleQuote")
        return self._value

    def is_valid(self) -> bool:
        return self._value is not None and not math.isnan(self._value)

    def set_value(self, value: float | None) -> float:
        """Set a new value and return the change (0.0 when the quote was invalid)."""
        diff = 0.0
        if self._value is not None and value is not None:
            diff = value - self._value
        if value != self._value:
            self._value = value
            self.notify_observers()
        return diff

    def reset(self) -> None:
        self.set_value(None)

    def __repr__(self) -> str:
        return f"SimpleQuote({self._value!r})"
