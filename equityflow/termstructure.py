"""
Shared behavior of curves and volatility surfaces.

A term structure is anchored at a reference date. When built without one it
floats with the evaluation date: it follows `settings` and notifies its own
dependents whenever the evaluation date moves.
"""

from __future__ import annotations

import datetime

from equityflow.dates import Actual365Fixed
from equityflow.observable import Observable
from equityflow.settings import settings


class TermStructure(Observable):
    """Reference date, day counter and date-to-time conversion."""

    def __init__(
        self,
        reference_date: datetime.date | None = None,
        day_counter: Actual365Fixed | None = None,
    ) -> None:
        super().__init__()
        self._reference_date = reference_date
        self.day_counter = day_counter or Actual365Fixed()
        if reference_date is None:
            settings.register_observer(self.notify_observers)

    @property
    def reference_date(self) -> datetime.date:
        if self._reference_date is None:
            return settings.evaluation_date
        return self._reference_date

    @property
    def floating(self) -> bool:
        """True when the reference date follows the evaluation date."""
        return self._reference_date is None

    def time_from_reference(self, d: datetime.date) -> float:
        """Year fraction from the reference date to `d`."""
        return self.day_counter.year_fraction(self.reference_date, d)

    def _check_time(self, t: float) -> None:
        if t < 0:
            raise ValueError(f"t must be >= 0 (got {t} before reference date {self.reference_date})")
