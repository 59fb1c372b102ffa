"""Black volatility term structures."""

from __future__ import annotations

import datetime

from equityflow.dates import Actual365Fixed
from equityflow.termstructure import TermStructure


class BlackConstantVol(TermStructure):
    """Volatility flat in both time and strike."""

    def __init__(
        self,
        volatility: float,
        reference_date: datetime.date | None = None,
        day_counter: Actual365Fixed | None = None,
    ) -> None:
        super().__init__(reference_date, day_counter)
        if volatility < 0:
            raise ValueError("volatility must be >= 0")
        self.volatility = volatility

    def black_vol(self, d: datetime.date, strike: float) -> float:
        self._check_time(self.time_from_reference(d))
        return self.volatility

    def black_variance(self, d: datetime.date, strike: float) -> float:
        """Total variance sigma^2 * t to date `d`."""
        t = self.time_from_reference(d)
        self._check_time(t)
        return self.volatility * self.volatility * t

    def __repr__(self) -> str:
        return f"BlackConstantVol(volatility={self.volatility!r}, reference_date={self._reference_date!r})"
