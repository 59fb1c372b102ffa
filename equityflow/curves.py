"""
Interest-rate and dividend yield curves.

This module deliberately keeps curve math minimal and explicit:
- Times are **year fractions** from the curve reference date (Actual/365 Fixed
  unless another day counter is given).
- Curves are defined by **continuously compounded zero rates**; other
  compounding conventions are derived from the discount factor on request.
- `ZeroCurve` interpolates **linearly in zero rates** between pillars and
  extrapolates flat.

The same classes serve as equity-currency discount curves, quanto-currency
curves and dividend yield curves.
"""

from __future__ import annotations

import datetime
import math
from abc import ABC, abstractmethod
from enum import Enum

from equityflow.dates import Actual365Fixed
from equityflow.termstructure import TermStructure

# Time used to derive a non-continuous rate at the reference date itself.
_SHORT_TIME = 1.0e-4


class Compounding(Enum):
    """Rate compounding conventions accepted by `zero_rate`."""

    CONTINUOUS = "continuous"
    SIMPLE = "simple"
    COMPOUNDED = "compounded"


class YieldCurve(TermStructure, ABC):
    """
    Base class for curves defined by a continuously compounded zero rate.

    Subclasses implement `zero_rate_cc(t)`; discount factors and rates in other
    conventions follow from it.
    """

    @abstractmethod
    def zero_rate_cc(self, t: float) -> float:
        """Continuously compounded zero rate at time t."""
        ...

    def _to_time(self, t: float | datetime.date) -> float:
        if isinstance(t, datetime.date):
            return self.time_from_reference(t)
        return t

    def discount(self, t: float | datetime.date) -> float:
        r"""
        Discount factor to time t (or to a date).

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        time = self._to_time(t)
        self._check_time(time)
        return math.exp(-self.zero_rate_cc(time) * time)

    def zero_rate(
        self,
        t: float | datetime.date,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: int = 1,
    ) -> float:
        """Zero rate to time t (or to a date) in the requested convention."""
        time = self._to_time(t)
        self._check_time(time)
        if compounding is Compounding.CONTINUOUS:
            return self.zero_rate_cc(time)
        time = max(time, _SHORT_TIME)
        compound = 1.0 / self.discount(time)
        if compounding is Compounding.SIMPLE:
            return (compound - 1.0) / time
        if frequency <= 0:
            raise ValueError("frequency must be positive for compounded rates")
        return (compound ** (1.0 / (frequency * time)) - 1.0) * frequency

    def forward_rate(self, t1: float, t2: float) -> float:
        """Continuously compounded forward rate between t1 and t2."""
        if t2 <= t1:
            raise ValueError("t2 must be greater than t1")
        return math.log(self.discount(t1) / self.discount(t2)) / (t2 - t1)

    @abstractmethod
    def bumped(self, bump: float) -> "YieldCurve":
        """Copy of the curve with every zero rate shifted by `bump`."""
        ...


class FlatForward(YieldCurve):
    """Flat continuously compounded zero rate."""

    def __init__(
        self,
        rate: float,
        reference_date: datetime.date | None = None,
        day_counter: Actual365Fixed | None = None,
    ) -> None:
        super().__init__(reference_date, day_counter)
        self.rate = rate

    def zero_rate_cc(self, t: float) -> float:
        return self.rate

    def bumped(self, bump: float) -> "FlatForward":
        """Return a new flat curve shifted by `bump` (absolute; 1bp = 0.0001)."""
        return FlatForward(self.rate + bump, self._reference_date, self.day_counter)

    def __repr__(self) -> str:
        return f"FlatForward(rate={self.rate!r}, reference_date={self._reference_date!r})"


class ZeroCurve(YieldCurve):
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - **Pillars** are increasing times (year fractions) where the curve is defined.
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`.
    """

    def __init__(
        self,
        pillars: list[float],
        zero_rates_cc: list[float],
        reference_date: datetime.date | None = None,
        day_counter: Actual365Fixed | None = None,
    ) -> None:
        super().__init__(reference_date, day_counter)
        self.pillars = list(pillars)
        self.zero_rates_cc = list(zero_rates_cc)
        self._validate()

    def _validate(self) -> None:
        if len(self.pillars) != len(self.zero_rates_cc):
            raise ValueError("pillars and zero_rates_cc must have the same length")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        for i in range(1, len(self.pillars)):
            if self.pillars[i] <= self.pillars[i - 1]:
                raise ValueError("pillars must be strictly increasing")

    def zero_rate_cc(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates. t must be >= 0.
        """
        self._check_time(t)
        # Flat extrapolation beyond the end pillars.
        if t <= self.pillars[0]:
            return self.zero_rates_cc[0]
        if t >= self.pillars[-1]:
            return self.zero_rates_cc[-1]
        for i in range(len(self.pillars) - 1):
            if self.pillars[i] <= t <= self.pillars[i + 1]:
                t0, t1 = self.pillars[i], self.pillars[i + 1]
                r0, r1 = self.zero_rates_cc[i], self.zero_rates_cc[i + 1]
                return r0 + (r1 - r0) * (t - t0) / (t1 - t0)
        return self.zero_rates_cc[-1]

    def bumped(self, bump: float) -> "ZeroCurve":
        """Return a new curve with a parallel additive shift to all zero rates."""
        return ZeroCurve(
            pillars=list(self.pillars),
            zero_rates_cc=[r + bump for r in self.zero_rates_cc],
            reference_date=self._reference_date,
            day_counter=self.day_counter,
        )
