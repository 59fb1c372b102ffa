"""
Equity indexes and their fixing history.

An `EquityIndex` answers `fixing(date)`: historical fixings up to the
evaluation date come from the `IndexManager` store, later ones are projected
from spot with the equity-currency interest rate curve and the dividend curve.

History is keyed by index name, not by index instance, so a clone bound to
different handles (say, without dividends) sees exactly the same fixings.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable

from equityflow.dates import Calendar
from equityflow.errors import MissingFixing
from equityflow.interfaces import Quote, YieldTermStructure
from equityflow.observable import Handle, Observable
from equityflow.settings import settings

logger = logging.getLogger(__name__)


class IndexManager:
    """Fixing histories by (case-insensitive) index name."""

    def __init__(self) -> None:
        self._histories: dict[str, dict[datetime.date, float]] = {}
        self._notifiers: dict[str, Observable] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.upper()

    def notifier(self, name: str) -> Observable:
        """Observable fired whenever the history of `name` changes."""
        return self._notifiers.setdefault(self._key(name), Observable())

    def has_history(self, name: str) -> bool:
        return bool(self._histories.get(self._key(name)))

    def get_history(self, name: str) -> dict[datetime.date, float]:
        """Copy of the stored fixings, sorted by date."""
        history = self._histories.get(self._key(name), {})
        return dict(sorted(history.items()))

    def get_fixing(self, name: str, d: datetime.date) -> float | None:
        return self._histories.get(self._key(name), {}).get(d)

    def add_fixings(
        self,
        name: str,
        fixings: Iterable[tuple[datetime.date, float]],
        force_overwrite: bool = False,
    ) -> None:
        """
        Store fixings for `name`.

        An existing fixing may only be replaced by a different value when
        `force_overwrite` is set; otherwise nothing is stored and ValueError
        is raised.
        """
        history = self._histories.setdefault(self._key(name), {})
        staged = dict(history)
        for d, value in fixings:
            existing = staged.get(d)
            if existing is not None and existing != value and not force_overwrite:
                raise ValueError(
                    f"At least one duplicated fixing provided: {d}, {value} "
                    f"while {existing} value is already present"
                )
            staged[d] = value
        history.clear()
        history.update(staged)
        logger.debug("stored fixings for %s (%d in history)", name, len(history))
        self.notifier(name).notify_observers()

    def clear_history(self, name: str) -> None:
        self._histories.pop(self._key(name), None)
        self.notifier(name).notify_observers()

    def clear_histories(self) -> None:
        names = list(self._histories)
        self._histories.clear()
        for name in names:
            self.notifier(name).notify_observers()


index_manager = IndexManager()


class EquityIndex(Observable):
    """
    Equity index with historical and projected fixings.

    Projection (dates after the evaluation date):

        F(T) = S0 * D_div(T) / D_rate(T) = S0 * exp((r - q) * T)

    with r and q continuously compounded zero rates of the interest rate and
    dividend curves. An empty dividend handle means q = 0. An empty spot handle
    falls back to the fixing stored for the evaluation date.
    """

    def __init__(
        self,
        name: str,
        fixing_calendar: Calendar,
        interest_rate_curve: Handle[YieldTermStructure] | None = None,
        dividend_curve: Handle[YieldTermStructure] | None = None,
        spot: Handle[Quote] | None = None,
        manager: IndexManager | None = None,
    ) -> None:
        super().__init__()
        self._name = name
        self._fixing_calendar = fixing_calendar
        self._interest_rate_curve = interest_rate_curve if interest_rate_curve is not None else Handle()
        self._dividend_curve = dividend_curve if dividend_curve is not None else Handle()
        self._spot = spot if spot is not None else Handle()
        self._manager = manager if manager is not None else index_manager

        self._interest_rate_curve.register_observer(self.update)
        self._dividend_curve.register_observer(self.update)
        self._spot.register_observer(self.update)
        self._manager.notifier(name).register_observer(self.update)
        settings.register_observer(self.update)

    def update(self) -> None:
        self.notify_observers()

    @property
    def name(self) -> str:
        return self._name

    @property
    def fixing_calendar(self) -> Calendar:
        return self._fixing_calendar

    @property
    def equity_interest_rate_curve(self) -> Handle[YieldTermStructure]:
        return self._interest_rate_curve

    @property
    def equity_dividend_curve(self) -> Handle[YieldTermStructure]:
        return self._dividend_curve

    @property
    def spot(self) -> Handle[Quote]:
        return self._spot

    def is_valid_fixing_date(self, d: datetime.date) -> bool:
        return self._fixing_calendar.is_business_day(d)

    # --- history ---

    def add_fixing(self, d: datetime.date, value: float, force_overwrite: bool = False) -> None:
        self.add_fixings([(d, value)], force_overwrite)

    def add_fixings(
        self,
        fixings: Iterable[tuple[datetime.date, float]],
        force_overwrite: bool = False,
    ) -> None:
        fixings = list(fixings)
        for d, _ in fixings:
            if not self.is_valid_fixing_date(d):
                raise ValueError(f"Fixing date {d} is not valid for {self.name}")
        self._manager.add_fixings(self.name, fixings, force_overwrite)

    def clear_fixings(self) -> None:
        self._manager.clear_history(self.name)

    def time_series(self) -> dict[datetime.date, float]:
        return self._manager.get_history(self.name)

    def past_fixing(self, d: datetime.date) -> float | None:
        """Stored fixing for `d`, or None."""
        return self._manager.get_fixing(self.name, d)

    # --- fixings ---

    def fixing(self, d: datetime.date, forecast_todays_fixing: bool = False) -> float:
        """Historical fixing up to the evaluation date, projected fixing after it."""
        if not self.is_valid_fixing_date(d):
            raise ValueError(f"Fixing date {d} is not valid for {self.name}")
        today = settings.evaluation_date
        if d > today or (d == today and forecast_todays_fixing):
            return self.forecast_fixing(d)
        past = self.past_fixing(d)
        if past is None:
            raise MissingFixing(f"Missing {self.name} fixing for {d}")
        return past

    def spot_value(self) -> float:
        """Spot level: the spot quote if linked, else today's stored fixing."""
        if not self._spot.empty:
            return self._spot.link.value()
        today = settings.evaluation_date
        past = self.past_fixing(today)
        if past is None:
            raise MissingFixing(
                f"Cannot determine {self.name} spot: spot handle is empty "
                f"and there is no fixing for {today}"
            )
        return past

    def forecast_fixing(self, d: datetime.date) -> float:
        if self._interest_rate_curve.empty:
            raise MissingFixing(
                f"null interest rate term structure set to this instance of {self.name}"
            )
        forward = self.spot_value() / self._interest_rate_curve.link.discount(d)
        if not self._dividend_curve.empty:
            forward *= self._dividend_curve.link.discount(d)
        return forward

    def clone(
        self,
        interest_rate_curve: Handle[YieldTermStructure],
        dividend_curve: Handle[YieldTermStructure],
        spot: Handle[Quote],
    ) -> "EquityIndex":
        """Same name, calendar and history, bound to other market-data handles."""
        return EquityIndex(
            self.name,
            self.fixing_calendar,
            interest_rate_curve,
            dividend_curve,
            spot,
            manager=self._manager,
        )

    def __repr__(self) -> str:
        return f"EquityIndex({self.name!r})"
