"""
Equity cash flow: pays the price return of an equity index over a period.

The cash flow holds dates, notional and references to its index and pricer.
The amount is computed by the pricer on first request and cached; any change
notified by the index, the pricer or (through them) a market-data handle, the
fixing history or the evaluation date drops the cached value.
"""

from __future__ import annotations

import datetime
import logging

from equityflow.errors import NoPricerAttached
from equityflow.indexes import EquityIndex
from equityflow.interfaces import CashFlowPricer
from equityflow.observable import Observable
from equityflow.settings import settings

logger = logging.getLogger(__name__)


class EquityCashFlow(Observable):
    """
    Cash flow paying

        notional * (I(fixing_date) / I(base_date) - 1)      growth_only=True
        notional * I(fixing_date) / I(base_date)            growth_only=False

    `base_date` is the start of the return period and `fixing_date` its end;
    they are also exposed as `start_date` and `end_date`. The payment date
    defaults to the fixing date.
    """

    def __init__(
        self,
        notional: float,
        index: EquityIndex,
        base_date: datetime.date,
        fixing_date: datetime.date,
        payment_date: datetime.date | None = None,
        growth_only: bool = True,
    ) -> None:
        super().__init__()
        self._notional = notional
        self._index = index
        self._base_date = base_date
        self._fixing_date = fixing_date
        self._payment_date = payment_date if payment_date is not None else fixing_date
        self._growth_only = growth_only
        self._pricer: CashFlowPricer | None = None
        self._amount: float | None = None
        index.register_observer(self.update)

    @property
    def notional(self) -> float:
        return self._notional

    @property
    def index(self) -> EquityIndex:
        return self._index

    @property
    def base_date(self) -> datetime.date:
        return self._base_date

    @property
    def fixing_date(self) -> datetime.date:
        return self._fixing_date

    @property
    def start_date(self) -> datetime.date:
        return self._base_date

    @property
    def end_date(self) -> datetime.date:
        return self._fixing_date

    @property
    def payment_date(self) -> datetime.date:
        return self._payment_date

    def date(self) -> datetime.date:
        return self._payment_date

    @property
    def growth_only(self) -> bool:
        return self._growth_only

    @property
    def pricer(self) -> CashFlowPricer | None:
        return self._pricer

    @property
    def is_calculated(self) -> bool:
        """True while a cached amount is held."""
        return self._amount is not None

    def set_pricer(self, pricer: CashFlowPricer | None) -> None:
        if self._pricer is not None:
            self._pricer.unregister_observer(self.update)
        self._pricer = pricer
        if pricer is not None:
            pricer.register_observer(self.update)
        self.update()

    def update(self) -> None:
        """Drop the cached amount and pass the notification on."""
        self._amount = None
        self.notify_observers()

    def amount(self) -> float:
        if self._amount is None:
            if self._pricer is None:
                raise NoPricerAttached(f"No pricer set for the {self.index.name} equity cash flow.")
            self._amount = self._pricer.amount(self)
            logger.debug("computed %s cash flow amount %s", self.index.name, self._amount)
        return self._amount

    def has_occurred(self, ref_date: datetime.date | None = None) -> bool:
        """True once the payment date lies strictly before `ref_date` (default: evaluation date)."""
        ref = ref_date if ref_date is not None else settings.evaluation_date
        return self._payment_date < ref

    def __repr__(self) -> str:
        return (
            f"EquityCashFlow(notional={self.notional!r}, index={self.index.name!r}, "
            f"base_date={self.base_date}, fixing_date={self.fixing_date})"
        )
