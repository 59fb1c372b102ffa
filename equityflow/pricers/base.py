"""Base pricer abstract class for equity cash-flow pricing strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from equityflow.errors import DateOrderError
from equityflow.observable import Handle, Observable

if TYPE_CHECKING:
    from equityflow.cashflows import EquityCashFlow


class BaseEquityPricer(Observable, ABC):
    """Abstract base class for equity cash-flow pricers.

    `amount()` runs the shared date check, then the subclass's market-data
    validation, then its pricing formula. Handles passed to
    `_register_handles` relay their notifications to whoever observes the
    pricer.
    """

    def _register_handles(self, *handles: Handle) -> None:
        for handle in handles:
            handle.register_observer(self.notify_observers)

    def amount(self, cash_flow: EquityCashFlow) -> float:
        self._check_dates(cash_flow)
        self._validate(cash_flow)
        return self._price(cash_flow)

    @staticmethod
    def _check_dates(cash_flow: EquityCashFlow) -> None:
        if cash_flow.base_date > cash_flow.fixing_date:
            raise DateOrderError("Fixing date cannot fall before base date.")

    def _validate(self, cash_flow: EquityCashFlow) -> None:
        """Market-data preconditions; none by default."""

    @abstractmethod
    def _price(self, cash_flow: EquityCashFlow) -> float:
        """Settlement amount once preconditions hold."""
        ...

    @staticmethod
    def _settle(cash_flow: EquityCashFlow, final_level: float, base_level: float) -> float:
        ratio = final_level / base_level
        if cash_flow.growth_only:
            return cash_flow.notional * (ratio - 1.0)
        return cash_flow.notional * ratio
