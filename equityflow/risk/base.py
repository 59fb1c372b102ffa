"""Base class for cash-flow risk measures computed by bump and reprice."""

from __future__ import annotations

from abc import ABC, abstractmethod

from equityflow.cashflows import EquityCashFlow


class BaseRiskMeasure(ABC):
    """
    Sensitivity of an `EquityCashFlow` amount to one market-data handle.

    Implementations relink the handle to bumped data, reprice the cash flow
    through its attached pricer and restore the original link afterwards.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Measure name reported alongside the value (e.g. "SpotDelta")."""
        ...

    @abstractmethod
    def compute(self, cash_flow: EquityCashFlow) -> float:
        """Amount change per unit bump of the handle; the cash flow must have a pricer."""
        ...
