"""Parallel PV01 risk measure (bump-and-reprice)."""

from __future__ import annotations

from dataclasses import dataclass

from equityflow.cashflows import EquityCashFlow
from equityflow.interfaces import YieldTermStructure
from equityflow.observable import RelinkableHandle
from equityflow.risk.base import BaseRiskMeasure


@dataclass
class PV01Parallel(BaseRiskMeasure):
    """Parallel PV01: change in amount for a parallel shift of one curve."""

    curve: RelinkableHandle[YieldTermStructure]
    bump_bp: float = 1.0
    label: str = "CURVE"

    @property
    def name(self) -> str:
        return f"PV01_{self.label}"

    def compute(self, cash_flow: EquityCashFlow) -> float:
        """A(bumped) - A(base) for a parallel zero-rate shift."""
        original = self.curve.link
        amount_base = cash_flow.amount()
        self.curve.link_to(original.bumped(self.bump_bp / 10000.0))
        try:
            amount_bumped = cash_flow.amount()
        finally:
            self.curve.link_to(original)
        return amount_bumped - amount_base
