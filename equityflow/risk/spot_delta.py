"""Equity spot delta (spot bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass

from equityflow.cashflows import EquityCashFlow
from equityflow.interfaces import Quote
from equityflow.observable import RelinkableHandle
from equityflow.quotes import SimpleQuote
from equityflow.risk.base import BaseRiskMeasure


@dataclass
class SpotDelta(BaseRiskMeasure):
    """Spot delta: (A(bumped) - A(base)) / (spot_bumped - spot).

    The spot handle is relinked to a bumped quote for the repricing and
    linked back to the original quote afterwards.
    """

    spot: RelinkableHandle[Quote]
    bump_pct: float = 0.01

    @property
    def name(self) -> str:
        return "SpotDelta"

    def compute(self, cash_flow: EquityCashFlow) -> float:
        original = self.spot.link
        spot = original.value()
        spot_bumped = spot * (1.0 + self.bump_pct)
        amount_base = cash_flow.amount()
        self.spot.link_to(SimpleQuote(spot_bumped))
        try:
            amount_bumped = cash_flow.amount()
        finally:
            self.spot.link_to(original)
        return (amount_bumped - amount_base) / (spot_bumped - spot)
