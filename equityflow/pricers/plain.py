"""Pricer for plain (same-currency) equity cash flows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from equityflow.pricers.base import BaseEquityPricer

if TYPE_CHECKING:
    from equityflow.cashflows import EquityCashFlow


class EquityCashFlowPricer(BaseEquityPricer):
    """Price return read straight off the index: notional * (I_end / I_start - 1)."""

    def _price(self, cash_flow: EquityCashFlow) -> float:
        index = cash_flow.index
        base_level = index.fixing(cash_flow.base_date)
        final_level = index.fixing(cash_flow.fixing_date)
        return self._settle(cash_flow, final_level, base_level)
