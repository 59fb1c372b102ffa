"""
Risk measures implemented via "bump and reprice".

Bumps are applied by relinking a market-data handle, so the cash flow's
cached amount is invalidated by the same notification path as any market
move. The original link is always restored.
"""

from __future__ import annotations

from equityflow.cashflows import EquityCashFlow
from equityflow.interfaces import Quote, YieldTermStructure
from equityflow.observable import RelinkableHandle
from equityflow.risk.base import BaseRiskMeasure
from equityflow.risk.pv01 import PV01Parallel
from equityflow.risk.spot_delta import SpotDelta


def spot_delta(
    cash_flow: EquityCashFlow,
    spot: RelinkableHandle[Quote],
    bump_pct: float = 0.01,
) -> float:
    """
    Spot delta: (A(bumped) - A(base)) / (spot_bumped - spot).
    Spot is bumped by factor (1 + bump_pct).
    """
    return SpotDelta(spot=spot, bump_pct=bump_pct).compute(cash_flow)


def pv01_parallel(
    cash_flow: EquityCashFlow,
    curve: RelinkableHandle[YieldTermStructure],
    bump_bp: float = 1.0,
) -> float:
    """
    PV01: change in amount when the curve is bumped by bump_bp basis points (parallel).
    Returns A(bumped) - A(base).
    """
    return PV01Parallel(curve=curve, bump_bp=bump_bp).compute(cash_flow)


__all__ = [
    "BaseRiskMeasure",
    "SpotDelta",
    "PV01Parallel",
    "spot_delta",
    "pv01_parallel",
]
