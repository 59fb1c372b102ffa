"""Pricing strategies for equity cash flows."""

from equityflow.pricers.base import BaseEquityPricer
from equityflow.pricers.plain import EquityCashFlowPricer
from equityflow.pricers.quanto import EquityQuantoCashFlowPricer

__all__ = [
    "BaseEquityPricer",
    "EquityCashFlowPricer",
    "EquityQuantoCashFlowPricer",
]
