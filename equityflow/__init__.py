"""Equity cash-flow pricing: handles, term structures, indexes, cash flows, pricers and risk."""

from equityflow.cashflows import EquityCashFlow
from equityflow.curves import Compounding, FlatForward, ZeroCurve
from equityflow.dates import TARGET, Actual365Fixed, BusinessDayConvention, Calendar, WeekendsOnly
from equityflow.errors import (
    DateOrderError,
    EquityFlowError,
    ErrorCode,
    InconsistentReferenceDates,
    MissingFixing,
    MissingMarketData,
    NoPricerAttached,
)
from equityflow.indexes import EquityIndex, IndexManager, index_manager
from equityflow.interfaces import BlackVolTermStructure, CashFlowPricer, Quote, YieldTermStructure
from equityflow.observable import Handle, Observable, RelinkableHandle
from equityflow.pricers import BaseEquityPricer, EquityCashFlowPricer, EquityQuantoCashFlowPricer
from equityflow.quotes import SimpleQuote
from equityflow.risk import PV01Parallel, SpotDelta, pv01_parallel, spot_delta
from equityflow.settings import Settings, saved_settings, settings
from equityflow.volatility import BlackConstantVol

__all__ = [
    "Quote",
    "YieldTermStructure",
    "BlackVolTermStructure",
    "CashFlowPricer",
    "Observable",
    "Handle",
    "RelinkableHandle",
    "Settings",
    "settings",
    "saved_settings",
    "Actual365Fixed",
    "BusinessDayConvention",
    "Calendar",
    "WeekendsOnly",
    "TARGET",
    "Compounding",
    "FlatForward",
    "ZeroCurve",
    "BlackConstantVol",
    "SimpleQuote",
    "IndexManager",
    "index_manager",
    "EquityIndex",
    "EquityCashFlow",
    "BaseEquityPricer",
    "EquityCashFlowPricer",
    "EquityQuantoCashFlowPricer",
    "SpotDelta",
    "PV01Parallel",
    "spot_delta",
    "pv01_parallel",
    "ErrorCode",
    "EquityFlowError",
    "DateOrderError",
    "MissingMarketData",
    "InconsistentReferenceDates",
    "MissingFixing",
    "NoPricerAttached",
]
