"""GraphQL types for the equity cash-flow pricing API."""

from __future__ import annotations

import datetime
from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class CurveInput:
    """Curve definition: pillars (year fractions), zero rates (continuously compounded).

    Without a reference date the curve is anchored at the evaluation date.
    """

    pillars: list[float]
    zero_rates_cc: list[float]
    reference_date: Optional[datetime.date] = None


@strawberry.input
class VolatilityInput:
    """Flat Black volatility."""

    volatility: float
    reference_date: Optional[datetime.date] = None


@strawberry.input
class FixingInput:
    """Historical index fixing."""

    fixing_date: datetime.date
    value: float


@strawberry.input
class EquityMarketInput:
    """Equity market: evaluation date, equity-currency and dividend curves, spot, history."""

    evaluation_date: datetime.date
    interest_rate_curve: CurveInput
    dividend_curve: Optional[CurveInput] = None
    spot: Optional[float] = None
    fixings: Optional[list[FixingInput]] = None


@strawberry.input
class QuantoInput:
    """Quanto settlement: settlement-currency curve, vols and equity/FX correlation."""

    quanto_currency_curve: CurveInput
    equity_volatility: VolatilityInput
    fx_volatility: VolatilityInput
    correlation: float


@strawberry.input
class EquityCashFlowInput:
    """Equity cash flow paying the index return between base and fixing dates."""

    index_name: str
    notional: float
    base_date: datetime.date
    fixing_date: datetime.date
    payment_date: Optional[datetime.date] = None
    growth_only: bool = True
    calendar: str = "TARGET"


# --- Output types (response payloads) ---


@strawberry.type
class RiskMeasures:
    """Risk measures: spot delta (spot bump), PV01 (equity-currency curve bump)."""

    spot_delta: Optional[float] = None
    pv01: Optional[float] = None


@strawberry.type
class PricingResult:
    """Pricing result: cash-flow amount and optional risk measures."""

    amount: float
    index_start: float
    index_end: float
    risk_measures: Optional[RiskMeasures] = None
