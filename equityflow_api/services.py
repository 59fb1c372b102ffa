"""Service layer: convert GraphQL inputs to library objects and run pricing/risk."""

from __future__ import annotations

import logging
from typing import Optional

from equityflow.cashflows import EquityCashFlow
from equityflow.curves import ZeroCurve
from equityflow.dates import TARGET, Calendar, WeekendsOnly
from equityflow.indexes import EquityIndex, IndexManager
from equityflow.observable import RelinkableHandle
from equityflow.pricers import EquityCashFlowPricer, EquityQuantoCashFlowPricer
from equityflow.pricers.base import BaseEquityPricer
from equityflow.quotes import SimpleQuote
from equityflow.risk import pv01_parallel, spot_delta
from equityflow.settings import saved_settings
from equityflow.volatility import BlackConstantVol

from equityflow_api.types import (
    CurveInput,
    EquityCashFlowInput,
    EquityMarketInput,
    PricingResult,
    QuantoInput,
    RiskMeasures,
    VolatilityInput,
)

logger = logging.getLogger(__name__)

_CALENDARS: dict[str, type[Calendar]] = {
    "TARGET": TARGET,
    "WEEKENDS_ONLY": WeekendsOnly,
}


def _calendar_from_input(name: str) -> Calendar:
    try:
        return _CALENDARS[name.upper()]()
    except KeyError:
        raise ValueError(
            f"unknown calendar '{name}'. Available calendars: {list(_CALENDARS)}"
        ) from None


def _curve_from_input(c: CurveInput) -> ZeroCurve:
    """Build ZeroCurve from GraphQL CurveInput."""
    return ZeroCurve(
        pillars=list(c.pillars),
        zero_rates_cc=list(c.zero_rates_cc),
        reference_date=c.reference_date,
    )


def _vol_from_input(v: VolatilityInput) -> BlackConstantVol:
    return BlackConstantVol(v.volatility, reference_date=v.reference_date)


def _pricer_from_input(quanto: Optional[QuantoInput]) -> BaseEquityPricer:
    if quanto is None:
        return EquityCashFlowPricer()
    return EquityQuantoCashFlowPricer(
        RelinkableHandle(_curve_from_input(quanto.quanto_currency_curve)),
        RelinkableHandle(_vol_from_input(quanto.equity_volatility)),
        RelinkableHandle(_vol_from_input(quanto.fx_volatility)),
        RelinkableHandle(SimpleQuote(quanto.correlation)),
    )


def price_equity_cash_flow(
    cash_flow: EquityCashFlowInput,
    market: EquityMarketInput,
    quanto: Optional[QuantoInput] = None,
    calculate_spot_delta: bool = False,
    calculate_pv01: bool = False,
    spot_bump_pct: float = 0.01,
    pv01_bump_bp: float = 1.0,
) -> PricingResult:
    """Price an equity cash flow (plain, or quanto when `quanto` is given) and optional risks."""
    if calculate_spot_delta and market.spot is None:
        raise ValueError("spot delta requires market.spot")

    # Each request gets its own fixing store and evaluation date.
    with saved_settings() as settings:
        settings.evaluation_date = market.evaluation_date
        calendar = _calendar_from_input(cash_flow.calendar)

        interest_rate_curve = RelinkableHandle(_curve_from_input(market.interest_rate_curve))
        dividend_curve = RelinkableHandle(
            _curve_from_input(market.dividend_curve) if market.dividend_curve else None
        )
        spot = RelinkableHandle(SimpleQuote(market.spot) if market.spot is not None else None)

        index = EquityIndex(
            cash_flow.index_name,
            calendar,
            interest_rate_curve,
            dividend_curve,
            spot,
            manager=IndexManager(),
        )
        if market.fixings:
            index.add_fixings((f.fixing_date, f.value) for f in market.fixings)

        flow = EquityCashFlow(
            notional=cash_flow.notional,
            index=index,
            base_date=cash_flow.base_date,
            fixing_date=cash_flow.fixing_date,
            payment_date=cash_flow.payment_date,
            growth_only=cash_flow.growth_only,
        )
        pricer = _pricer_from_input(quanto)
        flow.set_pricer(pricer)

        amount = flow.amount()
        index_start = index.fixing(flow.base_date)
        if isinstance(pricer, EquityQuantoCashFlowPricer):
            index_end = pricer.quanto_forward(flow)
        else:
            index_end = index.fixing(flow.fixing_date)
        logger.info("priced %s equity cash flow: %s", cash_flow.index_name, amount)

        risk_measures = None
        if calculate_spot_delta or calculate_pv01:
            risk_measures = RiskMeasures(
                spot_delta=spot_delta(flow, spot, bump_pct=spot_bump_pct) if calculate_spot_delta else None,
                pv01=pv01_parallel(flow, interest_rate_curve, bump_bp=pv01_bump_bp) if calculate_pv01 else None,
            )
        return PricingResult(
            amount=amount,
            index_start=index_start,
            index_end=index_end,
            risk_measures=risk_measures,
        )
