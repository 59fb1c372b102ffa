"""Pricer for equity cash flows settled in a currency other than the equity's."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from equityflow.curves import Compounding
from equityflow.errors import InconsistentReferenceDates, MissingMarketData
from equityflow.interfaces import BlackVolTermStructure, Quote, YieldTermStructure
from equityflow.observable import Handle
from equityflow.pricers.base import BaseEquityPricer

if TYPE_CHECKING:
    from equityflow.cashflows import EquityCashFlow

logger = logging.getLogger(__name__)

# FX volatility is read flat, at this strike.
ATM_FX_STRIKE = 1.0


class EquityQuantoCashFlowPricer(BaseEquityPricer):
    """
    Quanto-adjusted equity return.

    Under joint lognormal equity/FX dynamics the forward seen from the
    settlement currency carries the covariance drift -rho * sigma_eq * sigma_fx:

        F_q(T) = S0 * exp((r - q - rho * sigma_eq * sigma_fx) * T)
        amount = notional * (F_q(T) / I(base_date) - 1)

    - T: time to the fixing date on the quanto-currency curve.
    - r: equity-currency zero rate (the index's interest rate curve).
    - q: dividend zero rate, 0 when the index has no dividend curve.
    - sigma_eq: equity vol at the fixing date, struck at the index level there.
    - sigma_fx: FX vol at the fixing date, flat (ATM).
    - rho: equity/FX correlation.

    The quanto-currency curve and both surfaces must share a reference date.
    """

    def __init__(
        self,
        quanto_currency_curve: Handle[YieldTermStructure],
        equity_volatility: Handle[BlackVolTermStructure],
        fx_volatility: Handle[BlackVolTermStructure],
        correlation: Handle[Quote],
    ) -> None:
        super().__init__()
        self.quanto_currency_curve = quanto_currency_curve
        self.equity_volatility = equity_volatility
        self.fx_volatility = fx_volatility
        self.correlation = correlation
        self._register_handles(quanto_currency_curve, equity_volatility, fx_volatility, correlation)

    def _validate(self, cash_flow: EquityCashFlow) -> None:
        if (
            self.quanto_currency_curve.empty
            or self.equity_volatility.empty
            or self.fx_volatility.empty
        ):
            raise MissingMarketData(
                "Quanto currency, equity and FX volatility term structure handles cannot be empty."
            )
        reference_date = self.quanto_currency_curve.link.reference_date
        if (
            self.equity_volatility.link.reference_date != reference_date
            or self.fx_volatility.link.reference_date != reference_date
        ):
            raise InconsistentReferenceDates(
                "Quanto currency term structure, equity and FX volatility need to have the same "
                "reference date."
            )

    def quanto_forward(self, cash_flow: EquityCashFlow) -> float:
        """Quanto-adjusted index level at the cash flow's fixing date."""
        index = cash_flow.index
        fixing_date = cash_flow.fixing_date
        if index.equity_interest_rate_curve.empty:
            raise MissingMarketData("Equity interest rate term structure handle cannot be empty.")

        time = self.quanto_currency_curve.link.time_from_reference(fixing_date)
        rate = index.equity_interest_rate_curve.link.zero_rate(time, Compounding.CONTINUOUS)
        dividend = 0.0
        if not index.equity_dividend_curve.empty:
            dividend = index.equity_dividend_curve.link.zero_rate(time, Compounding.CONTINUOUS)

        strike = index.fixing(fixing_date)
        equity_vol = self.equity_volatility.link.black_vol(fixing_date, strike)
        fx_vol = self.fx_volatility.link.black_vol(fixing_date, ATM_FX_STRIKE)
        rho = self.correlation.link.value()
        spot = index.spot_value()

        drift = rate - dividend - rho * equity_vol * fx_vol
        logger.debug(
            "%s quanto drift %.6f (r=%.6f q=%.6f rho=%.4f eq_vol=%.4f fx_vol=%.4f T=%.6f)",
            index.name, drift, rate, dividend, rho, equity_vol, fx_vol, time,
        )
        return spot * math.exp(drift * time)

    def _price(self, cash_flow: EquityCashFlow) -> float:
        base_level = cash_flow.index.fixing(cash_flow.base_date)
        return self._settle(cash_flow, self.quanto_forward(cash_flow), base_level)
