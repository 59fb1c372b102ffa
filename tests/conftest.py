"""Shared fixtures for equity cash-flow tests."""

from __future__ import annotations

import datetime

import pytest

from equityflow.cashflows import EquityCashFlow
from equityflow.curves import FlatForward
from equityflow.dates import TARGET, Actual365Fixed
from equityflow.indexes import EquityIndex, index_manager
from equityflow.observable import Handle, RelinkableHandle
from equityflow.pricers import EquityQuantoCashFlowPricer
from equityflow.quotes import SimpleQuote
from equityflow.settings import saved_settings
from equityflow.volatility import BlackConstantVol

TODAY = datetime.date(2023, 1, 27)
START = datetime.date(2023, 1, 5)
END = datetime.date(2023, 4, 5)


class MarketVars:
    """Equity index on TARGET with local, dividend and quanto curves, vols and quotes."""

    def __init__(self) -> None:
        self.calendar = TARGET()
        self.day_counter = Actual365Fixed()
        self.notional = 1.0e7

        self.local_rate: RelinkableHandle = RelinkableHandle()
        self.dividend: RelinkableHandle = RelinkableHandle()
        self.quanto_rate: RelinkableHandle = RelinkableHandle()
        self.equity_vol: RelinkableHandle = RelinkableHandle()
        self.fx_vol: RelinkableHandle = RelinkableHandle()
        self.spot: RelinkableHandle = RelinkableHandle()
        self.correlation: RelinkableHandle = RelinkableHandle()

        self.index = EquityIndex("eqIndex", self.calendar, self.local_rate, self.dividend, self.spot)
        self.index.clear_fixings()
        self.index.add_fixing(START, 9010.0)
        self.index.add_fixing(TODAY, 8690.0)

        self.local_rate.link_to(FlatForward(0.0375))
        self.dividend.link_to(FlatForward(0.005))
        self.quanto_rate.link_to(FlatForward(0.001))
        self.equity_vol.link_to(BlackConstantVol(0.4))
        self.fx_vol.link_to(BlackConstantVol(0.2))
        self.spot.link_to(SimpleQuote(8700.0))
        self.correlation.link_to(SimpleQuote(0.4))

    def cash_flow(
        self,
        index: EquityIndex | None = None,
        start: datetime.date = START,
        end: datetime.date = END,
    ) -> EquityCashFlow:
        return EquityCashFlow(self.notional, index or self.index, start, end, end)

    def quanto_pricer(self) -> EquityQuantoCashFlowPricer:
        return EquityQuantoCashFlowPricer(
            self.quanto_rate, self.equity_vol, self.fx_vol, self.correlation
        )

    def quanto_pricer_with_missing_handles(self) -> EquityQuantoCashFlowPricer:
        vol: Handle = Handle()
        return EquityQuantoCashFlowPricer(self.quanto_rate, vol, vol, self.correlation)

    def index_without_dividend(self) -> EquityIndex:
        return self.index.clone(self.local_rate, Handle(), self.spot)

    def bump(self) -> None:
        self.local_rate.link_to(FlatForward(0.04))
        self.dividend.link_to(FlatForward(0.01))
        self.quanto_rate.link_to(FlatForward(0.03))
        self.equity_vol.link_to(BlackConstantVol(0.45))
        self.fx_vol.link_to(BlackConstantVol(0.25))
        self.spot.link_to(SimpleQuote(8710.0))


@pytest.fixture(autouse=True)
def pinned_evaluation_date():
    """Pin the evaluation date and leave no fixings behind."""
    with saved_settings() as settings:
        settings.evaluation_date = TODAY
        yield settings
    index_manager.clear_histories()


@pytest.fixture
def market() -> MarketVars:
    return MarketVars()
