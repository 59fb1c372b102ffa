"""Demo: price a plain and a quanto equity cash flow, then move the market."""

import datetime

from equityflow.cashflows import EquityCashFlow
from equityflow.curves import FlatForward
from equityflow.dates import TARGET
from equityflow.indexes import EquityIndex
from equityflow.observable import RelinkableHandle
from equityflow.pricers import EquityCashFlowPricer, EquityQuantoCashFlowPricer
from equityflow.quotes import SimpleQuote
from equityflow.risk import pv01_parallel, spot_delta
from equityflow.settings import saved_settings
from equityflow.volatility import BlackConstantVol


def main() -> None:
    with saved_settings() as settings:
        calendar = TARGET()
        settings.evaluation_date = calendar.adjust(datetime.date(2023, 1, 27))

        # Curves float with the evaluation date
        local_rate = RelinkableHandle(FlatForward(0.0375))
        dividend = RelinkableHandle(FlatForward(0.005))
        quanto_rate = RelinkableHandle(FlatForward(0.001))
        equity_vol = RelinkableHandle(BlackConstantVol(0.4))
        fx_vol = RelinkableHandle(BlackConstantVol(0.2))
        spot = RelinkableHandle(SimpleQuote(8700.0))
        correlation = RelinkableHandle(SimpleQuote(0.4))

        index = EquityIndex("eqIndex", calendar, local_rate, dividend, spot)
        index.clear_fixings()
        index.add_fixing(datetime.date(2023, 1, 5), 9010.0)
        index.add_fixing(settings.evaluation_date, 8690.0)

        start = datetime.date(2023, 1, 5)
        end = datetime.date(2023, 4, 5)
        notional = 10_000_000

        # 1) Plain price return
        plain = EquityCashFlow(notional, index, start, end)
        plain.set_pricer(EquityCashFlowPricer())

        # 2) Same flow settled in the quanto currency
        quanto = EquityCashFlow(notional, index, start, end)
        quanto.set_pricer(
            EquityQuantoCashFlowPricer(quanto_rate, equity_vol, fx_vol, correlation)
        )

        print("Equity cash flow demo")
        print("=" * 40)
        print(f"Plain amount:            {plain.amount():,.2f}")
        print(f"Quanto amount:           {quanto.amount():,.2f}")
        print(f"Quanto spot delta:       {spot_delta(quanto, spot):,.2f}")
        print(f"Quanto PV01 (local ccy): {pv01_parallel(quanto, local_rate):,.2f}")

        # 3) Market move: relinking invalidates both cached amounts
        spot.link_to(SimpleQuote(8710.0))
        correlation.link.set_value(0.0)  # linked quote changes propagate too
        print("-" * 40)
        print(f"Plain amount (bumped):   {plain.amount():,.2f}")
        print(f"Quanto amount (rho=0):   {quanto.amount():,.2f}")

        index.clear_fixings()


if __name__ == "__main__":
    main()
