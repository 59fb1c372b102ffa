"""GraphQL schema: equity cash-flow pricing and risk queries."""

from typing import Optional

import strawberry

from equityflow_api.services import price_equity_cash_flow
from equityflow_api.types import (
    EquityCashFlowInput,
    EquityMarketInput,
    PricingResult,
    QuantoInput,
)


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return "0.1.0"

    @strawberry.field
    def price_equity_cash_flow(
        self,
        cash_flow: EquityCashFlowInput,
        market: EquityMarketInput,
        quanto: Optional[QuantoInput] = None,
        calculate_spot_delta: bool = False,
        calculate_pv01: bool = False,
        spot_bump_pct: float = 0.01,
        pv01_bump_bp: float = 1.0,
    ) -> PricingResult:
        """Price an equity cash flow, quanto-adjusted when `quanto` is given. Optionally compute risks."""
        return price_equity_cash_flow(
            cash_flow=cash_flow,
            market=market,
            quanto=quanto,
            calculate_spot_delta=calculate_spot_delta,
            calculate_pv01=calculate_pv01,
            spot_bump_pct=spot_bump_pct,
            pv01_bump_bp=pv01_bump_bp,
        )


schema = strawberry.Schema(query=Query)
