"""
Protocol-based interfaces for the market data and pricing extension points.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
A desk's own curve or surface implementation can therefore be linked into a
handle without touching the index or pricer code.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from equityflow.cashflows import EquityCashFlow
    from equityflow.curves import Compounding
    from equityflow.observable import Callback


@runtime_checkable
class Quote(Protocol):
    """A market level: spot, correlation, etc."""

    def value(self) -> float:
        ...

    def is_valid(self) -> bool:
        ...


@runtime_checkable
class YieldTermStructure(Protocol):
    """Protocol for discount curve implementations.

    Times are year fractions measured from `reference_date` with the curve's
    own day counter.
    """

    @property
    def reference_date(self) -> datetime.date:
        ...

    def time_from_reference(self, d: datetime.date) -> float:
        ...

    def discount(self, t: float | datetime.date) -> float:
        ...

    def zero_rate(self, t: float, compounding: Compounding = ...) -> float:
        ...

    def bumped(self, bump: float) -> YieldTermStructure:
        """Return new curve with parallel additive rate shift."""
        ...


@runtime_checkable
class BlackVolTermStructure(Protocol):
    """Protocol for Black volatility surfaces."""

    @property
    def reference_date(self) -> datetime.date:
        ...

    def black_vol(self, d: datetime.date, strike: float) -> float:
        ...


class CashFlowPricer(Protocol):
    """Protocol for equity cash-flow pricing strategies.

    Pricers are observable: a cash flow subscribes to its pricer so that a
    change in any of the pricer's handles invalidates the cached amount.
    """

    def amount(self, cash_flow: EquityCashFlow) -> float:
        """Settlement amount of `cash_flow`."""
        ...

    def register_observer(self, callback: Callback) -> None:
        ...

    def unregister_observer(self, callback: Callback) -> None:
        ...
