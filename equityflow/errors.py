"""Error types raised while pricing equity cash flows."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Error classification codes."""

    DATE_ORDER = "date_order"
    MISSING_MARKET_DATA = "missing_market_data"
    INCONSISTENT_REFERENCE_DATES = "inconsistent_reference_dates"
    MISSING_FIXING = "missing_fixing"
    NO_PRICER = "no_pricer"


class EquityFlowError(ValueError):
    """Pricing failure with a structured error code.

    Every failure is a configuration problem surfaced to the caller as-is;
    nothing is retried.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DateOrderError(EquityFlowError):
    """Base date of a cash flow falls after its fixing date."""

    code = ErrorCode.DATE_ORDER


class MissingMarketData(EquityFlowError):
    """A required market-data handle is empty."""

    code = ErrorCode.MISSING_MARKET_DATA


class InconsistentReferenceDates(EquityFlowError):
    """Term structures used together disagree on their reference date."""

    code = ErrorCode.INCONSISTENT_REFERENCE_DATES


class MissingFixing(EquityFlowError):
    """No stored fixing and no way to project one."""

    code = ErrorCode.MISSING_FIXING


class NoPricerAttached(EquityFlowError):
    """amount() requested before a pricer was set."""

    code = ErrorCode.NO_PRICER
