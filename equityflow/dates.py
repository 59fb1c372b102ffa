"""
Day counting and business-day calendars.

Only what pricing needs: Actual/365 (Fixed) year fractions, and calendars
able to tell business days apart and roll a date onto one.
"""

from __future__ import annotations

import datetime
from enum import Enum
from functools import lru_cache


class Actual365Fixed:
    """Actual/365 (Fixed): calendar days between the dates divided by 365."""

    name = "Actual/365 (Fixed)"

    def day_count(self, start: datetime.date, end: datetime.date) -> int:
        return (end - start).days

    def year_fraction(self, start: datetime.date, end: datetime.date) -> float:
        return self.day_count(start, end) / 365.0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Actual365Fixed)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return "Actual365Fixed()"


class BusinessDayConvention(Enum):
    """How a date falling on a holiday is rolled."""

    UNADJUSTED = "unadjusted"
    FOLLOWING = "following"
    MODIFIED_FOLLOWING = "modified_following"
    PRECEDING = "preceding"


class Calendar:
    """Weekends-only calendar; subclasses add holidays via `_is_holiday`."""

    name = "Weekends only"

    def is_weekend(self, d: datetime.date) -> bool:
        return d.weekday() >= 5

    def _is_holiday(self, d: datetime.date) -> bool:
        return False

    def is_business_day(self, d: datetime.date) -> bool:
        return not (self.is_weekend(d) or self._is_holiday(d))

    def is_holiday(self, d: datetime.date) -> bool:
        return not self.is_business_day(d)

    def adjust(
        self,
        d: datetime.date,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> datetime.date:
        """Roll `d` onto a business day according to `convention`."""
        if convention is BusinessDayConvention.UNADJUSTED:
            return d
        step = -1 if convention is BusinessDayConvention.PRECEDING else 1
        adjusted = d
        while not self.is_business_day(adjusted):
            adjusted += datetime.timedelta(days=step)
        if (
            convention is BusinessDayConvention.MODIFIED_FOLLOWING
            and adjusted.month != d.month
        ):
            return self.adjust(d, BusinessDayConvention.PRECEDING)
        return adjusted

    def business_days_between(self, start: datetime.date, end: datetime.date) -> int:
        """Business days in [start, end)."""
        count = 0
        d = start
        while d < end:
            if self.is_business_day(d):
                count += 1
            d += datetime.timedelta(days=1)
        return count

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


WeekendsOnly = Calendar


@lru_cache(maxsize=None)
def easter_sunday(year: int) -> datetime.date:
    """Gregorian Easter Sunday (anonymous Gregorian algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return datetime.date(year, month, day + 1)


class TARGET(Calendar):
    """
    TARGET (Trans-European Automated Real-time Gross settlement Express Transfer).

    Holidays: New Year's Day, Good Friday, Easter Monday, Labour Day,
    Christmas, Boxing Day; Dec 31 in 1998, 1999 and 2001.
    """

    name = "TARGET"

    def _is_holiday(self, d: datetime.date) -> bool:
        if (d.month, d.day) in ((1, 1), (12, 25), (12, 26)):
            return True
        if d.month == 5 and d.day == 1 and d.year >= 2000:
            return True
        if d.month == 12 and d.day == 31 and d.year in (1998, 1999, 2001):
            return True
        if d.year >= 2000:
            easter = easter_sunday(d.year)
            if d in (easter - datetime.timedelta(days=2), easter + datetime.timedelta(days=1)):
                return True
        return False
