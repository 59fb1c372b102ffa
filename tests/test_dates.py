"""Tests for day counting and calendars."""

import datetime

from equityflow.dates import TARGET, Actual365Fixed, BusinessDayConvention, WeekendsOnly, easter_sunday


def test_actual_365_fixed_year_fraction() -> None:
    dc = Actual365Fixed()
    assert dc.year_fraction(datetime.date(2023, 1, 27), datetime.date(2023, 4, 5)) == 68 / 365
    assert dc.year_fraction(datetime.date(2023, 1, 1), datetime.date(2024, 1, 1)) == 1.0


def test_easter_sunday() -> None:
    assert easter_sunday(2023) == datetime.date(2023, 4, 9)
    assert easter_sunday(2024) == datetime.date(2024, 3, 31)
    assert easter_sunday(2000) == datetime.date(2000, 4, 23)


def test_target_holidays_2023() -> None:
    target = TARGET()
    for d in (
        datetime.date(2023, 1, 1),
        datetime.date(2023, 4, 7),   # Good Friday
        datetime.date(2023, 4, 10),  # Easter Monday
        datetime.date(2023, 5, 1),
        datetime.date(2023, 12, 25),
        datetime.date(2023, 12, 26),
    ):
        assert target.is_holiday(d)
    assert target.is_business_day(datetime.date(2023, 1, 5))
    assert target.is_business_day(datetime.date(2023, 4, 5))
    assert not target.is_business_day(datetime.date(2023, 1, 28))  # Saturday


def test_weekends_only_ignores_holidays() -> None:
    assert WeekendsOnly().is_business_day(datetime.date(2023, 4, 7))


def test_adjust_conventions() -> None:
    target = TARGET()
    good_friday = datetime.date(2023, 4, 7)
    assert target.adjust(good_friday) == datetime.date(2023, 4, 11)
    assert target.adjust(good_friday, BusinessDayConvention.PRECEDING) == datetime.date(2023, 4, 6)
    assert target.adjust(good_friday, BusinessDayConvention.UNADJUSTED) == good_friday
    # Following would leave the month: roll back instead.
    assert target.adjust(datetime.date(2023, 9, 30), BusinessDayConvention.MODIFIED_FOLLOWING) == datetime.date(2023, 9, 29)
    assert target.adjust(datetime.date(2023, 1, 27)) == datetime.date(2023, 1, 27)


def test_business_days_between() -> None:
    target = TARGET()
    # Mon 3 Apr .. Tue 11 Apr 2023: Good Friday and Easter Monday excluded.
    assert target.business_days_between(datetime.date(2023, 4, 3), datetime.date(2023, 4, 11)) == 4
