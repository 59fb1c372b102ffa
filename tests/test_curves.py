"""Tests for yield curves and volatility surfaces."""

import datetime
import math

import pytest

from equityflow.curves import Compounding, FlatForward, YieldCurve, ZeroCurve
from equityflow.volatility import BlackConstantVol
from tests.conftest import END, TODAY


def test_curve_interpolation_endpoints() -> None:
    """Endpoints: rate at first/last pillar equals stored rate."""
    curve = ZeroCurve(pillars=[0.5, 1.0, 2.0, 5.0], zero_rates_cc=[0.05, 0.04, 0.035, 0.03])
    assert curve.zero_rate_cc(0.5) == 0.05
    assert curve.zero_rate_cc(5.0) == 0.03


def test_curve_interpolation_midpoint() -> None:
    """Midpoint: linear interp between two pillars."""
    curve = ZeroCurve(pillars=[0.0, 2.0], zero_rates_cc=[0.04, 0.06])
    assert abs(curve.zero_rate_cc(1.0) - 0.05) < 1e-10


def test_curve_flat_extrapolation() -> None:
    curve = ZeroCurve(pillars=[0.5, 1.0], zero_rates_cc=[0.05, 0.04])
    assert curve.zero_rate_cc(0.0) == 0.05
    assert curve.zero_rate_cc(0.25) == 0.05
    assert curve.zero_rate_cc(2.0) == 0.04


def test_discount_formula_by_time_and_date() -> None:
    """DF(t) = exp(-r(t)*t); a date is converted with Actual/365 from the reference date."""
    curve = FlatForward(0.05)
    assert abs(curve.discount(1.0) - math.exp(-0.05)) < 1e-12
    t = (END - TODAY).days / 365.0
    assert abs(curve.discount(END) - math.exp(-0.05 * t)) < 1e-12


def test_zero_rate_compounding_conventions() -> None:
    curve = FlatForward(0.05)
    assert curve.zero_rate(2.0) == 0.05
    assert abs(curve.zero_rate(2.0, Compounding.SIMPLE) - (math.exp(0.1) - 1.0) / 2.0) < 1e-12
    assert abs(curve.zero_rate(2.0, Compounding.COMPOUNDED) - (math.exp(0.05) - 1.0)) < 1e-12
    semi = curve.zero_rate(2.0, Compounding.COMPOUNDED, frequency=2)
    assert abs(semi - 2.0 * (math.exp(0.025) - 1.0)) < 1e-12


def test_forward_rate_on_flat_curve() -> None:
    curve = FlatForward(0.03)
    assert abs(curve.forward_rate(1.0, 2.0) - 0.03) < 1e-12
    with pytest.raises(ValueError, match="t2 must be greater"):
        curve.forward_rate(2.0, 1.0)


def test_floating_reference_date_follows_evaluation_date(pinned_evaluation_date) -> None:
    curve = FlatForward(0.02)
    fixed = FlatForward(0.02, reference_date=datetime.date(2023, 1, 26))
    calls = []
    curve.register_observer(lambda: calls.append(1))
    assert curve.reference_date == TODAY
    pinned_evaluation_date.evaluation_date = datetime.date(2023, 2, 1)
    assert curve.reference_date == datetime.date(2023, 2, 1)
    assert fixed.reference_date == datetime.date(2023, 1, 26)
    assert calls == [1]


def test_bumped_curves_keep_reference_date() -> None:
    """Bumped curve has rates shifted by bump."""
    curve = ZeroCurve(pillars=[1.0], zero_rates_cc=[0.04], reference_date=datetime.date(2023, 1, 26))
    bumped = curve.bumped(0.01)
    assert abs(bumped.zero_rate_cc(1.0) - 0.05) < 1e-10
    assert bumped.reference_date == datetime.date(2023, 1, 26)
    flat = FlatForward(0.04).bumped(0.0001)
    assert abs(flat.rate - 0.0401) < 1e-12
    assert flat.floating


def test_validate_pillars() -> None:
    with pytest.raises(ValueError, match="strictly increasing"):
        ZeroCurve(pillars=[1.0, 1.0], zero_rates_cc=[0.04, 0.04])
    with pytest.raises(ValueError, match="same length"):
        ZeroCurve(pillars=[1.0, 2.0], zero_rates_cc=[0.04])
    with pytest.raises(ValueError, match="no pillars"):
        ZeroCurve(pillars=[], zero_rates_cc=[])


def test_yield_curve_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        YieldCurve()


def test_negative_time_raises() -> None:
    curve = FlatForward(0.04)
    with pytest.raises(ValueError, match="t must be >= 0"):
        curve.discount(-0.1)
    with pytest.raises(ValueError, match="t must be >= 0"):
        curve.discount(datetime.date(2023, 1, 2))


def test_black_constant_vol() -> None:
    vol = BlackConstantVol(0.4)
    assert vol.black_vol(END, 8700.0) == 0.4
    assert vol.black_vol(END, 1.0) == 0.4
    t = (END - TODAY).days / 365.0
    assert abs(vol.black_variance(END, 8700.0) - 0.16 * t) < 1e-12
    with pytest.raises(ValueError, match="volatility must be >= 0"):
        BlackConstantVol(-0.1)
