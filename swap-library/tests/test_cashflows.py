"""Tests for coupons, leg builders, and how indices pick fixings vs forecasts."""

from datetime import date

import pytest

from swaplib.cashflows import (
    FixedRateCoupon,
    IborCoupon,
    OvernightIndexedCoupon,
    fixed_rate_leg,
    ibor_leg,
    overnight_leg,
)
from swaplib.curves import FlatForwardCurve
from swaplib.dates import Actual360, BusinessDayConvention, Schedule, Thirty360
from swaplib.indexes import IborIndex, OvernightIndex, RateAveraging
from swaplib.market import Market

TODAY = date(2024, 1, 15)  # Monday
MF = BusinessDayConvention.MODIFIED_FOLLOWING


@pytest.fixture
def market() -> Market:
    return Market(
        valuation_date=TODAY,
        curves={"FWD": FlatForwardCurve(name="FWD", reference_date=TODAY, rate=0.04)},
    )


def _ibor(fixing_days: int = 2) -> IborIndex:
    return IborIndex(name="IDX-3M", tenor_months=3, forecast_curve="FWD", fixing_days=fixing_days)


def test_fixed_coupon_amount() -> None:
    coupon = FixedRateCoupon(
        payment_date=date(2024, 7, 15),
        nominal=1_000_000,
        rate=0.05,
        accrual_start=TODAY,
        accrual_end=date(2024, 7, 15),
        day_count=Thirty360(),
    )
    assert coupon.accrual_period == 0.5
    assert abs(coupon.amount - 25_000.0) < 1e-9


def test_fixed_leg_one_coupon_per_period() -> None:
    schedule = Schedule.from_tenor(date(2024, 1, 17), date(2025, 1, 17), 6)
    leg = fixed_rate_leg(schedule, 100.0, 0.03, Thirty360(), MF)
    assert [c.accrual_start for c in leg] == [date(2024, 1, 17), date(2024, 7, 17)]
    assert [c.payment_date for c in leg] == [date(2024, 7, 17), date(2025, 1, 17)]
    assert all(c.rate == 0.03 for c in leg)


def test_ibor_forecast_is_par_forward(market: Market) -> None:
    """Future fixing: simple forward (DF(s)/DF(e) - 1) / tau over the accrual period."""
    start, end = date(2024, 4, 15), date(2024, 7, 15)
    coupon = ibor_leg(Schedule(dates=(start, end)), 1_000_000, _ibor(), 0.001, Actual360(), MF)[0]
    assert coupon.fixing_date == date(2024, 4, 11)

    curve = market.curve("FWD")
    tau = Actual360().year_fraction(start, end)
    expected = (curve.discount(start) / curve.discount(end) - 1.0) / tau
    assert abs(coupon.rate(market) - (expected + 0.001)) < 1e-14
    assert abs(coupon.amount(market) - 1_000_000 * (expected + 0.001) * tau) < 1e-8


def test_ibor_past_fixing_used(market: Market) -> None:
    """A fixing before the valuation date is read from the market."""
    coupon = IborCoupon(
        payment_date=date(2024, 4, 12),
        nominal=1_000_000,
        accrual_start=date(2024, 1, 12),
        accrual_end=date(2024, 4, 12),
        day_count=Actual360(),
        spread=0.0,
        index=_ibor(),
    )
    assert coupon.fixing_date == date(2024, 1, 10)
    assert coupon.amount(market) is None

    fixed = market.with_fixing("IDX-3M", date(2024, 1, 10), 0.055)
    assert coupon.rate(fixed) == 0.055
    assert abs(coupon.amount(fixed) - 1_000_000 * 0.055 * 91 / 360) < 1e-8


def test_ibor_fixing_today_falls_back_to_forecast(market: Market) -> None:
    """On the valuation date a published fixing wins, otherwise the curve forecast is used."""
    start, end = date(2024, 1, 17), date(2024, 4, 17)
    index = _ibor()
    forecast = index.forecast(start, end, market)
    assert index.rate(TODAY, start, end, market) == forecast
    published = market.with_fixing("IDX-3M", TODAY, 0.061)
    assert index.rate(TODAY, start, end, published) == 0.061


def test_overnight_compounded_forecast_telescopes(market: Market) -> None:
    """All-forecast compounded rate = (DF(start)/DF(end) - 1) / tau."""
    start, end = date(2024, 2, 15), date(2024, 5, 15)
    sofr = OvernightIndex(name="SOFR", forecast_curve="FWD")
    tau = Actual360().year_fraction(start, end)
    curve = market.curve("FWD")
    expected = (curve.discount(start) / curve.discount(end) - 1.0) / tau
    assert abs(sofr.period_rate(start, end, market) - expected) < 1e-14


def test_overnight_compounds_past_fixings(market: Market) -> None:
    """Past daily fixings compound before the forecast part starts."""
    start, end = date(2024, 1, 11), date(2024, 2, 12)  # Thursday .. Monday
    sofr = OvernightIndex(name="SOFR", forecast_curve="FWD")
    past = [date(2024, 1, 11), date(2024, 1, 12)]
    with_fixings = market.with_fixing("SOFR", past[0], 0.05).with_fixing("SOFR", past[1], 0.06)

    rate = sofr.period_rate(start, end, with_fixings)
    curve = market.curve("FWD")
    growth = (1 + 0.05 / 360) * (1 + 0.06 * 3 / 360)
    growth *= curve.discount(TODAY) / curve.discount(end)
    expected = (growth - 1.0) / (32 / 360)
    assert abs(rate - expected) < 1e-14


def test_overnight_missing_past_fixing_is_none(market: Market) -> None:
    sofr = OvernightIndex(name="SOFR", forecast_curve="FWD")
    assert sofr.period_rate(date(2024, 1, 11), date(2024, 2, 12), market) is None


def test_overnight_simple_averaging_below_compounding(market: Market) -> None:
    """With positive rates, a simple average of daily forwards accrues less than compounding."""
    start, end = date(2024, 2, 15), date(2025, 2, 18)
    sofr = OvernightIndex(name="SOFR", forecast_curve="FWD")
    compound = sofr.period_rate(start, end, market, RateAveraging.COMPOUND)
    simple = sofr.period_rate(start, end, market, RateAveraging.SIMPLE)
    assert simple < compound
    # continuously compounded 4% on ACT/365F, quoted simple ACT/360
    assert abs(simple - 0.04 * 360 / 365) < 1e-4


def test_overnight_leg_carries_averaging() -> None:
    schedule = Schedule.from_tenor(date(2024, 1, 17), date(2025, 1, 17), 6)
    sofr = OvernightIndex(name="SOFR", forecast_curve="FWD")
    leg = overnight_leg(schedule, 1.0, sofr, 0.0, Actual360(), MF, RateAveraging.SIMPLE)
    assert len(leg) == 2
    assert all(isinstance(c, OvernightIndexedCoupon) for c in leg)
    assert all(c.averaging is RateAveraging.SIMPLE for c in leg)
    assert leg[0].fixing_date == date(2024, 1, 17)


def test_ibor_index_dates() -> None:
    index = _ibor()
    assert index.fixing_date(date(2024, 1, 17)) == TODAY
    with pytest.raises(ValueError, match="positive length"):
        index.forecast(TODAY, TODAY, Market(valuation_date=TODAY))
