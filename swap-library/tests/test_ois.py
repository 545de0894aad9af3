"""Tests for OvernightIndexedSwap (fixed vs compounded/averaged overnight rate)."""

from datetime import date

import pytest

from swaplib.curves import ZeroRateCurve
from swaplib.dates import Actual360, Schedule
from swaplib.errors import UndefinedResult
from swaplib.indexes import OvernightIndex, RateAveraging
from swaplib.market import Market
from swaplib.pricing import fair_rate, price
from swaplib.products.ois import OvernightIndexedSwap
from swaplib.products.swap import SwapType

TODAY = date(2024, 1, 15)
SOFR = OvernightIndex(name="SOFR", forecast_curve="USD_SOFR")


@pytest.fixture
def market() -> Market:
    curve = ZeroRateCurve(
        name="USD_SOFR",
        reference_date=TODAY,
        pillars=[0.25, 1.0, 2.0, 5.0],
        zero_rates_cc=[0.053, 0.050, 0.046, 0.042],
    )
    return Market(valuation_date=TODAY, curves={"USD_SOFR": curve})


def _ois(
    start: date = date(2024, 1, 17),
    end: date = date(2026, 1, 17),
    fixed_rate: float = 0.045,
    averaging: RateAveraging = RateAveraging.COMPOUND,
    type: SwapType = SwapType.PAYER,
) -> OvernightIndexedSwap:
    schedule = Schedule.from_tenor(start, end, 12)
    return OvernightIndexedSwap(
        type=type,
        nominal=25_000_000,
        fixed_schedule=schedule,
        fixed_rate=fixed_rate,
        fixed_day_count=Actual360(),
        floating_schedule=schedule,
        index=SOFR,
        spread=0.0,
        floating_day_count=Actual360(),
        discount_curve="USD_SOFR",
        averaging=averaging,
    )


def test_ois_fair_rate_reprices_to_zero(market: Market) -> None:
    rate = fair_rate(_ois(), market)
    assert abs(price(_ois(fixed_rate=rate), market)) < 1e-8 * 25_000_000


def test_single_curve_floating_leg_is_df_difference(market: Market) -> None:
    """Forecasting and discounting on one curve, the compounded leg is N * (DF(start) - DF(end))."""
    swap = _ois()
    swap.calculate(market)
    curve = market.curve("USD_SOFR")
    start, end = swap.floating_schedule.start_date, swap.floating_schedule.end_date
    expected = 25_000_000 * (curve.discount(start) - curve.discount(end))
    assert abs(swap.floating_leg_npv - expected) < 1e-6


def test_simple_averaging_lowers_fair_rate(market: Market) -> None:
    compound = fair_rate(_ois(averaging=RateAveraging.COMPOUND), market)
    simple = fair_rate(_ois(averaging=RateAveraging.SIMPLE), market)
    assert simple < compound
    assert _ois(averaging=RateAveraging.SIMPLE).averaging is RateAveraging.SIMPLE


def test_seasoned_ois_needs_past_fixings(market: Market) -> None:
    """Coupons that started before today compound published fixings first."""
    seasoned = _ois(start=date(2024, 1, 10), end=date(2025, 1, 10))
    with pytest.raises(UndefinedResult, match="missing fixing"):
        seasoned.calculate(market)

    fixed = market
    for d in (date(2024, 1, 10), date(2024, 1, 11), date(2024, 1, 12)):
        fixed = fixed.with_fixing("SOFR", d, 0.0531)
    seasoned.calculate(fixed)
    low = seasoned.floating_leg_npv

    higher = market
    for d in (date(2024, 1, 10), date(2024, 1, 11), date(2024, 1, 12)):
        higher = higher.with_fixing("SOFR", d, 0.0631)
    seasoned.calculate(higher)
    assert seasoned.floating_leg_npv > low


def test_ois_payer_receiver_mirror(market: Market) -> None:
    payer = price(_ois(type=SwapType.PAYER), market)
    receiver = price(_ois(type=SwapType.RECEIVER), market)
    assert abs(payer + receiver) < 1e-6
