"""Tests for fixed-vs-floating swap valuation: leg figures, fair rate and fair spread."""

from datetime import date

import pytest

from swaplib.dates import BusinessDayConvention, Schedule, Thirty360
from swaplib.errors import UndefinedResult
from swaplib.indexes import IborIndex
from swaplib.pricing import fair_rate, fair_spread, price
from swaplib.products.swap import SwapType
from swaplib.products.vanilla import VanillaSwap


def test_one_period_scenario_leg_values(one_period_swap, one_period_market) -> None:
    """1 period, N=1,000,000, fixed 5%, DF 0.98, forecast 3%: payer leg NPVs and BPS."""
    swap = one_period_swap()
    swap.calculate(one_period_market)

    assert abs(swap.fixed_leg_npv - (-49_000.0)) < 1e-6
    assert abs(swap.floating_leg_npv - 29_400.0) < 1e-6
    assert abs(swap.npv - (-19_600.0)) < 1e-6
    assert abs(swap.fixed_leg_bps - (-98.0)) < 1e-9
    assert abs(swap.floating_leg_bps - 98.0) < 1e-9


def test_one_period_scenario_fair_values(one_period_swap, one_period_market) -> None:
    """fair rate = 5% - (-19,600)/(-980,000) = 3%; fair spread = 0 - (-19,600)/980,000 = 2%."""
    swap = one_period_swap()
    swap.calculate(one_period_market)
    assert abs(swap.fair_rate - 0.03) < 1e-12
    assert abs(swap.fair_spread - 0.02) < 1e-12


def test_fair_rate_reprices_to_zero(one_period_swap, one_period_market) -> None:
    """Rebuilding the swap at its fair rate gives NPV ~ 0."""
    rate = fair_rate(one_period_swap(), one_period_market)
    assert abs(price(one_period_swap(fixed_rate=rate), one_period_market)) < 1e-8


def test_fair_spread_reprices_to_zero(one_period_swap, one_period_market) -> None:
    spread = fair_spread(one_period_swap(), one_period_market)
    assert abs(price(one_period_swap(spread=spread), one_period_market)) < 1e-8


@pytest.mark.parametrize("swap_type", [SwapType.PAYER, SwapType.RECEIVER])
def test_fair_values_reprice_multi_period(five_year_swap, usd_market, swap_type) -> None:
    """Fair rate/spread reprice to zero on a real curve for both swap types."""
    swap = five_year_swap(type=swap_type)
    swap.calculate(usd_market)
    nominal = swap.nominal

    at_fair_rate = five_year_swap(type=swap_type, fixed_rate=swap.fair_rate)
    assert abs(price(at_fair_rate, usd_market)) < 1e-8 * nominal

    at_fair_spread = five_year_swap(type=swap_type, spread=swap.fair_spread)
    assert abs(price(at_fair_spread, usd_market)) < 1e-8 * nominal


def test_fair_rate_independent_of_swap_type(five_year_swap, usd_market) -> None:
    """Payer and receiver share the same breakeven rate; their NPVs are opposite."""
    payer = five_year_swap(type=SwapType.PAYER)
    receiver = five_year_swap(type=SwapType.RECEIVER)
    payer.calculate(usd_market)
    receiver.calculate(usd_market)
    assert abs(payer.fair_rate - receiver.fair_rate) < 1e-14
    assert abs(payer.fair_spread - receiver.fair_spread) < 1e-14
    assert abs(payer.npv + receiver.npv) < 1e-6


def test_npv_decreasing_in_paid_fixed_rate(five_year_swap, usd_market) -> None:
    """Payer NPV strictly decreases as the fixed rate paid increases."""
    npvs = [price(five_year_swap(fixed_rate=r), usd_market) for r in (0.02, 0.03, 0.04, 0.05)]
    for i in range(1, len(npvs)):
        assert npvs[i] < npvs[i - 1]


def test_npv_increasing_in_received_spread(five_year_swap, usd_market) -> None:
    """Payer NPV strictly increases with the spread received on the floating leg."""
    npvs = [price(five_year_swap(spread=s), usd_market) for s in (-0.01, 0.0, 0.005, 0.01)]
    for i in range(1, len(npvs)):
        assert npvs[i] > npvs[i - 1]


def test_swap_high_fixed_negative_pv(five_year_swap, usd_market) -> None:
    """If fixed rate > implied forwards, the payer pays more fixed => PV negative."""
    assert price(five_year_swap(fixed_rate=0.10), usd_market) < 0


def test_swap_low_fixed_positive_pv(five_year_swap, usd_market) -> None:
    """If fixed rate < implied forwards, the payer receives more float => PV positive."""
    assert price(five_year_swap(fixed_rate=0.01), usd_market) > 0


def test_zero_nominal_prices_to_zero(one_period_swap, one_period_market) -> None:
    assert price(one_period_swap(nominal=0.0), one_period_market) == 0.0


def test_zero_nominal_fair_values_undefined(one_period_swap, one_period_market) -> None:
    """Zero notional: NPV is 0 and each breakeven quote names its own empty leg."""
    swap = one_period_swap(nominal=0.0)
    swap.calculate(one_period_market)
    assert swap.npv == 0.0
    assert swap.fixed_leg_bps == 0.0
    assert swap.floating_leg_bps == 0.0
    with pytest.raises(UndefinedResult, match="fair rate is undefined: fixed leg annuity is zero"):
        swap.fair_rate
    with pytest.raises(
        UndefinedResult, match="fair spread is undefined: floating leg annuity is zero"
    ):
        swap.fair_spread
    with pytest.raises(UndefinedResult, match="fair rate is undefined"):
        fair_rate(one_period_swap(nominal=0.0), one_period_market)
    with pytest.raises(UndefinedResult, match="fair spread is undefined"):
        fair_spread(one_period_swap(nominal=0.0), one_period_market)


def test_settled_floating_leg_leaves_fair_rate_defined(one_period_market) -> None:
    """Live fixed leg against a floating leg that already paid: only the spread is undefined."""
    swap = VanillaSwap(
        type=SwapType.PAYER,
        nominal=1_000_000,
        fixed_schedule=Schedule(dates=(date(2024, 1, 15), date(2025, 1, 15))),
        fixed_rate=0.05,
        fixed_day_count=Thirty360(),
        floating_schedule=Schedule(dates=(date(2023, 1, 12), date(2024, 1, 12))),
        index=IborIndex(
            name="IDX-12M",
            tenor_months=12,
            forecast_curve="FWD",
            fixing_days=0,
            day_count=Thirty360(),
        ),
        spread=0.0,
        floating_day_count=Thirty360(),
        discount_curve="DISC",
    )
    swap.calculate(one_period_market)

    assert abs(swap.npv - (-49_000.0)) < 1e-6
    assert abs(swap.fixed_leg_bps - (-98.0)) < 1e-9
    assert swap.floating_leg_npv == 0.0
    assert swap.floating_leg_bps == 0.0
    # 5% - (-49,000) / (-980,000)
    assert abs(swap.fair_rate) < 1e-12
    assert abs(fair_rate(swap, one_period_market)) < 1e-12
    with pytest.raises(
        UndefinedResult, match="fair spread is undefined: floating leg annuity is zero"
    ):
        swap.fair_spread


def test_reset_then_recalculate_is_idempotent(five_year_swap, usd_market) -> None:
    """Repeated valuations with unchanged inputs reproduce fair values exactly."""
    swap = five_year_swap()
    first = swap.calculate(usd_market)
    rate, spread = swap.fair_rate, swap.fair_spread
    first.reset()
    assert first.fair_rate is None
    swap.invalidate()
    swap.calculate(usd_market)
    assert swap.fair_rate == rate
    assert swap.fair_spread == spread


def test_legs_and_inspectors(five_year_swap) -> None:
    """Fixed leg is legs[0], floating leg is legs[1]; inspectors echo construction."""
    swap = five_year_swap()
    assert swap.legs[0] is swap.fixed_leg
    assert swap.legs[1] is swap.floating_leg
    assert len(swap.fixed_leg) == 10
    assert len(swap.floating_leg) == 20
    assert swap.type is SwapType.PAYER
    assert swap.nominal == 10_000_000
    assert swap.fixed_rate == 0.04
    assert swap.spread == 0.0
    assert swap.discount_curve == "USD_DISC"
    assert swap.floating_index.name == "USD-3M"
    assert swap.fixed_schedule.end_date == date(2029, 1, 17)
    assert swap.maturity_date == date(2029, 1, 17)


def test_payment_convention_defaults_to_floating_schedule(five_year_swap) -> None:
    assert five_year_swap().payment_convention is BusinessDayConvention.MODIFIED_FOLLOWING
    explicit = five_year_swap(payment_convention=BusinessDayConvention.FOLLOWING)
    assert explicit.payment_convention is BusinessDayConvention.FOLLOWING


def test_payment_convention_moves_pay_dates() -> None:
    """Payment dates are the period ends adjusted with the payment convention."""
    # 2024-08-31 is a Saturday at month end
    schedule = Schedule(
        dates=(date(2024, 2, 29), date(2024, 8, 31)),
        convention=BusinessDayConvention.UNADJUSTED,
    )
    index = IborIndex(name="I", tenor_months=6, forecast_curve="FWD")

    def swap(convention):
        return VanillaSwap(
            type=SwapType.PAYER,
            nominal=1.0,
            fixed_schedule=schedule,
            fixed_rate=0.01,
            fixed_day_count=Thirty360(),
            floating_schedule=schedule,
            index=index,
            spread=0.0,
            floating_day_count=Thirty360(),
            payment_convention=convention,
        )

    assert swap(None).fixed_leg[0].payment_date == date(2024, 8, 31)
    assert swap(BusinessDayConvention.FOLLOWING).fixed_leg[0].payment_date == date(2024, 9, 2)
    assert (
        swap(BusinessDayConvention.MODIFIED_FOLLOWING).floating_leg[0].payment_date
        == date(2024, 8, 30)
    )


def test_leg_sign() -> None:
    assert SwapType.PAYER.leg_sign(0) == -1.0
    assert SwapType.PAYER.leg_sign(1) == 1.0
    assert SwapType.RECEIVER.leg_sign(0) == 1.0
    assert SwapType.RECEIVER.leg_sign(1) == -1.0
