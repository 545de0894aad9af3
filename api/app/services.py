"""Service layer: convert GraphQL inputs to swap library objects and run pricing/risk."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from swaplib.curves import ZeroRateCurve
from swaplib.dates import BusinessDayConvention, Schedule, day_counter
from swaplib.indexes import IborIndex, OvernightIndex, RateAveraging
from swaplib.market import Market
from swaplib.products.ois import OvernightIndexedSwap
from swaplib.products.swap import (
    FIXED_LEG,
    FLOATING_LEG,
    FixedVsFloatingSwap,
    SwapType,
)
from swaplib.products.vanilla import VanillaSwap
from swaplib.risk import PV01Parallel

from app.types import (
    CurveInput,
    IndexInput,
    IndexKind,
    MarketInput,
    RiskMeasures,
    SwapInput,
    SwapPricingResult,
)

logger = logging.getLogger(__name__)

# Overnight swaps pay annually on the floating side unless told otherwise
OVERNIGHT_FLOATING_TENOR_MONTHS = 12


def _curve_from_input(c: CurveInput, valuation_date: date) -> ZeroRateCurve:
    """Build ZeroRateCurve from GraphQL CurveInput."""
    return ZeroRateCurve(
        name=c.name,
        reference_date=c.reference_date or valuation_date,
        pillars=list(c.pillars),
        zero_rates_cc=list(c.zero_rates_cc),
        day_count=day_counter(c.day_count),
    )


def market_from_input(m: MarketInput) -> Market:
    """Build Market from GraphQL MarketInput."""
    if not m.curves:
        raise ValueError("market.curves must not be empty")
    curves = {c.name: _curve_from_input(c, m.valuation_date) for c in m.curves}
    fixings: dict[str, dict[date, float]] = {}
    for f in m.fixings or []:
        fixings.setdefault(f.index_name, {})[f.fixing_date] = f.rate
    return Market(
        valuation_date=m.valuation_date,
        curves=curves,
        fixings=fixings,
        include_reference_date_cashflows=m.include_reference_date_cashflows,
    )


def _validate_curve_in_market(market: Market, curve_name: str, context: str) -> None:
    if curve_name not in market.curves:
        raise ValueError(
            f"{context}: curve '{curve_name}' not found in market. "
            f"Available curves: {list(market.curves.keys())}"
        )


def _index_from_input(i: IndexInput) -> IborIndex | OvernightIndex:
    if i.kind is IndexKind.OVERNIGHT:
        return OvernightIndex(
            name=i.name,
            forecast_curve=i.forecast_curve,
            day_count=day_counter(i.day_count),
        )
    if i.tenor_months <= 0:
        raise ValueError("index.tenor_months must be positive")
    return IborIndex(
        name=i.name,
        tenor_months=i.tenor_months,
        forecast_curve=i.forecast_curve,
        fixing_days=2 if i.fixing_days is None else i.fixing_days,
        day_count=day_counter(i.day_count),
    )


def swap_from_input(swap: SwapInput) -> FixedVsFloatingSwap:
    """Build a VanillaSwap or OvernightIndexedSwap from GraphQL SwapInput."""
    if swap.termination_date <= swap.effective_date:
        raise ValueError("swap.termination_date must be after swap.effective_date")
    index = _index_from_input(swap.index)
    convention = BusinessDayConvention(swap.schedule_convention.value)
    payment_convention = (
        BusinessDayConvention(swap.payment_convention.value)
        if swap.payment_convention is not None
        else None
    )
    if swap.floating_tenor_months is not None:
        floating_tenor = swap.floating_tenor_months
    elif isinstance(index, IborIndex):
        floating_tenor = index.tenor_months
    else:
        floating_tenor = OVERNIGHT_FLOATING_TENOR_MONTHS
    fixed_schedule = Schedule.from_tenor(
        swap.effective_date,
        swap.termination_date,
        swap.fixed_tenor_months,
        convention=convention,
    )
    floating_schedule = Schedule.from_tenor(
        swap.effective_date,
        swap.termination_date,
        floating_tenor,
        convention=convention,
    )
    common = dict(
        type=SwapType(swap.type.value),
        nominal=swap.nominal,
        fixed_schedule=fixed_schedule,
        fixed_rate=swap.fixed_rate,
        fixed_day_count=day_counter(swap.fixed_day_count),
        floating_schedule=floating_schedule,
        spread=swap.spread,
        floating_day_count=day_counter(swap.floating_day_count),
        payment_convention=payment_convention,
        discount_curve=swap.discount_curve,
    )
    if isinstance(index, OvernightIndex):
        return OvernightIndexedSwap(
            index=index,
            averaging=RateAveraging(swap.index.averaging.value),
            **common,
        )
    return VanillaSwap(index=index, **common)


def price_fixed_vs_floating_swap(
    swap: SwapInput,
    market: MarketInput,
    calculate_pv01: bool = False,
    pv01_curve_name: Optional[str] = None,
    pv01_bump_bp: float = 1.0,
) -> SwapPricingResult:
    """Value a fixed-vs-floating swap, solve fair rate/spread, and optionally compute PV01."""
    m = market_from_input(market)
    _validate_curve_in_market(m, swap.discount_curve, "discount_curve")
    _validate_curve_in_market(m, swap.index.forecast_curve, "index.forecast_curve")
    instrument = swap_from_input(swap)
    logger.info(
        "pricing %s %s nominal=%s on %s",
        swap.type.value,
        type(instrument).__name__,
        swap.nominal,
        m.valuation_date.isoformat(),
    )
    results = instrument.calculate(m)
    risk_measures = None
    if calculate_pv01:
        measure = PV01Parallel(curve_name=pv01_curve_name, bump_bp=pv01_bump_bp)
        _validate_curve_in_market(m, measure.curve_for(instrument), "PV01")
        risk_measures = RiskMeasures(pv01=measure.compute(instrument, m))
    if results.undefined:
        logger.info("undefined quotes: %s", "; ".join(results.undefined.values()))
    return SwapPricingResult(
        npv=results.value,
        fixed_leg_npv=results.leg_npv[FIXED_LEG],
        fixed_leg_bps=results.leg_bps[FIXED_LEG],
        floating_leg_npv=results.leg_npv[FLOATING_LEG],
        floating_leg_bps=results.leg_bps[FLOATING_LEG],
        maturity_date=instrument.maturity_date,
        risk_measures=risk_measures,
        fair_rate_value=results.fair_rate,
        fair_spread_value=results.fair_spread,
        undefined=dict(results.undefined),
    )
