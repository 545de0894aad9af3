"""Discounting pricer for fixed-vs-floating swaps (single discount curve)."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from swaplib.errors import UR_MISSING_COUPON, UndefinedResult
from swaplib.interfaces import Curve, Instrument
from swaplib.market import Market
from swaplib.pricers.base import BasePricer
from swaplib.products.swap import (
    BASIS_POINT,
    FIXED_LEG,
    FLOATING_LEG,
    FixedVsFloatingArguments,
    FixedVsFloatingResults,
    FixedVsFloatingSwap,
    solve_fair_values,
)

logger = logging.getLogger(__name__)


class DiscountingSwapPricer(BasePricer):
    """
    Pricer for FixedVsFloatingSwap and its subclasses.

    Every live cash flow is discounted on the arguments' discount curve:
    leg NPV = sign * sum(amount_i * DF(pay_i)),
    leg BPS = sign * 1bp * sum(nominal * accrual_i * DF(pay_i)).
    The breakeven fixed rate and spread are then closed-form, since NPV is
    linear in both. A leg with zero annuity leaves only its own quote
    undefined.
    """

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, FixedVsFloatingSwap)

    def new_arguments(self) -> FixedVsFloatingArguments:
        return FixedVsFloatingArguments()

    def new_results(self) -> FixedVsFloatingResults:
        return FixedVsFloatingResults()

    def _calculate(
        self,
        arguments: FixedVsFloatingArguments,
        results: FixedVsFloatingResults,
        market: Market,
    ) -> None:
        assert arguments.type is not None and arguments.nominal is not None
        assert arguments.fixed_rate is not None and arguments.discount_curve is not None
        curve = market.curve(arguments.discount_curve)
        nominal = arguments.nominal

        fixed_npv, fixed_bps = self._leg_npv_bps(
            arguments.fixed_pay_dates,
            arguments.fixed_coupons,
            arguments.fixed_accrual_times,
            nominal,
            arguments.type.leg_sign(FIXED_LEG),
            curve,
            market,
        )
        floating_npv, floating_bps = self._leg_npv_bps(
            arguments.floating_pay_dates,
            arguments.floating_coupons,
            arguments.floating_accrual_times,
            nominal,
            arguments.type.leg_sign(FLOATING_LEG),
            curve,
            market,
        )
        npv = fixed_npv + floating_npv

        results.value = npv
        results.leg_npv = [fixed_npv, floating_npv]
        results.leg_bps = [fixed_bps, floating_bps]
        results.valuation_date = market.valuation_date
        solve_fair_values(results, arguments.fixed_rate, arguments.spread, nominal)

        logger.debug(
            "swap valued on %s: npv=%.6f fixed(npv=%.6f bps=%.6f) "
            "floating(npv=%.6f bps=%.6f) fair_rate=%s fair_spread=%s",
            market.valuation_date.isoformat(),
            npv,
            fixed_npv,
            fixed_bps,
            floating_npv,
            floating_bps,
            results.fair_rate,
            results.fair_spread,
        )

    @staticmethod
    def _leg_npv_bps(
        pay_dates: Sequence[date],
        amounts: Sequence[Optional[float]],
        accrual_times: Sequence[float],
        nominal: float,
        sign: float,
        curve: Curve,
        market: Market,
    ) -> tuple[float, float]:
        """Signed NPV and BPS of one leg, skipping flows that have occurred."""
        npv = 0.0
        annuity = 0.0
        for pay, amount, accrual in zip(pay_dates, amounts, accrual_times):
            if market.has_occurred(pay):
                continue
            if amount is None:
                raise UndefinedResult(UR_MISSING_COUPON.format(pay.isoformat()))
            df = curve.discount(pay)
            npv += amount * df
            annuity += nominal * accrual * df
        return sign * npv, sign * BASIS_POINT * annuity
