"""Overnight indexed swap: fixed leg against daily compounded (or averaged) overnight fixings."""

from __future__ import annotations

from typing import Optional

from swaplib.cashflows import Leg, OvernightIndexedCoupon, overnight_leg
from swaplib.dates import BusinessDayConvention, DayCounter, Schedule
from swaplib.indexes import OvernightIndex, RateAveraging
from swaplib.market import Market
from swaplib.products.swap import (
    FixedVsFloatingArguments,
    FixedVsFloatingSwap,
    SwapType,
    floating_arguments_from,
)


class OvernightIndexedSwap(FixedVsFloatingSwap):
    """
    Fixed vs overnight swap (SOFR/ESTR style).

    Each floating coupon accrues the overnight index over its whole period;
    the reported fixing date is the first overnight fixing of the period.
    """

    def __init__(
        self,
        type: SwapType,
        nominal: float,
        fixed_schedule: Schedule,
        fixed_rate: float,
        fixed_day_count: DayCounter,
        floating_schedule: Schedule,
        index: OvernightIndex,
        spread: float,
        floating_day_count: DayCounter,
        payment_convention: Optional[BusinessDayConvention] = None,
        discount_curve: str = "DISC",
        averaging: RateAveraging = RateAveraging.COMPOUND,
    ) -> None:
        # needed by _build_floating_leg, which runs inside the base __init__
        self._averaging = averaging
        super().__init__(
            type,
            nominal,
            fixed_schedule,
            fixed_rate,
            fixed_day_count,
            floating_schedule,
            index,
            spread,
            floating_day_count,
            payment_convention,
            discount_curve,
        )

    @property
    def overnight_index(self) -> OvernightIndex:
        return self._index  # type: ignore[return-value]

    @property
    def averaging(self) -> RateAveraging:
        return self._averaging

    def _build_floating_leg(self) -> Leg:
        return overnight_leg(
            self._floating_schedule,
            self._nominal,
            self.overnight_index,
            self._spread,
            self._floating_day_count,
            self._payment_convention,
            self._averaging,
        )

    def _setup_floating_arguments(
        self, arguments: FixedVsFloatingArguments, market: Market
    ) -> None:
        coupons: list[OvernightIndexedCoupon] = list(self.floating_leg)  # type: ignore[arg-type]
        floating_arguments_from(coupons, arguments, market)
