"""Vanilla swap: fixed leg against a term (IBOR-style) index."""

from __future__ import annotations

from typing import Optional

from swaplib.cashflows import IborCoupon, Leg, ibor_leg
from swaplib.dates import BusinessDayConvention, DayCounter, Schedule
from swaplib.indexes import IborIndex
from swaplib.market import Market
from swaplib.products.swap import (
    FixedVsFloatingArguments,
    FixedVsFloatingSwap,
    SwapType,
    floating_arguments_from,
)


class VanillaSwap(FixedVsFloatingSwap):
    """
    Fixed vs IBOR swap.
    Floating coupons fix `index.fixing_days` business days before each accrual
    start and are forecast over their own accrual period (par coupons).
    """

    def __init__(
        self,
        type: SwapType,
        nominal: float,
        fixed_schedule: Schedule,
        fixed_rate: float,
        fixed_day_count: DayCounter,
        floating_schedule: Schedule,
        index: IborIndex,
        spread: float,
        floating_day_count: DayCounter,
        payment_convention: Optional[BusinessDayConvention] = None,
        discount_curve: str = "DISC",
    ) -> None:
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
    def ibor_index(self) -> IborIndex:
        return self._index  # type: ignore[return-value]

    def _build_floating_leg(self) -> Leg:
        return ibor_leg(
            self._floating_schedule,
            self._nominal,
            self.ibor_index,
            self._spread,
            self._floating_day_count,
            self._payment_convention,
        )

    def _setup_floating_arguments(
        self, arguments: FixedVsFloatingArguments, market: Market
    ) -> None:
        coupons: list[IborCoupon] = list(self.floating_leg)  # type: ignore[arg-type]
        floating_arguments_from(coupons, arguments, market)
