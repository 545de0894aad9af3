"""
Coupons and leg builders.

A leg is a tuple of frozen coupon records, one per accrual period of its
schedule. Coupons are data plus the formula for their own amount; floating
coupons need the Market to read fixings and forecast curves, and report an
unknown amount as `None`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from swaplib.dates import BusinessDayConvention, DayCounter, Schedule
from swaplib.indexes import IborIndex, OvernightIndex, RateAveraging
from swaplib.market import Market


@dataclass(frozen=True)
class FixedRateCoupon:
    """Coupon = nominal * rate * accrual_period, paid on payment_date."""

    payment_date: date
    nominal: float
    rate: float
    accrual_start: date
    accrual_end: date
    day_count: DayCounter

    @property
    def accrual_period(self) -> float:
        return self.day_count.year_fraction(self.accrual_start, self.accrual_end)

    @property
    def amount(self) -> float:
        return self.nominal * self.rate * self.accrual_period


@dataclass(frozen=True)
class FloatingRateCoupon(ABC):
    """Coupon = nominal * (index rate + spread) * accrual_period."""

    payment_date: date
    nominal: float
    accrual_start: date
    accrual_end: date
    day_count: DayCounter
    spread: float

    @property
    def accrual_period(self) -> float:
        return self.day_count.year_fraction(self.accrual_start, self.accrual_end)

    @property
    @abstractmethod
    def fixing_date(self) -> date:
        ...

    @abstractmethod
    def index_rate(self, market: Market) -> Optional[float]:
        """Index rate for the period, or None when a past fixing is missing."""
        ...

    def rate(self, market: Market) -> Optional[float]:
        index_rate = self.index_rate(market)
        if index_rate is None:
            return None
        return index_rate + self.spread

    def amount(self, market: Market) -> Optional[float]:
        rate = self.rate(market)
        if rate is None:
            return None
        return self.nominal * rate * self.accrual_period


@dataclass(frozen=True)
class IborCoupon(FloatingRateCoupon):
    """Term-index coupon fixed in advance, forecast over its own accrual period."""

    index: IborIndex

    @property
    def fixing_date(self) -> date:
        return self.index.fixing_date(self.accrual_start)

    def index_rate(self, market: Market) -> Optional[float]:
        return self.index.rate(
            self.fixing_date, self.accrual_start, self.accrual_end, market
        )


@dataclass(frozen=True)
class OvernightIndexedCoupon(FloatingRateCoupon):
    """Coupon on daily overnight fixings, compounded or averaged over the period."""

    index: OvernightIndex
    averaging: RateAveraging = RateAveraging.COMPOUND

    @property
    def fixing_date(self) -> date:
        return self.index.fixing_date(self.accrual_start)

    def index_rate(self, market: Market) -> Optional[float]:
        return self.index.period_rate(
            self.accrual_start, self.accrual_end, market, self.averaging
        )


Coupon = Union[FixedRateCoupon, FloatingRateCoupon]
Leg = tuple[Coupon, ...]


def fixed_rate_leg(
    schedule: Schedule,
    nominal: float,
    rate: float,
    day_count: DayCounter,
    payment_convention: BusinessDayConvention,
) -> tuple[FixedRateCoupon, ...]:
    """One fixed coupon per schedule period, paid on the adjusted period end."""
    return tuple(
        FixedRateCoupon(
            payment_date=schedule.calendar.adjust(end, payment_convention),
            nominal=nominal,
            rate=rate,
            accrual_start=start,
            accrual_end=end,
            day_count=day_count,
        )
        for start, end in schedule.periods()
    )


def ibor_leg(
    schedule: Schedule,
    nominal: float,
    index: IborIndex,
    spread: float,
    day_count: DayCounter,
    payment_convention: BusinessDayConvention,
) -> tuple[IborCoupon, ...]:
    return tuple(
        IborCoupon(
            payment_date=schedule.calendar.adjust(end, payment_convention),
            nominal=nominal,
            accrual_start=start,
            accrual_end=end,
            day_count=day_count,
            spread=spread,
            index=index,
        )
        for start, end in schedule.periods()
    )


def overnight_leg(
    schedule: Schedule,
    nominal: float,
    index: OvernightIndex,
    spread: float,
    day_count: DayCounter,
    payment_convention: BusinessDayConvention,
    averaging: RateAveraging = RateAveraging.COMPOUND,
) -> tuple[OvernightIndexedCoupon, ...]:
    return tuple(
        OvernightIndexedCoupon(
            payment_date=schedule.calendar.adjust(end, payment_convention),
            nominal=nominal,
            accrual_start=start,
            accrual_end=end,
            day_count=day_count,
            spread=spread,
            index=index,
            averaging=averaging,
        )
        for start, end in schedule.periods()
    )
