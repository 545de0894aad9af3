"""
Date conventions: calendars, business-day adjustment, day counters, schedules.

These are deliberately small reference implementations so the swap protocol
can run end to end:
- Calendars know weekends plus an explicit holiday set (no named holiday rules).
- Day counters cover the three conventions vanilla swaps actually use.
- Schedules are generated **backward** from termination with a short front stub.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Iterator, Optional

from dateutil.relativedelta import relativedelta


class BusinessDayConvention(Enum):
    """Rule for rolling a date that falls on a non-business day."""

    FOLLOWING = "F"
    MODIFIED_FOLLOWING = "MF"
    PRECEDING = "P"
    MODIFIED_PRECEDING = "MP"
    UNADJUSTED = "NONE"


@dataclass(frozen=True)
class Calendar:
    """Weekend (Sat/Sun) calendar with optional explicit holidays."""

    name: str = "WEEKENDS"
    holidays: frozenset[date] = field(default_factory=frozenset)

    def is_business_day(self, d: date) -> bool:
        return d.weekday() < 5 and d not in self.holidays

    def adjust(
        self,
        d: date,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> date:
        """Roll `d` onto a business day according to `convention`."""
        if convention is BusinessDayConvention.UNADJUSTED:
            return d
        if convention in (
            BusinessDayConvention.FOLLOWING,
            BusinessDayConvention.MODIFIED_FOLLOWING,
        ):
            rolled = self._roll(d, 1)
            if (
                convention is BusinessDayConvention.MODIFIED_FOLLOWING
                and rolled.month != d.month
            ):
                return self._roll(d, -1)
            return rolled
        rolled = self._roll(d, -1)
        if (
            convention is BusinessDayConvention.MODIFIED_PRECEDING
            and rolled.month != d.month
        ):
            return self._roll(d, 1)
        return rolled

    def advance(self, d: date, business_days: int) -> date:
        """Move `d` by a signed number of business days (0 = following adjust)."""
        if business_days == 0:
            return self.adjust(d, BusinessDayConvention.FOLLOWING)
        step = 1 if business_days > 0 else -1
        remaining = abs(business_days)
        current = d
        while remaining > 0:
            current += timedelta(days=step)
            if self.is_business_day(current):
                remaining -= 1
        return current

    def business_days_between(self, start: date, end: date) -> list[date]:
        """Business days in [start, end)."""
        days = []
        current = start
        while current < end:
            if self.is_business_day(current):
                days.append(current)
            current += timedelta(days=1)
        return days

    def _roll(self, d: date, step: int) -> date:
        while not self.is_business_day(d):
            d += timedelta(days=step)
        return d


WEEKENDS_ONLY = Calendar()


# --- Day counters ---


@dataclass(frozen=True)
class Actual360:
    name: str = "ACT/360"

    def year_fraction(self, start: date, end: date) -> float:
        return (end - start).days / 360.0


@dataclass(frozen=True)
class Actual365Fixed:
    name: str = "ACT/365F"

    def year_fraction(self, start: date, end: date) -> float:
        return (end - start).days / 365.0


@dataclass(frozen=True)
class Thirty360:
    """30/360 US bond basis."""

    name: str = "30/360"

    def year_fraction(self, start: date, end: date) -> float:
        d1 = min(start.day, 30)
        d2 = end.day
        if d1 == 30:
            d2 = min(d2, 30)
        days = (
            360 * (end.year - start.year)
            + 30 * (end.month - start.month)
            + (d2 - d1)
        )
        return days / 360.0


DayCounter = Actual360 | Actual365Fixed | Thirty360

_DAY_COUNTERS: dict[str, DayCounter] = {
    "ACT/360": Actual360(),
    "ACT/365F": Actual365Fixed(),
    "30/360": Thirty360(),
}


def day_counter(name: str) -> DayCounter:
    """Look up a day counter by name (e.g. 'ACT/360'). Raises ValueError if unknown."""
    try:
        return _DAY_COUNTERS[name.upper()]
    except KeyError:
        raise ValueError(
            f"unknown day count '{name}'. Available: {sorted(_DAY_COUNTERS)}"
        ) from None


# --- Schedule ---


@dataclass(frozen=True)
class Schedule:
    """
    Ordered accrual boundaries for one leg.

    `dates[i]` / `dates[i+1]` are the (adjusted) start/end of period i. The
    schedule's `convention` is what a swap falls back to for payment-date
    adjustment when no explicit payment convention is given.
    """

    dates: tuple[date, ...]
    calendar: Calendar = WEEKENDS_ONLY
    convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    tenor_months: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "dates", tuple(self.dates))
        if len(self.dates) < 2:
            raise ValueError("schedule needs at least two dates")
        for i in range(1, len(self.dates)):
            if self.dates[i] <= self.dates[i - 1]:
                raise ValueError("schedule dates must be strictly increasing")

    @classmethod
    def from_tenor(
        cls,
        effective: date,
        termination: date,
        tenor_months: int,
        calendar: Calendar = WEEKENDS_ONLY,
        convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
        termination_convention: Optional[BusinessDayConvention] = None,
    ) -> "Schedule":
        """
        Generate backward from `termination` in steps of `tenor_months`.

        Unadjusted dates are always computed as `termination - k * tenor` (not by
        repeated stepping) so month-end roll days do not drift. Whatever is left
        between `effective` and the first regular date becomes a front stub.
        """
        if tenor_months <= 0:
            raise ValueError("tenor_months must be positive")
        if termination <= effective:
            raise ValueError("termination must be after effective date")
        unadjusted = [termination]
        k = 1
        while True:
            d = termination - relativedelta(months=k * tenor_months)
            if d <= effective:
                break
            unadjusted.append(d)
            k += 1
        unadjusted.append(effective)
        unadjusted.reverse()

        term_conv = termination_convention or convention
        adjusted = [calendar.adjust(d, convention) for d in unadjusted[:-1]]
        adjusted.append(calendar.adjust(unadjusted[-1], term_conv))
        return cls(
            dates=tuple(adjusted),
            calendar=calendar,
            convention=convention,
            tenor_months=tenor_months,
        )

    @property
    def start_date(self) -> date:
        return self.dates[0]

    @property
    def end_date(self) -> date:
        return self.dates[-1]

    def periods(self) -> Iterator[tuple[date, date]]:
        """Yield (accrual_start, accrual_end) pairs."""
        for i in range(len(self.dates) - 1):
            yield self.dates[i], self.dates[i + 1]

    def __len__(self) -> int:
        return len(self.dates)
