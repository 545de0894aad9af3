"""
Interest-rate curve primitives.

This module keeps curve math minimal and explicit:
- Pillars are **year fractions** from `reference_date`, measured with the
  curve's own day counter (ACT/365F by default).
- Rates are **continuously compounded zero rates**.
- Interpolation is **linear in zero rates** between pillar points, flat outside.

Curves are the discounting/forecasting service of the swap engine. They are
immutable: `bumped()` returns a new curve, so a `Market` holding them can be
read concurrently by many valuations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date

from swaplib.dates import Actual365Fixed, DayCounter


def _time_from_reference(reference_date: date, d: date, day_count: DayCounter) -> float:
    if d < reference_date:
        raise ValueError(
            f"date {d.isoformat()} is before curve reference date {reference_date.isoformat()}"
        )
    return day_count.year_fraction(reference_date, d)


@dataclass(frozen=True)
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - **Pillars** are increasing times (year fractions) where the curve is defined.
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`.
    - `discount(d)` converts a date to a time with `day_count`, then calls `df`.

    Implements Curve protocol structurally (no explicit inheritance).
    """

    name: str
    reference_date: date
    pillars: list[float]
    zero_rates_cc: list[float]
    day_count: DayCounter = field(default_factory=Actual365Fixed)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if len(self.pillars) != len(self.zero_rates_cc):
            raise ValueError("pillars and zero_rates_cc must have the same length")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        for i in range(1, len(self.pillars)):
            if self.pillars[i] <= self.pillars[i - 1]:
                raise ValueError("pillars must be strictly increasing")

    def zero_rate_cc(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates. t must be >= 0.
        """
        if t < 0:
            raise ValueError("t must be >= 0")
        if t <= self.pillars[0]:
            return self.zero_rates_cc[0]
        if t >= self.pillars[-1]:
            return self.zero_rates_cc[-1]
        for i in range(len(self.pillars) - 1):
            if self.pillars[i] <= t <= self.pillars[i + 1]:
                t0, t1 = self.pillars[i], self.pillars[i + 1]
                r0, r1 = self.zero_rates_cc[i], self.zero_rates_cc[i + 1]
                return r0 + (r1 - r0) * (t - t0) / (t1 - t0)
        return self.zero_rates_cc[-1]

    def df(self, t: float) -> float:
        r"""
        Discount factor to time t.

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        r = self.zero_rate_cc(t)
        return math.exp(-r * t)

    def discount(self, d: date) -> float:
        """Discount factor to date d (d must not precede the reference date)."""
        return self.df(_time_from_reference(self.reference_date, d, self.day_count))

    def bumped(self, bump: float) -> "ZeroRateCurve":
        """
        Return a new curve with a *parallel* additive shift to all zero rates.

        `bump` is expressed in absolute rate terms (e.g. 1bp = 0.0001).
        """
        return ZeroRateCurve(
            name=self.name,
            reference_date=self.reference_date,
            pillars=list(self.pillars),
            zero_rates_cc=[r + bump for r in self.zero_rates_cc],
            day_count=self.day_count,
        )


@dataclass(frozen=True)
class FlatForwardCurve:
    """Single continuously compounded rate for every maturity."""

    name: str
    reference_date: date
    rate: float
    day_count: DayCounter = field(default_factory=Actual365Fixed)

    def df(self, t: float) -> float:
        if t < 0:
            raise ValueError("t must be >= 0")
        return math.exp(-self.rate * t)

    def discount(self, d: date) -> float:
        return self.df(_time_from_reference(self.reference_date, d, self.day_count))

    def bumped(self, bump: float) -> "FlatForwardCurve":
        return FlatForwardCurve(
            name=self.name,
            reference_date=self.reference_date,
            rate=self.rate + bump,
            day_count=self.day_count,
        )
