"""
Floating-rate indices.

An index knows its conventions and where to get a rate for a given fixing:
- fixing before the valuation date -> the historical fixing stored in the Market
- fixing on the valuation date      -> stored fixing if published, else forecast
- fixing after the valuation date   -> forecast from the index's forecast curve

A missing historical fixing is reported as `None` (never as 0.0) so the
coupon amount is explicitly unknown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from swaplib.dates import (
    WEEKENDS_ONLY,
    Actual360,
    BusinessDayConvention,
    Calendar,
    DayCounter,
)
from swaplib.market import Market

logger = logging.getLogger(__name__)


class RateAveraging(Enum):
    """How daily overnight fixings are combined into a period rate."""

    COMPOUND = "compound"
    SIMPLE = "simple"


def _forward_growth(market: Market, curve_name: str, start: date, end: date) -> float:
    """DF(start) / DF(end): the forecast gross growth over [start, end]."""
    curve = market.curve(curve_name)
    return curve.discount(start) / curve.discount(end)


@dataclass(frozen=True)
class IborIndex:
    """Term index (EURIBOR/LIBOR-style) fixing `fixing_days` before the period start."""

    name: str
    tenor_months: int
    forecast_curve: str
    fixing_days: int = 2
    day_count: DayCounter = field(default_factory=Actual360)
    calendar: Calendar = WEEKENDS_ONLY

    def fixing_date(self, value_date: date) -> date:
        return self.calendar.advance(value_date, -self.fixing_days)

    def forecast(self, start: date, end: date, market: Market) -> float:
        """Simply-compounded forward over [start, end] on the forecast curve."""
        tau = self.day_count.year_fraction(start, end)
        if tau <= 0:
            raise ValueError(f"{self.name}: forecast period must have positive length")
        return (_forward_growth(market, self.forecast_curve, start, end) - 1.0) / tau

    def rate(
        self, fixing_date: date, start: date, end: date, market: Market
    ) -> Optional[float]:
        """Rate for a coupon fixing on `fixing_date` and accruing over [start, end]."""
        if fixing_date <= market.valuation_date:
            stored = market.fixing(self.name, fixing_date)
            if stored is not None:
                return stored
            if fixing_date < market.valuation_date:
                logger.info(
                    "missing %s fixing for %s", self.name, fixing_date.isoformat()
                )
                return None
        return self.forecast(start, end, market)


@dataclass(frozen=True)
class OvernightIndex:
    """Overnight index (SOFR/ESTR-style); one fixing per business day, no fixing lag."""

    name: str
    forecast_curve: str
    day_count: DayCounter = field(default_factory=Actual360)
    calendar: Calendar = WEEKENDS_ONLY
    fixing_days: int = 0

    def fixing_date(self, value_date: date) -> date:
        return self.calendar.advance(
            self.calendar.adjust(value_date, BusinessDayConvention.PRECEDING),
            -self.fixing_days,
        )

    def value_dates(self, start: date, end: date) -> list[date]:
        """Accrual nodes: start, every business day strictly inside, end."""
        inner = [d for d in self.calendar.business_days_between(start, end) if d > start]
        return [start] + inner + [end]

    def period_rate(
        self,
        start: date,
        end: date,
        market: Market,
        averaging: RateAveraging = RateAveraging.COMPOUND,
    ) -> Optional[float]:
        """
        Period rate over [start, end] from daily fixings.

        Compounded: (prod(1 + r_i d_i) - 1) / tau. Once the first node that still
        needs a forecast is reached, the rest of the product telescopes to
        DF(node) / DF(end), so no daily loop is needed for the future part.
        Simple: sum(r_i d_i) / tau with forecast daily forwards.
        """
        tau = self.day_count.year_fraction(start, end)
        if tau <= 0:
            raise ValueError(f"{self.name}: accrual period must have positive length")
        nodes = self.value_dates(start, end)
        growth = 1.0
        accrued = 0.0
        for i in range(len(nodes) - 1):
            d0, d1 = nodes[i], nodes[i + 1]
            fixing_date = self.fixing_date(d0)
            stored = None
            if fixing_date <= market.valuation_date:
                stored = market.fixing(self.name, fixing_date)
                if stored is None and fixing_date < market.valuation_date:
                    logger.info(
                        "missing %s fixing for %s", self.name, fixing_date.isoformat()
                    )
                    return None
            if stored is None:
                if averaging is RateAveraging.COMPOUND:
                    growth *= _forward_growth(market, self.forecast_curve, d0, end)
                    break
                accrued += _forward_growth(market, self.forecast_curve, d0, d1) - 1.0
                continue
            delta = self.day_count.year_fraction(d0, d1)
            growth *= 1.0 + stored * delta
            accrued += stored * delta
        if averaging is RateAveraging.COMPOUND:
            return (growth - 1.0) / tau
        return accrued / tau
