"""Shared fixtures: a hand-specified discount-factor curve and a one-period swap."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from swaplib.curves import ZeroRateCurve
from swaplib.dates import Actual360, Schedule, Thirty360
from swaplib.indexes import IborIndex
from swaplib.market import Market
from swaplib.products.swap import SwapType
from swaplib.products.vanilla import VanillaSwap

VALUATION_DATE = date(2024, 1, 15)
ONE_YEAR = date(2025, 1, 15)


@dataclass(frozen=True)
class TableCurve:
    """Curve given directly as discount factors on dates (DF is 1.0 on unlisted dates)."""

    name: str
    dfs: dict = field(default_factory=dict)

    def df(self, t: float) -> float:
        raise NotImplementedError("TableCurve is date-based")

    def discount(self, d: date) -> float:
        return self.dfs.get(d, 1.0)

    def bumped(self, bump: float) -> "TableCurve":
        raise NotImplementedError("TableCurve cannot be bumped")


@pytest.fixture
def one_period_market() -> Market:
    """DF 0.98 at the pay date; forecast curve implying a 3% simple forward over the year."""
    return Market(
        valuation_date=VALUATION_DATE,
        curves={
            "DISC": TableCurve("DISC", {ONE_YEAR: 0.98}),
            "FWD": TableCurve("FWD", {VALUATION_DATE: 1.0, ONE_YEAR: 1.0 / 1.03}),
        },
    )


@pytest.fixture
def one_period_swap():
    """Factory for a 1Y, single-period swap with accrual fraction exactly 1.0."""

    def make(
        fixed_rate: float = 0.05,
        spread: float = 0.0,
        nominal: float = 1_000_000,
        type: SwapType = SwapType.PAYER,
    ) -> VanillaSwap:
        schedule = Schedule(dates=(VALUATION_DATE, ONE_YEAR))
        index = IborIndex(
            name="IDX-12M",
            tenor_months=12,
            forecast_curve="FWD",
            fixing_days=0,
            day_count=Thirty360(),
        )
        return VanillaSwap(
            type=type,
            nominal=nominal,
            fixed_schedule=schedule,
            fixed_rate=fixed_rate,
            fixed_day_count=Thirty360(),
            floating_schedule=schedule,
            index=index,
            spread=spread,
            floating_day_count=Thirty360(),
            discount_curve="DISC",
        )

    return make


@pytest.fixture
def usd_market() -> Market:
    """Upward-sloping discount and 3M forecast curves as of VALUATION_DATE."""
    pillars = [0.5, 1.0, 2.0, 5.0, 10.0]
    return Market(
        valuation_date=VALUATION_DATE,
        curves={
            "USD_DISC": ZeroRateCurve(
                "USD_DISC", VALUATION_DATE, pillars, [0.045, 0.043, 0.040, 0.038, 0.037]
            ),
            "USD_3M": ZeroRateCurve(
                "USD_3M", VALUATION_DATE, pillars, [0.047, 0.045, 0.042, 0.040, 0.039]
            ),
        },
    )


@pytest.fixture
def five_year_swap():
    """Factory for a 5Y semiannual-fixed vs 3M swap starting two days after VALUATION_DATE."""

    def make(
        fixed_rate: float = 0.04,
        spread: float = 0.0,
        nominal: float = 10_000_000,
        type: SwapType = SwapType.PAYER,
        **kwargs,
    ) -> VanillaSwap:
        start, end = date(2024, 1, 17), date(2029, 1, 17)
        return VanillaSwap(
            type=type,
            nominal=nominal,
            fixed_schedule=Schedule.from_tenor(start, end, 6),
            fixed_rate=fixed_rate,
            fixed_day_count=Thirty360(),
            floating_schedule=Schedule.from_tenor(start, end, 3),
            index=IborIndex(name="USD-3M", tenor_months=3, forecast_curve="USD_3M"),
            spread=spread,
            floating_day_count=Actual360(),
            discount_curve="USD_DISC",
            **kwargs,
        )

    return make


@pytest.fixture
def table_curve():
    """The TableCurve class, for tests that build their own snapshots."""
    return TableCurve
