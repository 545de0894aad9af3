"""GraphQL types for the swap pricing and risk API."""

from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum
from typing import Optional

import strawberry


# --- Enums ---


@strawberry.enum
class SwapTypeEnum(Enum):
    """PAYER pays fixed and receives floating; RECEIVER is the mirror."""

    PAYER = "payer"
    RECEIVER = "receiver"


@strawberry.enum
class IndexKind(Enum):
    IBOR = "ibor"
    OVERNIGHT = "overnight"


@strawberry.enum
class RateAveragingEnum(Enum):
    COMPOUND = "compound"
    SIMPLE = "simple"


@strawberry.enum
class BusinessDayConventionEnum(Enum):
    FOLLOWING = "F"
    MODIFIED_FOLLOWING = "MF"
    PRECEDING = "P"
    MODIFIED_PRECEDING = "MP"
    UNADJUSTED = "NONE"


# --- Input types (request payloads) ---


@strawberry.input
class CurveInput:
    """Curve definition: name, pillars (year fractions), zero rates (continuously compounded).

    reference_date defaults to the market valuation date.
    """

    name: str
    pillars: list[float]
    zero_rates_cc: list[float]
    reference_date: Optional[date] = None
    day_count: str = "ACT/365F"


@strawberry.input
class FixingInput:
    """Published index fixing for a past date."""

    index_name: str
    fixing_date: date
    rate: float


@strawberry.input
class MarketInput:
    """Market snapshot: valuation date, curves, and historical fixings."""

    valuation_date: date
    curves: list[CurveInput]
    fixings: Optional[list[FixingInput]] = None
    include_reference_date_cashflows: bool = False


@strawberry.input
class IndexInput:
    """Floating index. tenor_months and fixing_days only apply to IBOR indices."""

    name: str
    forecast_curve: str
    kind: IndexKind = IndexKind.IBOR
    tenor_months: int = 3
    fixing_days: Optional[int] = None
    day_count: str = "ACT/360"
    averaging: RateAveragingEnum = RateAveragingEnum.COMPOUND


@strawberry.input
class SwapInput:
    """Fixed-vs-floating swap. Both schedules run from effective_date to termination_date."""

    type: SwapTypeEnum
    nominal: float
    effective_date: date
    termination_date: date
    fixed_rate: float
    index: IndexInput
    discount_curve: str
    spread: float = 0.0
    fixed_tenor_months: int = 12
    fixed_day_count: str = "30/360"
    floating_tenor_months: Optional[int] = None
    floating_day_count: str = "ACT/360"
    schedule_convention: BusinessDayConventionEnum = (
        BusinessDayConventionEnum.MODIFIED_FOLLOWING
    )
    payment_convention: Optional[BusinessDayConventionEnum] = None


# --- Output types (response payloads) ---


@strawberry.type
class RiskMeasures:
    """Risk measures: PV01 (parallel curve bump)."""

    pv01: Optional[float] = None


@strawberry.type
class SwapPricingResult:
    """NPV, per-leg NPV/BPS and breakeven quotes.

    fair_rate / fair_spread are null for a swap with no cash flows left.
    A quote whose leg annuity is zero is null and reported in `errors`,
    while the rest of the payload is still returned.
    """

    npv: float
    fixed_leg_npv: float
    fixed_leg_bps: float
    floating_leg_npv: float
    floating_leg_bps: float
    maturity_date: date
    risk_measures: Optional[RiskMeasures] = None
    fair_rate_value: strawberry.Private[Optional[float]] = None
    fair_spread_value: strawberry.Private[Optional[float]] = None
    undefined: strawberry.Private[dict[str, str]] = dataclasses.field(default_factory=dict)

    @strawberry.field
    def fair_rate(self) -> Optional[float]:
        if "fair_rate" in self.undefined:
            raise ValueError(self.undefined["fair_rate"])
        return self.fair_rate_value

    @strawberry.field
    def fair_spread(self) -> Optional[float]:
        if "fair_spread" in self.undefined:
            raise ValueError(self.undefined["fair_spread"])
        return self.fair_spread_value
