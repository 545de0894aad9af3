"""Client-side types for the Swap Pricing GraphQL API (mirror API contracts)."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class CurveInput:
    """Curve definition: name, pillars (year fractions), zero rates (continuously compounded).

    reference_date defaults to the market valuation date on the server.
    """

    name: str
    pillars: list[float]
    zero_rates_cc: list[float]
    reference_date: Optional[date] = None
    day_count: str = "ACT/365F"


@dataclass
class FixingInput:
    """Published index fixing for a past date."""

    index_name: str
    fixing_date: date
    rate: float


@dataclass
class MarketInput:
    """Market snapshot: valuation date, curves, and historical fixings."""

    valuation_date: date
    curves: list[CurveInput]
    fixings: Optional[list[FixingInput]] = None
    include_reference_date_cashflows: bool = False


@dataclass
class IndexInput:
    """Floating index. kind is "IBOR" or "OVERNIGHT"; averaging is "COMPOUND" or "SIMPLE"."""

    name: str
    forecast_curve: str
    kind: str = "IBOR"
    tenor_months: int = 3
    fixing_days: Optional[int] = None
    day_count: str = "ACT/360"
    averaging: str = "COMPOUND"


@dataclass
class SwapInput:
    """Fixed-vs-floating swap. type is "PAYER" (pay fixed) or "RECEIVER"."""

    type: str
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
    schedule_convention: str = "MODIFIED_FOLLOWING"
    payment_convention: Optional[str] = None


@dataclass
class SwapPricingResult:
    """Swap valuation: NPV, leg figures, breakeven quotes and optional PV01 (flattened for ergonomics)."""

    npv: float
    fixed_leg_npv: float
    fixed_leg_bps: float
    floating_leg_npv: float
    floating_leg_bps: float
    fair_rate: Optional[float]
    fair_spread: Optional[float]
    maturity_date: date
    pv01: Optional[float] = None
