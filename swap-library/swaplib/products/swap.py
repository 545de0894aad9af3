"""
Fixed-vs-floating interest rate swap: instrument, arguments snapshot, results record.

Legs are generated once at construction. `legs[0]` is always the fixed leg and
`legs[1]` the floating leg; pricers and inspectors rely on that order.
Signs come from `SwapType.leg_sign`: a PAYER swap pays fixed (-1) and
receives floating (+1), a RECEIVER swap is the mirror.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional, Sequence, Union

from swaplib.cashflows import FixedRateCoupon, FloatingRateCoupon, Leg, fixed_rate_leg
from swaplib.dates import BusinessDayConvention, DayCounter, Schedule
from swaplib.errors import (
    IA_DISCOUNT_CURVE_NOT_SET,
    IA_FIXED_RATE_NOT_SET,
    IA_LENGTH_MISMATCH,
    IA_NOMINAL_NOT_SET,
    IA_TYPE_NOT_SET,
    RNA_EXPIRED,
    TM_WRONG_ARGUMENTS,
    TM_WRONG_RESULTS,
    UR_ZERO_ANNUITY,
    InvalidArguments,
    ResultNotAvailable,
    TypeMismatch,
    UndefinedResult,
)
from swaplib.indexes import IborIndex, OvernightIndex
from swaplib.market import Market
from swaplib.products.instrument import Instrument

logger = logging.getLogger(__name__)

BASIS_POINT = 1.0e-4

# relative to max(1, |nominal|)
ANNUITY_TOLERANCE = 1.0e-12

FIXED_LEG = 0
FLOATING_LEG = 1

LEG_NAMES = ("fixed", "floating")


class SwapType(Enum):
    """Which side of the fixed leg the holder is on."""

    PAYER = "payer"
    RECEIVER = "receiver"

    def leg_sign(self, leg: int) -> float:
        """-1.0 for the leg paid, +1.0 for the leg received."""
        pays_fixed = self is SwapType.PAYER
        paid = (leg == FIXED_LEG) == pays_fixed
        return -1.0 if paid else 1.0


# --- Results ---


def _unset_pair() -> list[Optional[float]]:
    return [None, None]


@dataclass
class SwapResults:
    """Total and per-leg NPV/BPS. `None` means not calculated."""

    value: Optional[float] = None
    leg_npv: list[Optional[float]] = field(default_factory=_unset_pair)
    leg_bps: list[Optional[float]] = field(default_factory=_unset_pair)
    valuation_date: Optional[date] = None

    def reset(self) -> None:
        self.value = None
        self.leg_npv = _unset_pair()
        self.leg_bps = _unset_pair()
        self.valuation_date = None


@dataclass
class FixedVsFloatingResults(SwapResults):
    """
    Adds the breakeven fixed rate and floating spread.

    A quote whose leg annuity vanishes stays None and its reason is kept in
    `undefined`, keyed by field name; the rest of the record is still valid.
    """

    fair_rate: Optional[float] = None
    fair_spread: Optional[float] = None
    undefined: dict[str, str] = field(default_factory=dict)

    def reset(self) -> None:
        super().reset()
        self.fair_rate = None
        self.fair_spread = None
        self.undefined = {}

    def solved(self, name: str, what: str) -> float:
        """Return the quote `name`; raise UndefinedResult or ResultNotAvailable if unset."""
        value = getattr(self, name)
        if value is not None:
            return value
        if name in self.undefined:
            raise UndefinedResult(self.undefined[name])
        raise ResultNotAvailable(RNA_EXPIRED.format(what))


def breakeven(current: float, npv: float, bps: float, nominal: float) -> Optional[float]:
    """current - NPV / (signed annuity), or None when the annuity is zero."""
    annuity = bps / BASIS_POINT
    if abs(annuity) <= ANNUITY_TOLERANCE * max(1.0, abs(nominal)):
        return None
    return current - npv / annuity


def solve_fair_values(
    results: FixedVsFloatingResults, fixed_rate: float, spread: float, nominal: float
) -> None:
    """Fill fair_rate / fair_spread from the NPV and leg BPS already in `results`."""
    quotes = (
        ("fair_rate", "fair rate", FIXED_LEG, fixed_rate),
        ("fair_spread", "fair spread", FLOATING_LEG, spread),
    )
    for name, what, leg, current in quotes:
        bps = results.leg_bps[leg]
        if results.value is None or bps is None:
            continue
        value = breakeven(current, results.value, bps, nominal)
        setattr(results, name, value)
        if value is None:
            reason = UR_ZERO_ANNUITY.format(what, LEG_NAMES[leg])
            results.undefined[name] = reason
            logger.debug(reason)


# --- Arguments ---


def _require_same_length(name_a: str, a: Sequence[Any], name_b: str, b: Sequence[Any]) -> None:
    if len(a) != len(b):
        raise InvalidArguments(IA_LENGTH_MISMATCH.format(name_a, len(a), name_b, len(b)))


@dataclass
class FixedVsFloatingArguments:
    """
    Flat, engine-consumable copy of both legs.

    Parallel lists per leg; a floating coupon whose amount cannot be
    determined (e.g. a missing past fixing) is stored as None.
    """

    type: Optional[SwapType] = SwapType.RECEIVER
    nominal: Optional[float] = None
    fixed_rate: Optional[float] = None
    spread: float = 0.0
    discount_curve: Optional[str] = None

    fixed_reset_dates: list[date] = field(default_factory=list)
    fixed_pay_dates: list[date] = field(default_factory=list)
    fixed_accrual_times: list[float] = field(default_factory=list)
    fixed_coupons: list[float] = field(default_factory=list)

    floating_accrual_times: list[float] = field(default_factory=list)
    floating_reset_dates: list[date] = field(default_factory=list)
    floating_fixing_dates: list[date] = field(default_factory=list)
    floating_pay_dates: list[date] = field(default_factory=list)
    floating_spreads: list[float] = field(default_factory=list)
    floating_coupons: list[Optional[float]] = field(default_factory=list)

    def validate(self) -> None:
        if self.type is None:
            raise InvalidArguments(IA_TYPE_NOT_SET)
        if self.nominal is None:
            raise InvalidArguments(IA_NOMINAL_NOT_SET)
        if self.fixed_rate is None:
            raise InvalidArguments(IA_FIXED_RATE_NOT_SET)
        if self.discount_curve is None:
            raise InvalidArguments(IA_DISCOUNT_CURVE_NOT_SET)

        _require_same_length(
            "fixed reset dates", self.fixed_reset_dates,
            "fixed payment dates", self.fixed_pay_dates,
        )
        _require_same_length(
            "fixed accrual times", self.fixed_accrual_times,
            "fixed payment dates", self.fixed_pay_dates,
        )
        _require_same_length(
            "fixed payment dates", self.fixed_pay_dates,
            "fixed coupon amounts", self.fixed_coupons,
        )
        _require_same_length(
            "floating reset dates", self.floating_reset_dates,
            "floating payment dates", self.floating_pay_dates,
        )
        _require_same_length(
            "floating fixing dates", self.floating_fixing_dates,
            "floating payment dates", self.floating_pay_dates,
        )
        _require_same_length(
            "floating accrual times", self.floating_accrual_times,
            "floating payment dates", self.floating_pay_dates,
        )
        _require_same_length(
            "floating spreads", self.floating_spreads,
            "floating payment dates", self.floating_pay_dates,
        )
        _require_same_length(
            "floating payment dates", self.floating_pay_dates,
            "floating coupon amounts", self.floating_coupons,
        )


# --- Instrument ---


FloatingIndex = Union[IborIndex, OvernightIndex]


class FixedVsFloatingSwap(Instrument):
    """
    Swap exchanging a fixed leg against a floating leg plus spread.

    If no payment convention is passed, the convention of the floating-rate
    schedule is used for both legs. Concrete subclasses decide how the floating
    leg is built and how it is copied into the arguments snapshot.
    """

    def __init__(
        self,
        type: SwapType,
        nominal: float,
        fixed_schedule: Schedule,
        fixed_rate: float,
        fixed_day_count: DayCounter,
        floating_schedule: Schedule,
        index: FloatingIndex,
        spread: float,
        floating_day_count: DayCounter,
        payment_convention: Optional[BusinessDayConvention] = None,
        discount_curve: str = "DISC",
    ) -> None:
        super().__init__()
        self._type = type
        self._nominal = nominal
        self._fixed_schedule = fixed_schedule
        self._fixed_rate = fixed_rate
        self._fixed_day_count = fixed_day_count
        self._floating_schedule = floating_schedule
        self._index = index
        self._spread = spread
        self._floating_day_count = floating_day_count
        self._payment_convention = (
            payment_convention
            if payment_convention is not None
            else floating_schedule.convention
        )
        self._discount_curve = discount_curve

        fixed_leg = fixed_rate_leg(
            fixed_schedule,
            nominal,
            fixed_rate,
            fixed_day_count,
            self._payment_convention,
        )
        self._legs: tuple[Leg, Leg] = (fixed_leg, self._build_floating_leg())

    @abstractmethod
    def _build_floating_leg(self) -> Leg:
        """Generate the floating coupons (called once, from __init__)."""
        ...

    @abstractmethod
    def _setup_floating_arguments(
        self, arguments: FixedVsFloatingArguments, market: Market
    ) -> None:
        """Copy floating-leg data into the snapshot."""
        ...

    # --- Inspectors ---

    @property
    def type(self) -> SwapType:
        return self._type

    @property
    def nominal(self) -> float:
        return self._nominal

    @property
    def fixed_schedule(self) -> Schedule:
        return self._fixed_schedule

    @property
    def fixed_rate(self) -> float:
        return self._fixed_rate

    @property
    def fixed_day_count(self) -> DayCounter:
        return self._fixed_day_count

    @property
    def floating_schedule(self) -> Schedule:
        return self._floating_schedule

    @property
    def floating_index(self) -> FloatingIndex:
        return self._index

    @property
    def spread(self) -> float:
        return self._spread

    @property
    def floating_day_count(self) -> DayCounter:
        return self._floating_day_count

    @property
    def payment_convention(self) -> BusinessDayConvention:
        return self._payment_convention

    @property
    def discount_curve(self) -> str:
        return self._discount_curve

    @property
    def legs(self) -> tuple[Leg, Leg]:
        return self._legs

    @property
    def fixed_leg(self) -> Leg:
        return self._legs[FIXED_LEG]

    @property
    def floating_leg(self) -> Leg:
        return self._legs[FLOATING_LEG]

    @property
    def maturity_date(self) -> date:
        return max(c.payment_date for leg in self._legs for c in leg)

    # --- Results ---

    @property
    def npv(self) -> float:
        return self._current("npv").results.value

    @property
    def fixed_leg_npv(self) -> float:
        return self._current("fixed leg NPV").results.leg_npv[FIXED_LEG]

    @property
    def fixed_leg_bps(self) -> float:
        return self._current("fixed leg BPS").results.leg_bps[FIXED_LEG]

    @property
    def floating_leg_npv(self) -> float:
        return self._current("floating leg NPV").results.leg_npv[FLOATING_LEG]

    @property
    def floating_leg_bps(self) -> float:
        return self._current("floating leg BPS").results.leg_bps[FLOATING_LEG]

    @property
    def fair_rate(self) -> float:
        return self._current("fair rate").results.solved("fair_rate", "fair rate")

    @property
    def fair_spread(self) -> float:
        return self._current("fair spread").results.solved("fair_spread", "fair spread")

    # --- Protocol ---

    def is_expired(self, market: Market) -> bool:
        return all(
            market.has_occurred(coupon.payment_date)
            for leg in self._legs
            for coupon in leg
        )

    def setup_arguments(self, arguments: Any, market: Market) -> None:
        if not isinstance(arguments, FixedVsFloatingArguments):
            raise TypeMismatch(
                TM_WRONG_ARGUMENTS.format(
                    FixedVsFloatingArguments.__name__, type(arguments).__name__
                )
            )
        arguments.type = self._type
        arguments.nominal = self._nominal
        arguments.fixed_rate = self._fixed_rate
        arguments.spread = self._spread
        arguments.discount_curve = self._discount_curve

        fixed: tuple[FixedRateCoupon, ...] = self.fixed_leg  # type: ignore[assignment]
        arguments.fixed_reset_dates = [c.accrual_start for c in fixed]
        arguments.fixed_pay_dates = [c.payment_date for c in fixed]
        arguments.fixed_accrual_times = [c.accrual_period for c in fixed]
        arguments.fixed_coupons = [c.amount for c in fixed]

        self._setup_floating_arguments(arguments, market)

    def setup_expired(self, market: Market) -> FixedVsFloatingResults:
        """Nothing left to pay: zero NPV/BPS, no meaningful breakeven."""
        logger.info(
            "%s expired on %s (maturity %s)",
            type(self).__name__,
            market.valuation_date.isoformat(),
            self.maturity_date.isoformat(),
        )
        results = FixedVsFloatingResults(
            value=0.0,
            leg_npv=[0.0, 0.0],
            leg_bps=[0.0, 0.0],
            valuation_date=market.valuation_date,
        )
        self._store(results, market)
        return results

    def fetch_results(self, results: Any, market: Market) -> None:
        """
        Write `results` into this instrument's cache token.

        A plain SwapResults (from an engine that does not solve for fair
        values) is accepted; the fair rate/spread are then derived from the
        leg BPS, with the same zero-annuity rule the discounting pricer uses.
        """
        if not isinstance(results, SwapResults):
            raise TypeMismatch(
                TM_WRONG_RESULTS.format(SwapResults.__name__, type(results).__name__)
            )
        stored = FixedVsFloatingResults(
            value=results.value,
            leg_npv=list(results.leg_npv),
            leg_bps=list(results.leg_bps),
            valuation_date=results.valuation_date,
        )
        if isinstance(results, FixedVsFloatingResults):
            stored.fair_rate = results.fair_rate
            stored.fair_spread = results.fair_spread
            stored.undefined = dict(results.undefined)
        else:
            solve_fair_values(stored, self._fixed_rate, self._spread, self._nominal)
        self._store(stored, market)


def floating_arguments_from(
    coupons: Sequence[FloatingRateCoupon],
    arguments: FixedVsFloatingArguments,
    market: Market,
) -> None:
    """Fill the floating-leg lists of `arguments` from `coupons`."""
    arguments.floating_reset_dates = [c.accrual_start for c in coupons]
    arguments.floating_pay_dates = [c.payment_date for c in coupons]
    arguments.floating_fixing_dates = [c.fixing_date for c in coupons]
    arguments.floating_accrual_times = [c.accrual_period for c in coupons]
    arguments.floating_spreads = [c.spread for c in coupons]
    # settled coupons are skipped by the pricer, so their fixings are not needed
    arguments.floating_coupons = [
        None if market.has_occurred(c.payment_date) else c.amount(market)
        for c in coupons
    ]
