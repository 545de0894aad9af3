"""Swap library: dates, curves, market, fixed-vs-floating swaps, pricing engine, and risk."""

from swaplib.curves import FlatForwardCurve, ZeroRateCurve
from swaplib.dates import (
    Actual360,
    Actual365Fixed,
    BusinessDayConvention,
    Calendar,
    Schedule,
    Thirty360,
)
from swaplib.engine import PricingEngine, create_default_engine, default_engine
from swaplib.errors import (
    InvalidArguments,
    ResultNotAvailable,
    SwapError,
    TypeMismatch,
    UndefinedResult,
)
from swaplib.indexes import IborIndex, OvernightIndex, RateAveraging
from swaplib.interfaces import (
    Curve,
    Instrument,
    Pricer,
    PricingArguments,
    PricingResults,
    RiskMeasure,
)
from swaplib.market import Market
from swaplib.pricers import BasePricer, DiscountingSwapPricer
from swaplib.pricing import fair_rate, fair_spread, price, Trade
from swaplib.products.ois import OvernightIndexedSwap
from swaplib.products.swap import (
    FixedVsFloatingArguments,
    FixedVsFloatingResults,
    FixedVsFloatingSwap,
    SwapResults,
    SwapType,
)
from swaplib.products.vanilla import VanillaSwap
from swaplib.risk import PV01Parallel, pv01_parallel

__all__ = [
    "Curve",
    "Instrument",
    "Pricer",
    "PricingArguments",
    "PricingResults",
    "RiskMeasure",
    "ZeroRateCurve",
    "FlatForwardCurve",
    "Actual360",
    "Actual365Fixed",
    "Thirty360",
    "BusinessDayConvention",
    "Calendar",
    "Schedule",
    "IborIndex",
    "OvernightIndex",
    "RateAveraging",
    "PricingEngine",
    "create_default_engine",
    "default_engine",
    "Market",
    "BasePricer",
    "DiscountingSwapPricer",
    "price",
    "fair_rate",
    "fair_spread",
    "Trade",
    "FixedVsFloatingArguments",
    "FixedVsFloatingResults",
    "FixedVsFloatingSwap",
    "SwapResults",
    "SwapType",
    "VanillaSwap",
    "OvernightIndexedSwap",
    "PV01Parallel",
    "pv01_parallel",
    "SwapError",
    "InvalidArguments",
    "TypeMismatch",
    "UndefinedResult",
    "ResultNotAvailable",
]
