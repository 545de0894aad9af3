"""Products: fixed-vs-floating swaps (IBOR and overnight floating legs)."""

from swaplib.products.instrument import CachedResults, Instrument
from swaplib.products.ois import OvernightIndexedSwap
from swaplib.products.swap import (
    FixedVsFloatingArguments,
    FixedVsFloatingResults,
    FixedVsFloatingSwap,
    SwapResults,
    SwapType,
)
from swaplib.products.vanilla import VanillaSwap

__all__ = [
    "CachedResults",
    "Instrument",
    "FixedVsFloatingArguments",
    "FixedVsFloatingResults",
    "FixedVsFloatingSwap",
    "OvernightIndexedSwap",
    "SwapResults",
    "SwapType",
    "VanillaSwap",
]
