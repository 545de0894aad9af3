"""Pricer implementations for the registry-based pricing engine."""

from swaplib.pricers.base import BasePricer
from swaplib.pricers.swap_pricer import DiscountingSwapPricer

__all__ = [
    "BasePricer",
    "DiscountingSwapPricer",
]
