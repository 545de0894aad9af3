"""
Swap risk measures implemented via "bump and reprice".

New code should use the PV01Parallel class for composability.
The pv01_parallel function is a shorthand for one-off calls.
"""

from __future__ import annotations

from typing import Optional

from swaplib.market import Market
from swaplib.pricing import Trade
from swaplib.risk.base import BaseRiskMeasure
from swaplib.risk.pv01 import PV01Parallel


def pv01_parallel(
    trade: Trade,
    market: Market,
    curve_name: Optional[str] = None,
    bump_bp: float = 1.0,
) -> float:
    """
    PV01: change in PV when a curve is bumped by bump_bp basis points (parallel).
    The curve defaults to the trade's discount curve; the bump is additive to
    zero rates. Returns PV(bumped) - PV(base).
    """
    measure = PV01Parallel(curve_name=curve_name, bump_bp=bump_bp)
    return measure.compute(trade, market)


__all__ = [
    "BaseRiskMeasure",
    "PV01Parallel",
    "pv01_parallel",
]
