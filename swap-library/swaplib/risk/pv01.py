"""Parallel PV01 risk measure (bump-and-reprice)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from swaplib.market import Market
from swaplib.products.swap import FixedVsFloatingSwap
from swaplib.risk.base import BaseRiskMeasure

logger = logging.getLogger(__name__)


@dataclass
class PV01Parallel(BaseRiskMeasure):
    """Parallel PV01 of a swap.

    With no `curve_name` the swap's own discount curve is bumped, which moves
    both legs' discounting but none of the floating forecasts.
    """

    curve_name: Optional[str] = None
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"PV01_{self.curve_name or 'DISCOUNT'}"

    def curve_for(self, instrument: FixedVsFloatingSwap) -> str:
        return self.curve_name if self.curve_name is not None else instrument.discount_curve

    def compute(self, instrument: FixedVsFloatingSwap, market: Market) -> float:
        curve_name = self.curve_for(instrument)
        pv01 = self.reprice_bumped(instrument, market, curve_name, self.bump_bp)
        logger.debug(
            "%s on %s: %.6f for %.2fbp", type(instrument).__name__, curve_name, pv01, self.bump_bp
        )
        return pv01
