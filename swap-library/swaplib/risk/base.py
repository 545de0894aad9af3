"""Base class for swap risk measures."""

from __future__ import annotations

from abc import ABC, abstractmethod

from swaplib.market import Market
from swaplib.pricing import price
from swaplib.products.swap import BASIS_POINT, FixedVsFloatingSwap


class BaseRiskMeasure(ABC):
    """Bump-and-reprice sensitivity of a fixed-vs-floating swap."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def compute(self, instrument: FixedVsFloatingSwap, market: Market) -> float:
        """Compute the risk measure value."""
        ...

    @staticmethod
    def reprice_bumped(
        instrument: FixedVsFloatingSwap, market: Market, curve_name: str, bump_bp: float
    ) -> float:
        """PV(bumped) - PV(base) for a parallel shift of `curve_name` by `bump_bp` bp.

        The bumped valuation runs on a new Market snapshot; the base market
        and its curves are left untouched.
        """
        curve = market.curve(curve_name)
        bumped_market = market.with_curve(curve_name, curve.bumped(bump_bp * BASIS_POINT))
        return price(instrument, bumped_market) - price(instrument, market)
