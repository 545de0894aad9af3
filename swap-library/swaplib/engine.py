"""
Pricing engine: values instruments given a market snapshot.

Design intent:
- Instruments never price themselves; they fill an arguments snapshot and
  read a results record back (see `BasePricer.calculate`).
- This engine uses a **registry of pricers** for dispatch, enabling:
  - Adding new instruments without modifying engine code (Open/Closed Principle)
  - Swapping pricing models per instrument type
  - Third-party pricer plugins
"""

from __future__ import annotations

import threading
from typing import Optional

from swaplib.interfaces import Instrument, PricingResults
from swaplib.market import Market
from swaplib.pricers import BasePricer


class PricingEngine:
    """
    Registry-based pricing engine.

    Pricers are registered at initialization and dispatched based on
    can_price() checks. First matching pricer wins.
    """

    def __init__(self) -> None:
        self._pricers: list[BasePricer] = []

    def register(self, pricer: BasePricer) -> None:
        """Register a pricer for dispatch.

        Order matters: first matching pricer wins.
        """
        self._pricers.append(pricer)

    def pricer_for(self, instrument: Instrument) -> BasePricer:
        for pricer in self._pricers:
            if pricer.can_price(instrument):
                return pricer
        raise ValueError(
            f"No pricer registered for {type(instrument).__name__}. "
            "Register a pricer with engine.register(pricer)."
        )

    def calculate(self, instrument: Instrument, market: Market) -> PricingResults:
        """Dispatch to the appropriate pricer and return its results record."""
        return self.pricer_for(instrument).calculate(instrument, market)

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Dispatch to appropriate pricer."""
        return self.pricer_for(instrument).npv(instrument, market)


def create_default_engine() -> PricingEngine:
    """Factory for default engine with all built-in pricers registered."""
    from swaplib.pricers import DiscountingSwapPricer

    engine = PricingEngine()
    engine.register(DiscountingSwapPricer())
    return engine


_default_engine: Optional[PricingEngine] = None
_default_engine_lock = threading.Lock()


def default_engine() -> PricingEngine:
    """Shared engine used when an instrument is valued without one."""
    global _default_engine
    with _default_engine_lock:
        if _default_engine is None:
            _default_engine = create_default_engine()
        return _default_engine
