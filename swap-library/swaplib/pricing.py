"""
Pricing entrypoint.

Most users of the library should only need `price(trade, market)`, plus
`fair_rate` / `fair_spread` for breakeven quotes.
They delegate to a default `PricingEngine` instance that contains the pricing logic.

Keeping this as a thin wrapper gives you a stable, ergonomic API while still
allowing advanced users to instantiate/configure their own engines.
"""

from typing import TypeAlias

from swaplib.engine import default_engine
from swaplib.market import Market
from swaplib.products.ois import OvernightIndexedSwap
from swaplib.products.swap import FixedVsFloatingSwap
from swaplib.products.vanilla import VanillaSwap


Trade: TypeAlias = VanillaSwap | OvernightIndexedSwap | FixedVsFloatingSwap


def price(trade: Trade, market: Market) -> float:
    """Return present value of trade (via default registry-based engine)."""
    return default_engine().npv(trade, market)


def _solved(trade: FixedVsFloatingSwap, market: Market, name: str, what: str) -> float:
    with trade.valuation_lock():
        trade.calculate(market)
        token = trade.cached_results
        assert token is not None
        return token.results.solved(name, what)


def fair_rate(trade: FixedVsFloatingSwap, market: Market) -> float:
    """Fixed rate that makes the swap worth zero on `market`."""
    return _solved(trade, market, "fair_rate", "fair rate")


def fair_spread(trade: FixedVsFloatingSwap, market: Market) -> float:
    """Floating spread that makes the swap worth zero on `market`."""
    return _solved(trade, market, "fair_spread", "fair spread")
