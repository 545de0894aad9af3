"""Python client for the Swap Pricing GraphQL API."""

from swap_client.client import PricingClient
from swap_client.types import (
    CurveInput,
    FixingInput,
    IndexInput,
    MarketInput,
    SwapInput,
    SwapPricingResult,
)

__all__ = [
    "CurveInput",
    "FixingInput",
    "IndexInput",
    "MarketInput",
    "PricingClient",
    "SwapInput",
    "SwapPricingResult",
]
