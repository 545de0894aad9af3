"""GraphQL schema: swap pricing and risk queries."""

from typing import Optional

import strawberry

from app.services import price_fixed_vs_floating_swap
from app.types import MarketInput, SwapInput, SwapPricingResult

API_VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def hello(self, name: str = "World") -> str:
        return f"Hello {name} from Swap Pricing API!"

    @strawberry.field
    def version(self) -> str:
        return API_VERSION

    @strawberry.field
    def price_fixed_vs_floating_swap(
        self,
        swap: SwapInput,
        market: MarketInput,
        calculate_pv01: bool = False,
        pv01_curve_name: Optional[str] = None,
        pv01_bump_bp: float = 1.0,
    ) -> SwapPricingResult:
        """Value a fixed-vs-floating swap with fair rate and fair spread. Optionally compute PV01."""
        return price_fixed_vs_floating_swap(
            swap=swap,
            market=market,
            calculate_pv01=calculate_pv01,
            pv01_curve_name=pv01_curve_name,
            pv01_bump_bp=pv01_bump_bp,
        )


schema = strawberry.Schema(query=Query)
