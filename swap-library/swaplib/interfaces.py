"""
Protocol-based interfaces for all extension points in the swap library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
The arguments/results pair is the contract between an instrument and its
pricer: the instrument fills an arguments snapshot, the pricer fills a results
record, and the instrument reads the record back.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import date
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from swaplib.market import Market


@runtime_checkable
class Curve(Protocol):
    """Protocol for discount/forecast curve implementations.

    Any class implementing df(), discount() and bumped() can be used as a
    curve, e.g. a test-only flat curve, without changes to Market.
    """

    name: str

    def df(self, t: float) -> float:
        """Return discount factor to time t (year-fraction from the reference date)."""
        ...

    def discount(self, d: date) -> float:
        """Return discount factor to calendar date d."""
        ...

    def bumped(self, bump: float) -> Curve:
        """Return new curve with parallel additive rate shift."""
        ...


@runtime_checkable
class PricingArguments(Protocol):
    """Flat snapshot an instrument hands to its pricer."""

    def validate(self) -> None:
        """Raise InvalidArguments if the snapshot is inconsistent."""
        ...


class PricingResults(Protocol):
    """Record a pricer fills and an instrument reads back."""

    value: float | None

    def reset(self) -> None:
        """Restore every field to its unset state."""
        ...


@runtime_checkable
class Instrument(Protocol):
    """Protocol for instruments taking part in the arguments/results exchange."""

    def is_expired(self, market: Market) -> bool:
        ...

    def valuation_lock(self) -> AbstractContextManager[Any]:
        """Lock serializing valuations that write this instrument's cache."""
        ...

    def setup_arguments(self, arguments: Any, market: Market) -> None:
        ...

    def setup_expired(self, market: Market) -> PricingResults:
        ...

    def fetch_results(self, results: Any, market: Market) -> None:
        ...


class Pricer(Protocol):
    """Protocol for instrument pricing implementations.

    Each pricer handles one or more instrument types and can be registered
    with the PricingEngine for dispatch.
    """

    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the given instrument type."""
        ...

    def calculate(self, instrument: Instrument, market: Market) -> PricingResults:
        """Run the full arguments/results protocol and return the results."""
        ...

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Compute present value."""
        ...


class RiskMeasure(Protocol):
    """Protocol for risk measure implementations.

    Risk measures are composable objects that compute sensitivities
    (PV01 etc.) via bump-and-reprice or analytic formulas.
    """

    @property
    def name(self) -> str:
        """Human-readable name (e.g., 'PV01_USD_DISC')."""
        ...

    def compute(self, instrument: Instrument, market: Market) -> float:
        """Compute the risk measure value."""
        ...
