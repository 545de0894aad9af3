"""Base pricer abstract class for instrument pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from swaplib.interfaces import Instrument, PricingArguments, PricingResults
from swaplib.market import Market


class BasePricer(ABC):
    """Abstract base class for instrument pricers.

    Subclasses implement can_price(), the arguments/results factories and
    _calculate() for specific instrument types. calculate() drives the
    exchange with the instrument, so pricing logic stays isolated, testable
    and pluggable.
    """

    @abstractmethod
    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the instrument type."""
        ...

    @abstractmethod
    def new_arguments(self) -> PricingArguments:
        """Fresh, empty arguments snapshot for the instrument to fill."""
        ...

    @abstractmethod
    def new_results(self) -> PricingResults:
        ...

    @abstractmethod
    def _calculate(self, arguments: Any, results: Any, market: Market) -> None:
        """Fill `results` from a validated `arguments` snapshot."""
        ...

    def calculate(self, instrument: Instrument, market: Market) -> PricingResults:
        """
        Value `instrument` on `market` and hand the results back to it.

        The instrument's valuation lock is held throughout, so two threads
        valuing the same instrument never interleave their cache writes.
        Validation and calculation errors propagate before fetch_results, so
        the instrument never sees partial results.
        """
        with instrument.valuation_lock():
            if instrument.is_expired(market):
                return instrument.setup_expired(market)
            arguments = self.new_arguments()
            instrument.setup_arguments(arguments, market)
            arguments.validate()
            results = self.new_results()
            results.reset()
            self._calculate(arguments, results, market)
            instrument.fetch_results(results, market)
            return results

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Compute present value."""
        value = self.calculate(instrument, market).value
        assert value is not None
        return value
