"""
Instrument base: version-token result cache and valuation lock.

An instrument never prices itself. It takes part in the pricer's
arguments/results exchange, and keeps the last results it was handed in an
explicit cache token `CachedResults(version, market, results)`. The token is
only trusted while `version` matches the instrument's current version;
`invalidate()` (the change-notification hook) and `bind()` bump it.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from swaplib.errors import RNA_NOT_CALCULATED, ResultNotAvailable
from swaplib.market import Market

if TYPE_CHECKING:
    from swaplib.engine import PricingEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedResults:
    """Results plus the instrument version and market they were computed for."""

    version: int
    market: Market
    results: Any


class Instrument(ABC):
    """Base class for instruments valued through the arguments/results protocol."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._version = 0
        self._cached: Optional[CachedResults] = None
        self._bound_market: Optional[Market] = None
        self._engine: Optional["PricingEngine"] = None

    @property
    def version(self) -> int:
        return self._version

    @property
    def cached_results(self) -> Optional[CachedResults]:
        """The last token written, valid or not."""
        return self._cached

    def valuation_lock(self) -> threading.RLock:
        """Held by the pricer across setup, calculation and fetch."""
        return self._lock

    def invalidate(self) -> None:
        """Mark cached results stale (call whenever an input the instrument depends on changes)."""
        with self._lock:
            self._version += 1
            logger.debug("%s invalidated (version %d)", type(self).__name__, self._version)

    def bind(self, market: Market, engine: Optional["PricingEngine"] = None) -> None:
        """Attach a market (and optionally an engine) so inspectors can recompute on demand."""
        with self._lock:
            self._bound_market = market
            self._engine = engine
            self.invalidate()

    def calculate(
        self, market: Optional[Market] = None, engine: Optional["PricingEngine"] = None
    ) -> Any:
        """Value the instrument on `market` (or the bound market) and return the results."""
        from swaplib.engine import default_engine

        with self._lock:
            market = market if market is not None else self._bound_market
            if market is None:
                raise ValueError("no market given and none bound to the instrument")
            engine = engine or self._engine or default_engine()
            return engine.calculate(self, market)

    def _store(self, results: Any, market: Market) -> None:
        with self._lock:
            self._cached = CachedResults(
                version=self._version, market=market, results=results
            )

    def _current(self, what: str) -> CachedResults:
        """Return a valid cache token, recomputing on the bound market if stale."""
        with self._lock:
            cached = self._cached
            if cached is not None and cached.version == self._version:
                if self._bound_market is None or cached.market is self._bound_market:
                    return cached
            if self._bound_market is not None:
                self.calculate(self._bound_market)
                assert self._cached is not None
                return self._cached
            raise ResultNotAvailable(RNA_NOT_CALCULATED.format(what))

    @abstractmethod
    def is_expired(self, market: Market) -> bool:
        ...

    @abstractmethod
    def setup_arguments(self, arguments: Any, market: Market) -> None:
        ...

    @abstractmethod
    def setup_expired(self, market: Market) -> Any:
        ...

    @abstractmethod
    def fetch_results(self, results: Any, market: Market) -> None:
        ...
