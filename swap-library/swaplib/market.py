"""
Market snapshot container.

`Market` is intentionally a *simple* in-memory snapshot of the inputs needed for
swap valuation:
- The valuation date every cash flow is judged against
- Curves, keyed by a name (e.g. "USD_DISC", "USD_SOFR")
- Past index fixings, keyed by index name then fixing date
- Whether cash flows paying *on* the valuation date still count

A snapshot is never mutated. Curve updates produce a new `Market`, which keeps
curve maintenance a separate phase from the valuations that read a snapshot.
"""

from __future__ import annotations

from copy import deepcopy
from datetime import date
from typing import Optional

from swaplib.interfaces import Curve


class Market:
    """
    Market snapshot: valuation date, curves (by name), fixings (index -> date -> rate).
    Immutable-style: with_curve / with_fixing / with_valuation_date return new Market instances.
    """

    def __init__(
        self,
        valuation_date: date,
        curves: dict[str, Curve] | None = None,
        fixings: dict[str, dict[date, float]] | None = None,
        include_reference_date_cashflows: bool = False,
    ) -> None:
        self.valuation_date = valuation_date
        self.curves: dict[str, Curve] = curves.copy() if curves else {}
        self.fixings: dict[str, dict[date, float]] = (
            {name: dict(series) for name, series in fixings.items()} if fixings else {}
        )
        self.include_reference_date_cashflows = include_reference_date_cashflows

    def curve(self, name: str) -> Curve:
        """Return curve by name. Raises KeyError if not found."""
        return self.curves[name]

    def fixing(self, index_name: str, fixing_date: date) -> Optional[float]:
        """Return the stored fixing for index on fixing_date, or None."""
        return self.fixings.get(index_name, {}).get(fixing_date)

    def has_occurred(self, payment_date: date) -> bool:
        """True if a cash flow paying on payment_date is already settled."""
        if payment_date == self.valuation_date:
            return not self.include_reference_date_cashflows
        return payment_date < self.valuation_date

    def with_curve(self, name: str, curve: Curve) -> "Market":
        """Return a new Market with the given curve updated/added."""
        new_curves = deepcopy(self.curves)
        new_curves[name] = curve
        return Market(
            valuation_date=self.valuation_date,
            curves=new_curves,
            fixings=self.fixings,
            include_reference_date_cashflows=self.include_reference_date_cashflows,
        )

    def with_fixing(self, index_name: str, fixing_date: date, rate: float) -> "Market":
        """Return a new Market with one more historical fixing."""
        new_fixings = deepcopy(self.fixings)
        new_fixings.setdefault(index_name, {})[fixing_date] = rate
        return Market(
            valuation_date=self.valuation_date,
            curves=self.curves,
            fixings=new_fixings,
            include_reference_date_cashflows=self.include_reference_date_cashflows,
        )

    def with_valuation_date(self, valuation_date: date) -> "Market":
        """Return a new Market rolled to another valuation date (curves unchanged)."""
        return Market(
            valuation_date=valuation_date,
            curves=self.curves,
            fixings=self.fixings,
            include_reference_date_cashflows=self.include_reference_date_cashflows,
        )
