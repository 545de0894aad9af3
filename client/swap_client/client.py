"""Swap pricing API client using sgqlc."""

from __future__ import annotations

import os
from datetime import date
from typing import Any

from sgqlc.endpoint.http import HTTPEndpoint

from swap_client.types import (
    CurveInput,
    FixingInput,
    IndexInput,
    MarketInput,
    SwapInput,
    SwapPricingResult,
)

DEFAULT_URL = "http://api:8000/graphql"
URL_ENV_VAR = "SWAP_PRICING_API_URL"


def _curve_to_vars(c: CurveInput) -> dict[str, Any]:
    """Serialize CurveInput to GraphQL variables (camelCase)."""
    result: dict[str, Any] = {
        "name": c.name,
        "pillars": c.pillars,
        "zeroRatesCc": c.zero_rates_cc,
        "dayCount": c.day_count,
    }
    if c.reference_date is not None:
        result["referenceDate"] = c.reference_date.isoformat()
    return result


def _fixing_to_vars(f: FixingInput) -> dict[str, Any]:
    return {
        "indexName": f.index_name,
        "fixingDate": f.fixing_date.isoformat(),
        "rate": f.rate,
    }


def _market_to_vars(m: MarketInput) -> dict[str, Any]:
    """Serialize MarketInput to GraphQL variables (camelCase)."""
    result: dict[str, Any] = {
        "valuationDate": m.valuation_date.isoformat(),
        "curves": [_curve_to_vars(c) for c in m.curves],
        "includeReferenceDateCashflows": m.include_reference_date_cashflows,
    }
    if m.fixings:
        result["fixings"] = [_fixing_to_vars(f) for f in m.fixings]
    return result


def _index_to_vars(i: IndexInput) -> dict[str, Any]:
    """Serialize IndexInput to GraphQL variables (camelCase)."""
    result: dict[str, Any] = {
        "name": i.name,
        "forecastCurve": i.forecast_curve,
        "kind": i.kind,
        "tenorMonths": i.tenor_months,
        "dayCount": i.day_count,
        "averaging": i.averaging,
    }
    if i.fixing_days is not None:
        result["fixingDays"] = i.fixing_days
    return result


def _swap_to_vars(s: SwapInput) -> dict[str, Any]:
    """Serialize SwapInput to GraphQL variables (camelCase)."""
    result: dict[str, Any] = {
        "type": s.type,
        "nominal": s.nominal,
        "effectiveDate": s.effective_date.isoformat(),
        "terminationDate": s.termination_date.isoformat(),
        "fixedRate": s.fixed_rate,
        "index": _index_to_vars(s.index),
        "discountCurve": s.discount_curve,
        "spread": s.spread,
        "fixedTenorMonths": s.fixed_tenor_months,
        "fixedDayCount": s.fixed_day_count,
        "floatingDayCount": s.floating_day_count,
        "scheduleConvention": s.schedule_convention,
    }
    if s.floating_tenor_months is not None:
        result["floatingTenorMonths"] = s.floating_tenor_months
    if s.payment_convention is not None:
        result["paymentConvention"] = s.payment_convention
    return result


class PricingClient:
    """
    Client for the Swap Pricing GraphQL API.
    Use from notebooks or scripts; configurable base URL for local vs Docker.
    The URL falls back to $SWAP_PRICING_API_URL, then to the Docker service name.
    """

    def __init__(self, url: str | None = None, timeout: float = 30.0) -> None:
        url = url or os.environ.get(URL_ENV_VAR) or DEFAULT_URL
        self._url = url.rstrip("/")
        self._timeout = timeout
        self._endpoint = HTTPEndpoint(self._url, timeout=timeout)

    @property
    def url(self) -> str:
        return self._url

    def _request(self, query: str, variables: dict | None = None) -> dict:
        result = self._endpoint(query, variables or {})
        if "errors" in result and result["errors"]:
            raise RuntimeError(f"GraphQL errors: {result['errors']}")
        return result.get("data", {})

    def hello(self, name: str = "World") -> str:
        """Call the hello query."""
        query = """
            query Hello($name: String!) {
                hello(name: $name)
            }
        """
        data = self._request(query, {"name": name})
        return data["hello"]

    def version(self) -> str:
        """Call the version query."""
        query = """
            query Version {
                version
            }
        """
        data = self._request(query)
        return data["version"]

    def price_swap(
        self,
        swap: SwapInput,
        market: MarketInput,
        calculate_pv01: bool = False,
        pv01_curve_name: str | None = None,
        pv01_bump_bp: float = 1.0,
    ) -> SwapPricingResult:
        """Value a fixed-vs-floating swap with fair rate/spread. Optionally compute PV01."""
        query = """
            query PriceFixedVsFloatingSwap(
                $swap: SwapInput!,
                $market: MarketInput!,
                $calculatePv01: Boolean,
                $pv01CurveName: String,
                $pv01BumpBp: Float
            ) {
                priceFixedVsFloatingSwap(
                    swap: $swap,
                    market: $market,
                    calculatePv01: $calculatePv01,
                    pv01CurveName: $pv01CurveName,
                    pv01BumpBp: $pv01BumpBp
                ) {
                    npv
                    fixedLegNpv
                    fixedLegBps
                    floatingLegNpv
                    floatingLegBps
                    fairRate
                    fairSpread
                    maturityDate
                    riskMeasures {
                        pv01
                    }
                }
            }
        """
        variables: dict[str, Any] = {
            "swap": _swap_to_vars(swap),
            "market": _market_to_vars(market),
            "calculatePv01": calculate_pv01,
            "pv01BumpBp": pv01_bump_bp,
        }
        if pv01_curve_name is not None:
            variables["pv01CurveName"] = pv01_curve_name
        data = self._request(query, variables)
        raw = data["priceFixedVsFloatingSwap"]
        risk = raw.get("riskMeasures") or {}
        return SwapPricingResult(
            npv=raw["npv"],
            fixed_leg_npv=raw["fixedLegNpv"],
            fixed_leg_bps=raw["fixedLegBps"],
            floating_leg_npv=raw["floatingLegNpv"],
            floating_leg_bps=raw["floatingLegBps"],
            fair_rate=raw["fairRate"],
            fair_spread=raw["fairSpread"],
            maturity_date=date.fromisoformat(raw["maturityDate"]),
            pv01=risk.get("pv01") if risk else None,
        )
