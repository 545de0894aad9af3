"""Demo: sample USD curves, market, and value a 5Y vanilla swap and a 2Y SOFR swap with PV01."""

from datetime import date

from swaplib.curves import ZeroRateCurve
from swaplib.dates import Actual360, Schedule, Thirty360
from swaplib.indexes import IborIndex, OvernightIndex
from swaplib.market import Market
from swaplib.pricing import fair_rate, fair_spread, price
from swaplib.products.ois import OvernightIndexedSwap
from swaplib.products.swap import SwapType
from swaplib.products.vanilla import VanillaSwap
from swaplib.risk import pv01_parallel


def main() -> None:
    today = date(2024, 1, 15)
    pillars = [0.5, 1.0, 2.0, 5.0, 10.0]
    disc_rates = [0.045, 0.043, 0.040, 0.038, 0.037]
    libor_rates = [0.047, 0.045, 0.042, 0.040, 0.039]  # Term premium over OIS
    usd_disc = ZeroRateCurve(
        name="USD_DISC", reference_date=today, pillars=pillars, zero_rates_cc=disc_rates
    )
    usd_3m = ZeroRateCurve(
        name="USD_3M", reference_date=today, pillars=pillars, zero_rates_cc=libor_rates
    )

    market = Market(
        valuation_date=today,
        curves={"USD_DISC": usd_disc, "USD_3M": usd_3m},
    )

    # 1) 5Y payer swap, 10,000,000 notional, 4% fixed semiannual 30/360 vs 3M floating
    start = date(2024, 1, 17)
    end = date(2029, 1, 17)
    usd_libor_3m = IborIndex(name="USD-3M", tenor_months=3, forecast_curve="USD_3M")
    vanilla = VanillaSwap(
        type=SwapType.PAYER,
        nominal=10_000_000,
        fixed_schedule=Schedule.from_tenor(start, end, 6),
        fixed_rate=0.04,
        fixed_day_count=Thirty360(),
        floating_schedule=Schedule.from_tenor(start, end, 3),
        index=usd_libor_3m,
        spread=0.0,
        floating_day_count=Actual360(),
        discount_curve="USD_DISC",
    )
    pv_vanilla = price(vanilla, market)
    rate_vanilla = fair_rate(vanilla, market)
    spread_vanilla = fair_spread(vanilla, market)
    pv01_vanilla = pv01_parallel(vanilla, market, "USD_DISC", bump_bp=1.0)

    # 2) 2Y receiver SOFR swap, 25,000,000 notional, 4.2% fixed annual ACT/360
    sofr = OvernightIndex(name="SOFR", forecast_curve="USD_DISC")
    ois_end = date(2026, 1, 17)
    ois = OvernightIndexedSwap(
        type=SwapType.RECEIVER,
        nominal=25_000_000,
        fixed_schedule=Schedule.from_tenor(start, ois_end, 12),
        fixed_rate=0.042,
        fixed_day_count=Actual360(),
        floating_schedule=Schedule.from_tenor(start, ois_end, 12),
        index=sofr,
        spread=0.0,
        floating_day_count=Actual360(),
        discount_curve="USD_DISC",
    )
    pv_ois = price(ois, market)
    rate_ois = fair_rate(ois, market)
    pv01_ois = pv01_parallel(ois, market, "USD_DISC", bump_bp=1.0)

    print("=== Swap Valuation Demo ===\n")
    print(f"Market: USD_DISC, USD_3M curves as of {today.isoformat()}\n")
    print("1) Vanilla payer swap (5Y, 10M notional, 4% fixed vs USD-3M)")
    print(f"   PV          = {pv_vanilla:,.2f}")
    print(f"   Fixed BPS   = {vanilla.fixed_leg_bps:,.2f}")
    print(f"   Fair rate   = {rate_vanilla:.6%}")
    print(f"   Fair spread = {spread_vanilla * 1e4:,.2f} bp")
    print(f"   PV01        = {pv01_vanilla:,.2f}\n")
    print("2) SOFR receiver swap (2Y, 25M notional, 4.2% fixed)")
    print(f"   PV          = {pv_ois:,.2f}")
    print(f"   Fair rate   = {rate_ois:.6%}")
    print(f"   PV01        = {pv01_ois:,.2f}\n")
    print("Done.")


if __name__ == "__main__":
    main()
