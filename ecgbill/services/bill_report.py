"""
bill_report.py
---------------
Turns a BillResult into something a person can read.

Currency is shown to two decimals and rates to four. Nothing here feeds
back into the calculation.
"""

import pandas as pd

from ecgbill.engine.response import BillResult
from ecgbill.models.tariff import TariffSchedule

CURRENCY = "GHS"


def money(value: float) -> str:
    return f"{value:.2f}"


def rate(value: float) -> str:
    return f"{value:.4f}"


def summary(result: BillResult) -> dict:
    """Headline figures, already formatted for display."""
    levies = result.levies
    lines = {
        "Units (kWh)": f"{result.units_consumed:g}",
        "Energy Cost": money(result.energy_cost),
        "Service Charge": money(result.service_charge),
        "Street Light (3%)": money(levies.street_light),
        "Nat'l Elect Levy (2%)": money(levies.national_electrification),
    }
    if result.taxed:
        lines["NHIL & GETFund (5%)"] = money(levies.nhil_getfund)
        lines["VAT (15%)"] = money(result.vat)
    lines["Total Bill"] = money(result.total_bill)
    if result.prior_balance_applied or result.payments_applied or result.adjustment_applied:
        lines["Previous Balance"] = money(result.prior_balance_applied)
        lines["Payments Made"] = money(result.payments_applied)
        lines["Adjustments"] = money(result.adjustment_applied)
    lines["Final Amount Payable"] = money(result.payable)
    return lines


def breakdown_frame(result: BillResult) -> pd.DataFrame:
    rows = [
        {
            "Units (kWh)": b.units,
            f"Rate ({CURRENCY}/kWh)": rate(b.rate),
            f"Cost ({CURRENCY})": money(b.cost),
        }
        for b in result.band_breakdown
    ]
    return pd.DataFrame(rows, columns=["Units (kWh)", f"Rate ({CURRENCY}/kWh)", f"Cost ({CURRENCY})"])


def tariff_frame(schedule: TariffSchedule, customer_class) -> pd.DataFrame:
    rows = [
        {
            "Limit (kWh)": "∞" if b.unbounded else f"{b.limit:g}",
            f"Rate ({CURRENCY}/kWh)": rate(b.rate),
        }
        for b in schedule.bands(customer_class)
    ]
    return pd.DataFrame(rows)


def bill_text(result: BillResult) -> str:
    width = max(len(k) for k in summary(result)) + 2
    text = "--- ESTIMATED ELECTRICITY BILL ---\n"
    text += f"Tariff: {result.customer_class.value} ({result.policy}), {result.period_days} days\n"
    text += "----------------------------------\n"
    for label, value in summary(result).items():
        unit = "" if label.startswith("Units") else f"{CURRENCY} "
        text += f"{label:<{width}}{unit}{value:>10}\n"
    text += "----------------------------------\n"
    text += "Band Breakdown:\n"
    text += breakdown_frame(result).to_string(index=False) + "\n"
    return text
