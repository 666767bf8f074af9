from dataclasses import replace

from ecgbill.api import BillingMode, CustomerClass, compute_bill
from ecgbill.services.bill_report import bill_text, breakdown_frame, money, rate, summary, tariff_frame
from ecgbill.strategies.policies import ECG_2025


def test_formatting_helpers():
    assert money(219.8895) == "219.89"
    assert money(-5) == "-5.00"
    assert rate(1.9) == "1.9000"


def test_residential_summary(schedule, make_request):
    lines = summary(compute_bill(schedule, make_request(100, 220), "ecg-2025"))

    assert lines["Units (kWh)"] == "120"
    assert lines["Energy Cost"] == "207.39"
    assert lines["Service Charge"] == "2.13"
    assert lines["Total Bill"] == "219.89"
    assert lines["Final Amount Payable"] == "219.89"
    assert "VAT (15%)" not in lines
    assert "Adjustments" not in lines


def test_non_residential_summary_shows_taxes_and_balances(schedule, make_request):
    request = make_request(
        0, 500,
        prior_balance=50,
        payments_received=20,
        manual_adjustment=5,
        customer_class=CustomerClass.NON_RESIDENTIAL,
        mode=BillingMode.DETAILED,
    )
    lines = summary(compute_bill(schedule, request, "ecg-2025"))

    assert lines["NHIL & GETFund (5%)"] == "39.75"
    assert "VAT (15%)" in lines
    assert lines["Previous Balance"] == "50.00"
    assert lines["Payments Made"] == "20.00"
    assert lines["Adjustments"] == "5.00"


def test_breakdown_frame(schedule, make_request):
    frame = breakdown_frame(compute_bill(schedule, make_request(100, 220), "ecg-2025"))

    assert list(frame.columns) == ["Units (kWh)", "Rate (GHS/kWh)", "Cost (GHS)"]
    assert frame["Rate (GHS/kWh)"].tolist() == ["1.4878", "1.9000"]
    assert frame["Cost (GHS)"].tolist() == ["74.39", "133.00"]


def test_breakdown_frame_empty_for_zero_consumption(schedule, make_request):
    frame = breakdown_frame(compute_bill(schedule, make_request(5, 5), "ecg-2025"))

    assert frame.empty
    assert len(frame.columns) == 3


def test_tariff_frame_marks_unbounded_band(schedule):
    frame = tariff_frame(schedule, CustomerClass.RESIDENTIAL)

    assert frame["Limit (kWh)"].tolist() == ["50", "250", "300", "∞"]
    assert frame["Rate (GHS/kWh)"].tolist()[0] == "1.4878"


def test_bill_text(schedule, make_request):
    text = bill_text(compute_bill(schedule, make_request(100, 220), "ecg-2025"))

    assert "Final Amount Payable" in text
    assert "219.89" in text
    assert "1.4878" in text


def test_summary_for_unregistered_policy(schedule, make_request):
    draft = replace(ECG_2025, name="ecg-2026-draft")
    result = compute_bill(schedule, make_request(0, 100, customer_class=CustomerClass.NON_RESIDENTIAL), draft)

    lines = summary(result)

    assert result.policy == "ecg-2026-draft"
    assert "VAT (15%)" in lines
    assert "ecg-2026-draft" in bill_text(result)


def test_summary_hides_taxes_for_untaxed_policy(make_request):
    from ecgbill.api import API

    schedule = API.default_schedule("ecg-legacy")
    result = compute_bill(schedule, make_request(0, 100, customer_class=CustomerClass.NON_RESIDENTIAL), "ecg-legacy")

    assert not result.taxed
    assert "VAT (15%)" not in summary(result)
