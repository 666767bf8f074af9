import pytest

from ecgbill.api import API, BillingMode, CustomerClass, compute_bill

RES = CustomerClass.RESIDENTIAL
NON_RES = CustomerClass.NON_RESIDENTIAL


def test_residential_quick_bill(schedule, make_request):
    result = compute_bill(schedule, make_request(100, 220), "ecg-2025")

    assert result.units_consumed == 120
    assert [(b.units, b.rate) for b in result.band_breakdown] == [(50, 1.4878), (70, 1.90)]
    assert result.energy_cost == pytest.approx(207.39)
    assert result.levies.street_light == pytest.approx(6.2217)
    assert result.levies.national_electrification == pytest.approx(4.1478)
    assert result.levies.nhil_getfund == 0
    assert result.vat == 0
    assert result.service_charge == pytest.approx(2.13)
    assert result.total_bill == pytest.approx(219.8895)
    assert result.payable == pytest.approx(219.8895)


def test_non_residential_detailed_bill(schedule, make_request):
    request = make_request(
        1000, 1500,
        period_days=31,
        prior_balance=50,
        payments_received=20,
        manual_adjustment=5,
        customer_class=NON_RES,
        mode=BillingMode.DETAILED,
    )
    result = compute_bill(schedule, request, "ecg-2025")

    assert result.units_consumed == 500
    assert len(result.band_breakdown) == 1
    assert result.energy_cost == pytest.approx(795.0)
    assert result.levies.street_light == pytest.approx(23.85)
    assert result.levies.national_electrification == pytest.approx(15.90)
    assert result.levies.nhil_getfund == pytest.approx(39.75)
    assert result.vat == pytest.approx(131.175)
    assert result.service_charge == pytest.approx(12.43)
    assert result.total_bill == pytest.approx(1018.105)
    assert result.adjustment_applied == 5
    assert result.payable == pytest.approx(1053.105)


def test_meter_rollback_bills_no_energy(schedule, make_request):
    result = compute_bill(schedule, make_request(500, 400), "ecg-2025")

    assert result.units_consumed == 0
    assert result.band_breakdown == ()
    assert result.energy_cost == 0
    assert result.total_bill == pytest.approx(2.13)


def test_quick_mode_ignores_detailed_fields(schedule, make_request):
    plain = compute_bill(schedule, make_request(0, 300), "ecg-2025")
    noisy = compute_bill(
        schedule,
        make_request(
            0, 300,
            period_days=90,
            prior_balance=1000,
            payments_received=250,
            manual_adjustment=-40,
        ),
        "ecg-2025",
    )

    assert noisy == plain
    assert noisy.period_days == 31
    assert noisy.prior_balance_applied == noisy.payments_applied == noisy.adjustment_applied == 0


def test_detailed_mode_carries_balances(schedule, make_request):
    request = make_request(
        0, 100,
        period_days=31,
        prior_balance=10,
        payments_received=30,
        manual_adjustment=-2.5,
        mode=BillingMode.DETAILED,
    )
    result = compute_bill(schedule, request, "ecg-2025")

    assert result.payable == pytest.approx(result.total_bill + 10 - 30 - 2.5)


@pytest.mark.parametrize("customer_class", [RES, NON_RES])
def test_service_charge_scales_with_period(schedule, make_request, customer_class):
    def service(days):
        request = make_request(0, 10, period_days=days, customer_class=customer_class, mode=BillingMode.DETAILED)
        return compute_bill(schedule, request, "ecg-2025").service_charge

    assert service(62) == pytest.approx(2 * service(31))
    assert service(15) == pytest.approx(service(31) * 15 / 31)


def test_residential_never_taxed(schedule, make_request):
    for units in (0, 1, 50, 600, 5000):
        result = compute_bill(schedule, make_request(0, units, mode=BillingMode.DETAILED), "ecg-2025")
        assert result.levies.nhil_getfund == 0
        assert result.vat == 0


def test_non_residential_vat_base_includes_levies(schedule, make_request):
    result = compute_bill(schedule, make_request(0, 37, customer_class=NON_RES), "ecg-2025")

    base = (
        result.energy_cost
        + result.levies.street_light
        + result.levies.national_electrification
        + result.levies.nhil_getfund
    )
    assert result.levies.nhil_getfund == pytest.approx(result.energy_cost * 0.05)
    assert result.vat == pytest.approx(base * 0.15)


def test_edited_schedule_is_billed_as_is(schedule, make_request):
    edited = schedule.update_band(RES, 1, limit=10)
    result = compute_bill(edited, make_request(0, 120), "ecg-2025")

    assert [b.units for b in result.band_breakdown] == [50, 10, 60]


def test_string_class_and_mode_are_accepted(schedule, make_request):
    as_enum = compute_bill(schedule, make_request(0, 500, customer_class=NON_RES), "ecg-2025")
    as_text = compute_bill(
        schedule, make_request(0, 500, customer_class="non_residential", mode="quick"), "ecg-2025"
    )

    assert as_text == as_enum


def test_identical_inputs_identical_results(schedule, make_request):
    request = make_request(12.5, 731.25, customer_class=NON_RES)

    assert compute_bill(schedule, request) == compute_bill(schedule, request)


def test_api_facade_uses_configured_policy(make_request, monkeypatch):
    monkeypatch.setattr("ecgbill.config.DEFAULT_POLICY", "ecg-legacy")

    result = API.compute_bill(API.default_schedule(), make_request(0, 10))

    assert result.policy == "ecg-legacy"


def test_result_to_json(schedule, make_request):
    result = compute_bill(schedule, make_request(100, 220), "ecg-2025")
    data = result.to_dict()

    assert data["customer_class"] == "residential"
    assert data["mode"] == "quick"
    assert data["band_breakdown"][0] == {"units": 50, "rate": 1.4878, "cost": pytest.approx(74.39)}
    assert '"policy": "ecg-2025"' in result.to_json()
