import pytest

from ecgbill.api import API, BillingMode, BillingRequest, CustomerClass


@pytest.fixture
def schedule():
    return API.default_schedule("ecg-2025")


@pytest.fixture
def make_request():
    def _make(previous=0, current=0, **kwargs):
        kwargs.setdefault("customer_class", CustomerClass.RESIDENTIAL)
        kwargs.setdefault("mode", BillingMode.QUICK)
        return BillingRequest(previous_reading=previous, current_reading=current, **kwargs)

    return _make
