"""
  Unified API
----------------------

Single entry point for the front-end and external callers.

Usage:
    from ecgbill.api import API
"""

# ===============================
# Billing
# ===============================

from ecgbill.engine.billing_engine import BillingEngine
from ecgbill.engine.context import BillingContext
from ecgbill.engine.response import BillResult
from ecgbill.strategies.policies import TariffPolicy, get_policy
from ecgbill.strategies.postpaid import PostpaidBilling

# ===============================
# Models
# ===============================

from ecgbill.models.request import BillingMode, BillingRequest
from ecgbill.models.tariff import (
    AddBand,
    Band,
    CustomerClass,
    RemoveBand,
    ResetBands,
    TariffSchedule,
    UpdateBand,
    apply_edit,
)


# =====================================================
# MAIN FACADE CLASS
# =====================================================

class API:
    """
    Unified facade for the bill calculator.
    Front-end code should ONLY talk to this class.
    """

    # -----------------------------
    # TARIFF SCHEDULE
    # -----------------------------
    @staticmethod
    def default_schedule(policy=None) -> TariffSchedule:
        return TariffSchedule(get_policy(policy).default_bands)

    @staticmethod
    def apply_edit(schedule: TariffSchedule, operation) -> TariffSchedule:
        return apply_edit(schedule, operation)

    # -----------------------------
    # BILL
    # -----------------------------
    @staticmethod
    def compute_bill(schedule: TariffSchedule, request: BillingRequest, policy=None) -> BillResult:
        engine = BillingEngine(PostpaidBilling(get_policy(policy)))
        return engine.run(BillingContext(schedule, request))

    @staticmethod
    def get_policy(policy=None) -> TariffPolicy:
        return get_policy(policy)


compute_bill = API.compute_bill
default_schedule = API.default_schedule


# =====================================================
# EXPORTS
# =====================================================

__all__ = [
    "API",
    "AddBand",
    "Band",
    "BillResult",
    "BillingMode",
    "BillingRequest",
    "CustomerClass",
    "RemoveBand",
    "ResetBands",
    "TariffPolicy",
    "TariffSchedule",
    "UpdateBand",
    "apply_edit",
    "compute_bill",
    "default_schedule",
]
