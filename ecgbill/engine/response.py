import json
from dataclasses import asdict, dataclass
from typing import Tuple

from ecgbill.models.request import BillingMode
from ecgbill.models.tariff import CustomerClass


@dataclass(frozen=True)
class BandUsage:
    units: float
    rate: float
    cost: float


@dataclass(frozen=True)
class LevyAmounts:
    street_light: float = 0.0
    national_electrification: float = 0.0
    nhil_getfund: float = 0.0


@dataclass(frozen=True)
class BillResult:
    units_consumed: float
    band_breakdown: Tuple[BandUsage, ...]
    energy_cost: float
    service_charge: float
    levies: LevyAmounts
    vat: float
    total_bill: float
    adjustment_applied: float
    payable: float
    # inputs as the engine actually used them
    customer_class: CustomerClass
    mode: BillingMode
    policy: str
    period_days: int
    prior_balance_applied: float
    payments_applied: float
    # NHIL/GETFund and VAT were charged
    taxed: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["band_breakdown"] = [asdict(b) for b in self.band_breakdown]
        data["customer_class"] = self.customer_class.value
        data["mode"] = self.mode.value
        return data

    def to_json(self, indent=2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
