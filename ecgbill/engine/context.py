from dataclasses import dataclass

from ecgbill.models.request import BillingRequest
from ecgbill.models.tariff import TariffSchedule


@dataclass(frozen=True)
class BillingContext:
    schedule: TariffSchedule
    request: BillingRequest

    @property
    def meter(self):
        return self.request.meter

    @property
    def period(self):
        return self.request.period
