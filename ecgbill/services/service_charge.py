from dataclasses import dataclass
from typing import Mapping

from ecgbill.models.period import Period
from ecgbill.models.tariff import CustomerClass


@dataclass(frozen=True)
class ProratedServiceCharge:
    """Flat monthly charge per class, scaled by days / 31."""

    monthly: Mapping[CustomerClass, float]

    def calculate(self, customer_class: CustomerClass, period: Period) -> float:
        return self.monthly[customer_class] * period.month_fraction


@dataclass(frozen=True)
class DailyServiceCharge:
    """Same charge per billing day for every class."""

    per_day: float

    def calculate(self, customer_class: CustomerClass, period: Period) -> float:
        return self.per_day * period.days
