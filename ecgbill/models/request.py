from dataclasses import dataclass
from enum import Enum

from ecgbill.errors import InvalidRequestError
from ecgbill.models.meter import MeterReading
from ecgbill.models.period import CANONICAL_DAYS, Period
from ecgbill.models.tariff import CustomerClass


class BillingMode(str, Enum):
    QUICK = "quick"
    DETAILED = "detailed"


@dataclass(frozen=True)
class BillingRequest:
    previous_reading: float
    current_reading: float
    period_days: int = CANONICAL_DAYS
    prior_balance: float = 0.0
    payments_received: float = 0.0
    manual_adjustment: float = 0.0
    customer_class: CustomerClass = CustomerClass.RESIDENTIAL
    mode: BillingMode = BillingMode.QUICK

    @property
    def meter(self) -> MeterReading:
        return MeterReading(self.previous_reading, self.current_reading)

    @property
    def period(self) -> Period:
        return Period(self.period_days)

    @classmethod
    def from_dict(cls, data: dict) -> "BillingRequest":
        """
        Build a request from raw form values.

        This is the only place inputs are validated; the engine trusts
        whatever request it is handed.
        """

        def _number(key, default=0.0):
            value = data.get(key)
            if value is None or value == "":
                return default
            try:
                return float(value)
            except (TypeError, ValueError) as exc:
                raise InvalidRequestError(f"{key} must be a number, got {value!r}") from exc

        days = _number("period_days", float(CANONICAL_DAYS))
        if not days.is_integer() or days <= 0:
            raise InvalidRequestError(f"period_days must be a positive whole number, got {days!r}")

        try:
            customer_class = CustomerClass(data.get("customer_class") or CustomerClass.RESIDENTIAL)
            mode = BillingMode(data.get("mode") or BillingMode.QUICK)
        except ValueError as exc:
            raise InvalidRequestError(str(exc)) from exc

        return cls(
            previous_reading=_number("previous_reading"),
            current_reading=_number("current_reading"),
            period_days=int(days),
            prior_balance=_number("prior_balance"),
            payments_received=_number("payments_received"),
            manual_adjustment=_number("manual_adjustment"),
            customer_class=customer_class,
            mode=mode,
        )
