"""
Tariff policies
----------------------

A policy is one version of the levy/service-charge model plus the band
table it ships with. The engine is the same for all of them; only the
numbers and the service-charge model change.
"""

from dataclasses import dataclass
from typing import FrozenSet, Mapping, Tuple

from ecgbill import config
from ecgbill.errors import UnknownPolicyError
from ecgbill.models.tariff import Band, CustomerClass
from ecgbill.services.service_charge import DailyServiceCharge, ProratedServiceCharge

RES = CustomerClass.RESIDENTIAL
NON_RES = CustomerClass.NON_RESIDENTIAL


@dataclass(frozen=True)
class TariffPolicy:
    name: str
    default_bands: Mapping[CustomerClass, Tuple[Band, ...]]
    service_charge: object
    street_light_rate: float = 0.03
    nel_rate: float = 0.02
    nhil_getfund_rate: float = 0.05
    vat_rate: float = 0.15
    taxed_classes: FrozenSet[CustomerClass] = frozenset({NON_RES})
    applies_adjustment: bool = True


RESIDENTIAL_BANDS = (
    Band(limit=50, rate=1.4878),
    Band(limit=250, rate=1.90),
    Band(limit=300, rate=2.30),
    Band(limit=None, rate=2.50),
)

ECG_2025 = TariffPolicy(
    name="ecg-2025",
    default_bands={
        RES: RESIDENTIAL_BANDS,
        NON_RES: (Band(limit=None, rate=1.59),),
    },
    service_charge=ProratedServiceCharge(monthly={RES: 2.13, NON_RES: 12.43}),
)

# Earlier model: per-day service charge, a single 2% government levy
# (carried as the national electrification levy), no NHIL/GETFund or VAT,
# and no manual adjustment on the payable amount.
ECG_LEGACY = TariffPolicy(
    name="ecg-legacy",
    default_bands={
        RES: RESIDENTIAL_BANDS,
        NON_RES: (
            Band(limit=300, rate=1.90),
            Band(limit=300, rate=2.30),
            Band(limit=None, rate=2.50),
        ),
    },
    service_charge=DailyServiceCharge(per_day=0.3518),
    taxed_classes=frozenset(),
    applies_adjustment=False,
)

POLICIES = {p.name: p for p in (ECG_2025, ECG_LEGACY)}


def get_policy(policy=None) -> TariffPolicy:
    """Resolve a policy object, a registered name, or the configured default."""
    if isinstance(policy, TariffPolicy):
        return policy

    name = policy or config.DEFAULT_POLICY
    try:
        return POLICIES[name]
    except KeyError:
        raise UnknownPolicyError(
            f"Unknown tariff policy {name!r}; choose one of {sorted(POLICIES)}"
        ) from None
