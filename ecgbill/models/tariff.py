from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from ecgbill.utils.logger import get_logger

logger = get_logger(__name__)

# limit given to a band inserted by add_band
NEW_BAND_LIMIT = 100


class CustomerClass(str, Enum):
    RESIDENTIAL = "residential"
    NON_RESIDENTIAL = "non_residential"


@dataclass(frozen=True)
class Band:
    """
    One consumption tier. ``limit`` is the kWh the band can absorb;
    ``None`` marks the unbounded band that takes whatever is left.
    """

    limit: Optional[float]
    rate: float

    @property
    def unbounded(self) -> bool:
        return self.limit is None

    def take(self, remaining: float) -> float:
        if self.limit is None:
            return remaining
        return min(remaining, self.limit)


BandTable = Mapping[CustomerClass, Tuple[Band, ...]]


class TariffSchedule:
    """
    Immutable band table per customer class.

    Every edit returns a new schedule. Edits that would break the
    table's shape (removing the unbounded band, out-of-range indexes,
    unknown customer classes) return an equal schedule instead of raising.
    Reading bands for an unknown class raises ValueError.
    """

    def __init__(self, bands: BandTable, defaults: Optional[BandTable] = None):
        self._bands: Dict[CustomerClass, Tuple[Band, ...]] = {
            CustomerClass(k): tuple(v) for k, v in bands.items()
        }
        if defaults is None:
            defaults = self._bands
        self._defaults: Dict[CustomerClass, Tuple[Band, ...]] = {
            CustomerClass(k): tuple(v) for k, v in defaults.items()
        }

    # -----------------------------
    # READ
    # -----------------------------
    def bands(self, customer_class) -> Tuple[Band, ...]:
        return self._bands[CustomerClass(customer_class)]

    @property
    def classes(self):
        return tuple(self._bands)

    def to_dict(self) -> dict:
        return {
            c.value: [{"limit": b.limit, "rate": b.rate} for b in bands]
            for c, bands in self._bands.items()
        }

    # -----------------------------
    # EDIT
    # -----------------------------
    def _known(self, customer_class):
        try:
            return CustomerClass(customer_class)
        except ValueError:
            logger.debug(f"edit ignored: unknown customer class {customer_class!r}")
            return None

    def _with(self, customer_class, bands) -> "TariffSchedule":
        table = dict(self._bands)
        table[CustomerClass(customer_class)] = tuple(bands)
        return TariffSchedule(table, self._defaults)

    def update_band(self, customer_class, index: int, **fields) -> "TariffSchedule":
        """
        Replace ``limit`` and/or ``rate`` of one band.

        Limits are not re-sorted; keeping them in order is up to the
        caller. The unbounded band keeps its open limit and a bounded
        band cannot be made unbounded.
        """
        customer_class = self._known(customer_class)
        if customer_class is None:
            return self
        bands = list(self.bands(customer_class))
        if not 0 <= index < len(bands):
            logger.debug(f"update_band ignored: index {index} out of range for {customer_class}")
            return self

        band = bands[index]
        changes = {k: v for k, v in fields.items() if k in ("limit", "rate")}
        if band.unbounded or changes.get("limit", 0) is None:
            changes.pop("limit", None)

        bands[index] = replace(band, **changes)
        return self._with(customer_class, bands)

    def add_band(self, customer_class) -> "TariffSchedule":
        customer_class = self._known(customer_class)
        if customer_class is None:
            return self
        bands = list(self.bands(customer_class))
        bands.insert(len(bands) - 1, Band(limit=NEW_BAND_LIMIT, rate=0.0))
        return self._with(customer_class, bands)

    def remove_band(self, customer_class, index: int) -> "TariffSchedule":
        customer_class = self._known(customer_class)
        if customer_class is None:
            return self
        bands = list(self.bands(customer_class))
        if not 0 <= index < len(bands) - 1:
            logger.debug(f"remove_band rejected: index {index} for {customer_class}")
            return self

        del bands[index]
        return self._with(customer_class, bands)

    def reset(self, scope=None) -> "TariffSchedule":
        """Restore the built-in bands for one class, or all when scope is None."""
        if scope is None:
            return TariffSchedule(self._defaults, self._defaults)
        scope = self._known(scope)
        if scope is None:
            return self
        return self._with(scope, self._defaults[scope])

    def __eq__(self, other):
        if not isinstance(other, TariffSchedule):
            return NotImplemented
        return self._bands == other._bands

    def __repr__(self):
        return f"TariffSchedule({self.to_dict()!r})"


# =====================================================
# Edit operations as values
# =====================================================

@dataclass(frozen=True)
class UpdateBand:
    customer_class: CustomerClass
    index: int
    # stored as sorted (name, value) pairs so the operation stays hashable
    fields: Tuple[Tuple[str, object], ...] = ()

    def __post_init__(self):
        items = self.fields.items() if isinstance(self.fields, Mapping) else self.fields
        object.__setattr__(self, "fields", tuple(sorted(items)))

    def apply(self, schedule: TariffSchedule) -> TariffSchedule:
        return schedule.update_band(self.customer_class, self.index, **dict(self.fields))


@dataclass(frozen=True)
class AddBand:
    customer_class: CustomerClass

    def apply(self, schedule: TariffSchedule) -> TariffSchedule:
        return schedule.add_band(self.customer_class)


@dataclass(frozen=True)
class RemoveBand:
    customer_class: CustomerClass
    index: int

    def apply(self, schedule: TariffSchedule) -> TariffSchedule:
        return schedule.remove_band(self.customer_class, self.index)


@dataclass(frozen=True)
class ResetBands:
    scope: Optional[CustomerClass] = None

    def apply(self, schedule: TariffSchedule) -> TariffSchedule:
        return schedule.reset(self.scope)


def apply_edit(schedule: TariffSchedule, operation) -> TariffSchedule:
    return operation.apply(schedule)
