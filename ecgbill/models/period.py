from dataclasses import dataclass

CANONICAL_DAYS = 31


@dataclass(frozen=True)
class Period:
    days: int = CANONICAL_DAYS

    @property
    def month_fraction(self) -> float:
        return self.days / CANONICAL_DAYS
