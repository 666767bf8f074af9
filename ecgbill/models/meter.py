from dataclasses import dataclass


@dataclass(frozen=True)
class MeterReading:
    previous: float
    current: float

    @property
    def units_consumed(self) -> float:
        # a rollback or meter replacement bills nothing
        return max(self.current - self.previous, 0)
