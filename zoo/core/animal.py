from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Polarity(Enum):
    """How an animal's sleep follows the day/night phase."""

    NOCTURNAL = "nocturnal"  # sleeps by day
    DIURNAL = "diurnal"  # sleeps by night

    def is_sleeping(self, is_daytime: bool) -> bool:
        if self is Polarity.NOCTURNAL:
            return is_daytime
        return not is_daytime


@dataclass
class AnimalState:
    name: str
    is_sleeping: bool


@dataclass(frozen=True)
class AnimalSnapshot:
    name: str
    is_sleeping: bool

    @classmethod
    def of(cls, animal: AnimalState) -> "AnimalSnapshot":
        return cls(name=animal.name, is_sleeping=animal.is_sleeping)

    def to_dict(self) -> dict:
        return {"name": self.name, "is_sleeping": self.is_sleeping}
