from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .animal import AnimalSnapshot, AnimalState, Polarity
from .config import ClockConfig
from .timer import TimerSource

logger = logging.getLogger(__name__)


class Phase(Enum):
    DAY = "day"
    NIGHT = "night"


@dataclass(frozen=True)
class ZooSnapshot:
    is_daytime: bool
    racoon: AnimalSnapshot
    parrot: AnimalSnapshot

    @property
    def phase(self) -> Phase:
        return Phase.DAY if self.is_daytime else Phase.NIGHT

    def to_dict(self) -> dict:
        return {
            "is_daytime": self.is_daytime,
            "phase": self.phase.value,
            "racoon": self.racoon.to_dict(),
            "parrot": self.parrot.to_dict(),
        }


Listener = Callable[[ZooSnapshot], None]


class ZooClock:
    """
    Day/night state machine for the zoo.

    Starts in daytime with the racoon asleep and the parrot awake. Every
    flip recomputes both animals' sleep from the new phase and then notifies
    each subscriber exactly once. When constructed with a timer, the timer
    is started right away and flips the phase every ``cycle_interval``
    seconds until :meth:`close` is called.
    """

    RACOON_POLARITY = Polarity.NOCTURNAL
    PARROT_POLARITY = Polarity.DIURNAL

    def __init__(
        self,
        timer: Optional[TimerSource] = None,
        config: Optional[ClockConfig] = None,
    ) -> None:
        self._config = config or ClockConfig()
        if self._config.cycle_interval <= 0:
            raise ValueError(f"cycle_interval must be positive, got {self._config.cycle_interval!r}")
        self.is_daytime = True
        self.racoon = AnimalState(self._config.racoon_name, is_sleeping=True)
        self.parrot = AnimalState(self._config.parrot_name, is_sleeping=False)
        self._toggle_count = 0
        self._listeners: List[Listener] = []
        self._timer = timer
        if self._timer is not None:
            self._timer.start(self._config.cycle_interval, self.toggle_daytime)
            logger.info("Day/night cycle started (every %.3gs)", self._config.cycle_interval)

    @property
    def config(self) -> ClockConfig:
        return self._config

    @property
    def phase(self) -> Phase:
        return Phase.DAY if self.is_daytime else Phase.NIGHT

    @property
    def toggle_count(self) -> int:
        return self._toggle_count

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.active

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> ZooSnapshot:
        return ZooSnapshot(
            is_daytime=self.is_daytime,
            racoon=AnimalSnapshot.of(self.racoon),
            parrot=AnimalSnapshot.of(self.parrot),
        )

    def toggle_daytime(self) -> None:
        self.is_daytime = not self.is_daytime
        self.racoon.is_sleeping = self.RACOON_POLARITY.is_sleeping(self.is_daytime)
        self.parrot.is_sleeping = self.PARROT_POLARITY.is_sleeping(self.is_daytime)
        self._toggle_count += 1
        logger.debug("Toggle #%d -> %s", self._toggle_count, self.phase.value)
        snapshot = self.snapshot()
        # Copy so a listener may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(snapshot)

    def close(self) -> None:
        if self._timer is None:
            return
        if self._timer.active:
            logger.info("Day/night cycle stopped after %d toggles", self._toggle_count)
        self._timer.cancel()

    def __enter__(self) -> "ZooClock":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
