from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from .clock import ZooClock, ZooSnapshot
from .config import ZooConfig, DEFAULT_CONFIG
from .timer import QtTimerSource


class ZooController(QObject):
    state_updated = Signal(dict)
    daytime_changed = Signal(bool)
    clock_stopped = Signal()
    log_emitted = Signal(str)

    def __init__(
        self,
        config: Optional[ZooConfig] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or DEFAULT_CONFIG
        self._timer = QtTimerSource(self)
        self._clock = ZooClock(self._timer, self._config.clock)
        self._unsubscribe = self._clock.subscribe(self._on_clock_changed)
        self._stopped = False

    @property
    def config(self) -> ZooConfig:
        return self._config

    @property
    def clock(self) -> ZooClock:
        return self._clock

    @property
    def running(self) -> bool:
        return self._clock.running

    @property
    def timer_interval_ms(self) -> int:
        return self._timer.interval_ms

    def request_snapshot(self) -> None:
        self.state_updated.emit(self._clock.snapshot().to_dict())

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        self._unsubscribe()
        self._clock.close()
        self.clock_stopped.emit()
        self.log_emitted.emit("Day/night cycle stopped.")

    def _on_clock_changed(self, snapshot: ZooSnapshot) -> None:
        self.state_updated.emit(snapshot.to_dict())
        self.daytime_changed.emit(snapshot.is_daytime)
        self.log_emitted.emit(describe_transition(snapshot))


def describe_transition(snapshot: ZooSnapshot) -> str:
    headline = "Day breaks" if snapshot.is_daytime else "Night falls"
    parts = []
    for animal in (snapshot.racoon, snapshot.parrot):
        parts.append(f"{animal.name} is {'sleeping' if animal.is_sleeping else 'awake'}")
    return f"{headline}: {', '.join(parts)}."
