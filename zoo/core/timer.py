from __future__ import annotations

from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer


class TimerSource(Protocol):
    """Recurring timer the clock drives its day/night flips from."""

    @property
    def active(self) -> bool:
        ...

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        ...

    def cancel(self) -> None:
        ...


class QtTimerSource:
    """
    QTimer-backed timer. Callbacks run on the thread that owns the Qt event
    loop, the same one that renders the view.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._timer = QTimer(parent)
        self._callback: Optional[Callable[[], None]] = None
        self._timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start(max(1, int(round(interval * 1000))))

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
