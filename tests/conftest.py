from __future__ import annotations

import os
from typing import Callable, Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


class ManualTimer:
    """Timer double that only fires when the test says so."""

    def __init__(self) -> None:
        self.interval: Optional[float] = None
        self.callback: Optional[Callable[[], None]] = None
        self.starts = 0
        self.cancels = 0

    @property
    def active(self) -> bool:
        return self.callback is not None

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.starts += 1

    def cancel(self) -> None:
        self.callback = None
        self.cancels += 1

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            assert self.callback is not None, "timer is not running"
            self.callback()


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def manual_timer() -> ManualTimer:
    return ManualTimer()
