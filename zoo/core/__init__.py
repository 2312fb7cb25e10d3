# SPDX-License-Identifier: MIT
"""
Core state, timer, and configuration for the zoo demo.
"""

from .animal import AnimalSnapshot, AnimalState, Polarity  # noqa: F401
from .clock import Phase, ZooClock, ZooSnapshot  # noqa: F401
from .config import (
    ClockConfig,
    ThemeConfig,
    WindowConfig,
    ZooConfig,
    load_config,
)  # noqa: F401
from .controller import ZooController  # noqa: F401
from .timer import QtTimerSource, TimerSource  # noqa: F401
