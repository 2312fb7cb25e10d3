from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from PySide6.QtGui import QColor

from zoo.core.config import ThemeConfig


class SkyIcon(Enum):
    SUN = "sun.max.fill"
    MOON = "moon.fill"


def sky_icon(is_daytime: bool) -> SkyIcon:
    return SkyIcon.SUN if is_daytime else SkyIcon.MOON


def scene_colors(is_daytime: bool, theme: ThemeConfig) -> Tuple[QColor, QColor]:
    """Background and foreground colours for the whole scene."""
    if is_daytime:
        return QColor(theme.day_background), QColor(theme.day_foreground)
    return QColor(theme.night_background), QColor(theme.night_foreground)


def status_text(animal: Dict) -> str:
    return "Sleeping" if animal.get("is_sleeping") else "Awake"


def status_tint(animal: Dict, theme: ThemeConfig) -> QColor:
    return QColor(theme.sleeping_tint if animal.get("is_sleeping") else theme.awake_tint)


def blend(start: QColor, end: QColor, t: float) -> QColor:
    t = max(0.0, min(1.0, t))
    return QColor(
        round(start.red() + (end.red() - start.red()) * t),
        round(start.green() + (end.green() - start.green()) * t),
        round(start.blue() + (end.blue() - start.blue()) * t),
    )
