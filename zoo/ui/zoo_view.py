from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from PySide6.QtCore import QAbstractAnimation, QPointF, QRectF, Qt, QVariantAnimation
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QFrame, QLabel, QSizePolicy, QVBoxLayout, QWidget

from zoo.core.config import ThemeConfig
from zoo.ui.theme import SkyIcon, blend, scene_colors, sky_icon, status_text, status_tint


class SkyIconWidget(QWidget):
    """Sun or moon glyph, drawn in the scene's foreground colour."""

    def __init__(self, size: int = 50, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._icon = SkyIcon.SUN
        self._color = QColor(Qt.GlobalColor.black)
        self._glyph_size = size
        padding = 16
        self.setFixedSize(size + 2 * padding, size + 2 * padding)

    @property
    def icon(self) -> SkyIcon:
        return self._icon

    def set_icon(self, icon: SkyIcon) -> None:
        if icon is not self._icon:
            self._icon = icon
            self.update()

    def set_color(self, color: QColor) -> None:
        self._color = QColor(color)
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        center = QPointF(self.width() / 2.0, self.height() / 2.0)
        if self._icon is SkyIcon.SUN:
            self._paint_sun(painter, center)
        else:
            self._paint_moon(painter, center)
        painter.end()

    def _paint_sun(self, painter: QPainter, center: QPointF) -> None:
        radius = self._glyph_size * 0.26
        pen = QPen(self._color, max(2.0, self._glyph_size / 14.0))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        inner = radius * 1.45
        outer = self._glyph_size * 0.5
        for i in range(8):
            angle = i * math.pi / 4
            dx, dy = math.cos(angle), math.sin(angle)
            painter.drawLine(
                QPointF(center.x() + dx * inner, center.y() + dy * inner),
                QPointF(center.x() + dx * outer, center.y() + dy * outer),
            )
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._color)
        painter.drawEllipse(center, radius, radius)

    def _paint_moon(self, painter: QPainter, center: QPointF) -> None:
        radius = self._glyph_size * 0.42
        disc = QPainterPath()
        disc.addEllipse(center, radius, radius)
        bite = QPainterPath()
        bite.addEllipse(QPointF(center.x() + radius * 0.55, center.y() - radius * 0.35), radius, radius)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._color)
        painter.drawPath(disc.subtracted(bite))


class AnimalDetailView(QFrame):
    """Card with an animal's name and whether it is sleeping."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("animalCard")
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.name_label = QLabel("")
        self.name_label.setObjectName("animalName")
        title_font = QFont(self.font())
        if title_font.pointSizeF() > 0:
            title_font.setPointSizeF(title_font.pointSizeF() * 2.0)
        title_font.setBold(True)
        self.name_label.setFont(title_font)
        self.name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.name_label)

        self.status_label = QLabel("")
        self.status_label.setObjectName("animalStatus")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.status_label)

    def set_animal(self, animal: Dict) -> None:
        self.name_label.setText(str(animal.get("name", "")))
        self.status_label.setText(status_text(animal))

    def apply_colors(self, tint: QColor, foreground: QColor) -> None:
        self.setStyleSheet(
            f"QFrame#animalCard {{ background-color: {tint.name()}; border-radius: 10px; }}"
            f"QFrame#animalCard QLabel {{ color: {foreground.name()}; background: transparent; }}"
        )


class ZooView(QWidget):
    """
    Renders the zoo payload emitted by the controller: the sky icon over the
    racoon and parrot cards, on a light or dark background.

    Colour changes are animated; text and icon swap immediately.
    """

    def __init__(self, theme: Optional[ThemeConfig] = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = theme or ThemeConfig()
        self._state: Dict | None = None

        background, foreground = scene_colors(True, self._theme)
        awake = QColor(self._theme.awake_tint)
        sleeping = QColor(self._theme.sleeping_tint)
        # (start, target) pairs for each animated colour
        self._colors: Dict[str, Tuple[QColor, QColor]] = {
            "background": (background, background),
            "foreground": (foreground, foreground),
            "racoon": (sleeping, sleeping),
            "parrot": (awake, awake),
        }
        self._current: Dict[str, QColor] = {key: QColor(end) for key, (_, end) in self._colors.items()}

        self._transition = QVariantAnimation(self)
        self._transition.setStartValue(0.0)
        self._transition.setEndValue(1.0)
        self._transition.setDuration(max(0, self._theme.transition_ms))
        self._transition.valueChanged.connect(self._on_transition_step)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.sky = SkyIconWidget(self._theme.icon_size)
        layout.addWidget(self.sky, alignment=Qt.AlignmentFlag.AlignHCenter)
        self.racoon_card = AnimalDetailView()
        self.parrot_card = AnimalDetailView()
        for card in (self.racoon_card, self.parrot_card):
            layout.addWidget(card)
        self._apply_colors()

    @property
    def state(self) -> Dict | None:
        return self._state

    @property
    def animating(self) -> bool:
        return self._transition.state() == QAbstractAnimation.State.Running

    def background_color(self) -> QColor:
        return QColor(self._current["background"])

    def foreground_color(self) -> QColor:
        return QColor(self._current["foreground"])

    def card_tint(self, animal_key: str) -> QColor:
        return QColor(self._current[animal_key])

    def set_state(self, payload: Dict, animate: bool = True) -> None:
        self._state = dict(payload)
        is_daytime = bool(payload.get("is_daytime", True))
        racoon = payload.get("racoon", {})
        parrot = payload.get("parrot", {})

        self.sky.set_icon(sky_icon(is_daytime))
        self.racoon_card.set_animal(racoon)
        self.parrot_card.set_animal(parrot)

        background, foreground = scene_colors(is_daytime, self._theme)
        targets = {
            "background": background,
            "foreground": foreground,
            "racoon": status_tint(racoon, self._theme),
            "parrot": status_tint(parrot, self._theme),
        }
        self._transition.stop()
        self._colors = {key: (QColor(self._current[key]), target) for key, target in targets.items()}
        if animate and self._transition.duration() > 0:
            self._transition.start()
        else:
            self._on_transition_step(1.0)

    def _on_transition_step(self, value) -> None:
        t = float(value)
        for key, (start, end) in self._colors.items():
            self._current[key] = blend(start, end, t)
        self._apply_colors()

    def _apply_colors(self) -> None:
        foreground = self._current["foreground"]
        self.sky.set_color(foreground)
        self.racoon_card.apply_colors(self._current["racoon"], foreground)
        self.parrot_card.apply_colors(self._current["parrot"], foreground)
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.fillRect(QRectF(self.rect()), self._current["background"])
        painter.end()
        super().paintEvent(event)
