from PySide6.QtGui import QColor

from zoo.core.config import ThemeConfig, ZooConfig
from zoo.core.controller import ZooController
from zoo.ui import MainWindow, ZooView
from zoo.ui.theme import SkyIcon, blend, scene_colors, sky_icon, status_text, status_tint

DAY = {
    "is_daytime": True,
    "phase": "day",
    "racoon": {"name": "Racoon", "is_sleeping": True},
    "parrot": {"name": "Parrot", "is_sleeping": False},
}
NIGHT = {
    "is_daytime": False,
    "phase": "night",
    "racoon": {"name": "Racoon", "is_sleeping": False},
    "parrot": {"name": "Parrot", "is_sleeping": True},
}


def test_theme_rules(qapp):
    theme = ThemeConfig()
    assert sky_icon(True) is SkyIcon.SUN
    assert sky_icon(False) is SkyIcon.MOON
    assert scene_colors(True, theme) == (QColor("#ffffff"), QColor("#000000"))
    assert scene_colors(False, theme) == (QColor("#000000"), QColor("#ffffff"))
    assert status_text({"is_sleeping": True}) == "Sleeping"
    assert status_text({"is_sleeping": False}) == "Awake"
    assert status_tint({"is_sleeping": True}, theme) == QColor(theme.sleeping_tint)
    assert status_tint({"is_sleeping": False}, theme) == QColor(theme.awake_tint)


def test_blend_clamps(qapp):
    black, white = QColor(0, 0, 0), QColor(255, 255, 255)
    assert blend(black, white, -1.0) == black
    assert blend(black, white, 2.0) == white
    assert blend(black, white, 0.5) == QColor(128, 128, 128)


def test_zoo_view_renders_day(qapp):
    view = ZooView()
    view.set_state(DAY, animate=False)
    assert view.sky.icon is SkyIcon.SUN
    assert view.racoon_card.name_label.text() == "Racoon"
    assert view.racoon_card.status_label.text() == "Sleeping"
    assert view.parrot_card.status_label.text() == "Awake"
    assert view.background_color() == QColor("#ffffff")
    assert view.foreground_color() == QColor("#000000")


def test_zoo_view_renders_night_without_animation(qapp):
    view = ZooView()
    view.set_state(NIGHT, animate=False)
    assert view.sky.icon is SkyIcon.MOON
    assert view.racoon_card.status_label.text() == "Awake"
    assert view.parrot_card.status_label.text() == "Sleeping"
    assert view.background_color() == QColor("#000000")
    assert view.card_tint("racoon") == QColor(ThemeConfig().awake_tint)
    assert view.card_tint("parrot") == QColor(ThemeConfig().sleeping_tint)
    assert view.animating is False


def test_zoo_view_animates_colours(qapp):
    view = ZooView(ThemeConfig(transition_ms=5000))
    view.set_state(DAY, animate=False)
    view.set_state(NIGHT)
    assert view.animating is True
    # text swaps immediately, colours follow the animation
    assert view.parrot_card.status_label.text() == "Sleeping"
    assert view.background_color() != QColor("#000000")


def test_zero_duration_skips_animation(qapp):
    view = ZooView(ThemeConfig(transition_ms=0))
    view.set_state(NIGHT)
    assert view.animating is False
    assert view.background_color() == QColor("#000000")


def test_main_window_follows_controller(qapp):
    controller = ZooController(ZooConfig())
    window = MainWindow(controller)
    window.show()
    try:
        assert window.windowTitle() == "Zoo"
        assert window.zoo_view.state["is_daytime"] is True
        assert window.statusBar().currentMessage() == "Day"
        controller.clock.toggle_daytime()
        assert window.zoo_view.state["is_daytime"] is False
        assert window.zoo_view.parrot_card.status_label.text() == "Sleeping"
        assert window.statusBar().currentMessage() == "Night"
        assert "Night falls" in window.log_output.toPlainText()
    finally:
        window.close()
    assert controller.running is False
