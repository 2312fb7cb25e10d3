from __future__ import annotations

from typing import Dict

from PySide6.QtWidgets import QLabel, QMainWindow, QTextEdit, QVBoxLayout, QWidget

from zoo.core.controller import ZooController
from zoo.ui.zoo_view import ZooView


class MainWindow(QMainWindow):
    def __init__(self, controller: ZooController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        window = controller.config.window
        self.setWindowTitle(window.title)
        self.resize(window.width, window.height)

        self._build_menu()
        self._build_ui()
        self._connect_signals()
        self.zoo_view.set_state(self.controller.clock.snapshot().to_dict(), animate=False)
        self._show_phase(self.controller.clock.is_daytime)

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        self.zoo_view = ZooView(self.controller.config.theme)
        layout.addWidget(self.zoo_view, stretch=4)

        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.setMaximumHeight(120)
        layout.addWidget(QLabel("Event log"))
        layout.addWidget(self.log_output, stretch=1)
        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        self.controller.state_updated.connect(self._on_state_updated)
        self.controller.daytime_changed.connect(self._show_phase)
        self.controller.log_emitted.connect(self._append_log)
        self.controller.clock_stopped.connect(self._on_clock_stopped)

    def _on_state_updated(self, payload: Dict) -> None:
        self.zoo_view.set_state(payload)

    def _show_phase(self, is_daytime: bool) -> None:
        self.statusBar().showMessage("Day" if is_daytime else "Night")

    def _on_clock_stopped(self) -> None:
        self.statusBar().showMessage("Stopped")

    def _append_log(self, message: str) -> None:
        self.log_output.append(message)

    def closeEvent(self, event) -> None:  # noqa: N802
        if self.controller:
            self.controller.stop()
        super().closeEvent(event)
