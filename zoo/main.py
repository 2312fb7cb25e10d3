from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication, QMessageBox

from zoo.core import ZooConfig, ZooController, load_config
from zoo.ui import MainWindow

logger = logging.getLogger(__name__)


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication.instance() or QApplication(list(argv))
    app.setApplicationName("Zoo")
    return app


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="Zoo day/night demo")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON config file with clock/theme/window sections",
    )
    parser.add_argument(
        "--cycle-interval",
        type=float,
        help="Seconds between day/night flips (default: 10)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level for console output (default: WARNING)",
    )
    args, qt_args = parser.parse_known_args(argv)
    try:
        args.zoo_config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))
    return args, qt_args


def build_config(args: argparse.Namespace) -> ZooConfig:
    config = load_config(args.config) if args.config else ZooConfig()
    if args.cycle_interval is not None:
        config.clock.cycle_interval = args.cycle_interval
    interval = config.clock.cycle_interval
    if not isinstance(interval, (int, float)) or isinstance(interval, bool):
        raise ValueError(f"cycle interval must be a number, got {interval!r}")
    if interval <= 0:
        raise ValueError(f"cycle interval must be positive, got {interval!r}")
    return config


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(argv if argv is not None else sys.argv)
    args, qt_args = parse_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_application(qt_argv)
    try:
        controller = ZooController(args.zoo_config)
        window = MainWindow(controller)
    except Exception as exc:
        logger.exception("Startup failed")
        QMessageBox.critical(None, "Zoo failed to start", str(exc))
        return 1
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
