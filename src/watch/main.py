# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from watch.config import ConfigError, build_repository, load_config
from watch.constants import APP_NAME, APP_VERSION
from watch.gui.main_window import MainWindow
from watch.utils.logger import setup_session_logging


CRASH_LOG_NAME = "LAST_CRASH.log"


def crash_handler(logs_dir: Path):
    """Return a ``sys.excepthook`` that logs the traceback and saves it under ``logs_dir``."""

    def _handle(exc_type, exc_value, exc_traceback) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        details = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
        crash_logger = logging.getLogger(APP_NAME)
        crash_logger.critical("Unhandled %s:\n%s", exc_type.__name__, details)

        crash_path = logs_dir / CRASH_LOG_NAME
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            crash_path.write_text(f"{APP_NAME} {APP_VERSION}\n{details}", encoding="utf-8")
        except OSError as exc:
            crash_logger.error("Could not save crash report: %s", exc)

        if QApplication.instance() is not None:
            QMessageBox.critical(None, APP_NAME, f"{APP_NAME} stopped on an unexpected error.\nReport: {crash_path}")
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    return _handle


def main() -> int:
    """Start the GUI application."""
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME)
    logs_dir = session_log_path.parent if session_log_path is not None else Path.cwd() / "logs"
    sys.excepthook = crash_handler(logs_dir)
    logger = logging.getLogger(__name__)
    app = QApplication(sys.argv)

    settings_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    try:
        settings = load_config(settings_path)
    except ConfigError as exc:
        logger.error("Invalid settings: %s", exc)
        QMessageBox.critical(None, "Invalid Settings", str(exc))
        return 2

    base_dir = settings_path.parent if settings_path is not None else Path.cwd()
    repository = build_repository(settings, base_dir=base_dir)
    logger.info("Using %s", type(repository).__name__)

    window = MainWindow(repository=repository, settings=settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
