from __future__ import annotations

"""Application entry point: logging, settings storage, state and the main window."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from pomotimer.config import default_db_path, log_dir, log_level
from pomotimer.core.app_state import AppState
from pomotimer.data.storage import Storage
from pomotimer.logging_config import setup_logging
from pomotimer.ui.main_window import MainWindow
from pomotimer.ui.styles import apply_theme


logger = logging.getLogger(__name__)


def main() -> int:
    """Builds the application's dependencies and runs the Qt event loop."""
    setup_logging(log_dir(), log_level())
    logger.info("pomotimer starting")

    app = QApplication(sys.argv)
    apply_theme(app)

    storage = Storage(default_db_path())
    storage.init_db()

    app_state = AppState()
    app_state.load_from_storage(storage)

    window = MainWindow(app_state=app_state)
    window.show()

    exit_code = app.exec()
    logger.info("pomotimer exiting with code %s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
