import sys
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtWidgets import QApplication

from .app_settings import SettingsStore
from .logging_utils import configure_app_logging, get_logger
from .ui.preferences_dialog import PreferencesDialog

LOGGER = get_logger(__name__)


def build_exception_hook(previous_hook: Callable) -> Callable:
    """Log unhandled exceptions, then hand them to the hook installed before us (e.g. the crash log writer)."""

    def _global_exception_hook(exc_type, exc_value, exc_tb) -> None:
        LOGGER.exception("Unhandled exception routed to global hook", exc_info=(exc_type, exc_value, exc_tb))
        previous_hook(exc_type, exc_value, exc_tb)

    return _global_exception_hook


def main(existing_app: Optional[QApplication] = None, settings_path: Optional[Path] = None) -> PreferencesDialog:
    # Use existing QApplication if passed (from run.py), otherwise create one
    owns_app = existing_app is None
    app = existing_app or QApplication(sys.argv)
    app.setApplicationName("FormatPanel")

    store = SettingsStore(settings_path)
    settings = store.load()
    configure_app_logging(settings.get("log_level", "INFO"))
    LOGGER.info("App main() starting (owns_app=%s, settings=%s)", owns_app, store.path)

    dialog = PreferencesDialog(store)
    LOGGER.info("Preferences dialog created")

    sys.excepthook = build_exception_hook(sys.excepthook)

    if owns_app:
        dialog.finished.connect(app.quit)
        dialog.show()
        LOGGER.info("Dialog shown by app.main() (standalone mode)")

    return dialog


def run() -> int:
    app = QApplication(sys.argv)
    dialog = main(existing_app=app)
    dialog.finished.connect(app.quit)
    dialog.show()
    return app.exec()
