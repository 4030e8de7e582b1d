import argparse
import faulthandler
import sys
import traceback
from pathlib import Path

from PySide6.QtWidgets import QApplication

# --- Add ROOT for imports ---
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from formatpanel.app import main
from formatpanel.app_settings import get_crash_logs_file_path
from formatpanel.logging_utils import LOG_LEVEL_OPTIONS, configure_app_logging, get_logger

configure_app_logging("INFO")
LOGGER = get_logger(__name__)


def _save_startup_traceback(traceback_text: str) -> None:
    try:
        path = get_crash_logs_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as handle:
            handle.write("[Startup Crash]\n")
            handle.write(traceback_text.rstrip("\n"))
            handle.write("\n\n")
    except OSError:
        LOGGER.warning("Could not write crash log", exc_info=True)


def _install_startup_exception_hooks() -> None:
    def _handle_exception(exc_type, exc_value, exc_tb) -> None:
        error_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb)).strip()
        _save_startup_traceback(error_text)
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _handle_exception

    # Capture low-level crashes (segfaults, aborts) to the same log.
    try:
        path = get_crash_logs_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = open(path, "a", encoding="utf-8")
        faulthandler.enable(file=handle, all_threads=True)
    except OSError:
        LOGGER.warning("Could not enable faulthandler crash log", exc_info=True)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(add_help=True, description="clang-format preferences")
    parser.add_argument("--settings", type=Path, default=None, help="Path of the settings JSON file.")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_OPTIONS,
        default=None,
        help="Override the log level stored in the settings file.",
    )
    parsed_args, qt_args = parser.parse_known_args(sys.argv[1:])
    LOGGER.debug("Parsed startup args: parsed=%s qt=%s", parsed_args, qt_args)

    _install_startup_exception_hooks()
    app = QApplication([sys.argv[0], *qt_args])
    LOGGER.info("QApplication created")

    try:
        dialog = main(existing_app=app, settings_path=parsed_args.settings)
    except Exception:
        _save_startup_traceback(traceback.format_exc())
        LOGGER.exception("Preferences bootstrap failed")
        sys.exit(1)
    if parsed_args.log_level:
        configure_app_logging(parsed_args.log_level)

    dialog.finished.connect(app.quit)
    dialog.show()
    exit_code = app.exec()
    LOGGER.info("Qt event loop exited with code %s", exit_code)
    sys.exit(exit_code)
