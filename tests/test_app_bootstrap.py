import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PySide6.QtWidgets import QApplication

from formatpanel import app as app_module


class AppBootstrapTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QApplication.instance() or QApplication([])

    def test_main_chains_previously_installed_exception_hook(self) -> None:
        crash_hook = Mock()
        error = ValueError("boom")
        with tempfile.TemporaryDirectory() as tmp, patch("sys.excepthook", crash_hook), patch.object(
            app_module, "PreferencesDialog"
        ):
            app_module.main(existing_app=self.app, settings_path=Path(tmp) / "settings.json")
            self.assertIsNot(sys.excepthook, crash_hook)
            with self.assertLogs("formatpanel.app", level="ERROR"):
                sys.excepthook(ValueError, error, None)
        crash_hook.assert_called_once_with(ValueError, error, None)

    def test_exception_hook_logs_before_delegating(self) -> None:
        calls = []
        hook = app_module.build_exception_hook(lambda *args: calls.append(args))
        error = RuntimeError("late failure")
        with self.assertLogs("formatpanel.app", level="ERROR") as logs:
            hook(RuntimeError, error, None)
        self.assertEqual(calls, [(RuntimeError, error, None)])
        self.assertIn("Unhandled exception routed to global hook", logs.output[0])


if __name__ == "__main__":
    unittest.main()
