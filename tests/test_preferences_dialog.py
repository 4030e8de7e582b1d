import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PySide6.QtWidgets import QApplication

from formatpanel.app_settings import SettingsStore
from formatpanel.ui.formatter_general_panel import FormatterGeneralPanel
from formatpanel.ui.preferences_dialog import PreferencesDialog


class PreferencesDialogTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.settings_path = Path(self._tmp.name) / "settings.json"
        self.store = SettingsStore(self.settings_path, settings={"formatter_base_style": "Chromium"})
        self.panel = FormatterGeneralPanel(self.store, runner=Mock(return_value=b""), demo_source_resolver=lambda: None)
        self.dialog = PreferencesDialog(self.store, pages=[self.panel])

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_pages_are_loaded_when_added(self) -> None:
        self.assertEqual(self.dialog.pages(), [self.panel])
        self.assertEqual(self.panel.brace_style_combo.currentText(), "Chromium")
        self.assertEqual(self.dialog.settings_page_title.text(), "Code Formatter: General")
        self.assertFalse(self.dialog.apply_btn.isEnabled())

    def test_apply_saves_changed_pages(self) -> None:
        self.panel.tab_size_spin.setValue(2)
        self.assertTrue(self.dialog.apply_btn.isEnabled())
        self.dialog.apply_changes()
        self.assertFalse(self.dialog.apply_btn.isEnabled())
        payload = json.loads(self.settings_path.read_text(encoding="utf-8"))
        self.assertEqual(payload["formatter_tab_width"], 2)
        self.assertEqual(payload["formatter_base_style"], "Chromium")

    def test_apply_without_changes_writes_nothing(self) -> None:
        self.dialog.apply_changes()
        self.assertFalse(self.settings_path.exists())

    def test_cancel_discards_unapplied_changes(self) -> None:
        self.panel.tab_size_spin.setValue(9)
        self.dialog.reject()
        self.assertFalse(self.settings_path.exists())
        self.assertEqual(self.store.code_formatter().tab_width, 4)


if __name__ == "__main__":
    unittest.main()
