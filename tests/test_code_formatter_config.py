import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from formatpanel.app_settings import CodeFormatterConfig, SettingsStore


class CodeFormatterConfigTests(unittest.TestCase):
    def test_from_settings_clamps_values(self) -> None:
        config = CodeFormatterConfig.from_settings(
            {
                "formatter_base_style": "  Google ",
                "formatter_tab_width": 99,
                "formatter_min_conditional_indent": "7",
                "formatter_break_max_code_length": "yes",
                "formatter_max_code_length": "abc",
            }
        )
        self.assertEqual(config.base_style, "Google")
        self.assertEqual(config.tab_width, 16)
        self.assertEqual(config.min_conditional_indent, 3)
        self.assertTrue(config.break_max_code_length)
        self.assertEqual(config.max_code_length, 80)
        self.assertFalse(config.break_after_logical)
        self.assertIsNone(config.store)

    def test_unknown_style_name_is_kept(self) -> None:
        config = CodeFormatterConfig.from_settings({"formatter_base_style": "Unknown"})
        self.assertEqual(config.base_style, "Unknown")

    def test_arguments_without_line_breaking(self) -> None:
        config = CodeFormatterConfig(base_style="Google", tab_width=4)
        self.assertEqual(
            config.get_arguments(),
            [
                "--assume-filename=formatdemo.cpp",
                "--style={BasedOnStyle: Google, IndentWidth: 4, TabWidth: 4, "
                "ContinuationIndentWidth: 4, ColumnLimit: 0, BreakBeforeBinaryOperators: NonAssignment}",
            ],
        )

    def test_arguments_with_line_breaking(self) -> None:
        config = CodeFormatterConfig(
            base_style="Mozilla",
            tab_width=8,
            min_conditional_indent=3,
            break_max_code_length=True,
            max_code_length=120,
            break_after_logical=True,
        )
        style = config.get_arguments()[1]
        self.assertIn("BasedOnStyle: Mozilla", style)
        self.assertIn("ContinuationIndentWidth: 4", style)
        self.assertIn("ColumnLimit: 120", style)
        self.assertIn("BreakBeforeBinaryOperators: None", style)

    def test_continuation_indent_modes(self) -> None:
        widths = [
            CodeFormatterConfig(tab_width=4, min_conditional_indent=mode).continuation_indent_width()
            for mode in range(4)
        ]
        self.assertEqual(widths, [0, 4, 8, 2])

    def test_unbound_config_cannot_be_saved(self) -> None:
        with self.assertRaises(RuntimeError):
            CodeFormatterConfig().save()

    def test_bound_config_save_writes_store_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            store = SettingsStore(path)
            config = store.code_formatter()
            config.base_style = "WebKit"
            config.tab_width = 2
            config.save()
            payload = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(payload["formatter_base_style"], "WebKit")
            self.assertEqual(payload["formatter_tab_width"], 2)

    def test_store_is_ignored_by_equality(self) -> None:
        store = SettingsStore(Path(tempfile.gettempdir()) / "formatpanel-unused.json")
        self.assertEqual(store.code_formatter(), CodeFormatterConfig())


if __name__ == "__main__":
    unittest.main()
