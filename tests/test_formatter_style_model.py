import os
import sys
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PySide6.QtCore import QModelIndex, Qt
from PySide6.QtWidgets import QApplication

from formatpanel.ui.formatter_style_model import FormatterStyleModel, StyleAspect


class FormatterStyleModelTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self) -> None:
        self.model = FormatterStyleModel()

    def test_lists_builtin_styles_in_order(self) -> None:
        self.assertEqual(self.model.rowCount(), 7)
        self.assertEqual(self.model.count(), 7)
        self.assertEqual(
            self.model.style_names(),
            ["LLVM", "Google", "Chromium", "Mozilla", "WebKit", "Microsoft", "GNU"],
        )

    def test_every_row_has_name_and_description(self) -> None:
        for row in range(self.model.count()):
            item = self.model.get_style(row)
            self.assertIsNotNone(item)
            self.assertTrue(item.name)
            self.assertTrue(item.description)

    def test_out_of_range_rows_return_none(self) -> None:
        self.assertIsNone(self.model.get_style(-1))
        self.assertIsNone(self.model.get_style(self.model.count()))
        self.assertIsNone(self.model.get_style(QModelIndex()))

    def test_names_are_unique(self) -> None:
        names = self.model.style_names()
        self.assertEqual(len(names), len(set(names)))

    def test_data_roles(self) -> None:
        index = self.model.index(1, 0)
        self.assertEqual(self.model.get_style(index).name, "Google")
        self.assertEqual(self.model.data(index, Qt.ItemDataRole.DisplayRole), "Google")
        self.assertEqual(
            self.model.data(index, Qt.ItemDataRole.ToolTipRole),
            "A style complying with Google's C++ style guide.",
        )
        self.assertIsNone(self.model.data(index, Qt.ItemDataRole.DecorationRole))
        self.assertIsNone(self.model.data(QModelIndex(), Qt.ItemDataRole.DisplayRole))

    def test_style_text_by_aspect(self) -> None:
        self.assertEqual(self.model.style_text(6, StyleAspect.DISPLAY), "GNU")
        self.assertEqual(
            self.model.style_text(6, StyleAspect.TOOLTIP),
            "A style complying with the GNU coding standards.",
        )
        self.assertIsNone(self.model.style_text(7, StyleAspect.DISPLAY))

    def test_find_style_row(self) -> None:
        self.assertEqual(self.model.find_style_row("Mozilla"), 3)
        self.assertEqual(self.model.find_style_row("mozilla"), -1)
        self.assertEqual(self.model.find_style_row("Unknown"), -1)


if __name__ == "__main__":
    unittest.main()
