from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt


@dataclass(frozen=True, slots=True)
class FormatterStyleItem:
    name: str
    description: str


class StyleAspect(Enum):
    DISPLAY = "display"
    TOOLTIP = "tooltip"


_ASPECT_BY_ROLE = {
    int(Qt.ItemDataRole.DisplayRole): StyleAspect.DISPLAY,
    int(Qt.ItemDataRole.ToolTipRole): StyleAspect.TOOLTIP,
}

BUILTIN_STYLES: tuple[FormatterStyleItem, ...] = (
    FormatterStyleItem("LLVM", "A style complying with the LLVM coding standards."),
    FormatterStyleItem("Google", "A style complying with Google's C++ style guide."),
    FormatterStyleItem("Chromium", "A style complying with Chromium's style guide."),
    FormatterStyleItem("Mozilla", "A style complying with Mozilla's style guide."),
    FormatterStyleItem("WebKit", "A style complying with WebKit's style guide."),
    FormatterStyleItem("Microsoft", "A style complying with Microsoft's style guide."),
    FormatterStyleItem("GNU", "A style complying with the GNU coding standards."),
)


class FormatterStyleModel(QAbstractListModel):
    """Read-only list of the clang-format base styles offered to the user."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._styles: tuple[FormatterStyleItem, ...] = BUILTIN_STYLES

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # type: ignore[override]
        if parent.isValid():
            return 0
        return len(self._styles)

    def count(self) -> int:
        return len(self._styles)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:  # type: ignore[override]
        if not index.isValid():
            return None
        aspect = _ASPECT_BY_ROLE.get(int(role))
        if aspect is None:
            return None
        return self.style_text(index.row(), aspect)

    def style_text(self, row: int, aspect: StyleAspect) -> str | None:
        item = self.get_style(row)
        if item is None:
            return None
        if aspect is StyleAspect.DISPLAY:
            return item.name
        if aspect is StyleAspect.TOOLTIP:
            return item.description
        return None

    def get_style(self, index: int | QModelIndex) -> FormatterStyleItem | None:
        if isinstance(index, QModelIndex):
            if not index.isValid():
                return None
            index = index.row()
        if index < 0 or index >= len(self._styles):
            return None
        return self._styles[index]

    def style_names(self) -> list[str]:
        return [item.name for item in self._styles]

    def find_style_row(self, name: str) -> int:
        for row, item in enumerate(self._styles):
            if item.name == name:
                return row
        return -1
