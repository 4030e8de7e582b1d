from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QPushButton,
    QSplitter,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from ..app_settings import SettingsStore
from ..logging_utils import get_logger
from .formatter_general_panel import FormatterGeneralPanel
from .settings_widget import SettingsWidget

_LOGGER = get_logger(__name__)


class PreferencesDialog(QDialog):
    def __init__(self, store: SettingsStore, parent: QWidget | None = None, pages: list[SettingsWidget] | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Preferences")
        self.resize(980, 620)
        self._store = store
        self._pages: list[SettingsWidget] = []

        root = QVBoxLayout(self)
        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        root.addWidget(splitter, 1)

        self.settings_nav_list = QListWidget(splitter)
        self.settings_nav_list.setObjectName("settingsNavList")
        self.settings_nav_list.setFixedWidth(220)
        right_panel = QWidget(splitter)
        right_layout = QVBoxLayout(right_panel)
        right_layout.setContentsMargins(0, 0, 0, 0)
        self.settings_header_card = QFrame(right_panel)
        self.settings_header_card.setObjectName("settingsHeaderCard")
        header_layout = QVBoxLayout(self.settings_header_card)
        header_layout.setContentsMargins(12, 10, 12, 10)
        self.settings_page_title = QLabel("Preferences", self.settings_header_card)
        self.settings_page_title.setObjectName("settingsPageTitle")
        self.settings_page_title.setStyleSheet("font-size: 16px; font-weight: 700;")
        header_layout.addWidget(self.settings_page_title)
        right_layout.addWidget(self.settings_header_card)
        self.settings_pages = QStackedWidget(right_panel)
        self.settings_pages.setObjectName("settingsPageStack")
        right_layout.addWidget(self.settings_pages, 1)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        buttons_row = QHBoxLayout()
        buttons_row.addStretch(1)
        self.apply_btn = QPushButton("Apply", self)
        self.apply_btn.setEnabled(False)
        self.apply_btn.clicked.connect(self.apply_changes)
        buttons_row.addWidget(self.apply_btn)
        self.button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel, self
        )
        self.button_box.accepted.connect(self._accept_with_apply)
        self.button_box.rejected.connect(self.reject)
        buttons_row.addWidget(self.button_box)
        root.addLayout(buttons_row)

        self.settings_nav_list.currentRowChanged.connect(self._on_nav_row_changed)
        for page in pages if pages is not None else [FormatterGeneralPanel(store)]:
            self.add_page(page)
        if self._pages:
            self.settings_nav_list.setCurrentRow(0)

    def pages(self) -> list[SettingsWidget]:
        return list(self._pages)

    def add_page(self, page: SettingsWidget) -> int:
        page.load()
        page.settings_changed.connect(self._on_page_settings_changed)
        self._pages.append(page)
        stack_index = self.settings_pages.addWidget(page)
        self.settings_nav_list.addItem(f"{page.group()} > {page.name()}")
        return stack_index

    def apply_changes(self) -> None:
        for page in self._pages:
            if page.is_settings_changed():
                page.save()
        self.apply_btn.setEnabled(False)

    def _accept_with_apply(self) -> None:
        self.apply_changes()
        self.accept()

    def _on_page_settings_changed(self) -> None:
        self.apply_btn.setEnabled(True)

    def _on_nav_row_changed(self, row: int) -> None:
        if row < 0 or row >= len(self._pages):
            return
        page = self._pages[row]
        self.settings_pages.setCurrentIndex(row)
        self.settings_page_title.setText(f"{page.group()}: {page.name()}")
        _LOGGER.debug("Showing settings page %s/%s", page.group(), page.name())
