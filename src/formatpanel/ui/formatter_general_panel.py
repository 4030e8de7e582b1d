from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence

from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from ..app_settings import CodeFormatterConfig, SettingsStore
from ..app_settings.defaults import MAX_CODE_LENGTH_RANGE, TAB_WIDTH_RANGE
from ..logging_utils import get_logger
from ..services.process_runner import run_and_get_output
from .asset_paths import resolve_demo_source_path
from .formatter_style_model import FormatterStyleModel
from .settings_widget import SettingsWidget

_LOGGER = get_logger(__name__)

ProcessRunner = Callable[[str, Optional[Path], Sequence[str], bytes], bytes]

MIN_CONDITIONAL_INDENT_OPTIONS: tuple[tuple[str, int], ...] = (
    ("No minimal indent", 0),
    ("Indent at least one additional indent", 1),
    ("Indent at least two additional indents", 2),
    ("Indent at least one-half an additional indent.", 3),
)


class FormatterGeneralPanel(SettingsWidget):
    """Base style, tab width and line breaking options with a live clang-format preview."""

    def __init__(
        self,
        store: SettingsStore,
        parent: QWidget | None = None,
        *,
        runner: ProcessRunner = run_and_get_output,
        demo_source_resolver: Callable[[], Path | None] = resolve_demo_source_path,
    ) -> None:
        super().__init__("General", "Code Formatter", parent)
        self._store = store
        self._runner = runner
        self._demo_source_resolver = demo_source_resolver
        self.styles_model = FormatterStyleModel(self)

        root = QHBoxLayout(self)
        options_column = QVBoxLayout()
        root.addLayout(options_column, 0)

        style_group = QGroupBox("Base style", self)
        style_layout = QVBoxLayout(style_group)
        self.brace_style_combo = QComboBox(style_group)
        self.brace_style_combo.setModel(self.styles_model)
        style_layout.addWidget(self.brace_style_combo)
        self.brace_style_label = QLabel(style_group)
        self.brace_style_label.setWordWrap(True)
        style_layout.addWidget(self.brace_style_label)
        options_column.addWidget(style_group)

        indent_group = QGroupBox("Indentation", self)
        indent_form = QFormLayout(indent_group)
        self.tab_size_spin = QSpinBox(indent_group)
        self.tab_size_spin.setRange(*TAB_WIDTH_RANGE)
        indent_form.addRow("Tab width:", self.tab_size_spin)
        self.min_conditional_indent_combo = QComboBox(indent_group)
        for label, value in MIN_CONDITIONAL_INDENT_OPTIONS:
            self.min_conditional_indent_combo.addItem(label, value)
        indent_form.addRow("Minimal conditional indent:", self.min_conditional_indent_combo)
        options_column.addWidget(indent_group)

        breaking_group = QGroupBox("Line breaking", self)
        breaking_form = QFormLayout(breaking_group)
        self.break_max_code_length_checkbox = QCheckBox("Break lines longer than the maximum code length", breaking_group)
        breaking_form.addRow(self.break_max_code_length_checkbox)
        self.max_code_length_spin = QSpinBox(breaking_group)
        self.max_code_length_spin.setRange(*MAX_CODE_LENGTH_RANGE)
        breaking_form.addRow("Maximum code length:", self.max_code_length_spin)
        self.break_after_logical_checkbox = QCheckBox("Break after logical operators", breaking_group)
        breaking_form.addRow(self.break_after_logical_checkbox)
        options_column.addWidget(breaking_group)
        options_column.addStretch(1)

        self.demo_edit = QPlainTextEdit(self)
        self.demo_edit.setReadOnly(True)
        self.demo_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.demo_edit.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        root.addWidget(self.demo_edit, 1)

        self.brace_style_combo.currentIndexChanged.connect(self.on_brace_style_changed)
        self.break_max_code_length_checkbox.toggled.connect(self.on_break_max_code_length_changed)
        self.watch_controls(
            self.brace_style_combo,
            self.tab_size_spin,
            self.min_conditional_indent_combo,
            self.break_max_code_length_checkbox,
            self.max_code_length_spin,
            self.break_after_logical_checkbox,
        )
        self.settings_changed.connect(self.update_demo)
        self.on_brace_style_changed()
        self.on_break_max_code_length_changed()

    def on_brace_style_changed(self, *_args) -> None:
        item = self.styles_model.get_style(self.brace_style_combo.currentIndex())
        if item is not None:
            self.brace_style_label.setText(item.description)

    def on_break_max_code_length_changed(self, *_args) -> None:
        enabled = self.break_max_code_length_checkbox.isChecked()
        self.max_code_length_spin.setEnabled(enabled)
        self.break_after_logical_checkbox.setEnabled(enabled)

    def do_load(self) -> None:
        config = self._store.code_formatter()
        row = self.styles_model.find_style_row(config.base_style)
        if row >= 0:
            self.brace_style_combo.setCurrentIndex(row)
        else:
            _LOGGER.info("Unknown formatter base style %r; keeping current selection", config.base_style)
        self.tab_size_spin.setValue(config.tab_width)
        indent_row = self.min_conditional_indent_combo.findData(config.min_conditional_indent)
        if indent_row >= 0:
            self.min_conditional_indent_combo.setCurrentIndex(indent_row)
        self.break_max_code_length_checkbox.setChecked(config.break_max_code_length)
        self.max_code_length_spin.setValue(config.max_code_length)
        self.break_after_logical_checkbox.setChecked(config.break_after_logical)
        self.on_break_max_code_length_changed()
        self.update_demo()

    def do_save(self) -> None:
        config = self._store.code_formatter()
        self.update_code_formatter(config)
        self.update_line_break_options(config)
        config.save()

    def update_code_formatter(self, config: CodeFormatterConfig) -> None:
        item = self.styles_model.get_style(self.brace_style_combo.currentIndex())
        if item is not None:
            config.base_style = item.name
        config.tab_width = self.tab_size_spin.value()

    def update_line_break_options(self, config: CodeFormatterConfig) -> None:
        indent = self.min_conditional_indent_combo.currentData()
        if indent is not None:
            config.min_conditional_indent = int(indent)
        config.break_max_code_length = self.break_max_code_length_checkbox.isChecked()
        config.max_code_length = self.max_code_length_spin.value()
        config.break_after_logical = self.break_after_logical_checkbox.isChecked()

    def update_demo(self) -> None:
        demo_path = self._demo_source_resolver()
        if demo_path is None:
            _LOGGER.debug("Formatter demo source not found; preview not refreshed")
            return
        try:
            content = Path(demo_path).read_bytes()
        except OSError as exc:
            _LOGGER.debug("Could not read formatter demo source %s: %s", demo_path, exc)
            return

        formatter = CodeFormatterConfig()
        self.update_code_formatter(formatter)
        self.update_line_break_options(formatter)
        command, working_dir = self._store.environment().formatter_invocation()
        output = self._runner(command, working_dir, formatter.get_arguments(), content)
        self.demo_edit.setPlainText(output.decode("utf-8", errors="replace"))
