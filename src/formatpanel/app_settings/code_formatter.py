from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .coercion import coerce_bool, coerce_int_clamped, coerce_style_name
from .defaults import (
    DEFAULT_BASE_STYLE,
    DEFAULT_MAX_CODE_LENGTH,
    DEFAULT_MIN_CONDITIONAL_INDENT,
    DEFAULT_TAB_WIDTH,
    MAX_CODE_LENGTH_RANGE,
    MIN_CONDITIONAL_INDENT_RANGE,
    TAB_WIDTH_RANGE,
)

if TYPE_CHECKING:
    from .store import SettingsStore

DEMO_FILE_NAME = "formatdemo.cpp"


@dataclass(slots=True)
class CodeFormatterConfig:
    """Options passed to clang-format.

    A config returned by ``SettingsStore.code_formatter()`` is bound to that
    store and can be persisted with ``save()``. A config built directly is a
    transient snapshot, e.g. for rendering a preview.
    """

    base_style: str = DEFAULT_BASE_STYLE
    tab_width: int = DEFAULT_TAB_WIDTH
    min_conditional_indent: int = DEFAULT_MIN_CONDITIONAL_INDENT
    break_max_code_length: bool = False
    max_code_length: int = DEFAULT_MAX_CODE_LENGTH
    break_after_logical: bool = False
    store: SettingsStore | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_settings(cls, settings: dict[str, Any], store: SettingsStore | None = None) -> "CodeFormatterConfig":
        s = settings if isinstance(settings, dict) else {}
        return cls(
            base_style=coerce_style_name(s.get("formatter_base_style")),
            tab_width=coerce_int_clamped(s.get("formatter_tab_width"), DEFAULT_TAB_WIDTH, *TAB_WIDTH_RANGE),
            min_conditional_indent=coerce_int_clamped(
                s.get("formatter_min_conditional_indent"),
                DEFAULT_MIN_CONDITIONAL_INDENT,
                *MIN_CONDITIONAL_INDENT_RANGE,
            ),
            break_max_code_length=coerce_bool(s.get("formatter_break_max_code_length"), False),
            max_code_length=coerce_int_clamped(
                s.get("formatter_max_code_length"), DEFAULT_MAX_CODE_LENGTH, *MAX_CODE_LENGTH_RANGE
            ),
            break_after_logical=coerce_bool(s.get("formatter_break_after_logical"), False),
            store=store,
        )

    def sanitized(self) -> "CodeFormatterConfig":
        return CodeFormatterConfig(
            base_style=coerce_style_name(self.base_style),
            tab_width=coerce_int_clamped(self.tab_width, DEFAULT_TAB_WIDTH, *TAB_WIDTH_RANGE),
            min_conditional_indent=coerce_int_clamped(
                self.min_conditional_indent, DEFAULT_MIN_CONDITIONAL_INDENT, *MIN_CONDITIONAL_INDENT_RANGE
            ),
            break_max_code_length=bool(self.break_max_code_length),
            max_code_length=coerce_int_clamped(
                self.max_code_length, DEFAULT_MAX_CODE_LENGTH, *MAX_CODE_LENGTH_RANGE
            ),
            break_after_logical=bool(self.break_after_logical),
            store=self.store,
        )

    def apply_to_settings(self, settings: dict[str, Any]) -> None:
        clean = self.sanitized()
        settings["formatter_base_style"] = clean.base_style
        settings["formatter_tab_width"] = int(clean.tab_width)
        settings["formatter_min_conditional_indent"] = int(clean.min_conditional_indent)
        settings["formatter_break_max_code_length"] = bool(clean.break_max_code_length)
        settings["formatter_max_code_length"] = int(clean.max_code_length)
        settings["formatter_break_after_logical"] = bool(clean.break_after_logical)

    def continuation_indent_width(self) -> int:
        tab = int(self.tab_width)
        mode = int(self.min_conditional_indent)
        if mode == 0:
            return 0
        if mode == 2:
            return tab * 2
        if mode == 3:
            return max(1, tab // 2)
        return tab

    def style_options(self) -> list[tuple[str, str]]:
        clean = self.sanitized()
        column_limit = clean.max_code_length if clean.break_max_code_length else 0
        binary_breaks = "None" if clean.break_after_logical else "NonAssignment"
        return [
            ("BasedOnStyle", clean.base_style),
            ("IndentWidth", str(clean.tab_width)),
            ("TabWidth", str(clean.tab_width)),
            ("ContinuationIndentWidth", str(clean.continuation_indent_width())),
            ("ColumnLimit", str(column_limit)),
            ("BreakBeforeBinaryOperators", binary_breaks),
        ]

    def get_arguments(self) -> list[str]:
        inline_style = ", ".join(f"{key}: {value}" for key, value in self.style_options())
        return [f"--assume-filename={DEMO_FILE_NAME}", f"--style={{{inline_style}}}"]

    def save(self) -> None:
        if self.store is None:
            raise RuntimeError("CodeFormatterConfig is not bound to a settings store")
        self.store.save_code_formatter(self)
