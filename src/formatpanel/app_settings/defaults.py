from __future__ import annotations

from typing import Any

SETTINGS_SCHEMA_VERSION = 1

DEFAULT_BASE_STYLE = "LLVM"
DEFAULT_TAB_WIDTH = 4
DEFAULT_MIN_CONDITIONAL_INDENT = 1
DEFAULT_MAX_CODE_LENGTH = 80

TAB_WIDTH_RANGE = (1, 16)
MAX_CODE_LENGTH_RANGE = (50, 200)
MIN_CONDITIONAL_INDENT_RANGE = (0, 3)


def build_default_settings() -> dict[str, Any]:
    return {
        "settings_schema_version": SETTINGS_SCHEMA_VERSION,
        "log_level": "INFO",
        "formatter_base_style": DEFAULT_BASE_STYLE,
        "formatter_tab_width": DEFAULT_TAB_WIDTH,
        "formatter_min_conditional_indent": DEFAULT_MIN_CONDITIONAL_INDENT,
        "formatter_break_max_code_length": False,
        "formatter_max_code_length": DEFAULT_MAX_CODE_LENGTH,
        "formatter_break_after_logical": False,
        # Empty means "look up clang-format on PATH".
        "formatter_path": "",
    }
