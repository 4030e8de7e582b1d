from __future__ import annotations

from typing import Any

from ..logging_utils import normalize_log_level_name
from .defaults import (
    DEFAULT_BASE_STYLE,
    DEFAULT_MAX_CODE_LENGTH,
    DEFAULT_MIN_CONDITIONAL_INDENT,
    DEFAULT_TAB_WIDTH,
    MAX_CODE_LENGTH_RANGE,
    MIN_CONDITIONAL_INDENT_RANGE,
    SETTINGS_SCHEMA_VERSION,
    TAB_WIDTH_RANGE,
    build_default_settings,
)


def coerce_bool(value, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off", ""}:
            return False
    return default


def coerce_int_clamped(value: object, default: int, min_value: int, max_value: int) -> int:
    try:
        num = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        num = default
    return max(min_value, min(max_value, num))


def coerce_style_name(value: object, default: str = DEFAULT_BASE_STYLE) -> str:
    text = str(value or "").strip()
    return text or default


def migrate_settings(settings: dict[str, Any]) -> dict[str, Any]:
    """Fill in missing keys and clamp formatter values to what the panel can show.

    Unknown keys are kept untouched. Style names are not checked against the
    style list, only stripped.
    """
    current = dict(settings) if isinstance(settings, dict) else {}
    defaults = build_default_settings()
    for key, value in defaults.items():
        current.setdefault(key, value)

    current["log_level"] = normalize_log_level_name(current.get("log_level"))
    current["formatter_base_style"] = coerce_style_name(current.get("formatter_base_style"))
    current["formatter_tab_width"] = coerce_int_clamped(
        current.get("formatter_tab_width"), DEFAULT_TAB_WIDTH, *TAB_WIDTH_RANGE
    )
    current["formatter_min_conditional_indent"] = coerce_int_clamped(
        current.get("formatter_min_conditional_indent"),
        DEFAULT_MIN_CONDITIONAL_INDENT,
        *MIN_CONDITIONAL_INDENT_RANGE,
    )
    current["formatter_break_max_code_length"] = coerce_bool(
        current.get("formatter_break_max_code_length"), False
    )
    current["formatter_max_code_length"] = coerce_int_clamped(
        current.get("formatter_max_code_length"), DEFAULT_MAX_CODE_LENGTH, *MAX_CODE_LENGTH_RANGE
    )
    current["formatter_break_after_logical"] = coerce_bool(current.get("formatter_break_after_logical"), False)
    current["formatter_path"] = str(current.get("formatter_path", "") or "").strip()
    current["settings_schema_version"] = SETTINGS_SCHEMA_VERSION
    return current
