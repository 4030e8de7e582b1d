"""Shared application settings helpers."""

from .code_formatter import CodeFormatterConfig
from .coercion import coerce_bool, migrate_settings
from .defaults import build_default_settings
from .environment import EnvironmentConfig
from .paths import get_crash_logs_file_path, get_settings_file_path
from .store import SettingsStore

__all__ = [
    "CodeFormatterConfig",
    "EnvironmentConfig",
    "SettingsStore",
    "build_default_settings",
    "coerce_bool",
    "migrate_settings",
    "get_crash_logs_file_path",
    "get_settings_file_path",
]
