from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..logging_utils import get_logger
from .code_formatter import CodeFormatterConfig
from .coercion import migrate_settings
from .defaults import build_default_settings
from .environment import EnvironmentConfig
from .paths import get_settings_file_path

_LOGGER = get_logger(__name__)


def _atomic_write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)


class SettingsStore:
    """Persisted application settings, passed explicitly to the widgets that edit them."""

    def __init__(self, path: Path | None = None, settings: dict[str, Any] | None = None) -> None:
        self.path = Path(path) if path is not None else get_settings_file_path()
        self.settings: dict[str, Any] = migrate_settings(settings if settings is not None else build_default_settings())

    def load(self) -> dict[str, Any]:
        if not self.path.exists():
            _LOGGER.info("Settings file not found, using defaults: %s", self.path)
            self.settings = build_default_settings()
            return self.settings
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Could not read settings from %s: %s", self.path, exc)
            loaded = {}
        if not isinstance(loaded, dict):
            _LOGGER.warning("Settings file %s does not hold an object; using defaults", self.path)
            loaded = {}
        self.settings = migrate_settings(loaded)
        return self.settings

    def save(self) -> None:
        _atomic_write_json(self.path, self.settings)
        _LOGGER.debug("Settings saved to %s", self.path)

    def code_formatter(self) -> CodeFormatterConfig:
        return CodeFormatterConfig.from_settings(self.settings, store=self)

    def save_code_formatter(self, config: CodeFormatterConfig) -> None:
        config.apply_to_settings(self.settings)
        self.save()

    def environment(self) -> EnvironmentConfig:
        return EnvironmentConfig.from_settings(self.settings)
