from __future__ import annotations

import os
from pathlib import Path


def _app_roaming_dir() -> Path:
    override = os.environ.get("FORMATPANEL_HOME")
    if override:
        return Path(override)
    appdata = os.environ.get("APPDATA")
    base_dir = Path(appdata) if appdata else (Path.home() / "AppData" / "Roaming")
    return base_dir / "formatpanel"


def get_settings_file_path() -> Path:
    return _app_roaming_dir() / "settings.json"


def get_crash_logs_file_path() -> Path:
    return _app_roaming_dir() / "crash_tracebacks.log"
