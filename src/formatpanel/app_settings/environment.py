from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

WINDOWS_FORMATTER_NAME = "clang-format.exe"
FORMATTER_NAME = "clang-format"


def default_app_dir() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def default_formatter_path() -> str:
    return shutil.which(FORMATTER_NAME) or FORMATTER_NAME


@dataclass(slots=True)
class EnvironmentConfig:
    formatter_path: str = ""
    app_dir: Path = field(default_factory=default_app_dir)

    @classmethod
    def from_settings(cls, settings: dict[str, Any], app_dir: Path | None = None) -> "EnvironmentConfig":
        s = settings if isinstance(settings, dict) else {}
        configured = str(s.get("formatter_path", "") or "").strip()
        return cls(
            formatter_path=configured or default_formatter_path(),
            app_dir=app_dir if app_dir is not None else default_app_dir(),
        )

    def formatter_invocation(self, os_name: str | None = None) -> tuple[str, Path | None]:
        """Return the formatter executable and the directory to run it in.

        Windows builds ship clang-format next to the application. Elsewhere the
        configured path is used and the process runs in the directory holding it.
        """
        platform = os_name if os_name is not None else os.name
        if platform == "nt":
            return str(self.app_dir / WINDOWS_FORMATTER_NAME), self.app_dir
        command = self.formatter_path or FORMATTER_NAME
        resolved = shutil.which(command) or command
        if os.sep not in resolved and "/" not in resolved:
            # Bare name not found on PATH; leave the lookup to the OS.
            return resolved, None
        # Relative paths would be looked up again inside the working directory.
        absolute = Path(os.path.abspath(resolved))
        return str(absolute), absolute.parent
