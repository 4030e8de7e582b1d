from __future__ import annotations

import sys
from pathlib import Path


def resolve_asset_path(*parts: str) -> Path | None:
    for root in _candidate_asset_roots():
        candidate = root.joinpath(*parts)
        if candidate.exists():
            return candidate
    return None


def resolve_demo_source_path() -> Path | None:
    return resolve_asset_path("codes", "formatdemo.cpp")


def _candidate_asset_roots() -> list[Path]:
    roots: list[Path] = []

    # PyInstaller onefile extracts bundled data into _MEIPASS.
    meipass = getattr(sys, "_MEIPASS", "")
    if meipass:
        roots.append(Path(meipass) / "assets")

    # Dist folder layout: executable next to assets/.
    executable = Path(sys.executable).resolve()
    roots.append(executable.parent / "assets")

    # Package data: <package>/assets/.
    ui_dir = Path(__file__).resolve().parent
    roots.append(ui_dir.parent / "assets")

    return roots
