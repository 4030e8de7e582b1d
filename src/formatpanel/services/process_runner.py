from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from ..logging_utils import get_logger

_LOGGER = get_logger(__name__)


def run_and_get_output(
    command: str,
    working_dir: str | Path | None,
    arguments: Sequence[str],
    input_bytes: bytes,
) -> bytes:
    """Run ``command`` with ``input_bytes`` on stdin and return what it wrote to stdout.

    Blocks until the process exits. A process that cannot be started yields
    empty output; a non-zero exit status is logged and its stdout returned as is.
    """
    cwd = str(working_dir) if working_dir and Path(working_dir).is_dir() else None
    argv = [str(command), *[str(arg) for arg in arguments]]
    _LOGGER.debug("Running %s (cwd=%s)", argv, cwd)
    try:
        completed = subprocess.run(
            argv,
            input=input_bytes,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
        )
    except OSError as exc:
        _LOGGER.warning("Could not start %s: %s", command, exc)
        return b""
    if completed.returncode != 0:
        stderr_text = (completed.stderr or b"").decode("utf-8", errors="replace").strip()
        _LOGGER.warning("%s exited with code %s: %s", command, completed.returncode, stderr_text)
    return completed.stdout or b""
