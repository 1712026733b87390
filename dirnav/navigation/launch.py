"""Hand a file to the operating system's default-open facility."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class LaunchError(OSError):
    """Default handler for a path could not be started."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to open {path}: {cause}")
        self.path = path
        self.cause = cause


def default_open_command(path: Path, platform: str | None = None) -> list[str] | None:
    """Return the opener argv for ``path``, or ``None`` where ``os.startfile`` is used."""
    platform = platform or sys.platform
    if platform == "win32":
        return None
    if platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_with_default_handler(path: Path) -> LaunchError | None:
    """Start the default program for ``path`` without waiting on it.

    Returns the failure instead of raising it; failures are also logged.
    """
    command = default_open_command(path)
    try:
        if command is None:
            os.startfile(path)  # type: ignore[attr-defined]
        else:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
    except OSError as exc:
        error = LaunchError(path, exc)
        logger.warning("%s", error)
        return error
    logger.debug("Opened %s with default handler", path)
    return None


__all__ = [
    "LaunchError",
    "default_open_command",
    "open_with_default_handler",
]
