"""Filesystem root discovery for the root picker."""

from __future__ import annotations

import string
import sys
from collections.abc import Callable
from pathlib import Path, PureWindowsPath

POSIX_ROOT = Path("/")


def _probe_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def drive_candidates() -> list[str]:
    """Return every drive-root spelling ``A:\\`` .. ``Z:\\`` in ascending order."""
    return [str(PureWindowsPath(f"{letter}:\\")) for letter in string.ascii_uppercase]


def enumerate_roots(
    *,
    multi_root: bool | None = None,
    exists: Callable[[Path], bool] | None = None,
) -> list[Path]:
    """Return currently reachable filesystem roots.

    On multi-root systems each drive letter is probed in ascending order and
    kept only when it exists; probe failures drop the candidate. Single-root
    systems always report ``/``. Results are never cached.
    """
    if multi_root is None:
        multi_root = sys.platform == "win32"
    if not multi_root:
        return [POSIX_ROOT]

    probe = exists or _probe_exists
    roots: list[Path] = []
    for candidate in drive_candidates():
        path = Path(candidate)
        try:
            reachable = probe(path)
        except OSError:
            reachable = False
        if reachable:
            roots.append(path)
    return roots


def is_current_root(root: Path, current: Path) -> bool:
    """Return whether ``current`` lies under ``root``."""
    return current.is_relative_to(root)


__all__ = [
    "POSIX_ROOT",
    "drive_candidates",
    "enumerate_roots",
    "is_current_root",
]
