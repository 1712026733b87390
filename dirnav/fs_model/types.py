"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PARENT_MARKER = Path("..")
PARENT_LABEL = ".. (parent)"


def has_parent(path: Path) -> bool:
    """Return whether ``path`` has a parent distinct from itself."""
    return path.parent != path


def safe_is_dir(path: Path) -> bool:
    """Return ``Path.is_dir`` for ``path`` or ``False`` on probe failure."""
    try:
        return path.is_dir()
    except OSError:
        return False


def safe_is_file(path: Path) -> bool:
    """Return ``Path.is_file`` for ``path`` or ``False`` on probe failure."""
    try:
        return path.is_file()
    except OSError:
        return False


@dataclass(frozen=True)
class Entry:
    """One listing row: a real child path or the synthetic parent marker.

    Directory/file classification is queried from the filesystem on each
    access rather than stored.
    """

    path: Path

    @property
    def is_parent_marker(self) -> bool:
        return self.path == PARENT_MARKER

    @property
    def is_dir(self) -> bool:
        if self.is_parent_marker:
            return False
        return safe_is_dir(self.path)

    @property
    def is_file(self) -> bool:
        if self.is_parent_marker:
            return False
        return safe_is_file(self.path)

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    @property
    def display_name(self) -> str:
        if self.is_parent_marker:
            return PARENT_LABEL
        return self.name


PARENT_ENTRY = Entry(PARENT_MARKER)

Listing = tuple[Entry, ...]


__all__ = [
    "PARENT_MARKER",
    "PARENT_LABEL",
    "PARENT_ENTRY",
    "Entry",
    "Listing",
    "has_parent",
    "safe_is_dir",
    "safe_is_file",
]
