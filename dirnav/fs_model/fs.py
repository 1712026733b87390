"""Filesystem scanning and display ordering for directory listings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import PARENT_ENTRY, Entry, Listing, has_parent

logger = logging.getLogger(__name__)


def listing_sort_key(entry: Entry) -> tuple[bool, str]:
    """Directories before files, then name in codepoint order."""
    return (not entry.is_dir, entry.name)


def list_directory_children(
    directory: Path,
    show_hidden: bool = True,
) -> tuple[list[Entry], Exception | None]:
    """List immediate children of ``directory`` in display order.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned, in which case ``children`` is empty.
    """
    children: list[Entry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if not show_hidden and child.name.startswith("."):
                    continue
                children.append(Entry(directory / child.name))
    except OSError as exc:
        return [], exc

    children.sort(key=listing_sort_key)
    return children, None


def list_directory(directory: Path, show_hidden: bool = True) -> Listing:
    """Build the display listing for ``directory``.

    The parent marker comes first whenever ``directory`` has a parent. An
    unreadable directory yields a listing holding only that marker (if any).
    """
    rows: list[Entry] = []
    if has_parent(directory):
        rows.append(PARENT_ENTRY)

    children, scan_error = list_directory_children(directory, show_hidden)
    if scan_error is not None:
        logger.debug("Cannot list %s: %s", directory, scan_error)
    rows.extend(children)
    return tuple(rows)


__all__ = [
    "listing_sort_key",
    "list_directory_children",
    "list_directory",
]
