"""Pure path algebra turning navigation targets into destinations."""

from __future__ import annotations

from pathlib import Path

from ..fs_model import PARENT_MARKER, Entry, has_parent

NavigationTarget = Entry | Path | str


def parent_or_self(current: Path) -> Path:
    """Return the parent of ``current``, or ``current`` itself at a root."""
    return current.parent if has_parent(current) else current


def resolve_target(target: NavigationTarget, current: Path) -> Path:
    """Resolve ``target`` against ``current`` without touching the filesystem.

    The parent marker maps to the parent directory (``current`` at a root),
    relative targets are joined onto ``current`` and absolute targets are
    returned unchanged. The result need not exist.
    """
    if isinstance(target, Entry):
        target = target.path
    target = Path(target)
    if target == PARENT_MARKER:
        return parent_or_self(current)
    if not target.is_absolute():
        return current / target
    return target


__all__ = [
    "NavigationTarget",
    "parent_or_self",
    "resolve_target",
]
