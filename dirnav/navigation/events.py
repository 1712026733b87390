"""Navigation events emitted by a presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EntryClicked:
    """A listing row was clicked; ``path`` may be the parent marker."""

    path: Path


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class GoUp:
    pass


@dataclass(frozen=True)
class RootSelected:
    root: Path


NavigationEvent = EntryClicked | Refresh | GoUp | RootSelected


__all__ = [
    "EntryClicked",
    "Refresh",
    "GoUp",
    "RootSelected",
    "NavigationEvent",
]
