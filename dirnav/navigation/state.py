"""Navigation state aggregate and its event reducer.

``handle_event`` is a pure ``(state, event) -> state`` transition apart from
filesystem reads and the optional launch side effect. It never raises for
filesystem or launch failures; those degrade into a smaller listing or a
diagnostic ``message``.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..fs_model import Entry, Listing, enumerate_roots, has_parent, list_directory, safe_is_dir, safe_is_file
from .clicks import DOUBLE_CLICK_SECONDS, ClickArbiter, ClickIntent
from .events import EntryClicked, GoUp, NavigationEvent, Refresh, RootSelected
from .launch import LaunchError, open_with_default_handler
from .paths import resolve_target

logger = logging.getLogger(__name__)

FALLBACK_START = Path(os.curdir)

RootsProvider = Callable[[], list[Path]]
FileOpener = Callable[[Path], LaunchError | None]


@dataclass(frozen=True)
class NavigationState:
    """Browsing location plus the listing rebuilt at the last refresh.

    ``roots_visible`` set means the root picker is shown; the current
    directory and listing are kept untouched meanwhile.
    """

    current_directory: Path
    listing: Listing
    roots: tuple[Path, ...] = ()
    roots_visible: bool = False
    clicks: ClickArbiter = field(default_factory=ClickArbiter)
    show_hidden: bool = True
    message: str = ""


def default_start_directory() -> Path:
    """Return the working directory, or ``.`` when it is unavailable."""
    try:
        return Path.cwd()
    except OSError:
        return FALLBACK_START


def _absolute_or_self(path: Path) -> Path:
    try:
        return path.absolute()
    except OSError:
        return path


def initial_state(
    start: Path | None = None,
    *,
    show_hidden: bool = True,
    double_click_seconds: float = DOUBLE_CLICK_SECONDS,
    roots_provider: RootsProvider = enumerate_roots,
) -> NavigationState:
    """Build the startup state browsing ``start`` (default: working directory)."""
    directory = _absolute_or_self(start) if start is not None else default_start_directory()
    return NavigationState(
        current_directory=directory,
        listing=list_directory(directory, show_hidden),
        roots=tuple(roots_provider()),
        clicks=ClickArbiter(window_seconds=double_click_seconds),
        show_hidden=show_hidden,
    )


def browse(state: NavigationState, directory: Path) -> NavigationState:
    """Move to ``directory``, relist it and hide the root picker."""
    return replace(
        state,
        current_directory=directory,
        listing=list_directory(directory, state.show_hidden),
        roots_visible=False,
    )


def _entry_clicked(
    state: NavigationState,
    event: EntryClicked,
    now: float,
    open_file: FileOpener,
) -> NavigationState:
    intent, clicks = state.clicks.click(now)
    state = replace(state, clicks=clicks)
    entry = Entry(Path(event.path))
    destination = resolve_target(entry, state.current_directory)

    if intent is ClickIntent.ACTIVATE and not entry.is_parent_marker and safe_is_file(destination):
        error = open_file(destination)
        if error is not None:
            state = replace(state, message=str(error))

    if entry.is_parent_marker and destination == state.current_directory:
        return state
    if safe_is_dir(destination):
        return browse(state, destination)
    logger.debug("Selected %s", destination)
    return state


def _go_up(state: NavigationState, roots_provider: RootsProvider) -> NavigationState:
    current = state.current_directory
    if has_parent(current):
        return browse(state, current.parent)
    return replace(state, roots=tuple(roots_provider()), roots_visible=True)


def handle_event(
    state: NavigationState,
    event: NavigationEvent,
    *,
    now: float | None = None,
    open_file: FileOpener = open_with_default_handler,
    roots_provider: RootsProvider = enumerate_roots,
) -> NavigationState:
    """Apply one navigation event and return the resulting state.

    Args:
        state: State before the event; never mutated.
        event: One of ``EntryClicked``, ``Refresh``, ``GoUp``, ``RootSelected``.
        now: Monotonic click instant; defaults to ``time.monotonic()``.
        open_file: Default-program launcher used on activation of a file.
        roots_provider: Root enumerator consulted when the root picker opens.
    """
    state = replace(state, message="")
    if isinstance(event, EntryClicked):
        return _entry_clicked(state, event, time.monotonic() if now is None else now, open_file)
    if isinstance(event, Refresh):
        return replace(state, listing=list_directory(state.current_directory, state.show_hidden))
    if isinstance(event, GoUp):
        return _go_up(state, roots_provider)
    if isinstance(event, RootSelected):
        return browse(state, Path(event.root))
    raise TypeError(f"unsupported navigation event: {event!r}")


__all__ = [
    "FALLBACK_START",
    "NavigationState",
    "default_start_directory",
    "initial_state",
    "browse",
    "handle_event",
]
