"""Navigation engine: path resolution, click arbitration and state transitions.

This package intentionally has no UI concerns. Presentation code dispatches
events into ``handle_event`` and renders the returned ``NavigationState``.
"""

from __future__ import annotations

from .clicks import DOUBLE_CLICK_SECONDS, ClickArbiter, ClickIntent
from .events import EntryClicked, GoUp, NavigationEvent, Refresh, RootSelected
from .launch import LaunchError, default_open_command, open_with_default_handler
from .paths import NavigationTarget, parent_or_self, resolve_target
from .state import NavigationState, browse, default_start_directory, handle_event, initial_state

__all__ = [
    "DOUBLE_CLICK_SECONDS",
    "ClickArbiter",
    "ClickIntent",
    "EntryClicked",
    "GoUp",
    "NavigationEvent",
    "Refresh",
    "RootSelected",
    "LaunchError",
    "default_open_command",
    "open_with_default_handler",
    "NavigationTarget",
    "parent_or_self",
    "resolve_target",
    "NavigationState",
    "browse",
    "default_start_directory",
    "handle_event",
    "initial_state",
]
