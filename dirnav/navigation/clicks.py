"""Single- versus double-click arbitration for listing entries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

DOUBLE_CLICK_SECONDS = 0.5


class ClickIntent(Enum):
    SELECT = "select"
    ACTIVATE = "activate"


@dataclass(frozen=True)
class ClickArbiter:
    """Timing state machine classifying each entry click.

    A click arriving less than ``window_seconds`` after the previous click
    activates, whichever entry either click landed on. The last-click instant
    is overwritten on every click and is never reset by navigation.
    """

    window_seconds: float = DOUBLE_CLICK_SECONDS
    last_click_instant: float | None = None

    def click(self, now: float) -> tuple[ClickIntent, ClickArbiter]:
        """Classify a click at monotonic time ``now`` and return the next arbiter."""
        last = self.last_click_instant
        if last is not None and (now - last) < self.window_seconds:
            intent = ClickIntent.ACTIVATE
        else:
            intent = ClickIntent.SELECT
        return intent, replace(self, last_click_instant=now)


__all__ = [
    "DOUBLE_CLICK_SECONDS",
    "ClickIntent",
    "ClickArbiter",
]
