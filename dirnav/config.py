"""Browsing preferences persisted as JSON in the user config directory.

Two keys are understood: ``double_click_seconds`` (click-activation window)
and ``show_hidden`` (whether dot-files are listed). Unknown keys are kept
untouched on save; invalid values read back as defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .navigation.clicks import DOUBLE_CLICK_SECONDS

logger = logging.getLogger(__name__)

APP_NAME = "dirnav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Preferences:
    """Browsing preferences with their defaults."""

    double_click_seconds: float = DOUBLE_CLICK_SECONDS
    show_hidden: bool = True


def _read_config_object() -> dict[str, object]:
    """Return the top-level JSON object, or ``{}`` if absent or unusable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_double_click_seconds(value: object) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DOUBLE_CLICK_SECONDS
    return float(value)


def _coerce_show_hidden(value: object) -> bool:
    return value if isinstance(value, bool) else True


def load_preferences() -> Preferences:
    """Load preferences, substituting defaults for missing or invalid keys."""
    data = _read_config_object()
    return Preferences(
        double_click_seconds=_coerce_double_click_seconds(data.get("double_click_seconds")),
        show_hidden=_coerce_show_hidden(data.get("show_hidden")),
    )


def save_preferences(
    *,
    double_click_seconds: float | None = None,
    show_hidden: bool | None = None,
) -> Preferences:
    """Merge the given values into the stored preferences and write them back.

    ``None`` leaves a key as stored. A non-positive window is rejected with
    ``ValueError``. Write failures are logged and leave the file as it was;
    the merged preferences are returned either way.
    """
    if double_click_seconds is not None and double_click_seconds <= 0:
        raise ValueError(f"double_click_seconds must be positive: {double_click_seconds!r}")

    data = _read_config_object()
    current = load_preferences()
    if double_click_seconds is not None:
        current = replace(current, double_click_seconds=float(double_click_seconds))
        data["double_click_seconds"] = current.double_click_seconds
    if show_hidden is not None:
        current = replace(current, show_hidden=bool(show_hidden))
        data["show_hidden"] = current.show_hidden

    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save preferences to %s: %s", CONFIG_PATH, exc)
    return current


__all__ = [
    "CONFIG_PATH",
    "Preferences",
    "load_preferences",
    "save_preferences",
]
