"""Command-line front door for dirnav.

Parses CLI options, resolves the start directory and prints its listing.
``--interactive`` runs a line-based adapter that dispatches navigation events;
``--save`` persists the preference flags given alongside it.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .config import load_preferences, save_preferences
from .fs_model import Entry, is_current_root
from .navigation import (
    EntryClicked,
    GoUp,
    NavigationEvent,
    NavigationState,
    Refresh,
    RootSelected,
    handle_event,
    initial_state,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PROMPT = "> "
HELP_TEXT = "<n> click  o <n> open  u up  r refresh  d <n> drive/root  q quit"
ROOTS_HELP_TEXT = "<n> or d <n> pick drive/root  q quit"


def _positive_float(value: str) -> float:
    """argparse type for positive float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def entry_row(index: int, entry: Entry) -> str:
    """Format one listing row; directories carry a trailing separator."""
    suffix = os.sep if entry.is_dir else ""
    return f"{index:>4}  {entry.display_name}{suffix}"


def render_listing(state: NavigationState) -> str:
    """Render the current directory header followed by every listing row."""
    out = [f"Directory: {state.current_directory}"]
    out.extend(entry_row(idx, entry) for idx, entry in enumerate(state.listing))
    return "\n".join(out) + "\n"


def render_roots(state: NavigationState) -> str:
    """Render the root picker, bracketing the root holding the current directory."""
    out = ["Select Drive:"]
    for idx, root in enumerate(state.roots):
        label = str(root)
        if is_current_root(root, state.current_directory):
            label = f"[{label}]"
        out.append(f"{idx:>4}  {label}")
    return "\n".join(out) + "\n"


def parse_command(line: str, state: NavigationState) -> list[NavigationEvent] | None:
    """Translate one input line into navigation events.

    Returns ``None`` for quit and an empty list for unrecognized input. While
    the root picker is shown, row numbers address roots, not listing rows.
    """
    parts = line.split()
    if not parts:
        return []
    head = parts[0].lower()
    if head == "q":
        return None
    if head == "u":
        return [GoUp()]
    if head == "r":
        return [Refresh()]

    def pick(items: tuple, raw: str):
        try:
            idx = int(raw)
        except ValueError:
            return None
        return items[idx] if 0 <= idx < len(items) else None

    if head == "d" and len(parts) == 2:
        root = pick(state.roots, parts[1])
        return [RootSelected(root)] if root is not None else []
    if state.roots_visible:
        if len(parts) == 1:
            root = pick(state.roots, parts[0])
            return [RootSelected(root)] if root is not None else []
        return []
    if head == "o" and len(parts) == 2:
        entry = pick(state.listing, parts[1])
        return [EntryClicked(entry.path), EntryClicked(entry.path)] if entry is not None else []
    if len(parts) == 1:
        entry = pick(state.listing, parts[0])
        return [EntryClicked(entry.path)] if entry is not None else []
    return []


def run_interactive(
    state: NavigationState,
    stdin: TextIO,
    stdout: TextIO,
    monotonic: Callable[[], float] = time.monotonic,
) -> NavigationState:
    """Read commands from ``stdin`` until EOF or ``q``; return the final state."""
    stdout.write(render_listing(state))
    stdout.write(HELP_TEXT + "\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return state
        events = parse_command(line, state)
        if events is None:
            return state
        for event in events:
            state = handle_event(state, event, now=monotonic())
        if state.message:
            stdout.write(state.message + "\n")
        if state.roots_visible:
            stdout.write(render_roots(state))
            stdout.write(ROOTS_HELP_TEXT + "\n")
        else:
            stdout.write(render_listing(state))


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print (or interactively browse) a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Browse directories from the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--roots", action="store_true", help="Print filesystem roots and exit.")
    parser.add_argument("--interactive", "-i", action="store_true", help="Browse with line commands.")
    hidden_group = parser.add_mutually_exclusive_group()
    hidden_group.add_argument(
        "--hide-hidden", dest="show_hidden", action="store_const", const=False, help="Skip dot-files in listings."
    )
    hidden_group.add_argument(
        "--show-hidden", dest="show_hidden", action="store_const", const=True, help="List dot-files."
    )
    parser.add_argument(
        "--double-click-seconds",
        type=_positive_float,
        default=None,
        help="Max interval between clicks that opens a file.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Persist --hide-hidden/--show-hidden and --double-click-seconds as defaults.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    start: Path | None = None
    if args.path is not None or default_path is not None:
        start = Path(args.path or default_path)
        if not start.exists():
            raise SystemExit(f"Path not found: {start}")
        if not start.is_dir():
            raise SystemExit(f"Not a directory: {start}")

    if args.save:
        if args.show_hidden is None and args.double_click_seconds is None:
            raise SystemExit("--save needs --hide-hidden, --show-hidden or --double-click-seconds.")
        preferences = save_preferences(
            double_click_seconds=args.double_click_seconds,
            show_hidden=args.show_hidden,
        )
    else:
        preferences = load_preferences()

    show_hidden = preferences.show_hidden if args.show_hidden is None else args.show_hidden
    double_click_seconds = (
        preferences.double_click_seconds if args.double_click_seconds is None else args.double_click_seconds
    )
    state = initial_state(start, show_hidden=show_hidden, double_click_seconds=double_click_seconds)

    if args.roots:
        sys.stdout.write(render_roots(state))
        return
    if args.interactive:
        run_interactive(state, sys.stdin, sys.stdout)
        return
    sys.stdout.write(render_listing(state))


if __name__ == "__main__":
    main()
