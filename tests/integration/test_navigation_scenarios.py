"""End-to-end browsing scenarios driven purely through navigation events."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dirnav.fs_model import PARENT_ENTRY, PARENT_MARKER, list_directory
from dirnav.navigation import EntryClicked, GoUp, NavigationState, RootSelected, handle_event, initial_state


class BrowsingScenarioTests(unittest.TestCase):
    def test_parent_click_from_home_directory_lists_siblings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            home = Path(tmp).resolve() / "home"
            (home / "alice").mkdir(parents=True)
            (home / "carol").mkdir()
            (home / "bob").mkdir()
            (home / "shared.txt").write_text("", encoding="utf-8")

            state = initial_state(home / "alice", roots_provider=lambda: [])
            state = handle_event(state, EntryClicked(PARENT_MARKER), now=0.0)

        self.assertEqual(state.current_directory, home)
        self.assertEqual(state.listing[0], PARENT_ENTRY)
        self.assertEqual(
            [entry.display_name for entry in state.listing[1:]],
            ["alice", "bob", "carol", "shared.txt"],
        )

    def test_go_up_to_root_then_pick_another_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            data = Path(tmp).resolve() / "mnt" / "data"
            data.mkdir(parents=True)
            (data / "backup").mkdir()
            top = Path(Path.cwd().anchor)
            roots = [top, data]

            state = NavigationState(current_directory=top, listing=list_directory(top))
            state = handle_event(state, GoUp(), roots_provider=lambda: roots)
            self.assertTrue(state.roots_visible)
            self.assertEqual(state.current_directory, top)

            state = handle_event(state, RootSelected(data), roots_provider=lambda: roots)

            self.assertEqual(state.current_directory, data)
            self.assertFalse(state.roots_visible)
            self.assertEqual(state.listing, (PARENT_ENTRY, *list_directory(data)[1:]))
            self.assertEqual(state.listing[1].display_name, "backup")

    def test_walk_up_until_root_picker_appears(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            start = Path(tmp).resolve()
            state = initial_state(start, roots_provider=lambda: [])

            for _ in range(len(start.parts) - 1):
                state = handle_event(state, GoUp(), roots_provider=lambda: [Path("/")])
                self.assertFalse(state.roots_visible)

            self.assertEqual(state.current_directory, Path(start.anchor))
            self.assertNotIn(PARENT_ENTRY, state.listing)

            state = handle_event(state, GoUp(), roots_provider=lambda: [Path("/")])

        self.assertTrue(state.roots_visible)
        self.assertEqual(state.current_directory, Path(start.anchor))


if __name__ == "__main__":
    unittest.main()
