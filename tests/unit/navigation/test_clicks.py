"""Tests for single- versus double-click arbitration."""

from __future__ import annotations

import unittest

from dirnav.navigation import ClickArbiter, ClickIntent


class ClickArbiterTests(unittest.TestCase):
    def test_first_click_selects(self) -> None:
        intent, arbiter = ClickArbiter().click(10.0)

        self.assertIs(intent, ClickIntent.SELECT)
        self.assertEqual(arbiter.last_click_instant, 10.0)

    def test_second_click_inside_window_activates(self) -> None:
        _intent, arbiter = ClickArbiter().click(0.0)
        intent, _arbiter = arbiter.click(0.3)

        self.assertIs(intent, ClickIntent.ACTIVATE)

    def test_second_click_outside_window_selects(self) -> None:
        _intent, arbiter = ClickArbiter().click(0.0)
        intent, _arbiter = arbiter.click(0.6)

        self.assertIs(intent, ClickIntent.SELECT)

    def test_window_boundary_is_exclusive(self) -> None:
        _intent, arbiter = ClickArbiter().click(1.0)
        intent, _arbiter = arbiter.click(1.5)

        self.assertIs(intent, ClickIntent.SELECT)

    def test_every_click_overwrites_last_instant(self) -> None:
        arbiter = ClickArbiter()
        intents = []
        for now in (0.0, 0.4, 0.8, 2.0):
            intent, arbiter = arbiter.click(now)
            intents.append(intent)

        self.assertEqual(
            intents,
            [ClickIntent.SELECT, ClickIntent.ACTIVATE, ClickIntent.ACTIVATE, ClickIntent.SELECT],
        )
        self.assertEqual(arbiter.last_click_instant, 2.0)

    def test_custom_window(self) -> None:
        _intent, arbiter = ClickArbiter(window_seconds=0.2).click(0.0)
        intent, _arbiter = arbiter.click(0.3)

        self.assertIs(intent, ClickIntent.SELECT)

    def test_click_returns_new_arbiter(self) -> None:
        arbiter = ClickArbiter()
        arbiter.click(5.0)

        self.assertIsNone(arbiter.last_click_instant)


if __name__ == "__main__":
    unittest.main()
