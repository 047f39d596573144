"""Tests for focus ring arithmetic and interaction-state defaults."""

from __future__ import annotations

import unittest

from lazyirc.state import FOCUS_RING, FocusTarget, InteractionState, Mode, next_focus, prev_focus


class FocusRingTests(unittest.TestCase):
    def test_ring_order_is_messages_input_channels(self) -> None:
        self.assertEqual(FOCUS_RING, (FocusTarget.MESSAGES, FocusTarget.INPUT, FocusTarget.CHANNELS))

    def test_next_and_prev_wrap_around(self) -> None:
        self.assertIs(next_focus(FocusTarget.CHANNELS), FocusTarget.MESSAGES)
        self.assertIs(prev_focus(FocusTarget.MESSAGES), FocusTarget.CHANNELS)

    def test_three_steps_return_to_start(self) -> None:
        for focus in FocusTarget:
            forward = focus
            backward = focus
            for _ in range(3):
                forward = next_focus(forward)
                backward = prev_focus(backward)
            self.assertIs(forward, focus)
            self.assertIs(backward, focus)

    def test_next_then_prev_is_identity(self) -> None:
        for focus in FocusTarget:
            self.assertIs(prev_focus(next_focus(focus)), focus)


class InteractionStateDefaultsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        state = InteractionState()
        self.assertIs(state.focus, FocusTarget.MESSAGES)
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertFalse(state.should_exit)
        self.assertTrue(state.dirty)


if __name__ == "__main__":
    unittest.main()
