"""Unit tests for three-pane screen geometry."""

from __future__ import annotations

import unittest

from lazyirc.render import CHANNELS_WIDTH_PERCENT, MESSAGES_HEIGHT_PERCENT, MIN_REGION_ROWS, Rect, compute_layout


class ComputeLayoutTests(unittest.TestCase):
    def test_default_ratios(self) -> None:
        self.assertEqual(CHANNELS_WIDTH_PERCENT, 25)
        self.assertEqual(MESSAGES_HEIGHT_PERCENT, 95)

    def test_split_uses_25_75_and_95_5(self) -> None:
        layout = compute_layout(200, 100)
        self.assertEqual(layout.channels, Rect(col=0, row=0, width=50, height=100))
        self.assertEqual(layout.messages, Rect(col=50, row=0, width=150, height=95))
        self.assertEqual(layout.input, Rect(col=50, row=95, width=150, height=5))

    def test_regions_tile_the_screen(self) -> None:
        for width, height in ((80, 24), (81, 25), (13, 7), (1, 1)):
            layout = compute_layout(width, height)
            self.assertEqual(layout.channels.width + layout.messages.width, width)
            self.assertEqual(layout.messages.height + layout.input.height, height)
            self.assertEqual(layout.messages.width, layout.input.width)

    def test_default_split_is_plain_floor_on_small_screens(self) -> None:
        layout = compute_layout(80, 24)
        self.assertEqual(layout.messages.height, 22)
        self.assertEqual(layout.input.height, 2)

    def test_min_input_rows_is_opt_in(self) -> None:
        layout = compute_layout(80, 24, min_input_rows=MIN_REGION_ROWS)
        self.assertEqual(layout.input.height, 3)
        self.assertEqual(layout.messages.height, 21)

        tall = compute_layout(80, 100, min_input_rows=MIN_REGION_ROWS)
        self.assertEqual(tall, compute_layout(80, 100))

        short = compute_layout(80, 5, min_input_rows=MIN_REGION_ROWS)
        self.assertEqual(short, compute_layout(80, 5))

    def test_tiny_screens_do_not_raise(self) -> None:
        layout = compute_layout(0, 0)
        self.assertEqual(layout.channels.width, 0)
        self.assertEqual(layout.input.height, 0)
        layout = compute_layout(-3, -1)
        self.assertEqual((layout.width, layout.height), (0, 0))

    def test_out_of_range_percentages_fall_back_to_defaults(self) -> None:
        self.assertEqual(compute_layout(100, 100, channels_percent=0), compute_layout(100, 100))
        self.assertEqual(compute_layout(100, 100, messages_percent=150), compute_layout(100, 100))

    def test_custom_percentages(self) -> None:
        layout = compute_layout(100, 100, channels_percent=40, messages_percent=80)
        self.assertEqual(layout.channels.width, 40)
        self.assertEqual(layout.messages.height, 80)


if __name__ == "__main__":
    unittest.main()
