from unittest import TestCase

from pomodeline.model.formatting import (
    formatDuration,
    formatMinuteSecond,
    toMinuteSecond,
)


class FormattingTests(TestCase):
    def test_toMinuteSecond(self) -> None:
        self.assertEqual(toMinuteSecond(125), (2, 5))
        self.assertEqual(toMinuteSecond(0), (0, 0))
        self.assertEqual(toMinuteSecond(59), (0, 59))
        self.assertEqual(toMinuteSecond(60), (1, 0))
        self.assertEqual(toMinuteSecond(1500), (25, 0))

    def test_negative(self) -> None:
        with self.assertRaises(ValueError):
            toMinuteSecond(-1)

    def test_format(self) -> None:
        self.assertEqual(formatMinuteSecond(2, 5, False), "2")
        self.assertEqual(formatMinuteSecond(2, 5, True), "2:5")
        self.assertEqual(formatMinuteSecond(0, 0, True), "0:0")

    def test_formatDuration(self) -> None:
        """
        Fractional seconds are truncated and negative durations clamp to
        zero.
        """
        self.assertEqual(formatDuration(125.9, True), "2:5")
        self.assertEqual(formatDuration(1499.5, False), "24")
        self.assertEqual(formatDuration(-3.0, True), "0:0")
