# -*- test-case-name: pomodeline.model.test.test_formatting -*-
"""
Minute/second display of durations.

Seconds are deliberately not zero-padded: two minutes and five seconds is
C{"2:5"}.
"""

from __future__ import annotations


def toMinuteSecond(totalSeconds: int) -> tuple[int, int]:
    """
    Split a non-negative whole number of seconds into minutes and seconds.
    """
    if totalSeconds < 0:
        raise ValueError(f"{totalSeconds} is negative")
    return divmod(totalSeconds, 60)


def formatMinuteSecond(minutes: int, seconds: int, includeSeconds: bool) -> str:
    if not includeSeconds:
        return f"{minutes}"
    return f"{minutes}:{seconds}"


def formatDuration(duration: float, includeSeconds: bool) -> str:
    """
    Format a duration in (possibly fractional) seconds, truncating to whole
    seconds and clamping at zero.
    """
    minutes, seconds = toMinuteSecond(max(0, int(duration)))
    return formatMinuteSecond(minutes, seconds, includeSeconds)
