# -*- test-case-name: pomodeline.model.test.test_countdown -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from twisted.internet.interfaces import IReactorTime

Instant = float
"POSIX timestamp, in seconds."

Duration = float
"A span of time, in seconds."


class Clock(Protocol):
    def now(self) -> Instant:
        """
        What time is it?
        """

    def difference(self, a: Instant, b: Instant) -> Duration:
        """
        Signed C{a - b}.
        """

    def isBefore(self, a: Instant, b: Instant) -> bool:
        """
        Does C{a} happen strictly before C{b}?
        """


@dataclass
class ReactorClock:
    """
    A L{Clock} that reads the time from a Twisted reactor, so that a
    L{twisted.internet.task.Clock} can stand in for it under test.
    """

    reactor: IReactorTime

    def now(self) -> Instant:
        return self.reactor.seconds()

    def difference(self, a: Instant, b: Instant) -> Duration:
        return a - b

    def isBefore(self, a: Instant, b: Instant) -> bool:
        return a < b


_ReactorClockImplements: type[Clock] = ReactorClock
