# -*- test-case-name: pomodeline.model.test.test_countdown -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from twisted.internet.interfaces import IDelayedCall, IReactorTime

from .clock import Clock, Duration, ReactorClock

TimerHandle = IDelayedCall


class TimerService(Protocol):
    """
    Schedules one-shot deferred actions.
    """

    def schedule(self, duration: Duration, onFire: Callable[[], None]) -> TimerHandle:
        """
        Run C{onFire} once, C{duration} seconds from now, unless the returned
        handle is cancelled first.
        """

    def cancel(self, handle: TimerHandle | None) -> None:
        """
        Prevent C{handle} from firing.  Does nothing if it already fired or
        was already cancelled.
        """

    def remaining(self, handle: TimerHandle | None) -> Duration:
        """
        How long until C{handle} fires?  Zero if it is due, fired, cancelled,
        or absent.
        """


@dataclass
class ReactorTimerService:
    """
    L{TimerService} built on L{IReactorTime.callLater}; a delayed call's
    C{getTime} is the scheduled fire instant.
    """

    reactor: IReactorTime
    clock: Clock | None = None

    def __post_init__(self) -> None:
        if self.clock is None:
            self.clock = ReactorClock(self.reactor)

    def schedule(self, duration: Duration, onFire: Callable[[], None]) -> TimerHandle:
        if duration < 0:
            raise ValueError(f"cannot schedule {duration!r} seconds in the past")
        return self.reactor.callLater(duration, onFire)

    def cancel(self, handle: TimerHandle | None) -> None:
        if handle is not None and handle.active():
            handle.cancel()

    def remaining(self, handle: TimerHandle | None) -> Duration:
        if handle is None or not handle.active():
            return 0.0
        assert self.clock is not None
        return max(0.0, self.clock.difference(handle.getTime(), self.clock.now()))


_ReactorTimerServiceImplements: type[TimerService] = ReactorTimerService
