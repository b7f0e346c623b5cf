# -*- test-case-name: pomodeline.model.test.test_status -*-
from __future__ import annotations

from .boundaries import InvalidStateError, SessionState
from .clock import Clock, Instant
from .configuration import Configuration
from .countdown import TimerHandle, TimerService
from .formatting import formatDuration


def buildStatus(
    state: SessionState,
    timerHandle: TimerHandle | None,
    lastCompletionTimestamp: Instant | None,
    configuration: Configuration,
    timers: TimerService,
    clock: Clock,
) -> str:
    """
    Compute the status indicator for C{state}.

    Working and break countdowns honor C{configuration.showSeconds}; overtime
    always shows seconds.
    """
    match state:
        case SessionState.Idle:
            return ""
        case SessionState.Working:
            remaining = formatDuration(
                timers.remaining(timerHandle), configuration.showSeconds
            )
            return f"<W {remaining}> "
        case SessionState.Break:
            remaining = formatDuration(
                timers.remaining(timerHandle), configuration.showSeconds
            )
            return f"<B {remaining}> "
        case SessionState.Overtime:
            if lastCompletionTimestamp is None:
                elapsed = "0"
            else:
                elapsed = formatDuration(
                    clock.difference(clock.now(), lastCompletionTimestamp),
                    True,
                )
            return f"<O +{elapsed}> "
    raise InvalidStateError(f"no status for {state!r}")
