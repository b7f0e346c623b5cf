# -*- test-case-name: pomodeline.model.test.test_explanations -*-
"""
Long-form descriptions of the current state of a session.
"""

from __future__ import annotations

from textwrap import dedent
from typing import TYPE_CHECKING

from .boundaries import InvalidStateError, SessionState
from .util import intervalSummary

if TYPE_CHECKING:
    from .session import SessionMachine

IDLE = """
       You're idle right now.  No need to do anything in particular.
       """

WORKING = """
          You're working on “{task}”; {remaining} to go.
          """

OVERTIME = """
           You finished “{task}” {elapsed} ago.  Time for a break!
           """

ON_BREAK = """
           You're taking a break for the next {remaining}.
           """

TALLY = """
        Completed: {completed}.  Interrupted: {interrupted}.
        """


def describeSession(machine: SessionMachine) -> str:
    """
    Explain where C{machine} is in the work/break cycle, in words.
    """
    task = machine.taskDescription or "something"
    remaining = intervalSummary(int(machine.timers.remaining(machine.activeTimer)))
    match machine.state:
        case SessionState.Idle:
            text = IDLE.format()
        case SessionState.Working:
            text = WORKING.format(task=task, remaining=remaining)
        case SessionState.Overtime:
            completedAt = machine.lastCompletionTimestamp
            elapsed = (
                0
                if completedAt is None
                else int(machine.clock.difference(machine.clock.now(), completedAt))
            )
            text = OVERTIME.format(task=task, elapsed=intervalSummary(elapsed))
        case SessionState.Break:
            text = ON_BREAK.format(remaining=remaining)
        case _:
            raise InvalidStateError(f"cannot describe {machine.state!r}")
    tally = TALLY.format(
        completed=machine.counters.completedCount,
        interrupted=machine.counters.interruptedCount,
    )
    return dedent(text).strip() + "\n" + dedent(tally).strip()
