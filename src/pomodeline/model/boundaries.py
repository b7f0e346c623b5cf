from __future__ import annotations

from enum import Enum
from typing import Protocol


class SessionState(Enum):
    """
    The state of the one session a L{SessionMachine} tracks.
    """

    Idle = "Idle"
    Working = "Working"
    Overtime = "Overtime"
    Break = "Break"


class SessionEvent(Enum):
    """
    Named events delivered to hook subscribers.
    """

    sessionStarted = "session-started"
    sessionInterrupted = "session-interrupted"
    sessionCompleted = "session-completed"
    breakStarted = "break-started"
    breakEnded = "break-ended"


class PomodelineError(Exception):
    """
    Base class for errors raised by this package.
    """


class InvalidTransitionError(PomodelineError):
    """
    An operation was invoked from a state that does not permit it.
    """

    def __init__(self, operation: str, state: SessionState, message: str = "") -> None:
        self.operation = operation
        self.state = state
        super().__init__(
            message or f"{operation}() is not valid from {state.value}"
        )


class InvalidStateError(PomodelineError):
    """
    Internal state holds a value outside the canonical L{SessionState}s.
    """


class ConfigurationError(PomodelineError, ValueError):
    """
    A configuration value was out of range or of the wrong type.
    """


class TaskPrompt(Protocol):
    """
    Asks the user what they are about to work on.
    """

    def ask(self) -> str:
        """
        Synchronously return a task description.
        """


class StatusSink(Protocol):
    """
    Receives each freshly computed status string.
    """

    def publish(self, displayString: str) -> None:
        """
        Show C{displayString} to the user.
        """


class NotificationDispatcher(Protocol):
    """
    Delivers named events to whoever is interested.
    """

    def notify(self, event: SessionEvent) -> None:
        """
        Deliver C{event} to zero or more subscribers.
        """


class NoPrompt:
    """
    A L{TaskPrompt} for hosts that never ask; the task is always empty.
    """

    def ask(self) -> str:
        return ""


class NoStatusSink:
    """
    Do-nothing implementation of a L{StatusSink}.
    """

    def publish(self, displayString: str) -> None:
        ...
