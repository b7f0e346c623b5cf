# -*- test-case-name: pomodeline.model.test.test_session -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from twisted.internet.interfaces import IReactorTime
from twisted.internet.task import LoopingCall
from twisted.logger import Logger

from .boundaries import (
    InvalidStateError,
    InvalidTransitionError,
    NoPrompt,
    NoStatusSink,
    NotificationDispatcher,
    SessionEvent,
    SessionState,
    StatusSink,
    TaskPrompt,
)
from .clock import Clock, Instant, ReactorClock
from .configuration import Configuration
from .countdown import ReactorTimerService, TimerHandle, TimerService
from .notifications import Hook, HookDispatcher, Subscription
from .status import buildStatus

log = Logger()


@dataclass
class Counters:
    """
    Process-wide tallies.  Only ever incremented.
    """

    completedCount: int = 0
    interruptedCount: int = 0


@dataclass
class SessionMachine:
    """
    The one work/break session for this user, and everything that moves it
    from one L{SessionState} to the next.

    Commands (L{start}, L{interrupt}, L{startBreak}, L{autoDispatch}) and the
    timer callbacks must all run on the reactor thread.
    """

    configuration: Configuration
    timers: TimerService
    clock: Clock
    dispatcher: NotificationDispatcher
    prompt: TaskPrompt = field(default_factory=NoPrompt)
    sink: StatusSink = field(default_factory=NoStatusSink)
    counters: Counters = field(default_factory=Counters)

    taskDescription: str | None = None
    lastCompletionTimestamp: Instant | None = None

    _state: SessionState = SessionState.Idle
    _activeTimer: TimerHandle | None = None
    _status: str = ""
    _ticker: LoopingCall | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def activeTimer(self) -> TimerHandle | None:
        return self._activeTimer

    @property
    def status(self) -> str:
        """
        The display string as of the last L{refreshStatus}.
        """
        return self._status

    # -- commands ----------------------------------------------------------

    def wantsTask(self, override: bool = False) -> bool:
        """
        Would L{start} ask the L{TaskPrompt} for a description, given no
        explicit one?
        """
        return self.configuration.promptForTask and (
            not override or self.taskDescription is None
        )

    def start(self, taskDescription: str | None = None, override: bool = False) -> None:
        """
        Begin working, from idle or from a break.

        @param taskDescription: what the user is working on; if not given,
            the prompt is asked when L{wantsTask}, otherwise the previous
            task carries over.
        @param override: keep the previous task rather than asking again.
        """
        self._require("start", {SessionState.Idle, SessionState.Break})
        if taskDescription is None and self.wantsTask(override):
            taskDescription = self.prompt.ask()
        if taskDescription is not None:
            self.taskDescription = taskDescription
        # starting from a break cuts it short without a break-ended event
        self._dropTimer()
        self._transition(SessionState.Working)
        self._schedule(self.configuration.workDuration, self._workCompleted)
        self.dispatcher.notify(SessionEvent.sessionStarted)
        self.refreshStatus()

    def interrupt(self) -> None:
        """
        Stop working or end a break early; either way, go idle.
        """
        self._require("interrupt", {SessionState.Working, SessionState.Break})
        wasWorking = self._state is SessionState.Working
        self._dropTimer()
        self._transition(SessionState.Idle)
        if wasWorking:
            self.counters.interruptedCount += 1
            self.dispatcher.notify(SessionEvent.sessionInterrupted)
        else:
            self.dispatcher.notify(SessionEvent.breakEnded)
        self.refreshStatus()

    def startBreak(self, long: bool = False) -> None:
        """
        Take a break, once work is over or nothing is running.
        """
        self._require(
            "startBreak",
            {SessionState.Overtime, SessionState.Idle},
            "Not complete",
        )
        self._transition(SessionState.Break)
        self.dispatcher.notify(SessionEvent.breakStarted)
        duration = (
            self.configuration.longBreakDuration
            if long
            else self.configuration.breakDuration
        )
        self._schedule(duration, self._breakCompleted)
        self.refreshStatus()

    def autoDispatch(self, longBreak: bool = False, override: bool = False) -> None:
        """
        Do the obvious next thing for the current state.
        """
        match self._state:
            case SessionState.Idle:
                self.start(override=override)
            case SessionState.Working:
                self.interrupt()
            case SessionState.Overtime:
                self.startBreak(longBreak)
            case SessionState.Break:
                self.interrupt()
            case _:
                raise InvalidStateError(f"cannot dispatch from {self._state!r}")

    # -- display -----------------------------------------------------------

    def refreshStatus(self) -> str:
        """
        Recompute the status string, cache it, and publish it.
        """
        self._status = buildStatus(
            self._state,
            self._activeTimer,
            self.lastCompletionTimestamp,
            self.configuration,
            self.timers,
            self.clock,
        )
        self.sink.publish(self._status)
        return self._status

    def startTicking(self, reactor: IReactorTime, interval: float = 1.0) -> LoopingCall:
        """
        Refresh the status every C{interval} seconds until L{stopTicking}.
        """
        assert self._ticker is None, "already ticking"
        ticker = LoopingCall(self.refreshStatus)
        ticker.clock = reactor
        ticker.start(interval, now=True)
        self._ticker = ticker
        return ticker

    def stopTicking(self) -> None:
        ticker, self._ticker = self._ticker, None
        if ticker is not None and ticker.running:
            ticker.stop()

    def subscribe(self, event: SessionEvent, hook: Hook) -> Subscription:
        """
        Convenience for subscribing to this session's L{HookDispatcher}.
        """
        if not isinstance(self.dispatcher, HookDispatcher):
            raise TypeError(f"{self.dispatcher!r} does not take subscriptions")
        return self.dispatcher.subscribe(event, hook)

    # -- timer callbacks ---------------------------------------------------

    def _workCompleted(self) -> None:
        self._activeTimer = None
        self.counters.completedCount += 1
        self.lastCompletionTimestamp = self.clock.now()
        self._transition(SessionState.Overtime)
        self.dispatcher.notify(SessionEvent.sessionCompleted)
        self.refreshStatus()

    def _breakCompleted(self) -> None:
        self._activeTimer = None
        self._transition(SessionState.Idle)
        self.dispatcher.notify(SessionEvent.breakEnded)
        self.refreshStatus()

    # -- internals ---------------------------------------------------------

    def _require(
        self, operation: str, valid: set[SessionState], message: str = ""
    ) -> None:
        if self._state not in set(SessionState):
            raise InvalidStateError(f"{operation}() found {self._state!r}")
        if self._state not in valid:
            log.warn(
                "rejected {operation}() from {state}",
                operation=operation,
                state=self._state.value,
            )
            raise InvalidTransitionError(operation, self._state, message)

    def _transition(self, newState: SessionState) -> None:
        log.info(
            "{old} -> {new} (task={task!r}, completed={completed}, "
            "interrupted={interrupted})",
            old=self._state.value,
            new=newState.value,
            task=self.taskDescription,
            completed=self.counters.completedCount,
            interrupted=self.counters.interruptedCount,
        )
        self._state = newState

    def _schedule(self, duration: float, onFire: Callable[[], None]) -> None:
        assert self._activeTimer is None, "a timer is already running"
        expectedState = self._state

        def fired() -> None:
            # a cancelled handle never fires, but a stale one must not act
            if self._activeTimer is not handle or self._state is not expectedState:
                log.warn("ignoring stale timer for {state}", state=expectedState.value)
                return
            onFire()

        handle = self.timers.schedule(duration, fired)
        self._activeTimer = handle

    def _dropTimer(self) -> None:
        timer, self._activeTimer = self._activeTimer, None
        self.timers.cancel(timer)


def createSession(
    reactor: IReactorTime,
    configuration: Configuration | None = None,
    prompt: TaskPrompt | None = None,
    sink: StatusSink | None = None,
    dispatcher: NotificationDispatcher | None = None,
) -> SessionMachine:
    """
    Build a L{SessionMachine} whose timers and clock run on C{reactor}.
    """
    clock = ReactorClock(reactor)
    machine = SessionMachine(
        configuration=configuration if configuration is not None else Configuration(),
        timers=ReactorTimerService(reactor, clock),
        clock=clock,
        dispatcher=dispatcher if dispatcher is not None else HookDispatcher(),
        prompt=prompt if prompt is not None else NoPrompt(),
        sink=sink if sink is not None else NoStatusSink(),
    )
    machine.refreshStatus()
    return machine
