# -*- test-case-name: pomodeline.model.test.test_notifications -*-
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Callable, Iterator

from twisted.logger import Logger

from .boundaries import NotificationDispatcher, SessionEvent

log = Logger()

Hook = Callable[[SessionEvent], object]


@dataclass(frozen=True)
class Subscription:
    """
    Token returned by L{HookDispatcher.subscribe}; hand it back to
    L{HookDispatcher.unsubscribe} to stop receiving the event.
    """

    dispatcher: HookDispatcher = field(compare=False, repr=False)
    event: SessionEvent
    serial: int

    def unsubscribe(self) -> None:
        self.dispatcher.unsubscribe(self)


@dataclass
class HookDispatcher:
    """
    Deliver each L{SessionEvent} to any number of independent subscribers, in
    the order they subscribed.
    """

    _hooks: dict[SessionEvent, dict[Subscription, Hook]] = field(
        default_factory=lambda: {event: {} for event in SessionEvent}
    )
    _serials: Iterator[int] = field(default_factory=count)

    def subscribe(self, event: SessionEvent, hook: Hook) -> Subscription:
        subscription = Subscription(self, event, next(self._serials))
        self._hooks[event][subscription] = hook
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """
        Stop delivering to C{subscription}'s hook.  Unsubscribing twice is
        harmless.
        """
        self._hooks[subscription.event].pop(subscription, None)

    def subscriberCount(self, event: SessionEvent) -> int:
        return len(self._hooks[event])

    def notify(self, event: SessionEvent) -> None:
        """
        Call every hook subscribed to C{event}.  A hook that raises is logged
        and the rest are still called.
        """
        log.debug("notify {event}", event=event.value)
        # copy, since hooks may unsubscribe themselves
        for hook in list(self._hooks[event].values()):
            try:
                hook(event)
            except Exception:
                log.failure(
                    "hook {hook!r} failed handling {event}",
                    hook=hook,
                    event=event.value,
                )


_HookDispatcherImplements: type[NotificationDispatcher] = HookDispatcher
