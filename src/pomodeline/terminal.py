# -*- test-case-name: pomodeline.test_terminal -*-
"""
A line-oriented terminal front end for a L{SessionMachine}.
"""

from __future__ import annotations

import sys
from typing import Callable

import click
from twisted.internet.interfaces import IReactorTime
from twisted.logger import globalLogBeginner, textFileLogObserver
from twisted.protocols.basic import LineReceiver

import pomodeline
from .model.boundaries import (
    ConfigurationError,
    InvalidTransitionError,
    SessionEvent,
    SessionState,
)
from .model.explanations import describeSession
from .model.session import SessionMachine, createSession
from .model.storage import defaultConfigurationFile, loadConfiguration
from .model.util import showFailures

HELP = """\
start [TASK]   start working (from idle or a break)
start! [TASK]  start working, keeping the previous task
interrupt      stop working, or end a break early
break          take a short break once work is over
long           take a long break once work is over
go             do the obvious next thing
status         show the status line
describe       explain what's going on
quit           exit

At the Task: prompt, an empty line cancels and quit exits."""


class TerminalSession(LineReceiver):
    """
    Reads commands a line at a time and drives a L{SessionMachine}.  Acts as
    its L{TaskPrompt} and L{StatusSink} too.
    """

    delimiter = b"\n"
    machine: SessionMachine
    whenDone: Callable[[], None] | None = None

    def __init__(self) -> None:
        self._pendingTask = ""
        self._awaitingTask: Callable[[], None] | None = None
        self._lastShown: str | None = None

    def attach(self, machine: SessionMachine) -> None:
        self.machine = machine
        for event in SessionEvent:
            machine.subscribe(event, self._announce)

    # TaskPrompt

    def ask(self) -> str:
        task, self._pendingTask = self._pendingTask, ""
        return task

    # StatusSink

    def publish(self, displayString: str) -> None:
        if displayString == self._lastShown or self.transport is None:
            return
        self._lastShown = displayString
        self.sendLine((displayString.strip() or "<idle>").encode("utf-8"))

    def _announce(self, event: SessionEvent) -> None:
        if self.transport is not None:
            self.sendLine(f"* {event.value}".encode("utf-8"))

    # LineReceiver

    def lineReceived(self, line: bytes) -> None:
        text = line.decode("utf-8", "replace").strip()
        with showFailures():
            if self._awaitingTask is not None:
                action, self._awaitingTask = self._awaitingTask, None
                if text == "quit":
                    self.transport.loseConnection()
                elif not text:
                    self.sendLine(b"cancelled")
                else:
                    self._pendingTask = text
                    self._run(action)
                return
            if text:
                self._dispatch(text)

    def _dispatch(self, text: str) -> None:
        command, _, argument = text.partition(" ")
        argument = argument.strip()
        machine = self.machine
        match command:
            case "start" | "start!":
                override = command == "start!"
                if argument:
                    self._run(lambda: machine.start(argument, override))
                else:
                    self._withTask(lambda: machine.start(override=override), override)
            case "interrupt":
                self._run(machine.interrupt)
            case "break":
                self._run(lambda: machine.startBreak(False))
            case "long":
                self._run(lambda: machine.startBreak(True))
            case "go":
                if machine.state is SessionState.Idle:
                    self._withTask(machine.autoDispatch, False)
                else:
                    self._run(machine.autoDispatch)
            case "status":
                # force a repaint even if nothing changed
                self._lastShown = None
                machine.refreshStatus()
            case "describe":
                self.sendLine(describeSession(machine).encode("utf-8"))
            case "help":
                self.sendLine(HELP.encode("utf-8"))
            case "quit":
                self.transport.loseConnection()
            case _:
                self.sendLine(
                    f"unknown command {command!r}; try 'help'".encode("utf-8")
                )

    def _withTask(self, action: Callable[[], None], override: bool) -> None:
        """
        Run C{action}, first asking for a task if the machine will want one.
        """
        if self.machine.state in {SessionState.Idle, SessionState.Break} and (
            self.machine.wantsTask(override)
        ):
            self._awaitingTask = action
            self.transport.write(b"Task: ")
        else:
            self._run(action)

    def _run(self, action: Callable[[], None]) -> None:
        try:
            action()
        except InvalidTransitionError as ite:
            self.sendLine(str(ite).encode("utf-8"))

    def connectionLost(self, reason: object) -> None:
        self.machine.stopTicking()
        if self.whenDone is not None:
            self.whenDone()


def run(reactor: IReactorTime, configurationFile: str) -> None:
    from twisted.internet.stdio import StandardIO

    configuration = loadConfiguration(configurationFile)
    terminal = TerminalSession()
    machine = createSession(reactor, configuration, prompt=terminal, sink=terminal)
    terminal.attach(machine)
    StandardIO(terminal, reactor=reactor)
    terminal.whenDone = reactor.stop  # type:ignore[attr-defined]
    machine.startTicking(reactor)


@click.command()
@click.version_option(version=pomodeline.__version__, prog_name="pomodeline")
@click.option(
    "--config",
    "configurationFile",
    default=defaultConfigurationFile,
    show_default=True,
    help="JSON file with durations and display preferences.",
)
@click.option("--verbose", is_flag=True, help="Log transitions to stderr.")
def main(configurationFile: str, verbose: bool) -> None:
    """Work/break timer with a status line."""
    from twisted.internet import reactor

    if verbose:
        globalLogBeginner.beginLoggingTo([textFileLogObserver(sys.stderr)])
    try:
        run(reactor, configurationFile)
    except ConfigurationError as ce:
        click.echo(f"{configurationFile}: {ce}", err=True)
        sys.exit(1)
    reactor.run()  # type:ignore[attr-defined]
