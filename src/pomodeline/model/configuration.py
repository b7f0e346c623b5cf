# -*- test-case-name: pomodeline.model.test.test_configuration -*-
from __future__ import annotations

from dataclasses import dataclass

from .boundaries import ConfigurationError
from .clock import Duration


@dataclass(frozen=True)
class Configuration:
    """
    Durations and display preferences, read whenever a session or break
    begins.  Replace the whole object to change them between sessions.
    """

    workMinutes: int = 25
    breakMinutes: int = 5
    longBreakMinutes: int = 30
    showSeconds: bool = False
    promptForTask: bool = True

    def __post_init__(self) -> None:
        for name in ["workMinutes", "breakMinutes", "longBreakMinutes"]:
            value = getattr(self, name)
            # bool is an int, but True minutes is never what anyone meant
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if value < 1:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        for name in ["showSeconds", "promptForTask"]:
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false")

    @property
    def workDuration(self) -> Duration:
        return self.workMinutes * 60.0

    @property
    def breakDuration(self) -> Duration:
        return self.breakMinutes * 60.0

    @property
    def longBreakDuration(self) -> Duration:
        return self.longBreakMinutes * 60.0
