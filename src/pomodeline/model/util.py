# -*- test-case-name: pomodeline.model.test.test_util -*-
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from dateutil.relativedelta import relativedelta
from twisted.logger import Logger

log = Logger()


def intervalSummary(seconds: int) -> str:
    """
    Produce a human-readable summary for a number of seconds.
    """
    delta = relativedelta(seconds=seconds)
    segments = [
        "%d %s" % (value, attr if value > 1 else attr[:-1])
        for attr in [
            "days",
            "hours",
            "minutes",
            "seconds",
        ]
        if (value := getattr(delta, attr))
    ]
    if not segments:
        segments = ["0 seconds"]
    if len(segments) > 1:
        segments[-2:] = [f"{segments[-2]} and {segments[-1]}"]
    return ", ".join(segments)


@contextmanager
def showFailures() -> Iterator[None]:
    """
    Log a traceback if the wrapped operation fails, then let the exception
    continue on its way.
    """
    try:
        yield
    except BaseException:
        log.failure("unhandled error")
        raise
