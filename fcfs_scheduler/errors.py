from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error raised by the scheduler package."""


class InvalidInputError(SchedulerError, ValueError):
    """A process was submitted with an empty id or a negative time."""


class ParseError(SchedulerError, ValueError):
    """Raw text or a workload entry could not be converted to a process."""


class EmptyScheduleError(SchedulerError):
    """A report or average was requested before any process was added."""


class NotComputedError(SchedulerError):
    """Averages were requested while some process has no computed times."""
