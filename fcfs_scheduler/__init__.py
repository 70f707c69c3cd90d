"""
FCFS scheduler package.

Simulates First-Come First-Served CPU scheduling over a list of process
records and renders a Gantt chart plus a per-process summary table.
"""

from .errors import (
    EmptyScheduleError,
    InvalidInputError,
    NotComputedError,
    ParseError,
    SchedulerError,
)
from .models import ProcessRecord
from .scheduler import Scheduler

__all__ = [
    "EmptyScheduleError",
    "InvalidInputError",
    "NotComputedError",
    "ParseError",
    "ProcessRecord",
    "Scheduler",
    "SchedulerError",
    "cli",
]
