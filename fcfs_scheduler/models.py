from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ProcessRecord:
    pid: str
    burst_time: int
    arrival_time: int
    waiting_time: Optional[int] = None
    turnaround_time: Optional[int] = None

    @property
    def computed(self) -> bool:
        return self.waiting_time is not None and self.turnaround_time is not None


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: str
    start_time: int
    end_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float
