from __future__ import annotations

from typing import List, Sequence

from .errors import EmptyScheduleError, NotComputedError
from .models import ProcessRecord, ScheduledSlice, SystemMetrics


def summarize_process_metrics(processes: Sequence[ProcessRecord]) -> dict:
    """
    Return the mean waiting and turnaround times over all processes.

    Raises EmptyScheduleError for an empty sequence and NotComputedError when
    any process has not been through the timing pass yet.
    """
    if not processes:
        raise EmptyScheduleError("No processes to average; add at least one process")

    pending = [p.pid for p in processes if not p.computed]
    if pending:
        raise NotComputedError(f"Times not computed for: {', '.join(pending)}")

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
    }


def compute_system_metrics(timeline: List[ScheduledSlice]) -> SystemMetrics:
    """
    Compute CPU busy/idle time, throughput and utilization from a timeline.
    """
    if not timeline:
        return SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)

    makespan = max(slice_.end_time for slice_ in timeline)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in timeline)

    throughput = len(timeline) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=makespan - cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )
