from __future__ import annotations

import logging
from typing import List, Optional

from .config import resolve_order
from .errors import EmptyScheduleError, InvalidInputError
from .gantt import render_gantt
from .metrics import compute_system_metrics, summarize_process_metrics
from .models import ProcessRecord, ScheduledSlice, SystemMetrics

logger = logging.getLogger(__name__)

ROW_FORMAT = "{:<10}{:<12}{:<14}{:<16}{:<14}"
RULE = "-" * 60
NOT_COMPUTED = "-"


def _validate(pid: str, burst_time: int, arrival_time: int) -> None:
    if not isinstance(pid, str) or not pid.strip():
        raise InvalidInputError("Process id must be a non-empty string")
    for name, value in (("burst_time", burst_time), ("arrival_time", arrival_time)):
        # bool is an int subclass but never a meaningful duration
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidInputError(f"{name} must be >= 0, got {value}")


class Scheduler:
    """
    Non-preemptive First-Come First-Served scheduler for a single CPU.

    Processes are kept in submission order. calculate_times() walks them in
    service order (submission order by default, or arrival time when
    constructed with order="arrival") and fills in waiting and turnaround
    times for each record.
    """

    def __init__(self, order: str = "submission"):
        self._order_func = resolve_order(order)
        self.order = order.lower()
        self.processes: List[ProcessRecord] = []

    def add_process(self, pid: str, burst_time: int, arrival_time: int) -> ProcessRecord:
        record = ProcessRecord(pid=pid, burst_time=burst_time, arrival_time=arrival_time)
        self.add_record(record)
        return record

    def add_record(self, record: ProcessRecord) -> None:
        _validate(record.pid, record.burst_time, record.arrival_time)
        self.processes.append(record)
        logger.debug(
            "Added %s (burst=%d, arrival=%d)", record.pid, record.burst_time, record.arrival_time
        )

    def service_sequence(self) -> List[ProcessRecord]:
        return self._order_func(self.processes)

    def calculate_times(self) -> None:
        """
        Fill in waiting and turnaround times with a single forward pass.

        Each process starts at max(clock, arrival) and runs to completion; the
        clock then advances by its burst time.
        """
        sequence = self.service_sequence()
        arrivals = [p.arrival_time for p in sequence]
        if arrivals != sorted(arrivals):
            logger.warning(
                "Serving processes in %s order, which differs from arrival order", self.order
            )

        current_time = 0
        for p in sequence:
            if current_time < p.arrival_time:
                current_time = p.arrival_time
            p.waiting_time = current_time - p.arrival_time
            current_time += p.burst_time
            p.turnaround_time = current_time - p.arrival_time

        logger.debug(
            "Computed times for %d processes (%s order), finished at t=%d",
            len(self.processes),
            self.order,
            current_time,
        )

    def timeline(self) -> List[ScheduledSlice]:
        """
        Start and end of every process's run, including idle gaps, without
        touching the records.
        """
        time = 0
        slices: List[ScheduledSlice] = []
        for p in self.service_sequence():
            start_time = max(time, p.arrival_time)
            time = start_time + p.burst_time
            slices.append(ScheduledSlice(pid=p.pid, start_time=start_time, end_time=time))
        return slices

    def gantt_chart(self) -> str:
        return render_gantt(self.service_sequence())

    def averages(self) -> dict:
        return summarize_process_metrics(self.processes)

    def system_metrics(self) -> SystemMetrics:
        return compute_system_metrics(self.timeline())

    def table_report(self) -> str:
        """
        Per-process table followed by average waiting and turnaround times.

        Processes that have not been through calculate_times() show "-" in
        their computed columns, and the averages then read "n/a".
        """
        if not self.processes:
            raise EmptyScheduleError("No processes to report; add at least one process")

        lines = [
            ROW_FORMAT.format("Process", "BurstTime", "ArrivalTime", "WaitingTime", "TurnaroundTime"),
            RULE,
        ]
        for p in self.processes:
            lines.append(
                ROW_FORMAT.format(
                    p.pid,
                    p.burst_time,
                    p.arrival_time,
                    _cell(p.waiting_time),
                    _cell(p.turnaround_time),
                )
            )

        if all(p.computed for p in self.processes):
            summary = self.averages()
            avg_waiting = f"{summary['avg_waiting']:.2f}"
            avg_turnaround = f"{summary['avg_turnaround']:.2f}"
        else:
            avg_waiting = avg_turnaround = "n/a"

        lines.append("")
        lines.append(f"Average Waiting Time: {avg_waiting}")
        lines.append(f"Average Turnaround Time: {avg_turnaround}")
        return "\n".join(lines)

    def report(self) -> str:
        return "\n\n".join([self.gantt_chart(), self.table_report()])


def _cell(value: Optional[int]) -> str:
    return NOT_COMPUTED if value is None else str(value)
