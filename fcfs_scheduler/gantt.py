from __future__ import annotations

from typing import Dict, List, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ProcessRecord, ScheduledSlice

PALETTE = ["red", "green", "yellow", "blue", "magenta", "cyan"]
MAX_CHART_WIDTH = 72


def render_gantt(processes: Sequence[ProcessRecord]) -> str:
    """
    Plain-text Gantt strip: process ids between bars on the first line and
    cumulative burst totals, starting at 0, on the second.

    Only burst times and order are used, so idle gaps between arrivals are not
    shown; see build_rich_gantt for a timeline that includes them.
    """
    if not processes:
        return "(no processes)"

    bars = "| " + " | ".join(p.pid for p in processes) + " |"

    marks = ["0"]
    elapsed = 0
    for p in processes:
        elapsed += p.burst_time
        marks.append(str(elapsed))

    return "\n".join([bars, "   ".join(marks)])


def gantt_rows(slices: List[ScheduledSlice], max_width: int = MAX_CHART_WIDTH) -> tuple[Text, Text, str]:
    """
    Lay out the bar row, the label row and the time marks for a timeline.

    Times map to columns one-to-one until the makespan exceeds max_width, after
    which they are scaled down to fit. Positions are tracked in columns, so a
    zero-burst process still gets one cell and the bars after it stay lined up
    with their marks.
    """
    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            pid_to_color[pid] = PALETTE[len(pid_to_color) % len(PALETTE)]
        return pid_to_color[pid]

    makespan = max(sl.end_time for sl in slices)

    def column(t: int) -> int:
        if makespan <= max_width:
            return t
        return t * max_width // makespan

    timeline = Text()
    labels = Text()
    time_marks = "0"
    cursor = 0

    def add_mark(t: int) -> str:
        # right-align the mark on the column where the last cell ends
        needed = cursor + 1 - len(time_marks)
        mark = str(t)
        if needed > len(mark):
            return f"{mark:>{needed}}"
        return " " + mark

    for sl in slices:
        start_col = max(column(sl.start_time), cursor)
        idle_gap = start_col - cursor
        if idle_gap > 0:
            timeline.append("." * idle_gap, style="dim")
            labels.append(" " * idle_gap)
            cursor = start_col
            time_marks += add_mark(sl.start_time)

        width = max(1, column(sl.end_time) - start_col)
        timeline.append(" " * width, style=f"on {pid_color(sl.pid)}")
        labels.append(sl.pid[:width].ljust(width), style="bold")
        cursor += width
        time_marks += add_mark(sl.end_time)

    return timeline, labels, time_marks


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel with a colored Gantt chart and a string of time marks.
    Idle CPU time is drawn as dots.
    """
    if not slices:
        return Panel("No processes", title="Gantt Chart"), ""

    timeline, labels, time_marks = gantt_rows(slices)

    grid = Table.grid(padding=(0, 0))
    grid.add_row(timeline)
    grid.add_row(labels)

    return Panel.fit(grid, title="Gantt Chart"), time_marks
