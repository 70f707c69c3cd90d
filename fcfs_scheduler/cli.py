from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import LOG_LEVELS, SERVICE_ORDERS, SchedulerConfig, config_from_args
from .errors import EmptyScheduleError, InvalidInputError, ParseError, SchedulerError
from .gantt import build_rich_gantt
from .scheduler import Scheduler
from .workload_io import load_workload, parse_process_fields

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcfs-scheduler",
        description="First-Come First-Served CPU scheduling simulator.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Schedule the processes in a workload file.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    _add_order_argument(run_parser)
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the plain-text Gantt strip and table instead of rich tables.",
    )

    menu_parser = subparsers.add_parser(
        "menu",
        help="Interactive menu to add processes one at a time and schedule them.",
    )
    _add_order_argument(menu_parser)

    return parser


def _add_order_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--order",
        "-o",
        type=str.lower,
        choices=list(SERVICE_ORDERS),
        default="submission",
        help="Service order: submission (as entered) or arrival (sorted by arrival time). "
        "Default: submission.",
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_result(scheduler: Scheduler, console: Console) -> None:
    # Raises EmptyScheduleError before anything is printed.
    summary = scheduler.averages()
    timeline = scheduler.timeline()

    console.print(f"[bold]Service order:[/bold] {scheduler.order}")
    console.print()

    panel, time_marks = build_rich_gantt(timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks, highlight=False)

    console.print()

    slices = {id(p): sl for p, sl in zip(scheduler.service_sequence(), timeline)}

    headers = ["PID", "Burst", "Arrive", "Start", "Complete", "Wait", "Turnaround"]
    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        proc_table.add_column(h, justify="center" if h == "PID" else "right")

    for p in scheduler.processes:
        sl = slices[id(p)]
        proc_table.add_row(
            escape(p.pid),
            str(p.burst_time),
            str(p.arrival_time),
            str(sl.start_time),
            str(sl.end_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )

    console.print(proc_table)
    console.print()

    system = scheduler.system_metrics()
    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
    sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
    sys_table.add_row("Makespan", str(system.makespan))
    sys_table.add_row("CPU idle time", str(system.idle_time))
    sys_table.add_row("Throughput (proc/time)", f"{system.throughput:.3f}")
    sys_table.add_row("CPU utilization", f"{system.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def _run_workload(workload_path: Path, config: SchedulerConfig, plain: bool, console: Console) -> None:
    scheduler = Scheduler(order=config.order)
    for record in load_workload(workload_path):
        scheduler.add_record(record)
    scheduler.calculate_times()

    if plain:
        console.out(scheduler.report(), highlight=False)
    else:
        _print_result(scheduler, console)


def _interactive_menu(config: SchedulerConfig, console: Console) -> None:
    scheduler = Scheduler(order=config.order)

    while True:
        console.print(f"\n[bold cyan]FCFS Scheduler Menu[/bold cyan] [dim]({config.order} order, q to quit)[/dim]")
        console.print(f"[bold]Processes entered:[/bold] {len(scheduler.processes)}")
        console.print("  [yellow]1[/yellow]. Add process")
        console.print("  [yellow]2[/yellow]. Start scheduling")
        console.print("  [yellow]3[/yellow]. List processes")

        try:
            choice = input("Choice [1-3 or q]: ").strip().lower()
        except EOFError:
            return

        if choice in {"q", "quit", "exit"}:
            return

        if choice == "1":
            try:
                pid, burst_time, arrival_time = parse_process_fields(
                    input("Process ID: "),
                    input("Burst Time: "),
                    input("Arrival Time: "),
                )
                scheduler.add_process(pid, burst_time, arrival_time)
            except (ParseError, InvalidInputError) as exc:
                console.print(f"[red]Error: {escape(str(exc))}[/red]")
                continue
            except EOFError:
                return
            console.print(
                f"Added: Process ID = {escape(pid)}, Burst Time = {burst_time}, Arrival Time = {arrival_time}",
                highlight=False,
            )
            continue

        if choice == "2":
            scheduler.calculate_times()
            try:
                console.out(scheduler.report(), highlight=False)
            except EmptyScheduleError as exc:
                console.print(f"[red]Error: {escape(str(exc))}[/red]")
            continue

        if choice == "3":
            if not scheduler.processes:
                console.print("[dim]No processes entered yet.[/dim]")
            for idx, p in enumerate(scheduler.processes, start=1):
                console.print(
                    f"  {idx}. {escape(p.pid)} (burst={p.burst_time}, arrival={p.arrival_time})",
                    highlight=False,
                )
            continue

        console.print("[red]Invalid selection.[/red]")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = config_from_args(args)
    _configure_logging(config.log_level)

    console = Console()

    if args.command == "run":
        try:
            _run_workload(Path(args.workload), config, args.plain, console)
        except (SchedulerError, ValueError, OSError) as exc:
            logger.debug("Run failed", exc_info=True)
            console.print(f"[red]Error: {escape(str(exc))}[/red]")
            return 1
        return 0

    if args.command == "menu":
        _interactive_menu(config, console)
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
