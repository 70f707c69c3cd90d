from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from .models import ProcessRecord

OrderFunc = Callable[[Sequence[ProcessRecord]], List[ProcessRecord]]


def submission_order(processes: Sequence[ProcessRecord]) -> List[ProcessRecord]:
    """
    Serve processes exactly in the order they were submitted.
    """
    return list(processes)


def arrival_order(processes: Sequence[ProcessRecord]) -> List[ProcessRecord]:
    """
    Serve processes by arrival time; ties keep their submission order.
    """
    return sorted(processes, key=lambda p: p.arrival_time)


SERVICE_ORDERS: Dict[str, OrderFunc] = {
    "submission": submission_order,
    "arrival": arrival_order,
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def resolve_order(name: str) -> OrderFunc:
    key = name.lower()
    if key not in SERVICE_ORDERS:
        raise ValueError(
            f"Unknown service order '{name}' (choose from {', '.join(SERVICE_ORDERS)})"
        )
    return SERVICE_ORDERS[key]


@dataclass
class SchedulerConfig:
    order: str = "submission"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # Fail early on typos rather than at the first timing pass.
        resolve_order(self.order)
        self.order = self.order.lower()
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")


def config_from_args(args: argparse.Namespace) -> SchedulerConfig:
    """
    Build a SchedulerConfig from parsed command-line arguments, falling back to
    defaults for options a subcommand does not define.
    """
    defaults = SchedulerConfig()
    return SchedulerConfig(
        order=getattr(args, "order", None) or defaults.order,
        log_level=getattr(args, "log_level", None) or defaults.log_level,
    )
