from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List, Tuple

from .errors import ParseError
from .models import ProcessRecord

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[ProcessRecord]:
    """
    Load a workload from a JSON or CSV file into a list of ProcessRecord
    objects, in file order.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.info("Loaded %d processes from %s", len(processes), path)
    return processes


def parse_process_fields(pid_text: str, burst_text: str, arrival_text: str) -> Tuple[str, int, int]:
    """
    Turn raw text fields into (pid, burst_time, arrival_time).

    Raises ParseError if a field is blank or a time is not a whole number.
    Range checks are left to the Scheduler.
    """
    pid = pid_text.strip()
    burst = burst_text.strip()
    arrival = arrival_text.strip()

    if not pid or not burst or not arrival:
        raise ParseError("Please enter Process ID, Burst Time, and Arrival Time.")

    try:
        return pid, int(burst), int(arrival)
    except ValueError as exc:
        raise ParseError("Burst Time and Arrival Time must be numbers!") from exc


def _load_json(path: Path) -> List[ProcessRecord]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise ParseError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[ProcessRecord]:
    processes: List[ProcessRecord] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _process_from_mapping(mapping) -> ProcessRecord:
    try:
        pid = _pid_value(mapping["pid"])
        burst_time = _time_value(mapping["burst_time"])
        arrival_time = _time_value(mapping["arrival_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ParseError(f"Invalid process entry: {mapping!r}") from exc

    return ProcessRecord(pid=pid, burst_time=burst_time, arrival_time=arrival_time)


def _pid_value(value) -> str:
    if value is None or isinstance(value, bool):
        raise TypeError(f"pid must be text or a number, got {value!r}")
    return str(value).strip()


def _time_value(value) -> int:
    """
    Accept ints, integral floats (3.0) and numeric text. CSV cells are always
    text; JSON may carry any scalar.
    """
    if isinstance(value, bool):
        raise TypeError(f"expected a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected a whole number, got {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise TypeError(f"expected a whole number, got {value!r}")
