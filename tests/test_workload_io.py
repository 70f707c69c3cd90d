from pathlib import Path

import pytest

from fcfs_scheduler.errors import ParseError
from fcfs_scheduler.models import ProcessRecord
from fcfs_scheduler.workload_io import load_workload, parse_process_fields


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst_time":3,"arrival_time":0},'
                 '{"pid":"B","burst_time":2,"arrival_time":1}]')
    procs = load_workload(p)
    assert isinstance(procs[0], ProcessRecord)
    assert [pr.pid for pr in procs] == ["A", "B"]
    assert procs[1].arrival_time == 1
    assert procs[1].waiting_time is None


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,burst_time,arrival_time\nA,3,0\nB,2,1\n")
    procs = load_workload(p)
    assert procs[0].pid == "A"
    assert procs[1].burst_time == 2


def test_load_csv_non_numeric(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,burst_time,arrival_time\nA,three,0\n")
    with pytest.raises(ParseError):
        load_workload(p)


def test_load_json_missing_key(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst_time":3}]')
    with pytest.raises(ParseError):
        load_workload(p)


def test_load_json_not_a_list(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"pid":"A"}')
    with pytest.raises(ParseError):
        load_workload(p)


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("A 3 0")
    with pytest.raises(ValueError, match="Unsupported"):
        load_workload(p)


def test_parse_process_fields_strips():
    assert parse_process_fields(" P1 ", "5", " 0") == ("P1", 5, 0)


@pytest.mark.parametrize(
    "fields",
    [("", "5", "0"), ("P1", " ", "0"), ("P1", "five", "0"), ("P1", "5", "1.5")],
)
def test_parse_process_fields_rejects(fields):
    with pytest.raises(ParseError):
        parse_process_fields(*fields)


@pytest.mark.parametrize(
    "entry",
    [
        '{"pid":"A","burst_time":2.9,"arrival_time":0}',
        '{"pid":"A","burst_time":2,"arrival_time":true}',
        '{"pid":null,"burst_time":2,"arrival_time":0}',
    ],
)
def test_load_json_rejects_non_integer_values(tmp_path: Path, entry):
    p = tmp_path / "w.json"
    p.write_text(f"[{entry}]")
    with pytest.raises(ParseError):
        load_workload(p)


def test_load_json_accepts_integral_floats_and_numeric_ids(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":7,"burst_time":3.0,"arrival_time":"2"}]')
    (proc,) = load_workload(p)
    assert (proc.pid, proc.burst_time, proc.arrival_time) == ("7", 3, 2)
