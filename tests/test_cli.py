from pathlib import Path

import pytest

from fcfs_scheduler.cli import build_parser, main


def _write_workload(tmp_path: Path) -> Path:
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst_time":5,"arrival_time":0},'
                 '{"pid":"B","burst_time":3,"arrival_time":1},'
                 '{"pid":"C","burst_time":8,"arrival_time":2}]')
    return p


def test_run_plain(tmp_path, capsys):
    assert main(["run", "-w", str(_write_workload(tmp_path)), "--plain"]) == 0
    out = capsys.readouterr().out
    assert "| A | B | C |" in out
    assert "Average Waiting Time: 3.33" in out
    assert "Average Turnaround Time: 8.67" in out


def test_run_rich(tmp_path, capsys):
    assert main(["run", "-w", str(_write_workload(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "Per-process metrics" in out
    assert "3.33" in out
    assert "8.67" in out


def test_run_missing_file(tmp_path, capsys):
    assert main(["run", "-w", str(tmp_path / "nope.json")]) == 1
    assert "Error" in capsys.readouterr().out


def test_run_empty_workload(tmp_path, capsys):
    p = tmp_path / "w.json"
    p.write_text("[]")
    assert main(["run", "-w", str(p), "--plain"]) == 1
    assert "No processes" in capsys.readouterr().out


def test_run_rejects_negative_burst(tmp_path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("pid,burst_time,arrival_time\nA,-2,0\n")
    assert main(["run", "-w", str(p)]) == 1
    assert "burst_time must be >= 0" in capsys.readouterr().out


def test_unknown_order_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["run", "-w", "x.json", "--order", "sjf"])
    assert exc.value.code == 2


def test_menu_add_and_schedule(monkeypatch, capsys):
    answers = iter(["1", "A", "5", "0", "1", "B", "x", "1", "1", "B", "3", "1", "2", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["menu"]) == 0
    out = capsys.readouterr().out
    assert "Added: Process ID = A, Burst Time = 5, Arrival Time = 0" in out
    assert "must be numbers" in out
    assert "Average Waiting Time: 2.00" in out


def test_menu_schedule_without_processes(monkeypatch, capsys):
    answers = iter(["2", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["menu"]) == 0
    assert "No processes" in capsys.readouterr().out
