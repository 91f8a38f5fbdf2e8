import io
import time
from unittest import mock

import pytest

from soshell.alerts import CopyLog, aviso, start_aviso, start_copy

HEADING = "Registos de cópias efetuadas:"


def test_aviso_writes_message():
    out = io.StringIO()
    aviso("hello", 0, out)
    assert out.getvalue() == "Aviso : hello\n"


@mock.patch("time.sleep")
def test_aviso_sleeps_once_per_second(fake_sleep):
    out = io.StringIO()
    aviso("wake", 3, out)
    assert fake_sleep.call_count == 3
    assert all(call.args == (1,) for call in fake_sleep.call_args_list)
    assert out.getvalue() == "Aviso : wake\n"


@mock.patch("time.sleep")
def test_aviso_negative_seconds_does_not_sleep(fake_sleep):
    out = io.StringIO()
    aviso("now", -2, out)
    assert fake_sleep.call_count == 0
    assert out.getvalue() == "Aviso : now\n"


def test_start_aviso_runs_in_daemon_thread(capsys):
    thread = start_aviso("background", 0)
    thread.join(timeout=5)
    assert thread.daemon is True
    assert not thread.is_alive()
    assert "Aviso : background\n" in capsys.readouterr().err


def test_copylog_empty_report():
    assert CopyLog().report() == HEADING + "\n"


def test_copylog_record_uses_clock():
    log = CopyLog(clock=lambda: 0)
    log.record("a.txt")
    assert log.report() == f"{HEADING}\n{time.ctime(0)} a.txt\n"


def test_copylog_wraps_in_slot_order():
    log = CopyLog(capacity=3, clock=lambda: 0)
    for name in ["s0", "s1", "s2", "s3", "s4"]:
        log.record(name)
    lines = log.report().rstrip("\n").split("\n")
    assert lines[0] == HEADING
    assert [line.rsplit(" ", 1)[1] for line in lines[1:]] == ["s3", "s4", "s2"]


def test_copylog_truncates_long_entries():
    log = CopyLog(clock=lambda: 0)
    log.record("x" * 500)
    entry = log.report().split("\n")[1]
    assert len(entry) == 129


def test_copylog_invalid_capacity():
    with pytest.raises(ValueError):
        CopyLog(capacity=0)


def test_copylog_copy_copies_and_records(tmp_path):
    source = tmp_path / "src"
    destination = tmp_path / "dst"
    source.write_bytes(b"payload" * 50)
    log = CopyLog(clock=lambda: 0)
    copied = log.copy(str(source), str(destination), 16)
    assert copied == len(b"payload" * 50)
    assert destination.read_bytes() == source.read_bytes()
    assert log.report().endswith(f" {source}\n")


def test_copylog_copy_failure_still_records(tmp_path):
    log = CopyLog(clock=lambda: 0)
    missing = tmp_path / "missing"
    with pytest.raises(FileNotFoundError):
        log.copy(str(missing), str(tmp_path / "out"))
    assert log.report().endswith(f" {missing}\n")


def test_start_copy_runs_in_background(tmp_path):
    source = tmp_path / "src"
    destination = tmp_path / "dst"
    source.write_bytes(b"data to copy")
    log = CopyLog()
    thread = start_copy(log, str(source), str(destination))
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert destination.read_bytes() == b"data to copy"
    assert str(source) in log.report()


def test_start_copy_reports_error(tmp_path, capsys):
    log = CopyLog()
    missing = tmp_path / "missing"
    thread = start_copy(log, str(missing), str(tmp_path / "out"))
    thread.join(timeout=5)
    assert f"Erro na cópia de {missing}" in capsys.readouterr().err
    assert str(missing) in log.report()