import sys

import pytest

from flagkit.__main__ import build_flags, main, run
from flagkit.usage import get_usage


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    """Keep `main()` from configuring real log handlers."""
    monkeypatch.setattr("flagkit.__main__.setup_logging", lambda **kwargs: None)


def test_build_flags():
    flags = build_flags("demo")
    assert flags.program_name == "demo"
    assert flags.get(int, "c") == 1
    assert not flags.is_required("c")


def test_run_success(capsys):
    assert run(["-c", "3"], program="demo") == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Usage: demo [-c]\n")
    assert "c = 3" in captured.out
    assert captured.err == ""


def test_run_default_value(capsys):
    assert run([], program="demo") == 0
    assert "c = 1" in capsys.readouterr().out


@pytest.mark.parametrize("args", [["-h"], ["--help"], ["-c", "2", "--help"]])
def test_run_help(capsys, args):
    assert run(args, program="demo") == 0
    captured = capsys.readouterr()
    assert captured.out == get_usage(build_flags("demo"))
    assert "c =" not in captured.out


@pytest.mark.parametrize(
    "args, message",
    [
        (["--bogus"], "Unknown flag '--bogus'"),
        (["-c"], "Flag 'c' expects a value of type int"),
        (["-c=abc"], "Invalid value 'abc' for flag 'c'"),
        (["stray"], "Unexpected argument 'stray'"),
    ],
)
def test_run_errors(capsys, args, message):
    assert run(args, program="demo") == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err
    assert message in captured.err
    assert "Usage: demo [-c]" in captured.err


def test_main_reads_sys_argv(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/opt/bin/flagdemo", "-c=7"])
    assert main() == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Usage: flagdemo [-c]")
    assert "c = 7" in captured.out
