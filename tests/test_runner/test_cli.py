"""Tests for the command-line runner."""

import argparse
import json

import pytest

from models.process import ProcessSpec
from runner.main import main, parse_process


def test_parse_process():
    assert parse_process("3:1:4") == ProcessSpec(pid=3, arrival_time=1, service_time=4)


@pytest.mark.parametrize("raw", ["1:2", "a:0:1", "1:0:0", "1:0:1:2"])
def test_parse_process_rejects_bad_input(raw):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_process(raw)


def test_main_prints_trace(capsys):
    exit_code = main(["--quantum", "1", "--process", "1:0:2", "--process", "2:0:1"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "round_robin (quantum=1)" in out

    data, _ = json.JSONDecoder().raw_decode(out[out.index("{"):])
    assert data["timeline"] == [1, 2, 1]
    assert data["total_cycles"] == 3


def test_main_marks_idle_cycles(capsys):
    main(["--quantum", "2", "--process", "1:1:1"])
    assert '"-"' in capsys.readouterr().out


def test_main_reports_bad_quantum():
    assert main(["--quantum", "0", "--process", "1:0:1"]) == 1


def test_main_requires_a_process():
    with pytest.raises(SystemExit):
        main([])
