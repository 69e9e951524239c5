#!/usr/bin/env python3
"""
Test the command line entry point by running it as a subprocess.
"""

import sys
import os
import subprocess
import pytest
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bftape.cli import main

SRC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'src')


def run_cli(args, input_data=b""):
    env = dict(os.environ)
    env['PYTHONPATH'] = SRC_DIR + os.pathsep + env.get('PYTHONPATH', '')
    return subprocess.run(
        [sys.executable, '-m', 'bftape', *args],
        input=input_data,
        capture_output=True,
        env=env,
        timeout=30,
    )


def test_run_file(tmp_path):
    path = tmp_path / "hi.bf"
    path.write_text("+" * 72 + "." + "+" * 33 + ".")
    result = run_cli([str(path)])
    assert result.returncode == 0
    assert result.stdout == b"Hi"


def test_program_reads_stdin(tmp_path):
    path = tmp_path / "cat.bf"
    path.write_text(",[.,]")
    result = run_cli([str(path)], input_data=b"echo me")
    assert result.stdout == b"echo me"


def test_missing_file_exits_1(tmp_path):
    result = run_cli([str(tmp_path / "missing.bf")])
    assert result.returncode == 1
    assert b"LoadError" in result.stderr
    assert result.stdout == b""


def test_dump(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text("+++[-]")
    result = run_cli(['--dump', str(path)])
    assert result.returncode == 0
    assert result.stdout.decode().split("\n")[0] == "0000  ADD        +3"


def test_dump_tape(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text("++><<+")
    result = run_cli(['--dump-tape', str(path)])
    assert b"[-1] = 1" in result.stderr
    assert b"[+0] = 2" in result.stderr


def test_repl_runs_each_line():
    program = "+" * 49 + ".\n" + "+" * 50 + ".\nquit\n"
    result = run_cli([], input_data=program.encode())
    assert result.returncode == 0
    assert result.stdout == b"1\n2\n"
    assert b"bf> " in result.stderr


def test_repl_stops_at_eof():
    result = run_cli([], input_data=b"+++\n")
    assert result.returncode == 0
    assert result.stdout == b""


def test_main_reports_load_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bf")]) == 1
    assert "LoadError" in capsys.readouterr().err


def test_eof_flag(tmp_path):
    path = tmp_path / "eof.bf"
    path.write_text(",.")
    result = run_cli(['--eof=-1', str(path)])
    assert result.returncode == 0
    assert result.stdout == b"\xff"


def test_trace_flag(tmp_path):
    path = tmp_path / "t.bf"
    path.write_text("+>")
    result = run_cli(['--trace', str(path)])
    assert result.returncode == 0
    lines = result.stderr.decode().splitlines()
    assert lines[0].startswith("0000  ADD(+1)")
    assert lines[1].startswith("0001  MOVE(+1)")


def test_cell_bits_flag(tmp_path):
    path = tmp_path / "w.bf"
    path.write_text("-")
    result = run_cli(['--cell-bits', '8', '--dump-tape', str(path)])
    assert result.returncode == 0
    assert b"[+0] = 255" in result.stderr


def test_tape_size_flag(tmp_path):
    path = tmp_path / "g.bf"
    path.write_text("<<+>>>>>+")
    result = run_cli(['--tape-size', '2', '--dump-tape', str(path)])
    assert result.returncode == 0
    assert b"[-2] = 1" in result.stderr
    assert b"[+3] = 1" in result.stderr


def test_bad_tape_size_exits_1(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text("+")
    result = run_cli(['--tape-size', '0', str(path)])
    assert result.returncode == 1
    assert b"OptionsError" in result.stderr


def test_bad_cell_bits_is_rejected_by_parser(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text("+")
    result = run_cli(['--cell-bits', '7', str(path)])
    assert result.returncode == 2


def test_repl_exit_word_stops_reading():
    program = "+" * 49 + ".\nexit\n" + "+" * 50 + ".\n"
    result = run_cli([], input_data=program.encode())
    assert result.returncode == 0
    assert result.stdout == b"1\n"


def test_repl_dump():
    result = run_cli(['--dump'], input_data=b"++[-]\nquit\n")
    assert result.returncode == 0
    lines = result.stdout.decode().splitlines()
    assert lines[0] == "0000  ADD        +2"
    assert lines[-1] == "0004  END"


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
