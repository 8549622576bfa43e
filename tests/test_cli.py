"""Test the CLI command-line interface."""

import subprocess
import sys

import pytest

from goforth import cli


def test_cli_command(capsys):
    code = cli.main(["-c", "variable balance 123 balance ! balance @"])
    assert code == 0
    assert capsys.readouterr().out == "OK -> STACK [123]\n"


def test_cli_command_error(capsys):
    code = cli.main(["-c", "1 frob"])
    assert code == 1
    assert "NumeralParseFailure" in capsys.readouterr().out


def test_cli_file(tmp_path, capsys):
    source = tmp_path / "prog.fs"
    source.write_text("var x\n7 x !\nx @ dup *\nbye\n99\n")

    code = cli.main([str(source)])

    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2] == "OK -> STACK [49]"
    assert out[-1] == "OK: Shutting down..."


def test_cli_missing_file(tmp_path, capsys):
    code = cli.main([str(tmp_path / "missing.fs")])
    assert code == 1
    assert "File not found" in capsys.readouterr().err


def test_cli_small_stack(capsys):
    code = cli.main(["--stack", "1", "-c", "1 2"])
    assert code == 1
    assert "StackOverflow" in capsys.readouterr().out


def test_cli_version(capsys):
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("goforth ")


def test_module_entry_point():
    result = subprocess.run(
        [sys.executable, "-m", "goforth", "-c", "1 2 -"],
        capture_output=True,
        text=True
    )

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "OK -> STACK [1]" in result.stdout


def test_verbose_logs_to_stderr():
    result = subprocess.run(
        [sys.executable, "-m", "goforth", "-v", "-c", "var x bye"],
        capture_output=True,
        text=True
    )

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "variable x stored at" in result.stderr
    assert "shutdown requested" in result.stderr


def test_cli_dictionary_too_small(capsys):
    """Capacities that can not hold the builtins are rejected up front."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--dict", "5", "-c", "1"])
    assert exc_info.value.code == 2
    assert "builtin words" in capsys.readouterr().err
