"""Tests for the ``sexpr-tree`` command line interface."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from sexpr_tree import cli


def test_cli_prints_one_line_per_expression(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["(A,B) (A,C)", "(A,B) (B,C) (B,C)"])
    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["(A(B)(C))", "E2"]


def test_cli_strict_mode_fails_on_rejection(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--strict", "(A,B)"]) == 0
    assert cli.main(["--strict", "(A,B)", "XYZ"]) == 1
    assert capsys.readouterr().out.splitlines() == ["(A(B))", "(A(B))", "E1"]


def test_cli_reads_expressions_from_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "pairs.txt"
    source.write_text("(A,B) (B,C)\n\n(A,B) (X,C)\n", encoding="utf-8")
    assert cli.main(["--input", str(source)]) == 0
    assert capsys.readouterr().out.splitlines() == ["(A(B(C)))", "E4"]


def test_cli_reads_expressions_from_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("(B,A) (B,C)\n"))
    assert cli.main(["--input", "-"]) == 0
    assert capsys.readouterr().out.splitlines() == ["(B(A)(C))"]


def test_cli_json_output_with_rendering(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--format", "json", "--render", "(A,B) (A,C)", "(A,b)"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["output"] == "(A(B)(C))"
    assert payload[0]["valid"] is True
    assert payload[0]["rendering"] == ["A", "├── B", "└── C"]
    assert payload[1]["error"] == "E1"
    assert "rendering" not in payload[1]


def test_cli_text_rendering(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--render", "(A,B)"]) == 0
    assert capsys.readouterr().out.splitlines() == ["(A(B))", "A", "└── B", ""]


def test_cli_requires_expressions(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
    assert "no expressions given" in capsys.readouterr().err


def test_cli_reports_missing_input_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--input", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 2
    assert "Failed to read" in capsys.readouterr().err


def test_cli_default_level_keeps_stderr_clean(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["XYZ", "(A,B) (B,A)"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["E1", "E4"]
    assert captured.err == ""
