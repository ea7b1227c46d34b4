from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from mend import logging_utils
from mend.cli import app

runner = CliRunner()

CP_OUTPUT = "cp: bar/baz: No such file or directory"


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_fix_lists_suggestions() -> None:
    result = runner.invoke(app, ["fix", "cp", "foo", "bar/baz", "--output", CP_OUTPUT, "--shell", "bash"])
    assert result.exit_code == 0
    assert "1. mkdir -p bar && cp foo bar/baz" in result.output


def test_fix_accepts_quoted_script() -> None:
    result = runner.invoke(app, ["fix", "cp foo bar/baz", "--output", CP_OUTPUT, "--shell", "fish", "--exit-code", "1"])
    assert result.exit_code == 0
    assert "1. mkdir -p bar; and cp foo bar/baz" in result.output


def test_fix_reads_output_file(tmp_path: Path) -> None:
    captured = tmp_path / "output.txt"
    captured.write_text(CP_OUTPUT, encoding="utf-8")
    result = runner.invoke(app, ["fix", "cp", "foo", "bar/baz", "--output-file", str(captured), "--shell", "bash"])
    assert result.exit_code == 0
    assert "mkdir -p bar && cp foo bar/baz" in result.output


def test_fix_select_first() -> None:
    result = runner.invoke(app, ["fix", "sl", "--output", "", "--select-first", "--shell", "bash"])
    assert result.exit_code == 0
    assert result.output.strip() == "ls"


def test_fix_without_correction() -> None:
    result = runner.invoke(app, ["fix", "true", "--output", "", "--shell", "bash"])
    assert result.exit_code == 1
    assert "No correction found" in result.output


def test_fix_excluded_rule() -> None:
    result = runner.invoke(app, ["fix", "sl", "--output", "", "--exclude-rule", "sl_ls", "--shell", "bash"])
    assert result.exit_code == 1


def test_fix_unknown_shell() -> None:
    result = runner.invoke(app, ["fix", "sl", "--output", "", "--shell", "nosuchshell"])
    assert result.exit_code == 2
    assert "nosuchshell" in result.output


def test_fix_unknown_rule() -> None:
    result = runner.invoke(app, ["fix", "sl", "--output", "", "--exclude-rule", "nope", "--shell", "bash"])
    assert result.exit_code == 2


def test_rules_table() -> None:
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    assert "git_pull" in result.output

    result = runner.invoke(app, ["rules", "--exclude-rule", "git_pull"])
    assert result.exit_code == 0
    assert "git_pull" not in result.output


def test_fix_debug_logging() -> None:
    result = runner.invoke(app, ["fix", "sl", "--output", "", "--debug", "--shell", "bash"])
    assert result.exit_code == 0
    assert "1. ls" in result.output
