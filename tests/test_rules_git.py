from __future__ import annotations

from pathlib import Path

import pytest

from mend.rules import git_add, git_not_command, git_pull
from mend.shells import Bash
from mend.types import Command


def _not_a_command(broken: str, *suggestions: str) -> str:
    lines = "\n".join(f"\t{item}" for item in suggestions)
    return f"git: '{broken}' is not a git command. See 'git --help'.\n\nThe most similar commands are\n{lines}\n"


def test_not_command_single_suggestion() -> None:
    command = Command("git brnch", output=_not_a_command("brnch", "branch"))
    assert git_not_command.match(command)
    assert git_not_command.get_new_command(command) == ["git branch"]


def test_not_command_orders_by_similarity() -> None:
    output = "git: 'stats' is not a git command. See 'git --help'.\n\nDid you mean one of these?\n\tstash\n\tstatus\n"
    command = Command("git stats", output=output)
    assert git_not_command.get_new_command(command) == ["git status", "git stash"]


def test_not_command_needs_git() -> None:
    assert not git_not_command.match(Command("svn brnch", output=_not_a_command("brnch", "branch")))
    assert not git_not_command.match(Command("git branch", output=""))


def test_pull_sets_upstream(bash: Bash) -> None:
    output = (
        "There is no tracking information for the current branch.\n"
        "    git branch --set-upstream-to=origin/<branch> main\n"
    )
    command = Command("git pull", output=output)
    assert git_pull.match(command, bash)
    assert git_pull.get_new_command(command, bash) == ["git branch --set-upstream-to=origin/<branch> main && git pull"]


def test_pull_ignores_other_failures(bash: Bash) -> None:
    assert not git_pull.match(Command("git pull", output="Already up to date."), bash)
    assert not git_pull.match(Command("git push", output="There is no tracking information"), bash)


def test_add_stages_existing_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, bash: Bash) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "README.md").write_text("hello\n", encoding="utf-8")
    output = "error: pathspec 'README.md' did not match any file(s) known to git"
    command = Command("git commit README.md", output=output)

    assert git_add.match(command, bash)
    assert git_add.get_new_command(command, bash) == ["git add -- README.md && git commit README.md"]


def test_add_skips_missing_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, bash: Bash) -> None:
    monkeypatch.chdir(tmp_path)
    output = "error: pathspec 'nope.txt' did not match any file(s) known to git"
    assert not git_add.match(Command("git commit nope.txt", output=output), bash)


def test_add_has_lower_precedence() -> None:
    assert git_add.rule.priority == 1100
