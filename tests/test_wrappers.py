from __future__ import annotations

import pytest

from mend.shells import Bash, Shell
from mend.types import Command
from mend.wrappers import (
    expand_git_alias,
    for_app,
    gate,
    generate_without_sudo,
    git_support,
    is_app,
    match_without_sudo,
    sudo_support,
)


def _never_called(command: Command, shell: Shell | None = None) -> bool:
    raise AssertionError("predicate must not run when the gate fails")


@pytest.mark.parametrize(
    ("script", "names", "at_least", "expected"),
    [
        ("git status", ["git"], 0, True),
        ("/usr/bin/git status", ["git", "hub"], 0, True),
        ("hub status", ["git", "hub"], 0, True),
        ("git", ["git"], 1, False),
        ("git status", ["git"], 1, True),
        ("gitk", ["git"], 0, False),
        ("", ["git"], 0, False),
    ],
)
def test_is_app(script: str, names: list[str], at_least: int, expected: bool) -> None:
    assert is_app(Command(script, output="whatever"), names, at_least) is expected


def test_is_app_accepts_single_name() -> None:
    assert is_app(Command("cargo build"), "cargo")


def test_gate_short_circuits_before_predicate() -> None:
    command = Command("ls foo", output="Invalid operation foo")
    assert gate(_never_called, command, ["apt", "apt-get"]) is False
    assert gate(_never_called, Command("apt"), ["apt"], 1) is False


def test_gate_delegates_when_open() -> None:
    assert gate(lambda command, shell: "boom" in command.output, Command("apt x", output="boom"), ["apt"])


def test_for_app_keeps_function_metadata() -> None:
    @for_app("touch")
    def match(command: Command, shell: Shell | None = None) -> bool:
        return True

    assert match.__name__ == "match"
    assert match(Command("touch a")) is True
    assert match(Command("cat a")) is False


def test_match_without_sudo_strips_prefix() -> None:
    seen: list[str] = []

    def predicate(command: Command, shell: Shell | None = None) -> bool:
        seen.append(command.script)
        return command.tokens[0] == "apt"

    assert match_without_sudo(predicate, Command("sudo apt install vim")) is True
    assert match_without_sudo(predicate, Command("apt install vim")) is True
    assert seen == ["apt install vim", "apt install vim"]


def test_bare_sudo_is_left_untouched() -> None:
    seen: list[Command] = []
    command = Command("sudo")
    match_without_sudo(lambda command, shell: seen.append(command) or False, command)
    assert seen == [command]


def test_generate_without_sudo_restores_prefix() -> None:
    def generator(command: Command, shell: Shell | None = None) -> list[str]:
        return [command.script.replace("isntall", "install"), "apt list"]

    assert generate_without_sudo(generator, Command("sudo apt isntall vim")) == [
        "sudo apt install vim",
        "sudo apt list",
    ]
    assert generate_without_sudo(generator, Command("apt isntall vim")) == ["apt install vim", "apt list"]


def test_generate_without_sudo_accepts_single_string() -> None:
    assert generate_without_sudo(lambda command, shell: "ls", Command("sudo sl")) == ["sudo ls"]


def test_sudo_support_handles_predicates_and_generators() -> None:
    @sudo_support
    def match(command: Command, shell: Shell | None = None) -> bool:
        return command.script == "sl"

    @sudo_support
    def get_new_command(command: Command, shell: Shell | None = None) -> str:
        return "ls"

    assert match(Command("sudo sl")) is True
    assert get_new_command(Command("sudo sl")) == ["sudo ls"]
    assert get_new_command(Command("sl")) == "ls"


def test_expand_git_alias() -> None:
    command = Command("git com", output="trace: alias expansion: com => 'commit' '--amend'\nerror")
    expanded = expand_git_alias(command, Bash())
    assert expanded.script == "git commit --amend"
    assert expanded.tokens == ("git", "commit", "--amend")
    assert command.script == "git com"


def test_expand_git_alias_without_trace_is_identity() -> None:
    command = Command("git status", output="fatal: not a git repository")
    assert expand_git_alias(command) is command


def test_git_support_gates_and_expands() -> None:
    seen: list[str] = []

    @git_support
    def match(command: Command, shell: Shell | None = None) -> bool:
        seen.append(command.script)
        return True

    assert match(Command("ls", output="")) is False
    assert match(Command("hub st", output="trace: alias expansion: st => 'status'"), Bash()) is True
    assert seen == ["hub status"]
