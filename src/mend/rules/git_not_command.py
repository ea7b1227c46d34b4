"""Swap an unknown git subcommand for the ones git suggests."""

from __future__ import annotations

import re

from mend.rule import Rule
from mend.shells import Shell
from mend.text import lines_after, replace_command
from mend.types import Command
from mend.wrappers import git_support

BROKEN_COMMAND_RE = re.compile(r"git: '([^']*)' is not a git command")
SUGGESTION_MARKERS = ("The most similar command", "Did you mean")


@git_support
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    return " is not a git command. See 'git --help'." in output and any(
        marker in output for marker in SUGGESTION_MARKERS
    )


@git_support
def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    output = command.output or ""
    found = BROKEN_COMMAND_RE.search(output)
    if found is None:
        return []
    return replace_command(command, found.group(1), lines_after(output, SUGGESTION_MARKERS))


rule = Rule(name="git_not_command", match=match, get_new_command=get_new_command)
