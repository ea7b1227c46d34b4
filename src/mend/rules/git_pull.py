"""Set the upstream branch git asks for, then pull again."""

from __future__ import annotations

import re

from mend.rule import Rule
from mend.shells import Shell, require_shell
from mend.types import Command
from mend.wrappers import git_support

SET_UPSTREAM_RE = re.compile(r"(git branch --set-upstream-to=\S+ \S+)")


@git_support
def match(command: Command, shell: Shell | None = None) -> bool:
    return "pull" in command.script and "set-upstream" in (command.output or "")


@git_support
def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    shell = require_shell(shell)
    found = SET_UPSTREAM_RE.search(command.output or "")
    if found is None:
        return []
    return [shell.sequence([found.group(1), command.script])]


rule = Rule(name="git_pull", match=match, get_new_command=get_new_command)
