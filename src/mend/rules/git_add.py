"""Stage an existing but untracked path that git refused to use."""

from __future__ import annotations

import os
import re

from mend.rule import Rule
from mend.shells import Shell, require_shell
from mend.types import Command
from mend.wrappers import git_support

PATHSPEC_RE = re.compile(r"error: pathspec '([^']*)' did not match any file\(s\) known to git")


def get_missing_file(command: Command) -> str | None:
    found = PATHSPEC_RE.search(command.output or "")
    if found is None or not found.group(1):
        return None
    path = found.group(1)
    return path if os.path.exists(path) else None


@git_support
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    return "did not match any file(s) known to git" in output and get_missing_file(command) is not None


@git_support
def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    shell = require_shell(shell)
    missing_file = get_missing_file(command)
    if missing_file is None:
        return []
    return [shell.sequence([f"git add -- {shell.quote(missing_file)}", command.script])]


rule = Rule(name="git_add", match=match, get_new_command=get_new_command, priority=1100)
