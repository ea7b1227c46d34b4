"""Create the missing parent directory before touching a file."""

from __future__ import annotations

import posixpath
import re

from mend.rule import Rule
from mend.shells import Shell, require_shell
from mend.types import Command
from mend.wrappers import for_app

CANNOT_TOUCH_RE = re.compile(r"touch: cannot touch '([^']+)': No such file or directory")


@for_app("touch")
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    return "touch: cannot touch" in output and "No such file or directory" in output


def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    shell = require_shell(shell)
    found = CANNOT_TOUCH_RE.search(command.output or "")
    if found is None:
        return []
    parent = posixpath.dirname(found.group(1))
    if not parent:
        return []
    return [shell.sequence([f"mkdir -p {shell.quote(parent)}", command.script])]


rule = Rule(name="touch", match=match, get_new_command=get_new_command)
