"""Create the missing destination directory before copying or moving."""

from __future__ import annotations

import posixpath

from mend.rule import Rule
from mend.shells import Shell, require_shell
from mend.types import Command
from mend.wrappers import for_app


@for_app("cp", "mv")
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    return (
        "No such file or directory" in output
        or output.rstrip().endswith("Not a directory")
        or (output.startswith("cp: directory") and output.rstrip().endswith("does not exist"))
    )


def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    shell = require_shell(shell)
    destination = command.tokens[-1]
    if destination.endswith(("/", "\\")):
        directory = destination.rstrip("/\\")
    else:
        directory = posixpath.dirname(destination)
    if not directory:
        return []
    return [shell.sequence([f"mkdir -p {shell.quote(directory)}", command.script])]


rule = Rule(name="cp_create_destination", match=match, get_new_command=get_new_command)
