"""`sl` is almost always a mistyped `ls`."""

from __future__ import annotations

from mend.rule import Rule
from mend.shells import Shell
from mend.types import Command


def match(command: Command, shell: Shell | None = None) -> bool:
    return command.script == "sl"


def get_new_command(command: Command, shell: Shell | None = None) -> str:
    return "ls"


rule = Rule(name="sl_ls", match=match, get_new_command=get_new_command)
