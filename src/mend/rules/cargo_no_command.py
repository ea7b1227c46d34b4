"""Use the subcommand cargo suggests for an unknown one."""

from __future__ import annotations

import re

from mend.rule import Rule
from mend.shells import Shell
from mend.text import replace_argument
from mend.types import Command
from mend.wrappers import for_app

SUGGESTION_RE = re.compile(r"(?:Did you mean|a command with a similar name exists:)\s*`([^`]+)`")


@for_app("cargo", at_least=1)
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    new_format = "error: no such command:" in output and "a command with a similar name exists:" in output
    old_format = "no such subcommand" in output.lower() and "Did you mean" in output
    return new_format or old_format


def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    found = SUGGESTION_RE.search(command.output or "")
    if found is None:
        return []
    return [replace_argument(command.script, command.tokens[1], found.group(1))]


rule = Rule(name="cargo_no_command", match=match, get_new_command=get_new_command)
