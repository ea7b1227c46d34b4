"""Fix a mistyped apt operation using the operations listed by `--help`."""

from __future__ import annotations

from pathlib import PurePath

from mend.fuzzy import closest_matches
from mend.rule import Rule
from mend.shells import Shell
from mend.text import replace_argument
from mend.types import Command
from mend.vocabulary import default_vocabulary
from mend.wrappers import for_app, sudo_support

APPS = ("apt", "apt-get", "apt-cache")


@sudo_support
@for_app(*APPS)
def match(command: Command, shell: Shell | None = None) -> bool:
    return "Invalid operation" in (command.output or "")


def get_operations(app: str) -> list[str]:
    if app == "apt":
        header: str | tuple[str, ...] = "Basic commands:"
    else:
        header = ("Commands:", "Most used commands:")
    return default_vocabulary().commands([app, "--help"], header)


@sudo_support
def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    words = (command.output or "").split()
    if not words:
        return []
    invalid_operation = words[-1]
    operations = get_operations(PurePath(command.tokens[0]).name)
    return [
        replace_argument(command.script, invalid_operation, operation)
        for operation in closest_matches(invalid_operation, operations, max_results=1)
    ]


rule = Rule(name="apt_invalid_operation", match=match, get_new_command=get_new_command)
