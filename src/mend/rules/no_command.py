"""Replace an unknown executable with the closest one on PATH."""

from __future__ import annotations

from shutil import which

from mend.fuzzy import closest_matches
from mend.rule import Rule
from mend.shells import Shell
from mend.types import Command
from mend.vocabulary import path_executables
from mend.wrappers import sudo_support

NOT_FOUND_MARKERS = ("not found", "is not recognized as")


@sudo_support
def match(command: Command, shell: Shell | None = None) -> bool:
    if not command.tokens:
        return False
    output = command.output or ""
    if not any(marker in output for marker in NOT_FOUND_MARKERS):
        return False
    app = command.tokens[0]
    return which(app) is None and bool(closest_matches(app, path_executables()))


@sudo_support
def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    app = command.tokens[0]
    if not command.script.startswith(app):
        return []
    rest = command.script[len(app) :]
    return [fix + rest for fix in closest_matches(app, path_executables(), min_ratio=0.1)]


rule = Rule(name="no_command", match=match, get_new_command=get_new_command, priority=3000)
