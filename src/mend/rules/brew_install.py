"""Install the formula Homebrew suggests for an unknown name."""

from __future__ import annotations

import re

from mend.rule import Rule
from mend.shells import Shell
from mend.text import split_suggestions
from mend.types import Command
from mend.wrappers import for_app

NO_FORMULA_RE = re.compile(r'Warning: No available formula with the name "(?:[^"]+)"\. Did you mean (.+)\?')


@for_app("brew")
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    return "install" in command.script and "No available formula" in output and "Did you mean" in output


def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    found = NO_FORMULA_RE.search(command.output or "")
    if found is None:
        return []
    return [f"brew install {formula}" for formula in split_suggestions(found.group(1))]


rule = Rule(name="brew_install", match=match, get_new_command=get_new_command)
