"""Open the file and line an error points at, then re-run the command."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from mend.rule import Rule
from mend.shells import Shell, require_shell
from mend.types import Command

PATTERNS = tuple(
    re.compile(pattern, re.MULTILINE)
    for pattern in (
        # js, node
        r"^    at (?P<file>[^:\n]+):(?P<line>[0-9]+):(?P<col>[0-9]+)",
        # cargo
        r"^   (?P<file>[^:\n]+):(?P<line>[0-9]+):(?P<col>[0-9]+)",
        # python
        r'^  File "(?P<file>[^:\n]+)", line (?P<line>[0-9]+)',
        # awk
        r"^awk: (?P<file>[^:\n]+):(?P<line>[0-9]+):",
        # git
        r"^fatal: bad config file line (?P<line>[0-9]+) in (?P<file>[^:\n]+)",
        # llc
        r"^llc: (?P<file>[^:\n]+):(?P<line>[0-9]+):(?P<col>[0-9]+):",
        # lua
        r"^lua: (?P<file>[^:\n]+):(?P<line>[0-9]+):",
        # fish
        r"^(?P<file>[^:\n]+) \(line (?P<line>[0-9]+)\):",
        # bash, sh, ssh
        r"^(?P<file>[^:\n]+): line (?P<line>[0-9]+): ",
        # cargo, clang, gcc, go, pep8, rustc
        r"^(?P<file>[^:\n]+):(?P<line>[0-9]+):(?P<col>[0-9]+)",
        # ghc, make, ruby, zsh
        r"^(?P<file>[^:\n]+):(?P<line>[0-9]+):",
        # perl
        r"^at (?P<file>[^:\n]+) line (?P<line>[0-9]+)",
    )
)


@dataclass(frozen=True)
class FileLocation:
    file: str
    line: str


def search(output: str) -> FileLocation | None:
    """Find the first reported location whose file exists."""

    for pattern in PATTERNS:
        found = pattern.search(output)
        if found is not None and os.path.isfile(found.group("file")):
            return FileLocation(file=found.group("file"), line=found.group("line"))
    return None


def match(command: Command, shell: Shell | None = None) -> bool:
    if not os.environ.get("EDITOR"):
        return False
    return search(command.output or "") is not None


def get_new_command(command: Command, shell: Shell | None = None) -> list[str]:
    shell = require_shell(shell)
    location = search(command.output or "")
    editor = os.environ.get("EDITOR")
    if location is None or not editor:
        return []
    editor_call = f"{editor} {shell.quote(location.file)} +{location.line}"
    return [shell.sequence([editor_call, command.script])]


rule = Rule(name="fix_file", match=match, get_new_command=get_new_command)
