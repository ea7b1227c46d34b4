"""Retry ssh/scp after dropping the host keys that no longer match.

The suggestion is the unchanged command; removing the stale `known_hosts`
lines is carried as a side-effect action run only once the suggestion has
been picked.
"""

from __future__ import annotations

import re
from collections import defaultdict
from pathlib import Path

from loguru import logger

from mend.rule import Rule
from mend.shells import Shell
from mend.types import Command, SideEffect
from mend.wrappers import for_app

REMOVE_OFFENDING_KEYS = "known_hosts.remove_offending_keys"

MISMATCH_PATTERNS = (
    re.compile(r"WARNING: REMOTE HOST IDENTIFICATION HAS CHANGED!"),
    re.compile(r"WARNING: POSSIBLE DNS SPOOFING DETECTED!"),
    re.compile(r"Warning: the \S+ host key for '([^']+)' differs from the key for the IP address '([^']+)'"),
)
OFFENDING_RE = re.compile(r"(?:Offending (?:key for IP|\S+ key)|Matching host key) in ([^:]+):(\d+)", re.MULTILINE)


@for_app("ssh", "scp")
def match(command: Command, shell: Shell | None = None) -> bool:
    output = command.output or ""
    return any(pattern.search(output) for pattern in MISMATCH_PATTERNS)


def get_new_command(command: Command, shell: Shell | None = None) -> str:
    return command.script


def remove_offending_keys(action: SideEffect, command: Command, script: str) -> None:
    """Delete every `known_hosts` line reported as offending."""

    lines_by_file: dict[str, set[int]] = defaultdict(set)
    for file_path, line_number in OFFENDING_RE.findall(command.output or ""):
        lines_by_file[file_path].add(int(line_number))

    for file_path, line_numbers in lines_by_file.items():
        path = Path(file_path).expanduser()
        lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
        kept = [line for index, line in enumerate(lines, start=1) if index not in line_numbers]
        path.write_text("".join(kept), encoding="utf-8")
        logger.info("known_hosts.removed path={} lines={}", path, sorted(line_numbers))


rule = Rule(
    name="ssh_known_hosts",
    match=match,
    get_new_command=get_new_command,
    side_effect=SideEffect.of(REMOVE_OFFENDING_KEYS),
)
