"""Text helpers shared by correction rules."""

from __future__ import annotations

import re
from collections.abc import Iterable

from mend.fuzzy import closest_matches
from mend.types import Command

SUGGESTION_SEPARATOR_RE = re.compile(r",\s*|\s+or\s+")


def replace_argument(script: str, old: str, new: str) -> str:
    """Replace one argument word, preferring the last position in the script."""

    replaced_at_end = re.sub(rf" {re.escape(old)}$", f" {new}", script, count=1)
    if replaced_at_end != script:
        return replaced_at_end
    return script.replace(f" {old} ", f" {new} ", 1)


def split_suggestions(text: str) -> list[str]:
    """Split "a, b or c" style lists into their items."""

    return [item.strip() for item in SUGGESTION_SEPARATOR_RE.split(text.strip()) if item.strip()]


def lines_after(output: str, markers: Iterable[str]) -> list[str]:
    """Collect the non-blank lines that follow the first line containing a marker."""

    markers = tuple(markers)
    collected: list[str] = []
    found = False
    for line in output.splitlines():
        if not found:
            found = any(marker in line for marker in markers)
            continue
        if line.strip():
            collected.append(line.strip())
    return collected


def replace_command(command: Command, broken: str, matched: Iterable[str]) -> list[str]:
    """Suggest the script with `broken` swapped for each close entry of `matched`."""

    fixes = closest_matches(broken, [item.strip() for item in matched], min_ratio=0.1)
    return [replace_argument(command.script, broken, fix) for fix in fixes]
