"""Correction pipeline: run every rule, then rank and merge the suggestions."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from operator import attrgetter

from loguru import logger

from mend.registry import RuleRegistry
from mend.rule import Rule
from mend.shells import Shell
from mend.types import Command, CorrectedCommand


def _evaluate(rule: Rule, command: Command, shell: Shell) -> list[CorrectedCommand]:
    if not rule.is_match(command, shell):
        return []
    corrected = rule.get_corrected_commands(command, shell)
    logger.debug("rule.matched rule={} candidates={}", rule.name, len(corrected))
    return corrected


def organize_commands(corrected_commands: Iterable[CorrectedCommand]) -> list[CorrectedCommand]:
    """Stable-sort by priority and drop entries equal to their predecessor.

    Only adjacent duplicates are removed: a repeated script separated by a
    different entry after sorting is kept.
    """

    organized: list[CorrectedCommand] = []
    for corrected in sorted(corrected_commands, key=attrgetter("priority")):
        if organized and organized[-1].script == corrected.script:
            continue
        organized.append(corrected)
    return organized


def get_corrected_commands(
    command: Command,
    shell: Shell,
    registry: RuleRegistry | Iterable[Rule],
    *,
    max_workers: int = 1,
) -> list[CorrectedCommand]:
    """Return the ordered suggestion list for one failing command."""

    rules = list(registry)
    if max_workers > 1 and len(rules) > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="mend-rule") as pool:
            # map() yields in submission order, whatever the scheduling
            batches = list(pool.map(lambda rule: _evaluate(rule, command, shell), rules))
    else:
        batches = [_evaluate(rule, command, shell) for rule in rules]

    collected = [corrected for batch in batches for corrected in batch]
    organized = organize_commands(collected)
    logger.debug("corrector.done script={!r} rules={} suggestions={}", command.script, len(rules), len(organized))
    return organized
