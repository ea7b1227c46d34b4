"""Rule descriptor with per-rule fault isolation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from mend.errors import ContractError
from mend.shells import Shell
from mend.types import Candidates, Command, CorrectedCommand, Generator, Predicate, SideEffect

DEFAULT_PRIORITY = 1000


def as_candidates(result: Candidates) -> list[str]:
    """Normalize one generator return value to a list of non-empty scripts."""

    if result is None or isinstance(result, bool):
        return []
    if isinstance(result, str):
        return [result] if result.strip() else []
    if isinstance(result, Iterable):
        return [item for item in result if isinstance(item, str) and item.strip()]
    return []


@dataclass(frozen=True)
class Rule:
    """Match predicate and candidate generator plus metadata."""

    name: str
    match: Predicate
    get_new_command: Generator
    enabled: bool = True
    priority: int = DEFAULT_PRIORITY
    requires_output: bool = True
    side_effect: SideEffect | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("rule name must not be empty")
        if self.priority < 0:
            raise ValueError(f"rule priority must be non-negative: {self.name}={self.priority}")

    def is_match(self, command: Command, shell: Shell | None = None) -> bool:
        if command.output is None and self.requires_output:
            return False

        try:
            return bool(self.match(command, shell))
        except ContractError:
            raise
        except Exception:
            logger.opt(exception=True).warning("rule.match_failed rule={} script={!r}", self.name, command.script)
            return False

    def get_corrected_commands(self, command: Command, shell: Shell | None = None) -> list[CorrectedCommand]:
        try:
            result = self.get_new_command(command, shell)
            # materialize lazy generators inside the guard
            candidates = result if isinstance(result, (str, bool)) or result is None else list(result)
        except ContractError:
            raise
        except Exception:
            logger.opt(exception=True).warning("rule.generate_failed rule={} script={!r}", self.name, command.script)
            return []

        return [
            CorrectedCommand(
                script=script,
                priority=self.priority * (index + 1),
                side_effect=self.side_effect,
                rule_name=self.name,
            )
            for index, script in enumerate(as_candidates(candidates))
        ]

    def __str__(self) -> str:
        return self.name
