"""Execution of side-effect actions attached to selected suggestions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeAlias

from loguru import logger

from mend.errors import UnknownActionError
from mend.types import Command, CorrectedCommand, SideEffect

ActionHandler: TypeAlias = Callable[[SideEffect, Command, str], None]


class ActionRunner:
    """Maps side-effect kinds to handlers. The correction pipeline never calls this."""

    def __init__(self, handlers: Mapping[str, ActionHandler] | None = None) -> None:
        self._handlers: dict[str, ActionHandler] = dict(handlers or {})

    def kinds(self) -> list[str]:
        return sorted(self._handlers)

    def run(self, corrected: CorrectedCommand, command: Command) -> bool:
        """Run the action of one selected suggestion. Returns False when it has none."""

        action = corrected.side_effect
        if action is None:
            return False

        handler = self._handlers.get(action.kind)
        if handler is None:
            raise UnknownActionError(action.kind)

        logger.info("action.run kind={} rule={} script={!r}", action.kind, corrected.rule_name, corrected.script)
        try:
            handler(action, command, corrected.script)
        except Exception:
            logger.exception("action.error kind={}", action.kind)
            raise
        return True
