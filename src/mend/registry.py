"""The fixed collection of correction rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from loguru import logger

from mend.actions import ActionHandler, ActionRunner
from mend.config import Settings
from mend.errors import DuplicateRuleError, UnknownRuleError
from mend.rule import Rule
from mend.rules import (
    apt_get_search,
    apt_invalid_operation,
    brew_install,
    cargo_no_command,
    cp_create_destination,
    fix_file,
    git_add,
    git_not_command,
    git_pull,
    no_command,
    sl_ls,
    ssh_known_hosts,
    sudo,
    touch,
)
from mend.vocabulary import configure_vocabulary

BUILTIN_RULES: tuple[Rule, ...] = (
    apt_get_search.rule,
    apt_invalid_operation.rule,
    brew_install.rule,
    cargo_no_command.rule,
    cp_create_destination.rule,
    fix_file.rule,
    git_add.rule,
    git_not_command.rule,
    git_pull.rule,
    no_command.rule,
    sl_ls.rule,
    ssh_known_hosts.rule,
    sudo.rule,
    touch.rule,
)

BUILTIN_ACTION_HANDLERS: dict[str, ActionHandler] = {
    ssh_known_hosts.REMOVE_OFFENDING_KEYS: ssh_known_hosts.remove_offending_keys,
}


class RuleRegistry:
    """Read-only set of rules, enumerated by name."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        by_name: dict[str, Rule] = {}
        for rule in rules:
            if rule.name in by_name:
                raise DuplicateRuleError(rule.name)
            by_name[rule.name] = rule
        self._rules: tuple[Rule, ...] = tuple(sorted(by_name.values(), key=lambda item: item.name))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self._rules)

    def names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def get(self, name: str) -> Rule | None:
        for rule in self._rules:
            if rule.name == name:
                return rule
        return None


def select_rules(rules: Iterable[Rule], settings: Settings) -> list[Rule]:
    """Apply the allow-list, exclusions and priority overrides from settings."""

    rules = list(rules)
    known = {rule.name for rule in rules}
    for name in [*settings.rules, *settings.exclude_rules, *settings.priority]:
        if name not in known:
            raise UnknownRuleError(name)

    allowed = set(settings.rules)
    excluded = set(settings.exclude_rules)
    selected: list[Rule] = []
    for rule in rules:
        wanted = rule.name in allowed if allowed else rule.enabled
        if not wanted or rule.name in excluded:
            continue
        if rule.name in settings.priority:
            rule = replace(rule, priority=settings.priority[rule.name])
        selected.append(rule)
    return selected


def build_registry(settings: Settings | None = None, rules: Iterable[Rule] = BUILTIN_RULES) -> RuleRegistry:
    """Assemble the registry once, before any dispatch."""

    settings = settings or Settings()
    configure_vocabulary(timeout_seconds=settings.help_timeout_seconds, cache=settings.cache_help_output)
    registry = RuleRegistry(select_rules(rules, settings))
    logger.debug("registry.built rules={}", ",".join(registry.names()))
    return registry


def build_action_runner() -> ActionRunner:
    return ActionRunner(BUILTIN_ACTION_HANDLERS)
