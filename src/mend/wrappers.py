"""Composable gates and normalizers for rule predicates and generators.

Every wrapper takes a narrow callable with the `(command, shell)` signature
and returns a wider one. The returned closures only capture immutable values.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection
from functools import wraps
from pathlib import PurePath
from typing import Any

from mend.rule import as_candidates
from mend.shells import Shell
from mend.types import Command, Predicate, split_script

SUDO_PREFIX = "sudo "
GIT_APPS = frozenset({"git", "hub"})
GIT_ALIAS_MARKER = "trace: alias expansion:"
GIT_ALIAS_RE = re.compile(r"trace: alias expansion: ([^ ]*) => ([^\n]*)")


def is_app(command: Command, allowed_names: Collection[str], min_extra_tokens: int = 0) -> bool:
    """Check the executable base name and that it has more than `min_extra_tokens` words."""

    if isinstance(allowed_names, str):
        allowed_names = (allowed_names,)
    if len(command.tokens) <= min_extra_tokens:
        return False
    return PurePath(command.tokens[0]).name in allowed_names


def gate(
    predicate: Predicate,
    command: Command,
    allowed_names: Collection[str],
    min_extra_tokens: int = 0,
    shell: Shell | None = None,
) -> bool:
    if not is_app(command, allowed_names, min_extra_tokens):
        return False
    return predicate(command, shell)


def for_app(*names: str, at_least: int = 0) -> Callable[[Predicate], Predicate]:
    """Gate a match predicate on the executable name and arity."""

    allowed = frozenset(names)

    def decorator(predicate: Predicate) -> Predicate:
        @wraps(predicate)
        def gated(command: Command, shell: Shell | None = None) -> bool:
            return gate(predicate, command, allowed, at_least, shell)

        return gated

    return decorator


def _strip_sudo(command: Command) -> Command | None:
    if not command.script.startswith(SUDO_PREFIX):
        return None
    return command.with_overrides(script=command.script[len(SUDO_PREFIX) :])


def match_without_sudo(predicate: Predicate, command: Command, shell: Shell | None = None) -> bool:
    stripped = _strip_sudo(command)
    if stripped is None:
        return predicate(command, shell)
    return predicate(stripped, shell)


def generate_without_sudo(
    generator: Callable[[Command, Shell | None], Any],
    command: Command,
    shell: Shell | None = None,
) -> list[str]:
    stripped = _strip_sudo(command)
    if stripped is None:
        return as_candidates(generator(command, shell))
    return [SUDO_PREFIX + candidate for candidate in as_candidates(generator(stripped, shell))]


def sudo_support(fn: Callable[[Command, Shell | None], Any]) -> Callable[[Command, Shell | None], Any]:
    """Let a predicate or generator ignore a leading `sudo `.

    Boolean results pass through untouched, candidate results get the prefix
    back.
    """

    @wraps(fn)
    def wrapper(command: Command, shell: Shell | None = None) -> Any:
        stripped = _strip_sudo(command)
        if stripped is None:
            return fn(command, shell)
        result = fn(stripped, shell)
        if isinstance(result, bool) or result is None:
            return result
        return [SUDO_PREFIX + candidate for candidate in as_candidates(result)]

    return wrapper


def expand_git_alias(command: Command, shell: Shell | None = None) -> Command:
    """Rewrite the script with the alias expansion reported by `GIT_TRACE=1`."""

    if not command.output or GIT_ALIAS_MARKER not in command.output:
        return command
    found = GIT_ALIAS_RE.search(command.output)
    if found is None:
        return command

    alias = found.group(1)
    # git quotes every word of the expansion ('commit' '--amend')
    words = split_script(found.group(2))
    expansion = " ".join(shell.quote(word) if shell else word for word in words)
    new_script = re.sub(rf"\b{re.escape(alias)}\b", lambda _: expansion, command.script)
    return command.with_overrides(script=new_script)


def git_support(fn: Callable[[Command, Shell | None], Any]) -> Callable[[Command, Shell | None], Any]:
    """Gate on git/hub and resolve git aliases before delegating."""

    @wraps(fn)
    def wrapper(command: Command, shell: Shell | None = None) -> Any:
        if not is_app(command, GIT_APPS):
            return False
        return fn(expand_git_alias(command, shell), shell)

    return wrapper
