"""Shared dataclasses for commands and suggestions."""

from __future__ import annotations

import shlex
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from mend.shells import Shell

_UNSET: Any = object()


def split_script(script: str) -> tuple[str, ...]:
    """Split script text into words using POSIX shell rules.

    Unbalanced quotes fall back to plain whitespace splitting.
    """

    try:
        return tuple(shlex.split(script))
    except ValueError:
        return tuple(script.split())


@dataclass(frozen=True)
class Command:
    """One failing invocation under examination."""

    script: str
    output: str | None = None
    exit_code: int | None = None
    tokens: tuple[str, ...] = field(default=_UNSET, compare=False)

    def __post_init__(self) -> None:
        if self.tokens is _UNSET:
            object.__setattr__(self, "tokens", split_script(self.script))
        else:
            object.__setattr__(self, "tokens", tuple(self.tokens))

    @classmethod
    def from_parts(cls, parts: Iterable[str], output: str | None = None, exit_code: int | None = None) -> Command:
        """Build a command from argv-style parts, quoting parts with whitespace."""

        parts = list(parts)
        # A single part is taken as a complete script typed by the user.
        if len(parts) == 1:
            return cls(script=parts[0].strip(), output=output, exit_code=exit_code)
        words = [part if part and not any(ch.isspace() for ch in part) else shlex.quote(part) for part in parts]
        return cls(script=" ".join(words), output=output, exit_code=exit_code)

    @property
    def app(self) -> str | None:
        return self.tokens[0] if self.tokens else None

    def with_overrides(self, *, script: str | None = None, output: Any = _UNSET) -> Command:
        """Return a derived copy. Tokens are recomputed only when the script changed."""

        new_script = self.script if script is None else script
        new_output = self.output if output is _UNSET else output
        tokens = self.tokens if new_script == self.script else _UNSET
        return Command(script=new_script, output=new_output, exit_code=self.exit_code, tokens=tokens)


@dataclass(frozen=True)
class SideEffect:
    """Inert, tagged action attached to a suggestion.

    The pipeline never runs it; `mend.actions.ActionRunner` looks the kind up
    in its handler table once a suggestion has been selected.
    """

    kind: str
    params: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, kind: str, params: Mapping[str, str] | None = None) -> SideEffect:
        return cls(kind=kind, params=tuple(sorted((params or {}).items())))

    def param(self, key: str, default: str | None = None) -> str | None:
        return dict(self.params).get(key, default)


@dataclass(frozen=True)
class CorrectedCommand:
    """One concrete suggestion."""

    script: str
    priority: int
    side_effect: SideEffect | None = None
    rule_name: str = field(default="", compare=False)


Predicate: TypeAlias = "Callable[[Command, Shell | None], bool]"
Candidates: TypeAlias = str | Iterable[str] | None | bool
Generator: TypeAlias = "Callable[[Command, Shell | None], Candidates]"
