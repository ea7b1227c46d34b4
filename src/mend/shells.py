"""Per-shell statement sequencing and quoting."""

from __future__ import annotations

import os
import shlex
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import PurePath

from mend.errors import MissingShellError, UnsupportedShellError


class Shell(ABC):
    """Capability set of one shell family."""

    name: str = ""

    @abstractmethod
    def sequence(self, statements: Iterable[str]) -> str:
        """Compose statements so each runs only if the previous one succeeded."""

    def quote(self, token: str) -> str:
        return shlex.quote(token)

    def and_(self, *statements: str) -> str:
        return self.sequence(statements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Generic(Shell):
    name = "sh"

    def sequence(self, statements: Iterable[str]) -> str:
        return " && ".join(statements)


class Bash(Generic):
    name = "bash"


class Zsh(Generic):
    name = "zsh"


class Tcsh(Generic):
    name = "tcsh"


class Fish(Shell):
    name = "fish"

    def sequence(self, statements: Iterable[str]) -> str:
        return "; and ".join(statements)

    def quote(self, token: str) -> str:
        if token and all(ch.isalnum() or ch in "@%+=:,./-_" for ch in token):
            return token
        escaped = token.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"


class PowerShell(Shell):
    name = "powershell"

    def sequence(self, statements: Iterable[str]) -> str:
        return " -and ".join(f"({statement})" for statement in statements)

    def quote(self, token: str) -> str:
        escaped = token.replace("'", "''")
        return f"'{escaped}'"


SHELLS: dict[str, type[Shell]] = {
    "sh": Generic,
    "bash": Bash,
    "zsh": Zsh,
    "tcsh": Tcsh,
    "csh": Tcsh,
    "fish": Fish,
    "powershell": PowerShell,
    "pwsh": PowerShell,
}


def get_shell(name: str | None = None) -> Shell:
    """Resolve a shell by name, or from `$SHELL` when no name is given."""

    if name:
        shell_class = SHELLS.get(name.strip().lower())
        if shell_class is None:
            raise UnsupportedShellError(name)
        return shell_class()

    detected = PurePath(os.environ.get("SHELL", "")).name.lower()
    return SHELLS.get(detected, Generic)()


def require_shell(shell: Shell | None) -> Shell:
    if shell is None:
        raise MissingShellError("this rule composes statements and needs a shell")
    return shell
