"""mend - suggest corrected versions of a failed shell command."""

from .corrector import get_corrected_commands, organize_commands
from .registry import RuleRegistry, build_registry
from .rule import Rule
from .shells import Shell, get_shell
from .types import Command, CorrectedCommand, SideEffect

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CorrectedCommand",
    "Rule",
    "RuleRegistry",
    "Shell",
    "SideEffect",
    "build_registry",
    "get_corrected_commands",
    "get_shell",
    "organize_commands",
]
