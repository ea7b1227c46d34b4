"""Application-level exception types for mend."""

from __future__ import annotations


class MendError(Exception):
    """Base exception for mend."""


class ConfigurationError(MendError):
    """Base exception for configuration and startup validation errors."""


class UnsupportedShellError(ConfigurationError):
    """Raised when a configured shell name has no implementation."""

    def __init__(self, shell_name: str) -> None:
        super().__init__(f"Unsupported shell: {shell_name}")
        self.shell_name = shell_name


class UnknownRuleError(ConfigurationError):
    """Raised when configuration references a rule that does not exist."""

    def __init__(self, rule_name: str) -> None:
        super().__init__(f"Unknown rule: {rule_name}")
        self.rule_name = rule_name


class RuleDefinitionError(MendError):
    """Base exception for malformed rule sets."""


class DuplicateRuleError(RuleDefinitionError):
    """Raised when two rules share one name."""

    def __init__(self, rule_name: str) -> None:
        super().__init__(f"Rule '{rule_name}' is defined more than once")
        self.rule_name = rule_name


class ContractError(MendError):
    """Programming-contract violations. Never contained by the pipeline."""


class MissingShellError(ContractError):
    """Raised when a rule needs statement sequencing but got no shell."""


class ActionError(MendError):
    """Base exception for side-effect execution errors."""


class UnknownActionError(ActionError):
    """Raised when no handler is registered for a side-effect kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"No handler registered for action '{kind}'")
        self.kind = kind
