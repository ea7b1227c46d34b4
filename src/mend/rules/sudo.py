"""Re-run commands that failed for lack of privileges with `sudo`."""

from __future__ import annotations

from mend.rule import Rule
from mend.shells import Shell
from mend.types import Command

PATTERNS = (
    "permission denied",
    "eacces",
    "pkg: insufficient privileges",
    "you cannot perform this operation unless you are root",
    "non-root users cannot",
    "operation not permitted",
    "not super-user",
    "superuser privilege",
    "root privilege",
    "this command has to be run under the root user.",
    "this operation requires root.",
    "requested operation requires superuser privilege",
    "must be run as root",
    "must run as root",
    "must be superuser",
    "must be root",
    "need to be root",
    "need root",
    "needs to be run as root",
    "only root can ",
    "authentication is required",
    "you don't have write permissions",
    "use `sudo`",
    "error: insufficient privileges",
)


def match(command: Command, shell: Shell | None = None) -> bool:
    if command.tokens and command.tokens[0] == "sudo" and "&&" not in command.tokens:
        return False
    output = (command.output or "").lower()
    return any(pattern in output for pattern in PATTERNS)


def get_new_command(command: Command, shell: Shell | None = None) -> str:
    if "&&" in command.script or ">" in command.script:
        # run the whole compound script or redirection as root
        inner = command.script.removeprefix("sudo ").replace('"', '\\"')
        return f'sudo sh -c "{inner}"'
    return f"sudo {command.script}"


rule = Rule(name="sudo", match=match, get_new_command=get_new_command)
