"""`apt-get` has no search operation, `apt-cache` does."""

from __future__ import annotations

import re

from mend.rule import Rule
from mend.shells import Shell
from mend.types import Command
from mend.wrappers import for_app


@for_app("apt-get")
def match(command: Command, shell: Shell | None = None) -> bool:
    return command.script.startswith("apt-get search")


def get_new_command(command: Command, shell: Shell | None = None) -> str:
    return re.sub(r"^apt-get", "apt-cache", command.script)


rule = Rule(name="apt_get_search", match=match, get_new_command=get_new_command)
