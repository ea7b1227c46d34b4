from __future__ import annotations

from collections.abc import Iterator

import pytest

from mend.shells import Bash
from mend.vocabulary import DEFAULT_HELP_TIMEOUT_SECONDS, configure_vocabulary


@pytest.fixture
def bash() -> Bash:
    return Bash()


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("EDITOR", raising=False)
    for name in ("MEND_RULES", "MEND_EXCLUDE_RULES", "MEND_PRIORITY", "MEND_SHELL", "MEND_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    yield
    configure_vocabulary(timeout_seconds=DEFAULT_HELP_TIMEOUT_SECONDS, cache=False)
