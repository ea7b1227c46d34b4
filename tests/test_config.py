from __future__ import annotations

import pytest
from pydantic import ValidationError

from mend.config import Settings, load_settings
from mend.vocabulary import DEFAULT_HELP_TIMEOUT_SECONDS


def test_defaults() -> None:
    settings = Settings()
    assert settings.rules == []
    assert settings.exclude_rules == []
    assert settings.priority == {}
    assert settings.shell is None
    assert settings.max_workers == 1
    assert settings.help_timeout_seconds == DEFAULT_HELP_TIMEOUT_SECONDS
    assert settings.cache_help_output is False


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEND_RULES", '["sl_ls", "sudo"]')
    monkeypatch.setenv("MEND_PRIORITY", '{"sudo": 10}')
    monkeypatch.setenv("MEND_MAX_WORKERS", "4")
    monkeypatch.setenv("MEND_SHELL", "fish")

    settings = Settings()
    assert settings.rules == ["sl_ls", "sudo"]
    assert settings.priority == {"sudo": 10}
    assert settings.max_workers == 4
    assert settings.shell == "fish"


def test_overrides_win_and_none_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEND_SHELL", "fish")
    assert load_settings(shell="zsh").shell == "zsh"
    assert load_settings(shell=None).shell == "fish"


def test_invalid_values() -> None:
    with pytest.raises(ValidationError):
        load_settings(max_workers=0)
    with pytest.raises(ValidationError):
        Settings(help_timeout_seconds=0)
