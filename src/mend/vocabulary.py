"""Discover a tool's valid subcommands from its own help output."""

from __future__ import annotations

import os
import subprocess
import threading
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

DEFAULT_HELP_TIMEOUT_SECONDS = 3.0


def parse_help_section(text: str, header: str | tuple[str, ...]) -> list[str]:
    """Read the leading word of each line under `header`, up to the next blank line."""

    entries: list[str] = []
    in_section = False
    for line in text.splitlines():
        if not in_section:
            in_section = line.startswith(header)
            continue
        if not line.strip():
            break
        entries.append(line.split()[0])
    return entries


class HelpVocabulary:
    """Runs `<tool> --help` style commands with a bounded timeout.

    Results are cached per (argv, header) only when `cache` is enabled.
    """

    def __init__(self, *, timeout_seconds: float = DEFAULT_HELP_TIMEOUT_SECONDS, cache: bool = False) -> None:
        self.timeout_seconds = timeout_seconds
        self.cache = cache
        self._cached: dict[tuple[tuple[str, ...], str | tuple[str, ...]], tuple[str, ...]] = {}
        self._lock = threading.Lock()

    def commands(self, argv: Sequence[str], header: str | tuple[str, ...]) -> list[str]:
        key = (tuple(argv), header)
        if self.cache:
            with self._lock:
                if key in self._cached:
                    return list(self._cached[key])

        entries = parse_help_section(self._run(key[0]) or "", header)

        if self.cache:
            with self._lock:
                self._cached[key] = tuple(entries)
        return entries

    def clear(self) -> None:
        with self._lock:
            self._cached.clear()

    def _run(self, argv: tuple[str, ...]) -> str | None:
        try:
            completed = subprocess.run(  # noqa: S603
                list(argv),
                capture_output=True,
                stdin=subprocess.DEVNULL,
                timeout=self.timeout_seconds,
                check=False,
            )
        except (OSError, subprocess.SubprocessError):
            logger.debug("vocabulary.exec_failed argv={}", " ".join(argv))
            return None

        if completed.returncode != 0:
            logger.debug("vocabulary.nonzero_exit argv={} code={}", " ".join(argv), completed.returncode)
            return None
        try:
            return completed.stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("vocabulary.undecodable argv={}", " ".join(argv))
            return None


def path_executables(path: str | None = None) -> list[str]:
    """List executable names on `PATH`, first occurrence wins."""

    search_path = os.environ.get("PATH", "") if path is None else path
    names: dict[str, None] = {}
    for directory in search_path.split(os.pathsep):
        if not directory:
            continue
        try:
            entries = sorted(Path(directory).iterdir())
        except OSError:
            continue
        for entry in entries:
            try:
                if entry.is_file() and os.access(entry, os.X_OK):
                    names.setdefault(entry.name, None)
            except OSError:
                continue
    return list(names)


_default = HelpVocabulary()


def default_vocabulary() -> HelpVocabulary:
    return _default


def configure_vocabulary(*, timeout_seconds: float, cache: bool) -> HelpVocabulary:
    """Replace the process-wide lookup. Called once, while the registry is built."""

    global _default
    _default = HelpVocabulary(timeout_seconds=timeout_seconds, cache=cache)
    return _default
