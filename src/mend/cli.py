"""Command line interface for mend."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from mend.config import load_settings
from mend.corrector import get_corrected_commands
from mend.errors import MendError
from mend.logging_utils import configure_logging
from mend.registry import build_action_runner, build_registry
from mend.shells import get_shell
from mend.types import Command

app = typer.Typer(
    name="mend",
    help="Suggest corrected versions of a failed shell command.",
    add_completion=False,
)


def _fail(error: Exception) -> None:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2)


def _read_output(output: str | None, output_file: Path | None) -> str | None:
    if output is not None:
        return output
    if output_file is None:
        return None
    return output_file.read_text(encoding="utf-8", errors="replace")


@app.command("fix")
def fix(
    script: list[str] = typer.Argument(..., help="Failed command, as words or one quoted string"),
    output: str | None = typer.Option(None, "--output", "-o", help="Captured stdout and stderr"),
    output_file: Path | None = typer.Option(  # noqa: B008
        None, "--output-file", help="Read the captured output from a file", exists=True, dir_okay=False
    ),
    exit_code: int | None = typer.Option(None, "--exit-code", help="Exit status of the failed command"),
    shell_name: str | None = typer.Option(None, "--shell", help="Shell syntax for composed suggestions"),
    select_first: bool = typer.Option(False, "--select-first", help="Print only the best suggestion"),
    exclude_rule: list[str] | None = typer.Option(None, "--exclude-rule", help="Skip a rule by name"),  # noqa: B008
    debug: bool = typer.Option(False, "--debug", help="Log rule evaluation to stderr"),
) -> None:
    """Print suggestions for one failed command, best first."""

    try:
        settings = load_settings(
            shell=shell_name,
            exclude_rules=exclude_rule or None,
            log_level="DEBUG" if debug else None,
        )
        configure_logging(profile="rich" if debug else "default", level=settings.log_level)
        shell = get_shell(settings.shell)
        registry = build_registry(settings)
    except MendError as exc:
        _fail(exc)
        return

    command = Command.from_parts(script, output=_read_output(output, output_file), exit_code=exit_code)
    suggestions = get_corrected_commands(command, shell, registry, max_workers=settings.max_workers)
    logger.debug("Retrieved command(s): {}", [suggestion.script for suggestion in suggestions])

    if not suggestions:
        typer.echo("No correction found", err=True)
        raise typer.Exit(1)

    if select_first:
        chosen = suggestions[0]
        try:
            build_action_runner().run(chosen, command)
        except (MendError, OSError) as exc:
            _fail(exc)
        typer.echo(chosen.script)
        return

    for index, suggestion in enumerate(suggestions, start=1):
        typer.echo(f"{index}. {suggestion.script}")


@app.command("rules")
def list_rules(
    exclude_rule: list[str] | None = typer.Option(None, "--exclude-rule", help="Skip a rule by name"),  # noqa: B008
) -> None:
    """Show the active rules in registry order."""

    try:
        settings = load_settings(exclude_rules=exclude_rule or None)
        registry = build_registry(settings)
    except MendError as exc:
        _fail(exc)
        return

    table = Table("rule", "priority", "requires output", "side effect")
    for rule in registry:
        table.add_row(
            rule.name,
            str(rule.priority),
            "yes" if rule.requires_output else "no",
            rule.side_effect.kind if rule.side_effect else "-",
        )
    Console().print(table)
