"""Address book CLI commands."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from src.addressbook.core.exceptions import CommandError, ParseError
from src.addressbook.logic.commands import (
    AddCommand,
    ClearCommand,
    CommandResult,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RemarkCommand,
)
from src.addressbook.logic.manager import LogicManager
from src.addressbook.runtime.context import get_config, with_context

from .utils import build_logic, config_override, console, person_table

_COMMANDS_IN_HELP = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    RemarkCommand,
    FindCommand,
    ListCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)

DATA_FILE_OPTION = typer.Option(
    None, "--data-file", "-d", help="Address book JSON file (overrides config.yaml)"
)
LOG_LEVEL_OPTION = typer.Option(
    None, "--log-level", "-l", case_sensitive=False, help="Logging level (DEBUG, INFO, ...)"
)


def show_help() -> None:
    usage = "\n\n".join(command.MESSAGE_USAGE for command in _COMMANDS_IN_HELP)
    console.print(Panel(escape(usage), title="Commands", border_style="blue"))


def show_result(logic: LogicManager, result: CommandResult) -> None:
    console.print(f"[green]{escape(result.feedback_to_user)}[/green]")
    if result.show_help:
        show_help()
    elif not result.should_exit:
        console.print(person_table(logic.get_filtered_person_list()))


def shell(
    data_file: Path | None = DATA_FILE_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """Start an interactive session; type 'help' for commands, 'exit' to quit."""
    with with_context(config_override(data_file, log_level)):
        logic = build_logic(get_config())
        console.print(
            f"[blue]Address book loaded from {escape(str(logic.get_address_book_file_path()))}[/blue]"
        )
        console.print(person_table(logic.get_filtered_person_list()))
        _session(logic)


def _session(logic: LogicManager) -> None:
    while True:
        try:
            command_text = Prompt.ask("[cyan]>")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        if not command_text.strip():
            continue

        try:
            result = logic.execute(command_text)
        except (ParseError, CommandError) as e:
            console.print(f"[red]❌ {escape(e.message)}[/red]")
            continue

        show_result(logic, result)
        if result.should_exit:
            return


def run(
    command: list[str] = typer.Argument(..., help="Command line to execute, e.g. find n/alice"),
    data_file: Path | None = DATA_FILE_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """Execute a single command and print the result."""
    with with_context(config_override(data_file, log_level)):
        logic = build_logic(get_config())

        try:
            result = logic.execute(" ".join(command))
        except (ParseError, CommandError) as e:
            console.print(f"[red]❌ {escape(e.message)}[/red]")
            raise typer.Exit(code=1) from e

        show_result(logic, result)
