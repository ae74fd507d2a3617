"""Help and exit commands."""

from typing import ClassVar

from src.addressbook.core.models import ModelManager

from .command import Command, CommandResult


class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    )
    SHOWING_HELP_MESSAGE: ClassVar[str] = "Showing help."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting Address Book as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, should_exit=True)
