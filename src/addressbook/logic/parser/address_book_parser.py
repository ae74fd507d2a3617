"""Top-level parser: dispatches on the command word."""

import re

from loguru import logger

from src.addressbook.core.exceptions import ParseError
from src.addressbook.logic.commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RemarkCommand,
)
from src.addressbook.logic.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format

from .add_command_parser import AddCommandParser
from .delete_command_parser import DeleteCommandParser
from .edit_command_parser import EditCommandParser
from .find_command_parser import FindCommandParser
from .remark_command_parser import RemarkCommandParser

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

_ARGUMENT_PARSERS = {
    AddCommand.COMMAND_WORD: AddCommandParser,
    EditCommand.COMMAND_WORD: EditCommandParser,
    DeleteCommand.COMMAND_WORD: DeleteCommandParser,
    RemarkCommand.COMMAND_WORD: RemarkCommandParser,
    FindCommand.COMMAND_WORD: FindCommandParser,
}

_NO_ARGUMENT_COMMANDS = {
    ClearCommand.COMMAND_WORD: ClearCommand,
    ListCommand.COMMAND_WORD: ListCommand,
    HelpCommand.COMMAND_WORD: HelpCommand,
    ExitCommand.COMMAND_WORD: ExitCommand,
}


class AddressBookParser:
    """Parses a full line of user input into a command."""

    def parse_command(self, user_input: str) -> Command:
        """Parse ``user_input``.

        Raises:
            ParseError: If the input is empty, the command word is unknown, or
                the arguments are invalid for the command.
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        logger.debug("Parsing command word '{}'", command_word)

        if command_word in _ARGUMENT_PARSERS:
            return _ARGUMENT_PARSERS[command_word]().parse(arguments)
        if command_word in _NO_ARGUMENT_COMMANDS:
            return _NO_ARGUMENT_COMMANDS[command_word]()

        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
