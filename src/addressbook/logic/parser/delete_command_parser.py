"""Parser for the delete command."""

from src.addressbook.core.exceptions import ParseError
from src.addressbook.logic.commands import DeleteCommand
from src.addressbook.logic.messages import invalid_format

from .parser_util import parse_index


class DeleteCommandParser:
    def parse(self, args: str) -> DeleteCommand:
        try:
            return DeleteCommand(parse_index(args))
        except ParseError as e:
            raise ParseError(invalid_format(DeleteCommand.MESSAGE_USAGE)) from e
