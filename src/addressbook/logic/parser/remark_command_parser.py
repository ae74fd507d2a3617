"""Parser for the remark command."""

from src.addressbook.core.exceptions import ParseError
from src.addressbook.logic.commands import RemarkCommand
from src.addressbook.logic.messages import invalid_format

from .argument_tokenizer import tokenize
from .cli_syntax import PREFIX_REMARK
from .parser_util import parse_index, parse_remark


class RemarkCommandParser:
    def parse(self, args: str) -> RemarkCommand:
        multimap = tokenize(args, PREFIX_REMARK)
        if not multimap.is_present(PREFIX_REMARK):
            raise ParseError(invalid_format(RemarkCommand.MESSAGE_USAGE))

        try:
            index = parse_index(multimap.get_preamble())
        except ParseError as e:
            raise ParseError(invalid_format(RemarkCommand.MESSAGE_USAGE)) from e

        return RemarkCommand(index, parse_remark(multimap.get_value(PREFIX_REMARK)))
