"""Parser for the add command."""

from src.addressbook.core.exceptions import ParseError
from src.addressbook.entities.person import Person
from src.addressbook.logic.commands import AddCommand
from src.addressbook.logic.messages import invalid_format

from . import parser_util
from .argument_tokenizer import tokenize
from .cli_syntax import (
    PREFIX_EMAIL,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    PREFIX_TELE_HANDLE,
)


class AddCommandParser:
    def parse(self, args: str) -> AddCommand:
        multimap = tokenize(
            args,
            PREFIX_NAME,
            PREFIX_PHONE,
            PREFIX_EMAIL,
            PREFIX_TELE_HANDLE,
            PREFIX_MODULE_CODE,
            PREFIX_TAG,
        )

        required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_TELE_HANDLE)
        if not parser_util.are_prefixes_present(multimap, *required) or multimap.get_preamble():
            raise ParseError(invalid_format(AddCommand.MESSAGE_USAGE))

        person = Person(
            name=parser_util.parse_name(multimap.get_value(PREFIX_NAME)),
            phone=parser_util.parse_phone(multimap.get_value(PREFIX_PHONE)),
            email=parser_util.parse_email(multimap.get_value(PREFIX_EMAIL)),
            tele_handle=parser_util.parse_tele_handle(multimap.get_value(PREFIX_TELE_HANDLE)),
            module_codes=parser_util.parse_module_codes(
                multimap.get_all_values(PREFIX_MODULE_CODE)
            ),
            tags=parser_util.parse_tags(multimap.get_all_values(PREFIX_TAG)),
        )
        return AddCommand(person)
