"""Parser for the edit command."""

from src.addressbook.core.exceptions import ParseError
from src.addressbook.logic.commands import EditCommand, EditPersonDescriptor
from src.addressbook.logic.messages import invalid_format

from . import parser_util
from .argument_tokenizer import ArgumentMultimap, tokenize
from .cli_syntax import (
    PREFIX_EMAIL,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    PREFIX_TELE_HANDLE,
    Prefix,
)


class EditCommandParser:
    def parse(self, args: str) -> EditCommand:
        multimap = tokenize(
            args,
            PREFIX_NAME,
            PREFIX_PHONE,
            PREFIX_EMAIL,
            PREFIX_TELE_HANDLE,
            PREFIX_MODULE_CODE,
            PREFIX_TAG,
        )

        try:
            index = parser_util.parse_index(multimap.get_preamble())
        except ParseError as e:
            raise ParseError(invalid_format(EditCommand.MESSAGE_USAGE)) from e

        descriptor = EditPersonDescriptor()
        if multimap.is_present(PREFIX_NAME):
            descriptor.name = parser_util.parse_name(multimap.get_value(PREFIX_NAME))
        if multimap.is_present(PREFIX_PHONE):
            descriptor.phone = parser_util.parse_phone(multimap.get_value(PREFIX_PHONE))
        if multimap.is_present(PREFIX_EMAIL):
            descriptor.email = parser_util.parse_email(multimap.get_value(PREFIX_EMAIL))
        if multimap.is_present(PREFIX_TELE_HANDLE):
            descriptor.tele_handle = parser_util.parse_tele_handle(
                multimap.get_value(PREFIX_TELE_HANDLE)
            )

        module_codes = _set_values(multimap, PREFIX_MODULE_CODE)
        if module_codes is not None:
            descriptor.module_codes = parser_util.parse_module_codes(module_codes)
        tags = _set_values(multimap, PREFIX_TAG)
        if tags is not None:
            descriptor.tags = parser_util.parse_tags(tags)

        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

        return EditCommand(index, descriptor)


def _set_values(multimap: ArgumentMultimap, prefix: Prefix) -> list[str] | None:
    """Values given for a set-valued prefix.

    Returns None if the prefix is absent, and an empty list if it appears
    once with no value, which clears the set.
    """
    if not multimap.is_present(prefix):
        return None
    values = multimap.get_all_values(prefix)
    if values == [""]:
        return []
    return values
