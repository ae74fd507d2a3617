"""Unit tests for the command parsers."""

import pytest

from src.addressbook.core.exceptions import ParseError
from src.addressbook.entities.person import (
    Email,
    ModuleCode,
    Name,
    NameContainsKeywordsPredicate,
    Phone,
    Remark,
    Tag,
    TeleHandle,
)
from src.addressbook.logic.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RemarkCommand,
)
from src.addressbook.logic.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from src.addressbook.logic.parser.add_command_parser import AddCommandParser
from src.addressbook.logic.parser.address_book_parser import AddressBookParser
from src.addressbook.logic.parser.delete_command_parser import DeleteCommandParser
from src.addressbook.logic.parser.edit_command_parser import EditCommandParser
from src.addressbook.logic.parser.remark_command_parser import RemarkCommandParser
from tests.fixtures.persons import make_person

BOB_ARGS = " n/Bob Choo p/22222222 e/bob@example.com h/@bobchoo"


def parse_error(parser, args: str) -> str:
    with pytest.raises(ParseError) as exc_info:
        parser.parse(args)
    return exc_info.value.message


class TestAddCommandParser:
    """Test parsing add arguments."""

    def test_all_fields(self, bob):
        command = AddCommandParser().parse(BOB_ARGS + " m/CS2100 t/friend t/husband")

        assert command == AddCommand(bob)

    def test_optional_fields_missing(self):
        command = AddCommandParser().parse(BOB_ARGS)

        assert command.to_add.module_codes == frozenset()
        assert command.to_add.tags == frozenset()
        assert command.to_add.remark == Remark("")

    def test_repeated_scalar_keeps_last(self):
        command = AddCommandParser().parse(BOB_ARGS + " p/33333333")

        assert command.to_add.phone == Phone("33333333")

    @pytest.mark.parametrize(
        "args",
        [
            " Bob Choo p/22222222 e/bob@example.com h/@bobchoo",
            " n/Bob Choo e/bob@example.com h/@bobchoo",
            " n/Bob Choo p/22222222 h/@bobchoo",
            " n/Bob Choo p/22222222 e/bob@example.com",
            " preamble" + BOB_ARGS,
        ],
    )
    def test_missing_required_or_preamble(self, args):
        assert parse_error(AddCommandParser(), args) == invalid_format(AddCommand.MESSAGE_USAGE)

    @pytest.mark.parametrize(
        "extra, message",
        [
            (" n/James&", Name.MESSAGE_CONSTRAINTS),
            (" p/911a", Phone.MESSAGE_CONSTRAINTS),
            (" e/bob!yahoo", Email.MESSAGE_CONSTRAINTS),
            (" h/@bob", TeleHandle.MESSAGE_CONSTRAINTS),
            (" m/CS", ModuleCode.MESSAGE_CONSTRAINTS),
            (" t/hubby*", Tag.MESSAGE_CONSTRAINTS),
        ],
    )
    def test_invalid_value(self, extra, message):
        assert parse_error(AddCommandParser(), BOB_ARGS + extra) == message


class TestEditCommandParser:
    """Test parsing edit arguments."""

    def test_some_fields(self):
        command = EditCommandParser().parse(" 2 p/91234567 e/johndoe@example.com")

        expected = EditPersonDescriptor(phone=Phone("91234567"), email=Email("johndoe@example.com"))
        assert command == EditCommand(1, expected)

    def test_module_codes_and_tags(self):
        command = EditCommandParser().parse(" 1 m/cs2100 t/friend t/husband")

        assert command.descriptor.module_codes == frozenset({ModuleCode("CS2100")})
        assert command.descriptor.tags == frozenset({Tag("friend"), Tag("husband")})

    def test_empty_prefix_clears_set(self):
        command = EditCommandParser().parse(" 3 t/")

        assert command == EditCommand(2, EditPersonDescriptor(tags=frozenset()))

    def test_empty_value_among_others_is_invalid(self):
        assert parse_error(EditCommandParser(), " 1 t/friend t/") == Tag.MESSAGE_CONSTRAINTS

    def test_nothing_to_edit(self):
        assert parse_error(EditCommandParser(), " 1") == EditCommand.MESSAGE_NOT_EDITED

    @pytest.mark.parametrize("args", ["", " n/Amy", " -5 n/Amy", " 0 n/Amy", " 1 some text n/Amy"])
    def test_invalid_index(self, args):
        assert parse_error(EditCommandParser(), args) == invalid_format(EditCommand.MESSAGE_USAGE)

    def test_invalid_value(self):
        assert parse_error(EditCommandParser(), " 1 p/abc") == Phone.MESSAGE_CONSTRAINTS


class TestDeleteAndRemarkParsers:
    """Test parsing index-based commands."""

    def test_delete(self):
        assert DeleteCommandParser().parse(" 1 ") == DeleteCommand(0)

    @pytest.mark.parametrize("args", ["", " a", " 0", " 1 2"])
    def test_delete_invalid(self, args):
        assert parse_error(DeleteCommandParser(), args) == invalid_format(DeleteCommand.MESSAGE_USAGE)

    def test_remark(self):
        command = RemarkCommandParser().parse(" 2 r/Likes to swim.")

        assert command == RemarkCommand(1, Remark("Likes to swim."))

    def test_empty_remark(self):
        assert RemarkCommandParser().parse(" 1 r/") == RemarkCommand(0, Remark(""))

    @pytest.mark.parametrize("args", [" 1", " r/Likes", " x r/Likes"])
    def test_remark_invalid(self, args):
        assert parse_error(RemarkCommandParser(), args) == invalid_format(RemarkCommand.MESSAGE_USAGE)


class TestAddressBookParser:
    """Test dispatching on the command word."""

    @pytest.fixture
    def parser(self) -> AddressBookParser:
        return AddressBookParser()

    def test_add(self, parser):
        person = make_person(remark="", module_codes=("CS2030S",), tags=("friend",))
        command = parser.parse_command(
            "add n/Amy Bee p/85355255 e/amy@gmail.com h/@amybee m/CS2030S t/friend"
        )

        assert command == AddCommand(person)

    def test_find(self, parser):
        command = parser.parse_command("find n/foo bar baz")

        assert command == FindCommand(NameContainsKeywordsPredicate(["foo", "bar", "baz"]))

    def test_index_commands(self, parser):
        assert parser.parse_command("delete 1") == DeleteCommand(0)
        assert parser.parse_command("remark 1 r/Hi") == RemarkCommand(0, Remark("Hi"))
        assert parser.parse_command("edit 1 n/Amy") == EditCommand(0, EditPersonDescriptor(name=Name("Amy")))

    @pytest.mark.parametrize(
        "text, command_type",
        [
            ("list", ListCommand),
            ("list 3", ListCommand),
            ("clear", ClearCommand),
            ("help", HelpCommand),
            ("exit", ExitCommand),
            ("  exit  ", ExitCommand),
        ],
    )
    def test_commands_without_arguments(self, parser, text, command_type):
        assert isinstance(parser.parse_command(text), command_type)

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_input(self, parser, text):
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command(text)

        assert exc_info.value.message == invalid_format(HelpCommand.MESSAGE_USAGE)

    @pytest.mark.parametrize("text", ["unknownCommand", "LIST", "adds n/Amy"])
    def test_unknown_command(self, parser, text):
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command(text)

        assert exc_info.value.message == MESSAGE_UNKNOWN_COMMAND
