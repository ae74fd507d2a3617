"""Unit tests for the logic manager."""

import pytest

from src.addressbook.core.exceptions import CommandError, ParseError
from src.addressbook.core.models import AddressBook, ModelManager
from src.addressbook.core.storage import JsonAddressBookStorage
from src.addressbook.logic.manager import LogicManager
from src.addressbook.logic.messages import MESSAGE_UNKNOWN_COMMAND


class FailingStorage(JsonAddressBookStorage):
    """Storage whose writes always fail."""

    def save_address_book(self, address_book, file_path=None):
        raise OSError("disk full")


@pytest.fixture
def logic(storage) -> LogicManager:
    return LogicManager(ModelManager(), storage)


class TestLogicManager:
    """Test running commands end to end."""

    def test_unknown_command(self, logic):
        with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
            logic.execute("uicfhmowqewca")

    def test_invalid_index(self, logic):
        with pytest.raises(CommandError, match="index provided is invalid"):
            logic.execute("delete 9")

    def test_add_is_saved(self, logic, storage):
        result = logic.execute("add n/Amy Bee p/85355255 e/amy@gmail.com h/@amybee t/friend")

        assert result.feedback_to_user.startswith("New person added: Amy Bee;")
        saved = storage.read_address_book()
        assert [p.name.value for p in saved.persons] == ["Amy Bee"]

    def test_parse_error_does_not_save(self, logic, storage):
        with pytest.raises(ParseError):
            logic.execute("add n/Amy")

        assert storage.read_address_book() is None

    def test_read_only_command_still_saves(self, logic, storage):
        logic.execute("list")

        assert storage.read_address_book() == AddressBook()

    def test_save_failure(self, data_file):
        logic = LogicManager(ModelManager(), FailingStorage(data_file))

        with pytest.raises(CommandError, match="Could not save data to file: disk full"):
            logic.execute("list")

    def test_filtered_list(self, storage, address_book):
        logic = LogicManager(ModelManager(address_book), storage)

        logic.execute("find n/Meier")

        assert [p.name.value for p in logic.get_filtered_person_list()] == ["Benson Meier", "Daniel Meier"]

    def test_file_path(self, logic, data_file):
        assert logic.get_address_book_file_path() == data_file
