"""Runs user input end to end: parse, execute, persist."""

from pathlib import Path

from loguru import logger

from src.addressbook.core.exceptions import CommandError
from src.addressbook.core.models import ModelManager
from src.addressbook.core.storage import AddressBookStorage
from src.addressbook.entities.person import Person

from .commands import CommandResult
from .parser.address_book_parser import AddressBookParser


class LogicManager:
    """Entry point of the command layer for any front end."""

    def __init__(self, model: ModelManager, storage: AddressBookStorage) -> None:
        self._model = model
        self._storage = storage
        self._parser = AddressBookParser()

    def execute(self, command_text: str) -> CommandResult:
        """Parse and run ``command_text``, then save the address book.

        Raises:
            ParseError: If the text is not a valid command.
            CommandError: If the command fails or the data cannot be saved.
        """
        logger.info("----------------[USER COMMAND][{}]", command_text)

        command = self._parser.parse_command(command_text)
        result = command.execute(self._model)

        try:
            self._storage.save_address_book(self._model.get_address_book())
        except OSError as e:
            raise CommandError(f"Could not save data to file: {e}") from e

        logger.debug("Result: {}", result.feedback_to_user)
        return result

    def get_filtered_person_list(self) -> list[Person]:
        return self._model.get_filtered_person_list()

    def get_address_book_file_path(self) -> Path:
        return self._storage.get_address_book_file_path()
