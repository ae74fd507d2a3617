"""Clear command."""

from typing import ClassVar

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.core.models import AddressBook, ModelManager

from .command import Command, CommandResult


class ClearCommand(Command):
    """Removes every person from the address book."""

    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Deletes all persons."
    MESSAGE_SUCCESS: ClassVar[str] = "Address book has been cleared!"

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        model.set_address_book(AddressBook())
        return CommandResult(self.MESSAGE_SUCCESS)
