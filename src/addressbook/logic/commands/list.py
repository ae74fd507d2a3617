"""List command."""

from typing import ClassVar

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.core.models import PREDICATE_SHOW_ALL_PERSONS, ModelManager

from .command import Command, CommandResult


class ListCommand(Command):
    """Shows every person in the address book."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Lists all persons."
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS)
