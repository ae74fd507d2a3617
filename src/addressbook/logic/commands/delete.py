"""Delete command."""

from typing import ClassVar

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.core.models import ModelManager

from .command import Command, CommandResult, person_at


class DeleteCommand(Command):
    """Deletes the person at an index of the shown list."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the person identified by the index number used "
        "in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_DELETE_PERSON_SUCCESS: ClassVar[str] = "Deleted Person: {}"

    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        to_delete = person_at(model, self.index)
        model.delete_person(to_delete)
        return CommandResult(self.MESSAGE_DELETE_PERSON_SUCCESS.format(to_delete))
