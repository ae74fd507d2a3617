"""Remark command."""

from typing import ClassVar

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.core.models import PREDICATE_SHOW_ALL_PERSONS, ModelManager
from src.addressbook.entities.person import Person, Remark
from src.addressbook.logic.parser.cli_syntax import PREFIX_REMARK

from .command import Command, CommandResult, person_at


class RemarkCommand(Command):
    """Replaces the remark of the person at an index of the shown list.

    An empty remark removes the existing one.
    """

    COMMAND_WORD: ClassVar[str] = "remark"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the remark of the person identified by the index "
        "number used in the displayed person list. "
        "Existing remark will be overwritten by the input.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_REMARK}[REMARK]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_REMARK}Likes to swim."
    )
    MESSAGE_ADD_REMARK_SUCCESS: ClassVar[str] = "Added remark to Person: {}"
    MESSAGE_DELETE_REMARK_SUCCESS: ClassVar[str] = "Removed remark from Person: {}"

    def __init__(self, index: int, remark: Remark) -> None:
        require_non_null(index=index, remark=remark)
        self.index = index
        self.remark = remark

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        to_edit = person_at(model, self.index)
        edited = Person(
            name=to_edit.name,
            email=to_edit.email,
            phone=to_edit.phone,
            tele_handle=to_edit.tele_handle,
            remark=self.remark,
            module_codes=to_edit.module_codes,
            tags=to_edit.tags,
        )

        model.set_person(to_edit, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

        message = (
            self.MESSAGE_ADD_REMARK_SUCCESS
            if self.remark.value
            else self.MESSAGE_DELETE_REMARK_SUCCESS
        )
        return CommandResult(message.format(edited))
