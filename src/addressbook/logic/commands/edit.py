"""Edit command."""

from dataclasses import dataclass, fields
from typing import ClassVar

from src.addressbook.core.exceptions import CommandError, require_non_null
from src.addressbook.core.models import PREDICATE_SHOW_ALL_PERSONS, ModelManager
from src.addressbook.entities.person import (
    Email,
    ModuleCode,
    Name,
    Person,
    Phone,
    Tag,
    TeleHandle,
)
from src.addressbook.logic.parser.cli_syntax import (
    PREFIX_EMAIL,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    PREFIX_TELE_HANDLE,
)

from .command import Command, CommandResult, person_at


@dataclass
class EditPersonDescriptor:
    """The fields to change on a person; None means keep the current value.

    A module code or tag set, when given, replaces the person's whole set.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    tele_handle: TeleHandle | None = None
    module_codes: frozenset[ModuleCode] | None = None
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, field.name) is not None for field in fields(self))


class EditCommand(Command):
    """Edits the details of the person at an index of the shown list."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the details of the person identified by the index "
        "number used in the displayed person list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] "
        f"[{PREFIX_PHONE}PHONE] "
        f"[{PREFIX_EMAIL}EMAIL] "
        f"[{PREFIX_TELE_HANDLE}TELEGRAM] "
        f"[{PREFIX_MODULE_CODE}MODULE_CODE]... "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 "
        f"{PREFIX_PHONE}91234567 "
        f"{PREFIX_EMAIL}johndoe@example.com"
    )
    MESSAGE_EDIT_PERSON_SUCCESS: ClassVar[str] = "Edited Person: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "This person already exists in the address book."

    def __init__(self, index: int, descriptor: EditPersonDescriptor) -> None:
        require_non_null(index=index, descriptor=descriptor)
        self.index = index
        self.descriptor = descriptor

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        to_edit = person_at(model, self.index)
        edited = create_edited_person(to_edit, self.descriptor)

        if not to_edit.is_same_person(edited) and model.has_person(edited):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)

        model.set_person(to_edit, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_EDIT_PERSON_SUCCESS.format(edited))


def create_edited_person(to_edit: Person, descriptor: EditPersonDescriptor) -> Person:
    """Build a new person from ``to_edit`` with the descriptor's changes applied."""

    def pick(new, old):
        return old if new is None else new

    return Person(
        name=pick(descriptor.name, to_edit.name),
        email=pick(descriptor.email, to_edit.email),
        phone=pick(descriptor.phone, to_edit.phone),
        tele_handle=pick(descriptor.tele_handle, to_edit.tele_handle),
        remark=to_edit.remark,
        module_codes=pick(descriptor.module_codes, to_edit.module_codes),
        tags=pick(descriptor.tags, to_edit.tags),
    )
