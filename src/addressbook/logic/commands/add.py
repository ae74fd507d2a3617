"""Add command."""

from typing import ClassVar

from src.addressbook.core.exceptions import CommandError, require_non_null
from src.addressbook.core.models import ModelManager
from src.addressbook.entities.person import Person
from src.addressbook.logic.parser.cli_syntax import (
    PREFIX_EMAIL,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    PREFIX_TELE_HANDLE,
)

from .command import Command, CommandResult


class AddCommand(Command):
    """Adds a person to the address book."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        "Parameters: "
        f"{PREFIX_NAME}NAME "
        f"{PREFIX_PHONE}PHONE "
        f"{PREFIX_EMAIL}EMAIL "
        f"{PREFIX_TELE_HANDLE}TELEGRAM "
        f"[{PREFIX_MODULE_CODE}MODULE_CODE]... "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} "
        f"{PREFIX_NAME}John Doe "
        f"{PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com "
        f"{PREFIX_TELE_HANDLE}@johndoe "
        f"{PREFIX_MODULE_CODE}CS2030S "
        f"{PREFIX_TAG}friends"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "This person already exists in the address book"

    def __init__(self, person: Person) -> None:
        require_non_null(person=person)
        self.to_add = person

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        if model.has_person(self.to_add):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)

        model.add_person(self.to_add)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.to_add))
