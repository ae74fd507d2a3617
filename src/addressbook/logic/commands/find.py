"""Find command: filter the shown list by name, module code or tag."""

from typing import ClassVar

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.core.models import ModelManager
from src.addressbook.entities.person.predicates import PersonPredicate
from src.addressbook.logic.messages import MESSAGE_PERSONS_LISTED_OVERVIEW
from src.addressbook.logic.parser.cli_syntax import PREFIX_MODULE_CODE, PREFIX_NAME, PREFIX_TAG

from .command import Command, CommandResult


class FindCommand(Command):
    """Shows only the persons matching one search criterion.

    Matching is case-insensitive. The underlying address book is not changed.
    """

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of the specified "
        "keywords (case-insensitive).\n"
        "Alternatively, finds all persons taking any of the specified module codes, "
        "or carrying any of the specified tags (case-insensitive).\n"
        "Displays the results as a list with index numbers.\n"
        f"Parameters: {PREFIX_NAME}NAME...\n"
        f"OR {PREFIX_MODULE_CODE}MODULE_CODE...\n"
        f"OR {PREFIX_TAG}TAG...\n"
        "Example:\n"
        f"{COMMAND_WORD} {PREFIX_NAME}alice bob charlie\n"
        f"{COMMAND_WORD} {PREFIX_MODULE_CODE}CS2030S CS2100"
    )
    MESSAGE_SINGLE_PREFIX_SEARCH: ClassVar[str] = "You can only search with a single prefix."

    def __init__(self, predicate: PersonPredicate) -> None:
        self.predicate = predicate

    def execute(self, model: ModelManager) -> CommandResult:
        require_non_null(model=model)
        model.update_filtered_person_list(self.predicate)
        return CommandResult(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.get_filtered_person_list()))
        )
