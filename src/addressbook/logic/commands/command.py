"""Base class for commands and the result they return."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from src.addressbook.core.exceptions import CommandError
from src.addressbook.core.models import ModelManager
from src.addressbook.entities.person import Person
from src.addressbook.logic.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing a command."""

    feedback_to_user: str
    show_help: bool = False
    should_exit: bool = False


class Command(ABC):
    """A parsed command that can be executed against the model."""

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        """Execute the command and return the feedback to show.

        Raises:
            CommandError: If the command cannot be carried out.
        """

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and vars(other) == vars(self)


def person_at(model: ModelManager, index: int) -> Person:
    """Return the person at zero-based ``index`` of the shown list."""
    shown = model.get_filtered_person_list()
    if index >= len(shown):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return shown[index]
