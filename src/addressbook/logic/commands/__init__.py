"""Executable commands.

Each module holds one command (or a closely related pair) and its usage text.
"""

from .add import AddCommand
from .clear import ClearCommand
from .command import Command, CommandResult
from .delete import DeleteCommand
from .edit import EditCommand, EditPersonDescriptor
from .find import FindCommand
from .help import ExitCommand, HelpCommand
from .list import ListCommand
from .remark import RemarkCommand

__all__ = [
    "Command",
    "CommandResult",
    "AddCommand",
    "ClearCommand",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "RemarkCommand",
]
