"""Exception hierarchy for the address book."""

from __future__ import annotations


class AddressBookError(Exception):
    """Base error carrying a single user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConstraintViolationError(AddressBookError, ValueError):
    """A value object's raw string fails its format rule."""


class NullFieldError(AddressBookError, TypeError):
    """A required field or collaborator was given as None."""


class ParseError(AddressBookError):
    """Command text is malformed, ambiguous or empty."""


class CommandError(AddressBookError):
    """A well-formed command could not be executed."""


class IllegalValueError(AddressBookError):
    """A stored record violates a data constraint."""


class DataLoadingError(AddressBookError):
    """The data file could not be read or converted."""


class DuplicatePersonError(AddressBookError):
    """The operation would result in two persons with the same name."""

    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(AddressBookError):
    """The person is not in the list."""

    def __init__(self) -> None:
        super().__init__("Person not found")


def require_non_null(**values: object) -> None:
    """Raise NullFieldError naming the first argument that is None."""
    for field_name, value in values.items():
        if value is None:
            raise NullFieldError(f"{field_name} must not be None")
