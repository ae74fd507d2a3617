"""In-memory address book: a list of persons with unique names."""

from collections.abc import Iterable, Iterator

from src.addressbook.core.exceptions import (
    DuplicatePersonError,
    PersonNotFoundError,
    require_non_null,
)
from src.addressbook.entities.person import Person


class UniquePersonList:
    """A list of persons in which no two share a name.

    Uniqueness uses :meth:`Person.is_same_person`; removal uses full equality,
    so a person is only removed if every field matches.
    """

    def __init__(self) -> None:
        self._persons: list[Person] = []

    def contains(self, to_check: Person) -> bool:
        require_non_null(person=to_check)
        return any(person.is_same_person(to_check) for person in self._persons)

    def add(self, to_add: Person) -> None:
        if self.contains(to_add):
            raise DuplicatePersonError()
        self._persons.append(to_add)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``.

        ``edited`` may keep ``target``'s name, but must not take the name of
        any other person in the list.
        """
        require_non_null(target=target, edited=edited)
        try:
            index = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError() from None

        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError()
        self._persons[index] = edited

    def remove(self, to_remove: Person) -> None:
        require_non_null(person=to_remove)
        try:
            self._persons.remove(to_remove)
        except ValueError:
            raise PersonNotFoundError() from None

    def set_persons(self, persons: Iterable[Person]) -> None:
        replacement = list(persons)
        if not _persons_are_unique(replacement):
            raise DuplicatePersonError()
        self._persons = replacement

    def as_list(self) -> list[Person]:
        """Return a copy of the persons, in insertion order."""
        return list(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._persons))

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UniquePersonList) and other._persons == self._persons


def _persons_are_unique(persons: list[Person]) -> bool:
    for i, person in enumerate(persons):
        if any(person.is_same_person(other) for other in persons[i + 1 :]):
            return False
    return True


class AddressBook:
    """Wraps all data at the address-book level."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons = UniquePersonList()
        self._persons.set_persons(persons)

    @classmethod
    def copy_of(cls, source: "AddressBook") -> "AddressBook":
        return cls(source.persons)

    def reset_data(self, new_data: "AddressBook") -> None:
        require_non_null(new_data=new_data)
        self._persons.set_persons(new_data.persons)

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_person(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    @property
    def persons(self) -> list[Person]:
        return self._persons.as_list()

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AddressBook) and other._persons == self._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self)} persons)"
