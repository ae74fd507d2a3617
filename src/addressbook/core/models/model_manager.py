"""The model the commands operate on: the address book plus a view filter."""

from loguru import logger

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.entities.person import Person
from src.addressbook.entities.person.predicates import PersonPredicate, show_all_persons

from .address_book import AddressBook

PREDICATE_SHOW_ALL_PERSONS: PersonPredicate = show_all_persons


class ModelManager:
    """Holds the address book and the predicate of the currently shown list.

    Commands read the filtered list to resolve indices and replace the
    predicate to change what is shown. The underlying book is only changed
    through the add, set and delete methods.
    """

    def __init__(self, address_book: AddressBook | None = None) -> None:
        logger.debug("Initializing model with {}", address_book)
        self._address_book = AddressBook.copy_of(address_book or AddressBook())
        self._predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS

    def get_address_book(self) -> AddressBook:
        return self._address_book

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    def has_person(self, person: Person) -> bool:
        require_non_null(person=person)
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def set_person(self, target: Person, edited: Person) -> None:
        require_non_null(target=target, edited=edited)
        self._address_book.set_person(target, edited)

    def delete_person(self, target: Person) -> None:
        self._address_book.remove_person(target)

    def get_filtered_person_list(self) -> list[Person]:
        """Return the persons matching the active predicate, in book order."""
        return [person for person in self._address_book.persons if self._predicate(person)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Replace the active predicate."""
        require_non_null(predicate=predicate)
        self._predicate = predicate

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return False
        return (
            self._address_book == other._address_book
            and self.get_filtered_person_list() == other.get_filtered_person_list()
        )
