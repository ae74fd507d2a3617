"""Unit tests for the address book, its unique person list and the model."""

import pytest

from src.addressbook.core.exceptions import (
    DuplicatePersonError,
    NullFieldError,
    PersonNotFoundError,
)
from src.addressbook.core.models import (
    PREDICATE_SHOW_ALL_PERSONS,
    AddressBook,
    ModelManager,
    UniquePersonList,
)
from src.addressbook.entities.person import NameContainsKeywordsPredicate
from tests.fixtures.persons import make_person, typical_persons


class TestUniquePersonList:
    """Test the uniqueness rules of the person list."""

    def test_contains_same_name(self, amy):
        persons = UniquePersonList()
        persons.add(amy)

        assert persons.contains(amy)
        assert persons.contains(make_person(phone="999", tags=("other",)))
        assert not persons.contains(make_person(name="Amy Beech"))

    def test_contains_none(self):
        with pytest.raises(NullFieldError):
            UniquePersonList().contains(None)

    def test_add_duplicate(self, amy):
        persons = UniquePersonList()
        persons.add(amy)

        with pytest.raises(DuplicatePersonError, match="duplicate persons"):
            persons.add(make_person(email="other@example.com"))

    def test_set_person_keeps_position(self, amy, bob):
        persons = UniquePersonList()
        persons.set_persons([bob, amy])
        edited = make_person(phone="11111111")

        persons.set_person(amy, edited)

        assert persons.as_list() == [bob, edited]

    def test_set_person_to_other_name(self, amy, bob):
        persons = UniquePersonList()
        persons.add(amy)

        persons.set_person(amy, bob)

        assert persons.as_list() == [bob]

    def test_set_person_missing_target(self, amy, bob):
        with pytest.raises(PersonNotFoundError, match="Person not found"):
            UniquePersonList().set_person(amy, bob)

    def test_set_person_clashing_name(self, amy, bob):
        persons = UniquePersonList()
        persons.set_persons([amy, bob])

        with pytest.raises(DuplicatePersonError):
            persons.set_person(amy, make_person(name="Bob Choo"))

    def test_remove_requires_full_equality(self, amy):
        persons = UniquePersonList()
        persons.add(amy)

        with pytest.raises(PersonNotFoundError):
            persons.remove(make_person(phone="999"))

        persons.remove(amy)
        assert len(persons) == 0

    def test_set_persons_with_duplicates(self, amy):
        persons = UniquePersonList()

        with pytest.raises(DuplicatePersonError):
            persons.set_persons([amy, make_person(phone="999")])
        assert len(persons) == 0

    def test_iteration_is_a_snapshot(self, amy, bob):
        persons = UniquePersonList()
        persons.add(amy)

        for _ in persons:
            persons.add(bob)

        assert len(persons) == 2


class TestAddressBook:
    """Test the address book wrapper."""

    def test_empty_by_default(self):
        assert AddressBook().persons == []

    def test_reset_data(self, address_book):
        book = AddressBook()

        book.reset_data(address_book)

        assert book == address_book

    def test_reset_data_with_none(self):
        with pytest.raises(NullFieldError, match="new_data"):
            AddressBook().reset_data(None)

    def test_copy_is_independent(self, address_book, amy):
        copy = AddressBook.copy_of(address_book)

        copy.add_person(amy)

        assert not address_book.has_person(amy)
        assert len(copy) == len(address_book) + 1

    def test_persons_is_a_copy(self, address_book, amy):
        address_book.persons.append(amy)

        assert not address_book.has_person(amy)

    def test_persons_keep_insertion_order(self, address_book):
        names = [person.name.value for person in address_book.persons]

        assert names[:3] == ["Alice Pauline", "Benson Meier", "Carl Kurz"]

    def test_remove_person(self, address_book):
        alice = address_book.persons[0]

        address_book.remove_person(alice)

        assert not address_book.has_person(alice)

    def test_equality(self, address_book):
        assert address_book == AddressBook(typical_persons())
        assert address_book != AddressBook()
        assert address_book != typical_persons()


class TestModelManager:
    """Test the model and its filtered view."""

    def test_defaults_to_empty_book(self):
        model = ModelManager()

        assert model.get_address_book() == AddressBook()
        assert model.get_filtered_person_list() == []

    def test_book_is_copied(self, address_book, amy):
        model = ModelManager(address_book)

        model.add_person(amy)

        assert not address_book.has_person(amy)

    def test_filter(self, model):
        model.update_filtered_person_list(NameContainsKeywordsPredicate(["Meier"]))

        names = [person.name.value for person in model.get_filtered_person_list()]

        assert names == ["Benson Meier", "Daniel Meier"]

    def test_filter_with_none(self, model):
        with pytest.raises(NullFieldError, match="predicate"):
            model.update_filtered_person_list(None)

    def test_add_resets_filter(self, model, amy):
        model.update_filtered_person_list(NameContainsKeywordsPredicate(["Meier"]))

        model.add_person(amy)

        assert len(model.get_filtered_person_list()) == len(typical_persons()) + 1

    def test_filtered_list_follows_book_changes(self, model):
        model.update_filtered_person_list(NameContainsKeywordsPredicate(["Meier"]))
        benson = model.get_filtered_person_list()[0]

        model.delete_person(benson)

        assert [p.name.value for p in model.get_filtered_person_list()] == ["Daniel Meier"]

    def test_has_person_with_none(self, model):
        with pytest.raises(NullFieldError):
            model.has_person(None)

    def test_set_address_book(self, model):
        model.set_address_book(AddressBook())

        assert model.get_filtered_person_list() == []

    def test_equality(self, address_book):
        model = ModelManager(address_book)
        other = ModelManager(AddressBook(typical_persons()))

        assert model == other
        assert model != ModelManager()

        other.update_filtered_person_list(NameContainsKeywordsPredicate(["Alice"]))
        assert model != other

        other.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        assert model == other
