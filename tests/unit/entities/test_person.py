"""Unit tests for the Person entity."""

import pytest
from pydantic import ValidationError

from src.addressbook.core.exceptions import NullFieldError
from src.addressbook.entities.person import (
    Email,
    ModuleCode,
    Name,
    Person,
    Phone,
    Remark,
    Tag,
    TeleHandle,
)
from tests.fixtures.persons import make_person


class TestPersonCreation:
    """Test building persons."""

    def test_create_with_all_fields(self):
        """Should keep every supplied field."""
        person = make_person(module_codes=("CS2030S",), tags=("friends",))

        assert person.name == Name("Amy Bee")
        assert person.phone == Phone("85355255")
        assert person.email == Email("amy@gmail.com")
        assert person.tele_handle == TeleHandle("@amybee")
        assert person.remark == Remark("She likes aardvarks.")
        assert person.module_codes == {ModuleCode("CS2030S")}
        assert person.tags == {Tag("friends")}

    def test_optional_collections_default_to_empty(self):
        person = Person(
            name=Name("Amy Bee"),
            email=Email("amy@gmail.com"),
            phone=Phone("85355255"),
            tele_handle=TeleHandle("@amybee"),
        )

        assert person.remark == Remark("")
        assert person.module_codes == frozenset()
        assert person.tags == frozenset()

    @pytest.mark.parametrize("field", ["name", "email", "phone", "tele_handle", "remark", "tags"])
    def test_null_field_rejected(self, field):
        """Should fail with NullFieldError naming the field."""
        fields = {
            "name": Name("Amy Bee"),
            "email": Email("amy@gmail.com"),
            "phone": Phone("85355255"),
            "tele_handle": TeleHandle("@amybee"),
            "remark": Remark(""),
            "module_codes": set(),
            "tags": set(),
        }
        fields[field] = None

        with pytest.raises(NullFieldError, match=field):
            Person(**fields)

    def test_duplicate_codes_and_tags_collapse(self):
        person = make_person(module_codes=("CS2030S", "cs2030s"), tags=("friends", "friends"))

        assert len(person.module_codes) == 1
        assert len(person.tags) == 1

    def test_collections_are_copied(self):
        """Changing the caller's set afterwards must not change the person."""
        tags = {Tag("friends")}
        person = make_person()
        person = Person(
            name=person.name,
            email=person.email,
            phone=person.phone,
            tele_handle=person.tele_handle,
            tags=tags,
        )

        tags.add(Tag("colleagues"))

        assert person.tags == {Tag("friends")}


class TestPersonImmutability:
    """Test that persons cannot be changed after construction."""

    def test_collections_have_no_mutators(self):
        """Module codes and tags are read-only; mutators raise AttributeError."""
        person = make_person(module_codes=("CS2030S",), tags=("friends",))

        with pytest.raises(AttributeError):
            person.tags.add(Tag("colleagues"))
        with pytest.raises(AttributeError):
            person.module_codes.remove(ModuleCode("CS2030S"))

    def test_fields_cannot_be_reassigned(self):
        person = make_person()

        with pytest.raises(ValidationError):
            person.name = Name("Someone Else")


class TestPersonEquality:
    """Test weak (same person) and strong (==) equality."""

    def test_is_same_person(self, amy, bob):
        assert amy.is_same_person(amy)
        assert not amy.is_same_person(None)
        assert not amy.is_same_person(bob)

    def test_same_name_other_fields_different_is_same_person(self, amy):
        edited = make_person(
            phone="99999999",
            email="other@example.com",
            tele_handle="@someoneelse",
            tags=("husband",),
        )

        assert amy.is_same_person(edited)
        assert amy != edited

    def test_different_name_same_other_fields_is_not_same_person(self, amy):
        edited = make_person(name="Bob Choo", module_codes=("CS2030S",), tags=("friend",))

        assert not amy.is_same_person(edited)

    def test_name_comparison_is_case_sensitive(self, amy):
        edited = make_person(name="amy bee")

        assert not amy.is_same_person(edited)

    def test_equals(self, amy, bob):
        """All six fields must match; sets compare as sets."""
        copy = make_person(module_codes=("CS2030S",), tags=("friend",))

        assert amy == copy
        assert hash(amy) == hash(copy)
        assert amy == amy
        assert amy != None  # noqa: E711
        assert amy != 5
        assert amy != bob

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "Bob Choo"},
            {"phone": "22222222"},
            {"email": "bob@example.com"},
            {"tele_handle": "@bobchoo"},
            {"module_codes": ("CS2100",)},
            {"tags": ("husband",)},
        ],
    )
    def test_any_differing_field_breaks_equality(self, amy, overrides):
        values = {"module_codes": ("CS2030S",), "tags": ("friend",)}
        values.update(overrides)

        assert amy != make_person(**values)

    def test_remark_is_not_compared(self, amy):
        other = make_person(remark="Something else", module_codes=("CS2030S",), tags=("friend",))

        assert amy == other
        assert hash(amy) == hash(other)

    def test_set_order_does_not_matter(self):
        first = make_person(module_codes=("CS2100", "CS2030S"), tags=("a", "b"))
        second = make_person(module_codes=("CS2030S", "CS2100"), tags=("b", "a"))

        assert first == second
        assert hash(first) == hash(second)


class TestPersonString:
    """Test the one-line rendering of a person."""

    def test_without_modules_or_tags(self):
        person = make_person()

        assert str(person) == "Amy Bee; Email: amy@gmail.com; Phone: 85355255; Telegram: @amybee"

    def test_with_modules_and_tags(self):
        person = make_person(module_codes=("CS2100", "CS2030S"), tags=("friends", "colleagues"))

        assert str(person) == (
            "Amy Bee; Email: amy@gmail.com; Phone: 85355255; Telegram: @amybee"
            "; Modules: [CS2030S][CS2100]; Tags: [colleagues][friends]"
        )

    def test_tags_only(self):
        person = make_person(tags=("friends",))

        assert str(person).endswith("Telegram: @amybee; Tags: [friends]")
