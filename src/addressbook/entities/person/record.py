"""JSON transport records for persons.

These mirror :class:`Person` as plain strings so they can be written to and
read from the data file. They are kept separate from the domain entity: a
record may hold missing or invalid values, and only becomes a ``Person``
through ``to_model_type``, which re-validates every field.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from src.addressbook.core.exceptions import IllegalValueError
from src.addressbook.entities._base import sorted_values

from .entity import Person
from .fields import Email, ModuleCode, Name, Phone, Remark, Tag, TeleHandle


class JsonAdaptedModuleCode(RootModel[str]):
    """A module code stored as a bare string."""

    @classmethod
    def from_model(cls, source: ModuleCode) -> "JsonAdaptedModuleCode":
        return cls(source.value)

    def to_model_type(self) -> ModuleCode:
        if not ModuleCode.is_valid(self.root):
            raise IllegalValueError(ModuleCode.MESSAGE_CONSTRAINTS)
        return ModuleCode(self.root)


class JsonAdaptedTag(RootModel[str]):
    """A tag stored as a bare string."""

    @classmethod
    def from_model(cls, source: Tag) -> "JsonAdaptedTag":
        return cls(source.value)

    def to_model_type(self) -> Tag:
        if not Tag.is_valid(self.root):
            raise IllegalValueError(Tag.MESSAGE_CONSTRAINTS)
        return Tag(self.root)


class JsonAdaptedPerson(BaseModel):
    """Flat, string-based form of a person as stored in the data file."""

    model_config = ConfigDict(populate_by_name=True)

    MISSING_FIELD_MESSAGE_FORMAT: ClassVar[str] = "Person's {} field is missing!"

    name: str | None = None
    email: str | None = None
    module_codes: list[JsonAdaptedModuleCode] = Field(
        default_factory=list, alias="moduleCodes"
    )
    phone: str | None = None
    tele_handle: str | None = Field(default=None, alias="teleHandle")
    remark: str | None = None
    tagged: list[JsonAdaptedTag] = Field(default_factory=list)

    @field_validator("module_codes", "tagged", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_model(cls, source: Person) -> "JsonAdaptedPerson":
        """Convert a person into its storable form."""
        return cls(
            name=source.name.value,
            email=source.email.value,
            module_codes=[
                JsonAdaptedModuleCode.from_model(code)
                for code in sorted_values(source.module_codes)
            ],
            phone=source.phone.value,
            tele_handle=source.tele_handle.value,
            remark=source.remark.value,
            tagged=[JsonAdaptedTag.from_model(tag) for tag in sorted_values(source.tags)],
        )

    def to_model_type(self) -> Person:
        """Convert this record into a validated person.

        Raises:
            IllegalValueError: For the first missing or invalid field found.
        """
        person_tags = [tag.to_model_type() for tag in self.tagged]
        person_module_codes = [code.to_model_type() for code in self.module_codes]

        name = self._to_field(Name, self.name)
        phone = self._to_field(Phone, self.phone)
        email = self._to_field(Email, self.email)
        remark = self._to_field(Remark, self.remark)
        tele_handle = self._to_field(TeleHandle, self.tele_handle)

        return Person(
            name=name,
            email=email,
            phone=phone,
            tele_handle=tele_handle,
            remark=remark,
            module_codes=set(person_module_codes),
            tags=set(person_tags),
        )

    def _to_field(self, field_type, raw: str | None):
        if raw is None:
            raise IllegalValueError(
                self.MISSING_FIELD_MESSAGE_FORMAT.format(field_type.__name__)
            )
        if not field_type.is_valid(raw):
            raise IllegalValueError(field_type.MESSAGE_CONSTRAINTS)
        return field_type(raw)
