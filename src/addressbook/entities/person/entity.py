"""Person domain entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.addressbook.core.exceptions import require_non_null
from src.addressbook.entities._base import sorted_values

from .fields import Email, ModuleCode, Name, Phone, Remark, Tag, TeleHandle


class Person(BaseModel):
    """A person in the address book.

    Every field is present, validated and immutable. The module code and tag
    collections are frozen copies of whatever iterable the caller supplied,
    so duplicates collapse and later changes to the caller's set are not seen.
    """

    model_config = ConfigDict(frozen=True)

    name: Name = Field(description="Identity field; see is_same_person")
    email: Email
    phone: Phone
    tele_handle: TeleHandle
    remark: Remark = Field(default_factory=lambda: Remark(""))
    # Read-only views: frozenset has no add/remove, so in-place changes raise AttributeError.
    module_codes: frozenset[ModuleCode] = Field(default_factory=frozenset)
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    @model_validator(mode="before")
    @classmethod
    def _reject_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            require_non_null(**{k: v for k, v in data.items() if k in cls.model_fields})
        return data

    def is_same_person(self, other: "Person | None") -> bool:
        """Return True if both persons have the same name.

        This is a weaker notion of equality than ``==`` and is what the
        address book uses to reject duplicates.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __eq__(self, other: Any) -> bool:
        """Compare all identity and data fields; the remark is not compared."""
        if other is self:
            return True
        if not isinstance(other, Person):
            return False

        return (
            self.name == other.name
            and self.email == other.email
            and self.phone == other.phone
            and self.tele_handle == other.tele_handle
            and self.module_codes == other.module_codes
            and self.tags == other.tags
        )

    def __hash__(self) -> int:
        return hash((
            self.name,
            self.email,
            self.phone,
            self.tele_handle,
            self.module_codes,
            self.tags,
        ))

    def __str__(self) -> str:
        parts = [
            f"{self.name}; Email: {self.email}; Phone: {self.phone}; "
            f"Telegram: {self.tele_handle}"
        ]
        if self.module_codes:
            parts.append("; Modules: ")
            parts.extend(str(code) for code in sorted_values(self.module_codes))
        if self.tags:
            parts.append("; Tags: ")
            parts.extend(str(tag) for tag in sorted_values(self.tags))
        return "".join(parts)
