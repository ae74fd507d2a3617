import re
from collections.abc import Iterable
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from src.addressbook.core.exceptions import ConstraintViolationError, require_non_null


class ValueObject(BaseModel):
    """Base class for immutable, string-backed, self-validating values.

    Subclasses set ``VALIDATION_REGEX`` and ``MESSAGE_CONSTRAINTS``. The raw
    string is checked before the model is built, so an instance always holds
    a valid value.
    """

    model_config = ConfigDict(frozen=True)

    VALIDATION_REGEX: ClassVar[str] = r".*"
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    value: str

    def __init__(self, value: str) -> None:
        require_non_null(value=value)
        if not self.is_valid(value):
            raise ConstraintViolationError(self.MESSAGE_CONSTRAINTS)
        super().__init__(value=self.normalize(value))

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        """Return True if ``raw`` satisfies the format rule of this type."""
        return re.fullmatch(cls.VALIDATION_REGEX, raw) is not None

    @classmethod
    def normalize(cls, raw: str) -> str:
        return raw

    def __str__(self) -> str:
        return self.value


V = TypeVar("V", bound=ValueObject)


def sorted_values(items: Iterable[V]) -> list[V]:
    """Return value objects ordered by their raw string, for stable output."""
    return sorted(items, key=lambda item: item.value)
