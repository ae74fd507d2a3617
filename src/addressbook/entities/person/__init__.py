"""Person entity package.

- fields: validated value objects (Name, Email, Phone, ...)
- entity: the immutable Person aggregate
- predicates: search predicates over persons
- record: JSON transport records and their conversion to and from Person
"""

from .entity import Person
from .fields import Email, ModuleCode, Name, Phone, Remark, Tag, TeleHandle
from .predicates import (
    ModuleCodesContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    TagsContainsKeywordsPredicate,
)
from .record import JsonAdaptedModuleCode, JsonAdaptedPerson, JsonAdaptedTag

__all__ = [
    "Person",
    "Name",
    "Email",
    "Phone",
    "TeleHandle",
    "ModuleCode",
    "Tag",
    "Remark",
    "NameContainsKeywordsPredicate",
    "ModuleCodesContainsKeywordsPredicate",
    "TagsContainsKeywordsPredicate",
    "JsonAdaptedPerson",
    "JsonAdaptedModuleCode",
    "JsonAdaptedTag",
]
