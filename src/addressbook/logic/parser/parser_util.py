"""Conversions from raw argument strings to validated values.

Every function raises :class:`ParseError` carrying the constraint message of
the value type when the input is invalid.
"""

from collections.abc import Iterable
from typing import TypeVar

from src.addressbook.core.exceptions import ParseError, require_non_null
from src.addressbook.entities._base import ValueObject
from src.addressbook.entities.person import (
    Email,
    ModuleCode,
    Name,
    Phone,
    Remark,
    Tag,
    TeleHandle,
)

from .argument_tokenizer import ArgumentMultimap
from .cli_syntax import Prefix

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

V = TypeVar("V", bound=ValueObject)


def parse_index(one_based_index: str) -> int:
    """Parse a 1-based index into a 0-based one."""
    trimmed = one_based_index.strip()
    if not trimmed.isdecimal() or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed) - 1


def parse_value(value_type: type[V], raw: str) -> V:
    """Trim ``raw`` and build a ``value_type`` from it."""
    require_non_null(value=raw)
    trimmed = raw.strip()
    if not value_type.is_valid(trimmed):
        raise ParseError(value_type.MESSAGE_CONSTRAINTS)
    return value_type(trimmed)


def parse_name(raw: str) -> Name:
    return parse_value(Name, raw)


def parse_phone(raw: str) -> Phone:
    return parse_value(Phone, raw)


def parse_email(raw: str) -> Email:
    return parse_value(Email, raw)


def parse_tele_handle(raw: str) -> TeleHandle:
    return parse_value(TeleHandle, raw)


def parse_remark(raw: str) -> Remark:
    return parse_value(Remark, raw)


def parse_module_codes(raw_codes: Iterable[str]) -> frozenset[ModuleCode]:
    return frozenset(parse_value(ModuleCode, raw) for raw in raw_codes)


def parse_tags(raw_tags: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_value(Tag, raw) for raw in raw_tags)


def are_prefixes_present(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(multimap.is_present(prefix) for prefix in prefixes)


def split_keywords(raw: str) -> list[str]:
    """Split on runs of whitespace."""
    return raw.split()
