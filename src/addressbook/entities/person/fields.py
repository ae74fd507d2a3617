"""Validated value objects that make up a person."""

import re
from typing import ClassVar

from src.addressbook.entities._base import ValueObject

_ALNUM = "[A-Za-z0-9]"


class Name(ValueObject):
    """A person's name; alphanumeric words separated by spaces."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    # The first character must not be a space, so " " is not a valid name.
    VALIDATION_REGEX: ClassVar[str] = rf"{_ALNUM}[A-Za-z0-9 ]*"


class Phone(ValueObject):
    """A person's phone number."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[0-9]{3,}"


class Email(ValueObject):
    """A person's email address, ``local-part@domain``."""

    SPECIAL_CHARACTERS: ClassVar[str] = "+_.-"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is "
        "made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    LOCAL_PART_REGEX: ClassVar[str] = rf"{_ALNUM}+(?:[+_.\-]{_ALNUM}+)*"
    DOMAIN_LABEL_REGEX: ClassVar[str] = rf"{_ALNUM}+(?:-{_ALNUM}+)*"
    VALIDATION_REGEX: ClassVar[str] = (
        rf"{LOCAL_PART_REGEX}@(?:{DOMAIN_LABEL_REGEX}\.)*{DOMAIN_LABEL_REGEX}"
    )

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        if re.fullmatch(cls.VALIDATION_REGEX, raw) is None:
            return False
        domain = raw.rsplit("@", 1)[1]
        return len(domain.rsplit(".", 1)[-1]) >= 2


class TeleHandle(ValueObject):
    """A person's Telegram handle, with or without the leading ``@``."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Telegram handles should start with a letter, contain only letters, "
        "digits and underscores, be 5 to 32 characters long, "
        "and may be prefixed with '@'"
    )
    VALIDATION_REGEX: ClassVar[str] = r"@?[A-Za-z][A-Za-z0-9_]{4,31}"


class ModuleCode(ValueObject):
    """A course code such as ``CS2030S``; stored upper-cased."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module codes should have a 2-3 letter prefix, 4 digits "
        "and an optional suffix of up to 2 letters, e.g. CS2030S"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z]{2,3}[0-9]{4}[A-Za-z]{0,2}"

    @classmethod
    def normalize(cls, raw: str) -> str:
        return raw.upper()

    def __str__(self) -> str:
        return f"[{self.value}]"


class Tag(ValueObject):
    """A free-form alphanumeric label."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9]+"

    def __str__(self) -> str:
        return f"[{self.value}]"


class Remark(ValueObject):
    """Free text attached to a person. Any string, including "", is accepted."""

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return True
