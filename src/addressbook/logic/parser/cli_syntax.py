"""Prefixes that introduce command arguments, e.g. ``n/`` in ``n/Alice``."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_TELE_HANDLE = Prefix("h/")
PREFIX_MODULE_CODE = Prefix("m/")
PREFIX_TAG = Prefix("t/")
PREFIX_REMARK = Prefix("r/")

# Text before the first prefix is stored under the empty prefix.
PREAMBLE = Prefix("")
