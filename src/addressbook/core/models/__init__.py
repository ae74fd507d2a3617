"""In-memory address book model."""

from .address_book import AddressBook, UniquePersonList
from .model_manager import PREDICATE_SHOW_ALL_PERSONS, ModelManager

__all__ = ["AddressBook", "UniquePersonList", "ModelManager", "PREDICATE_SHOW_ALL_PERSONS"]
