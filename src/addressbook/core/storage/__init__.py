"""Persistence for the address book."""

from .json_storage import AddressBookStorage, JsonAddressBookStorage, JsonSerializableAddressBook

__all__ = ["AddressBookStorage", "JsonAddressBookStorage", "JsonSerializableAddressBook"]
