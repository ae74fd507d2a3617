"""Address book storage interface and its JSON file implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from src.addressbook.core.exceptions import DataLoadingError, IllegalValueError
from src.addressbook.core.models import AddressBook
from src.addressbook.entities.person import JsonAdaptedPerson


class JsonSerializableAddressBook(BaseModel):
    """An address book in the shape it is written to the data file."""

    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "Persons list contains duplicate person(s)."

    persons: list[JsonAdaptedPerson] = Field(default_factory=list)

    @classmethod
    def from_model(cls, source: AddressBook) -> JsonSerializableAddressBook:
        return cls(persons=[JsonAdaptedPerson.from_model(p) for p in source.persons])

    def to_model_type(self) -> AddressBook:
        """Convert into an address book.

        Raises:
            IllegalValueError: If a record is invalid or two share a name.
        """
        address_book = AddressBook()
        for json_person in self.persons:
            person = json_person.to_model_type()
            if address_book.has_person(person):
                raise IllegalValueError(self.MESSAGE_DUPLICATE_PERSON)
            address_book.add_person(person)
        return address_book


class AddressBookStorage(ABC):
    """Abstract interface for address book storage backends."""

    @abstractmethod
    def get_address_book_file_path(self) -> Path:
        """Return the location the address book is stored at."""

    @abstractmethod
    def read_address_book(self, file_path: Path | None = None) -> AddressBook | None:
        """Read the address book.

        Args:
            file_path: Location to read from; defaults to the storage's own path

        Returns:
            The address book, or None if nothing has been stored yet

        Raises:
            DataLoadingError: If the stored data cannot be read or is invalid
        """

    @abstractmethod
    def save_address_book(self, address_book: AddressBook, file_path: Path | None = None) -> None:
        """Write the address book, replacing any previous contents.

        Args:
            address_book: Address book to store
            file_path: Location to write to; defaults to the storage's own path
        """


class JsonAddressBookStorage(AddressBookStorage):
    """Stores the address book as a JSON file on disk."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    def get_address_book_file_path(self) -> Path:
        return self._file_path

    def read_address_book(self, file_path: Path | None = None) -> AddressBook | None:
        path = Path(file_path) if file_path is not None else self._file_path
        if not path.exists():
            logger.info("Data file not found: {}", path)
            return None

        try:
            serialized = JsonSerializableAddressBook.model_validate_json(
                path.read_text(encoding="utf-8")
            )
            return serialized.to_model_type()
        except OSError as e:
            raise DataLoadingError(f"Could not read data file {path}: {e}") from e
        except UnicodeDecodeError as e:
            logger.warning("Data file {} is not valid UTF-8", path)
            raise DataLoadingError(f"Data file {path} is not valid UTF-8: {e}") from e
        except ValidationError as e:
            logger.warning("Data file {} is not in the expected format", path)
            raise DataLoadingError(f"Data file {path} is not in the expected format: {e}") from e
        except IllegalValueError as e:
            logger.warning("Illegal values found in {}: {}", path, e.message)
            raise DataLoadingError(e.message) from e

    def save_address_book(self, address_book: AddressBook, file_path: Path | None = None) -> None:
        path = Path(file_path) if file_path is not None else self._file_path
        path.parent.mkdir(parents=True, exist_ok=True)
        content = JsonSerializableAddressBook.from_model(address_book).model_dump_json(
            by_alias=True, indent=2
        )
        path.write_text(content, encoding="utf-8")
        logger.debug("Saved {} persons to {}", len(address_book), path)
