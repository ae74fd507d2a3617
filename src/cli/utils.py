"""Shared utilities for CLI commands."""

from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.addressbook.core.exceptions import DataLoadingError
from src.addressbook.core.models import AddressBook, ModelManager
from src.addressbook.core.storage import AddressBookStorage, JsonAddressBookStorage
from src.addressbook.entities._base import sorted_values
from src.addressbook.entities.person import Person
from src.addressbook.logic.manager import LogicManager
from src.addressbook.runtime.config.config_data import ConfigData
from src.addressbook.runtime.logger_config import configure_logging
from src.addressbook.runtime.settings import EnvironmentSettings

# Initialize Rich console for colored output
console = Console()


def initial_address_book(storage: AddressBookStorage) -> AddressBook:
    """Read the stored address book, starting empty if it is missing or bad."""
    try:
        address_book = storage.read_address_book()
    except DataLoadingError as e:
        logger.warning(
            "Data file could not be loaded ({}). Starting with an empty address book.", e.message
        )
        return AddressBook()

    if address_book is None:
        logger.info("Data file not found. Starting with an empty address book.")
        return AddressBook()
    return address_book


def config_override(data_file: Path | None = None, log_level: str | None = None) -> ConfigData:
    """Collect command-line options and environment settings into a config override.

    Options win over ``LOG_LEVEL`` and ``ADDRESSBOOK_DATA_FILE``; anything left
    unset keeps the value from config.yaml.
    """
    env = EnvironmentSettings()
    override = ConfigData()

    level = log_level or env.log_level
    if level:
        override.logging.level = level.upper()
    path = data_file or env.data_file
    if path:
        override.storage.address_book_file_path = Path(path)
    return override


def build_logic(config: ConfigData) -> LogicManager:
    """Configure logging and wire storage, model and logic together."""
    configure_logging(config.logging)

    path = config.storage.address_book_file_path
    storage = JsonAddressBookStorage(path)
    logger.info("Using data file {}", path)

    model = ModelManager(initial_address_book(storage))
    return LogicManager(model, storage)


def person_table(persons: list[Person]) -> Table:
    """Render persons as a numbered table; numbers are command indices."""
    table = Table(title="Persons")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Phone")
    table.add_column("Email", style="blue")
    table.add_column("Telegram", style="magenta")
    table.add_column("Modules", style="yellow")
    table.add_column("Tags", style="yellow")
    table.add_column("Remark")

    for index, person in enumerate(persons, start=1):
        table.add_row(
            str(index),
            person.name.value,
            person.phone.value,
            person.email.value,
            person.tele_handle.value,
            " ".join(code.value for code in sorted_values(person.module_codes)),
            " ".join(tag.value for tag in sorted_values(person.tags)),
            escape(person.remark.value),
        )

    return table
