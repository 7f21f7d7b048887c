import logging
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from phone_book.app.models.contact import Contact, is_valid_name, is_valid_number
from phone_book.app.storage.record_codec import decode_records, encode_records

log = logging.getLogger(__name__)


class AddResult(str, Enum):
    """Outcome of adding a number to the store."""

    CREATED = "created"
    APPENDED = "appended"
    DUPLICATE = "duplicate"


class ContactStore:
    """In-memory contacts backed by a record file.

    Contacts are keyed by name and always iterated in ascending name order.
    The store never writes on its own; callers invoke `save` after each change.

    Attributes:
        data_path (Path): The file the store is loaded from and saved to.

    """

    def __init__(self, data_path: Path | str):
        self.data_path = Path(data_path)
        self._contacts: dict[str, Contact] = {}

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, name: object) -> bool:
        return name in self._contacts

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.list_sorted())

    def load(self) -> bool:
        """Replace the in-memory contacts with the contents of the data file.

        Args:
            None

        Returns:
            bool: True if the file was read, False if it could not be opened or decoded.

        Notes:
            1. Clear the current contacts.
            2. Read the data file as UTF-8 text.
            3. On a read failure, log it and leave the store empty.
            4. Decode the lines; malformed records are skipped by the codec.
            5. Build a Contact for each decoded record.

        """
        _msg = f"load starting for {self.data_path}"
        log.debug(_msg)

        self._contacts = {}
        try:
            content = self.data_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.info("Contacts file %s does not exist, starting empty", self.data_path)
            return False
        except (OSError, UnicodeDecodeError):
            log.exception("Could not read contacts file %s", self.data_path)
            return False

        for name, numbers in decode_records(content.splitlines()).items():
            self._contacts[name] = Contact(name=name, numbers=numbers)

        log.info("Loaded %d contact(s) from %s", len(self._contacts), self.data_path)
        _msg = "load returning"
        log.debug(_msg)
        return True

    def save(self) -> bool:
        """Write every contact to the data file, replacing its contents.

        Args:
            None

        Returns:
            bool: True if the file was written, False if the write failed.

        Notes:
            1. Encode all contacts in ascending name order.
            2. Overwrite the data file in place.
            3. On failure, log it; the in-memory contacts are kept as they are.

        """
        _msg = f"save starting for {self.data_path}"
        log.debug(_msg)

        content = encode_records(
            {contact.name: contact.numbers for contact in self._contacts.values()},
        )
        try:
            self.data_path.write_text(content, encoding="utf-8")
        except OSError:
            log.exception("Could not write contacts file %s", self.data_path)
            return False

        _msg = "save returning"
        log.debug(_msg)
        return True

    def get(self, name: str) -> Contact | None:
        """Return the contact with exactly this name, or None."""
        return self._contacts.get(name)

    def put(self, contact: Contact) -> None:
        """Insert a contact, replacing any contact of the same name."""
        self._contacts[contact.name] = contact

    def remove(self, name: str) -> Contact:
        """Remove a contact by name.

        Args:
            name (str): The exact name of the contact.

        Returns:
            Contact: The removed contact.

        Raises:
            KeyError: If no contact has this name.

        """
        contact = self._contacts.pop(name)
        log.info("Removed contact '%s'", name)
        return contact

    def list_sorted(self) -> list[Contact]:
        """Return all contacts in ascending name order."""
        return [self._contacts[name] for name in sorted(self._contacts)]

    def add_number(self, name: str, number: str) -> AddResult:
        """Add a number to a contact, creating the contact if needed.

        Args:
            name (str): The contact name.
            number (str): The phone number to add.

        Returns:
            AddResult: CREATED for a new contact, APPENDED when the number was added to
                an existing contact, DUPLICATE when the contact already had the number.

        Raises:
            ValueError: If the name or number is not valid.

        Notes:
            1. Validate the name and number.
            2. If the contact exists and already has the number, change nothing.
            3. If the contact exists, append the number.
            4. Otherwise create a contact holding only this number.

        """
        if not is_valid_name(name):
            raise ValueError(f"Invalid contact name: {name!r}")
        if not is_valid_number(number):
            raise ValueError(f"Invalid phone number: {number!r}")

        contact = self._contacts.get(name)
        if contact is None:
            self.put(Contact(name=name, numbers=[number]))
            log.info("Created contact '%s'", name)
            return AddResult.CREATED

        if contact.has_number(number):
            return AddResult.DUPLICATE

        contact.numbers.append(number)
        log.info("Added number to contact '%s'", name)
        return AddResult.APPENDED

    def remove_number(self, name: str, number: str) -> bool:
        """Remove one occurrence of a number from a contact.

        Args:
            name (str): The contact name.
            number (str): The number to remove, matched exactly.

        Returns:
            bool: True if the contact was removed because it had no numbers left.

        Raises:
            KeyError: If the contact does not exist or does not have the number.

        """
        contact = self._contacts[name]
        if not contact.has_number(number):
            raise KeyError(number)

        contact.numbers.remove(number)
        log.info("Removed number from contact '%s'", name)
        if not contact.numbers:
            self.remove(name)
            return True
        return False

    def find_by_number(self, number: str) -> list[tuple[str, str]]:
        """Return every (name, number) pair whose number equals number exactly."""
        return [
            (contact.name, number)
            for contact in self.list_sorted()
            if contact.has_number(number)
        ]
