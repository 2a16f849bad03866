"""A small phone book kept in a plain text file, four lines per contact."""

from __future__ import annotations

import argparse
import enum
import os
import shutil
import tempfile
from dataclasses import dataclass
from itertools import zip_longest
from pathlib import Path
from typing import Callable, Iterable, Sequence

DEFAULT_PATH = "phonebook.txt"
DEFAULT_BACKUP_NAME = "phonebook_backup.txt"

# Longest text each field accepts when typed in interactively.
NAME_LIMIT = 49
PHONE_LIMIT = 14
EMAIL_LIMIT = 49
ADDRESS_LIMIT = 49

MENU = (
    "\nWhat do you want to do?\n"
    "1. Add Contact\n"
    "2. View All Contacts\n"
    "3. Search Contact\n"
    "4. Advanced Search\n"
    "5. Delete Contact\n"
    "6. Update Contact\n"
    "7. Backup Phonebook\n"
    "Type 'exit' to quit."
)


class PhoneBookError(Exception):
    """Raised when the phone book file cannot be used."""


class DuplicateContactError(PhoneBookError):
    """Raised when a contact with the same phone number already exists."""

    def __init__(self, phone: str) -> None:
        super().__init__(f"<<< A contact with phone number {phone} already exists! >>>")
        self.phone = phone


class ContactNotFoundError(PhoneBookError):
    """Raised when no contact matches a lookup."""


class SearchField(enum.Enum):
    """Which field an exact lookup compares against."""

    NAME = 1
    PHONE = 2


@dataclass(frozen=True)
class Contact:
    """One entry of the phone book."""

    name: str
    phone: str
    email: str = ""
    address: str = ""

    def describe(self) -> str:
        """Return the contact as labelled lines."""
        return (
            f"Name: {self.name}\n"
            f"Phone: {self.phone}\n"
            f"Email: {self.email}\n"
            f"Address: {self.address}"
        )

    def matches(self, text: str) -> bool:
        """Tell whether text occurs in any field."""
        return any(text in value for value in (self.name, self.phone, self.email, self.address))

    def field(self, field: SearchField) -> str:
        """Return the value of the given search field."""
        return self.name if field is SearchField.NAME else self.phone


def parse_contacts(text: str) -> list[Contact]:
    """Parse the file format: every contact is four consecutive lines."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    groups = zip_longest(*[iter(lines)] * 4, fillvalue="")
    return [Contact(name, phone, email, address) for name, phone, email, address in groups]


def format_contacts(contacts: Iterable[Contact]) -> str:
    """Render contacts in the file format."""
    return "".join(
        f"{c.name}\n{c.phone}\n{c.email}\n{c.address}\n" for c in contacts
    )


class PhoneBook:
    """A phone book stored in a text file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def load(self) -> list[Contact]:
        """Read every contact in file order."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PhoneBookError(f"Error opening file: {self.path}") from exc
        return parse_contacts(text)

    def save(self, contacts: Iterable[Contact]) -> None:
        """Replace the file's content with the given contacts."""
        data = format_contacts(contacts)
        directory = self.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".phonebook-", dir=directory)
        except OSError as exc:
            raise PhoneBookError(f"Error opening temporary file in {directory}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise PhoneBookError(f"Error writing file: {self.path}") from exc

    def has_phone(self, phone: str) -> bool:
        """Tell whether a contact with this phone number is stored."""
        return any(contact.phone == phone for contact in self.load())

    def add(self, contact: Contact) -> None:
        """Append a contact, refusing a phone number that is already stored."""
        try:
            self.path.touch(exist_ok=True)
        except OSError as exc:
            raise PhoneBookError(f"Error opening file: {self.path}") from exc
        if self.has_phone(contact.phone):
            raise DuplicateContactError(contact.phone)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(format_contacts([contact]))

    def find(self, field: SearchField, value: str) -> Contact:
        """Return the first contact whose field equals value."""
        for contact in self.load():
            if contact.field(field) == value:
                return contact
        raise ContactNotFoundError(f"no contact with {field.name.lower()} {value!r}")

    def advanced_search(self, text: str) -> list[Contact]:
        """Return every contact with text in any of its fields."""
        return [contact for contact in self.load() if contact.matches(text)]

    def delete(self, field: SearchField, value: str) -> list[Contact]:
        """Remove every contact whose field equals value and return them."""
        contacts = self.load()
        removed = [c for c in contacts if c.field(field) == value]
        if not removed:
            raise ContactNotFoundError(f"no contact with {field.name.lower()} {value!r}")
        self.save(c for c in contacts if c.field(field) != value)
        return removed

    def update(self, phone: str, contact: Contact) -> list[Contact]:
        """Replace every contact with this phone number; return the old entries."""
        contacts = self.load()
        replaced = [c for c in contacts if c.phone == phone]
        if not replaced:
            raise ContactNotFoundError(f"no contact with phone {phone!r}")
        self.save(contact if c.phone == phone else c for c in contacts)
        return replaced

    def backup(self, destination: str | os.PathLike[str] | None = None) -> Path:
        """Copy the file byte for byte and return the copy's path."""
        target = Path(destination) if destination is not None else self.path.with_name(DEFAULT_BACKUP_NAME)
        if not self.path.is_file():
            raise PhoneBookError(f"Error opening the source phonebook file: {self.path}")
        try:
            shutil.copyfile(self.path, target)
        except OSError as exc:
            raise PhoneBookError(f"Error opening the backup phonebook file: {target}") from exc
        return target

    def sort_by_name(self) -> list[Contact]:
        """Sort the stored contacts by name; a missing file is left alone."""
        try:
            contacts = self.load()
        except PhoneBookError:
            return []
        contacts.sort(key=lambda c: c.name)
        if contacts:
            self.save(contacts)
        return contacts


class _Session:
    """Interactive menu over a phone book."""

    def __init__(self, book: PhoneBook, read: Callable[[], str], write: Callable[[str], None]) -> None:
        self.book = book
        self._read = read
        self._write = write

    def ask(self, prompt: str, limit: int | None = None) -> str:
        self._write(prompt)
        text = self._read()
        return text[:limit] if limit is not None else text

    def ask_int(self, prompt: str) -> int:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            return 0

    def ask_field(self, title: str) -> SearchField | None:
        self._write(title)
        self._write("1. Name")
        self._write("2. Phone")
        choice = self.ask_int("Enter your line (1 or 2): ")
        try:
            return SearchField(choice)
        except ValueError:
            return None

    def add(self) -> None:
        for _ in range(max(self.ask_int("How many contact you want"), 0)):
            name = self.ask("Enter the Name", NAME_LIMIT)
            phone = self.ask("Enter the Phone Number", PHONE_LIMIT)
            self.book.path.touch(exist_ok=True)
            if self.book.has_phone(phone):
                self._write(str(DuplicateContactError(phone)))
                continue
            email = self.ask("Enter the Email", EMAIL_LIMIT)
            address = self.ask("Enter the Address", ADDRESS_LIMIT)
            self.book.add(Contact(name, phone, email, address))

    def view(self) -> None:
        for contact in self.book.load():
            self._write(f"{contact.name}\n{contact.phone}\n{contact.email}\n{contact.address}\n")

    def search(self) -> None:
        field = self.ask_field("Search by:")
        value = self.ask("Enter the searching data")
        contacts = self.book.load()
        found = next((c for c in contacts if field is not None and c.field(field) == value), None)
        if found is None:
            self._write("Contact not founded")
        else:
            self._write("Contact found:\n" + found.describe())

    def advanced(self) -> None:
        text = self.ask("Enter the Advanced contact data")
        found = self.book.advanced_search(text)
        for contact in found:
            self._write("Found contact:\n" + contact.describe())
        if not found:
            self._write("Contact not found")

    def delete(self) -> None:
        field = self.ask_field("Delete by:")
        value = self.ask("Enter the data for deletion")
        contacts = self.book.load()
        if field is None:
            self._write("Dont have that contact for delate")
            return
        try:
            removed = self.book.delete(field, value)
        except ContactNotFoundError:
            self._write("Dont have that contact for delate")
            return
        for contact in removed:
            self._write("Found contact:\n" + contact.describe())
        del contacts

    def update(self) -> None:
        self._write("Change by:\n Phone")
        phone = self.ask("Enter the data for changing")
        if not self.book.has_phone(phone):
            self._write("Dont have that contact for changing")
            return
        self._write("Found Contact: ")
        contact = Contact(
            self.ask("Enter the Name", NAME_LIMIT),
            self.ask("Enter the Phone Number", PHONE_LIMIT),
            self.ask("Enter the Email", EMAIL_LIMIT),
            self.ask("Enter the Address", ADDRESS_LIMIT),
        )
        self.book.update(phone, contact)

    def backup(self) -> None:
        try:
            self.book.backup()
        except PhoneBookError as exc:
            self._write(str(exc))
            return
        self._write("Backup created successfully.")

    def run(self) -> int:
        actions = {
            "1": self.add,
            "2": self.view,
            "3": self.search,
            "4": self.advanced,
            "5": self.delete,
            "6": self.update,
            "7": self.backup,
        }
        while True:
            try:
                choice = self.ask(MENU)
                if choice == "exit":
                    return 0
                action = actions.get(choice)
                if action is None:
                    self._write("Invalid choice, please try again.")
                else:
                    action()
            except EOFError:
                return 0
            except PhoneBookError as exc:
                self._write(str(exc))
                return 1
            self.book.sort_by_name()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive phone book menu."""
    parser = argparse.ArgumentParser(description="Keep contacts in a text file.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="phone book file")
    args = parser.parse_args(argv)
    session = _Session(PhoneBook(args.file), input, print)
    return session.run()


if __name__ == "__main__":
    raise SystemExit(main())