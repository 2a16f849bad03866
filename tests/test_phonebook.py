import io

import pytest

from pockettools.phonebook import (
    Contact,
    ContactNotFoundError,
    DuplicateContactError,
    PhoneBook,
    PhoneBookError,
    SearchField,
    format_contacts,
    main,
    parse_contacts,
)

ALICE = Contact("Alice", "101", "alice@example.com", "1 Oak Lane")
BOB = Contact("Bob", "202", "bob@example.com", "2 Elm Road")
CAROL = Contact("Carol", "303", "carol@example.com", "3 Pine Street")


@pytest.fixture
def book(tmp_path):
    return PhoneBook(tmp_path / "phonebook.txt")


def test_format_uses_four_lines_per_contact():
    assert format_contacts([ALICE]) == "Alice\n101\nalice@example.com\n1 Oak Lane\n"


def test_parse_format_round_trip():
    contacts = [ALICE, BOB, CAROL]
    assert parse_contacts(format_contacts(contacts)) == contacts


def test_parse_fills_missing_trailing_fields():
    assert parse_contacts("Dan\n404\n") == [Contact("Dan", "404", "", "")]


def test_parse_empty_text():
    assert parse_contacts("") == []


def test_describe():
    assert ALICE.describe() == (
        "Name: Alice\nPhone: 101\nEmail: alice@example.com\nAddress: 1 Oak Lane"
    )


def test_matches_any_field():
    assert ALICE.matches("Oak")
    assert ALICE.matches("example.com")
    assert not ALICE.matches("Elm")


def test_load_missing_file_raises(book):
    with pytest.raises(PhoneBookError):
        book.load()


def test_add_and_load(book):
    book.add(ALICE)
    book.add(BOB)
    assert book.load() == [ALICE, BOB]
    assert book.has_phone("202")
    assert not book.has_phone("999")


def test_add_duplicate_phone_raises(book):
    book.add(ALICE)
    with pytest.raises(DuplicateContactError) as info:
        book.add(Contact("Other", "101"))
    assert info.value.phone == "101"
    assert book.load() == [ALICE]


def test_find_by_name_and_phone(book):
    book.save([ALICE, BOB])
    assert book.find(SearchField.NAME, "Bob") == BOB
    assert book.find(SearchField.PHONE, "101") == ALICE


def test_find_missing_raises(book):
    book.save([ALICE])
    with pytest.raises(ContactNotFoundError):
        book.find(SearchField.NAME, "Zed")


def test_advanced_search_returns_all_matches(book):
    book.save([ALICE, BOB, CAROL])
    assert book.advanced_search("example.com") == [ALICE, BOB, CAROL]
    assert book.advanced_search("Elm") == [BOB]
    assert book.advanced_search("nothing here") == []


def test_delete_removes_matching(book):
    book.save([ALICE, BOB, CAROL])
    removed = book.delete(SearchField.PHONE, "202")
    assert removed == [BOB]
    assert book.load() == [ALICE, CAROL]


def test_delete_missing_raises_and_keeps_file(book):
    book.save([ALICE])
    with pytest.raises(ContactNotFoundError):
        book.delete(SearchField.NAME, "Bob")
    assert book.load() == [ALICE]


def test_update_replaces_contact(book):
    book.save([ALICE, BOB])
    new = Contact("Bobby", "212", "bobby@example.com", "4 Ash Way")
    old = book.update("202", new)
    assert old == [BOB]
    assert book.load() == [ALICE, new]


def test_update_missing_raises(book):
    book.save([ALICE])
    with pytest.raises(ContactNotFoundError):
        book.update("999", BOB)


def test_backup_copies_bytes(book, tmp_path):
    book.save([ALICE, BOB])
    target = book.backup(tmp_path / "copy.txt")
    assert target.read_bytes() == book.path.read_bytes()


def test_backup_default_name(book):
    book.save([ALICE])
    target = book.backup()
    assert target.name == "phonebook_backup.txt"
    assert parse_contacts(target.read_text()) == [ALICE]


def test_backup_missing_source_raises(book):
    with pytest.raises(PhoneBookError):
        book.backup()


def test_sort_by_name(book):
    book.save([CAROL, ALICE, BOB])
    assert book.sort_by_name() == [ALICE, BOB, CAROL]
    assert book.load() == [ALICE, BOB, CAROL]


def test_sort_by_name_missing_file(book):
    assert book.sort_by_name() == []
    assert not book.path.exists()


def test_main_adds_and_sorts(tmp_path, monkeypatch):
    path = tmp_path / "book.txt"
    PhoneBook(path).save([CAROL])
    script = "1\n2\nBob\n202\nbob@example.com\n2 Elm Road\nAlice\n101\nalice@example.com\n1 Oak Lane\nexit\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main(["--file", str(path)]) == 0
    assert PhoneBook(path).load() == [ALICE, BOB, CAROL]


def test_main_reports_duplicate(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.txt"
    PhoneBook(path).save([ALICE])
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\nCopy\n101\nexit\n"))
    assert main(["--file", str(path)]) == 0
    assert "already exists" in capsys.readouterr().out
    assert PhoneBook(path).load() == [ALICE]


def test_main_delete_by_name(tmp_path, monkeypatch):
    path = tmp_path / "book.txt"
    PhoneBook(path).save([ALICE, BOB])
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1\nAlice\nexit\n"))
    assert main(["--file", str(path)]) == 0
    assert PhoneBook(path).load() == [BOB]


def test_main_view_missing_file_fails(tmp_path, monkeypatch):
    path = tmp_path / "absent.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nexit\n"))
    assert main(["--file", str(path)]) == 1