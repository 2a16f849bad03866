# pockettools

Three small interactive terminal programs in one package:

- **a phone book** that stores contacts in a plain text file,
- **tic-tac-toe** for two players at one keyboard,
- **a mini shell** with a handful of built-in commands and a command history file.

## Installation

```
pip install .
```

To run the tests, install with the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Phone book

```
pockettools-phonebook [--file PATH]
```

Contacts live in `phonebook.txt` in the current directory unless `--file`
names another file. Each contact takes four lines: name, phone number, e-mail
and address. The menu offers:

1. Add contacts (a phone number that is already in the book is refused)
2. View all contacts
3. Search by exact name or phone number (first match is shown)
4. Advanced search: every contact with the text in any of its fields
5. Delete by exact name or phone number (every match is removed)
6. Update the contacts with a given phone number
7. Back up the book to `phonebook_backup.txt` next to it

Type `exit` to quit. After every action the book is re-sorted by name. When
typed in at the menu, names, e-mail addresses and addresses are cut to 49
characters and phone numbers to 14.

The same operations are available from Python:

```python
from pockettools.phonebook import Contact, PhoneBook, SearchField

book = PhoneBook("phonebook.txt")
book.add(Contact("Alice", "12345", "alice@example.com", "1 Main Street"))
print(book.find(SearchField.NAME, "Alice").describe())
for contact in book.advanced_search("Main"):
    print(contact.describe())
book.sort_by_name()
book.backup()
```

`PhoneBook.add` raises `DuplicateContactError` for a phone number already in
the book; `find`, `delete` and `update` raise `ContactNotFoundError` when
nothing matches. Both derive from `PhoneBookError`, which is also raised when
the file cannot be read or written. `parse_contacts` and `format_contacts`
convert between the file's text and a list of `Contact` values.

## Tic-tac-toe

```
pockettools-tictactoe
```

Players X and O take turns entering a row and a column, each from 0 to 2.
Illegal moves are rejected and the same player tries again. The game ends when
a player completes a row, column or diagonal, or when the board is full.

```python
from pockettools.tictactoe import Board, Player

board = Board()
board.place(Player.X, 1, 1)
print(board.render())
print(board.did_win(Player.X), board.is_full())
```

`Board.place` raises `IllegalMoveError` for a cell off the board or already
taken. `play(read_line, write)` runs a whole game over any pair of input and
output callables and returns the winning `Player`, or `None` on a draw.

## Mini shell

```
pockettools-shell [--history PATH]
```

Every line entered is appended to `history.txt` (or the `--history` file).
Built-in commands:

| Command                  | Effect                                    |
|--------------------------|-------------------------------------------|
| `cd <dir>`               | change directory (no argument: `$HOME`)   |
| `pwd`                    | print the working directory               |
| `echo <text>`            | print text; `echo $VAR` prints a variable |
| `chprompt <new_prompt>`  | change the prompt                         |
| `setenv <name> <value>`  | set an environment variable               |
| `unsetenv <name>`        | remove an environment variable (`unsetevn` also works) |
| `clear`                  | clear the screen                          |
| `help`                   | list the built-in commands                |
| `exit`                   | leave the shell                           |

Any other line is split on spaces and run as an external program.

From Python, `Shell(history_path, out, environ)` runs the same commands against
any output stream and environment mapping; `Shell.execute(line)` runs one line
and `Shell.run(lines)` runs lines until `exit` or the end of input.

### What the shell does not do

The shell has no pipes, no quoting and no `<` / `>` redirection, even though
the `help` text lists redirection. Arguments are split on single spaces only.