"""Two-player tic-tac-toe on a 3x3 board, played from the terminal."""

from __future__ import annotations

import argparse
import enum
from typing import Callable, Iterator, Sequence

SIZE = 3
EMPTY = " "
DRAW_MESSAGE = "The game is over with draw, thank you for choosing our game"

_WINNING_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((row, col) for col in range(SIZE)) for row in range(SIZE)),
    *(tuple((row, col) for row in range(SIZE)) for col in range(SIZE)),
    tuple((i, i) for i in range(SIZE)),
    tuple((i, SIZE - 1 - i) for i in range(SIZE)),
)


class Player(enum.Enum):
    """A side in the game; the value is the mark drawn on the board."""

    X = "x"
    O = "o"

    def other(self) -> Player:
        """Return the opponent."""
        return Player.O if self is Player.X else Player.X


class IllegalMoveError(ValueError):
    """Raised when a mark is placed outside the board or on a taken cell."""


class Board:
    """A 3x3 grid of cells, each empty or holding a player's mark."""

    def __init__(self) -> None:
        self._cells: list[list[Player | None]] = [[None] * SIZE for _ in range(SIZE)]

    def __getitem__(self, position: tuple[int, int]) -> Player | None:
        row, col = position
        return self._cells[row][col]

    def is_legal_move(self, row: int, col: int) -> bool:
        """Tell whether the cell exists and is empty."""
        return 0 <= row < SIZE and 0 <= col < SIZE and self._cells[row][col] is None

    def place(self, player: Player, row: int, col: int) -> None:
        """Put the player's mark on a cell."""
        if not self.is_legal_move(row, col):
            raise IllegalMoveError(f"Not a legal move: row {row}, column {col}")
        self._cells[row][col] = player

    def did_win(self, player: Player) -> bool:
        """Tell whether the player holds a full row, column or diagonal."""
        return any(
            all(self._cells[row][col] is player for row, col in line)
            for line in _WINNING_LINES
        )

    def is_full(self) -> bool:
        """Tell whether no empty cell is left."""
        return all(cell is not None for row in self._cells for cell in row)

    def render(self) -> str:
        """Draw the board as text, rows separated by rule lines."""
        rows = (
            " " + " | ".join(EMPTY if cell is None else cell.value for cell in row)
            for row in self._cells
        )
        return "\n---+---+---\n".join(rows)


def _tokens(read_line: Callable[[], str]) -> Iterator[str]:
    while True:
        yield from read_line().split()


def _next_int(tokens: Iterator[str]) -> int | None:
    try:
        return int(next(tokens))
    except ValueError:
        return None


def play(read_line: Callable[[], str], write: Callable[[str], None]) -> Player | None:
    """Play one game; return the winner, or None on a draw.

    read_line supplies input lines and raises EOFError when input runs out.
    """
    board = Board()
    tokens = _tokens(read_line)
    player = Player.X
    while True:
        write(f"{player.name} Please enter the row")
        row = _next_int(tokens)
        write(f"{player.name} Please enter the column")
        col = _next_int(tokens)
        if row is None or col is None or not board.is_legal_move(row, col):
            write("Not a legal move")
            continue
        board.place(player, row, col)
        write(board.render())
        if board.did_win(player):
            write(f"{player.name} player WIN!!!")
            return player
        if board.is_full():
            write(DRAW_MESSAGE)
            return None
        player = player.other()


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game of tic-tac-toe on the terminal."""
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe.")
    parser.parse_args(argv)
    try:
        play(input, print)
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())