"""Small terminal tools: a file-backed phone book, tic-tac-toe and a mini shell."""

__version__ = "0.1.0"
__all__ = ["phonebook", "tictactoe", "shell"]