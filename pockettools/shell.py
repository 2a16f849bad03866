"""A minimal interactive shell with a few built-in commands and a history file."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from contextlib import suppress
from pathlib import Path
from typing import IO, Iterable, MutableMapping, Sequence

DEFAULT_PROMPT = "My_shell >>"
DEFAULT_HISTORY = "history.txt"
MAX_COMMAND_LINE = 1024
# A history entry, newline included, is cut to this many characters.
_HISTORY_ENTRY_LIMIT = 999
CLEAR_SEQUENCE = "\033[H\033[J"

_HELP = (
    "Mini Shell - Built-in Commands:\n"
    "  cd <dir>       Change directory to <dir>\n"
    "  exit           Exit the shell\n"
    "  help           Show this help message\n"
    "  clear          Clear the terminal screan\n"
    "  echo <text>    Print <text> to the terminale\n"
    "  pwd            Print the current working directory\n"
    "  chprompt <new_prompt> Change the shell prompt to <new_prompt>\n"
    "Redirection:\n"
    "  < file         Redirect input from <file>\n"
    "  > file         Redirect output to <file>\n"
    "  unsetenv <var> Remove environment variable <var>\n"
)


def help_text() -> str:
    """Return the built-in help message."""
    return _HELP


class ShellExit(Exception):
    """Raised by the exit command to stop the shell."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def _strerror(exc: OSError) -> str:
    return exc.strerror or str(exc)


class Shell:
    """Reads command lines, runs built-ins itself and other commands as programs."""

    def __init__(
        self,
        history_path: str | os.PathLike[str] = DEFAULT_HISTORY,
        out: IO[str] | None = None,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self.history_path = Path(history_path)
        self.out = out if out is not None else sys.stdout
        self.environ = environ if environ is not None else os.environ
        self.prompt = DEFAULT_PROMPT
        with suppress(OSError):
            self.history_path.touch(exist_ok=True)

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    @staticmethod
    def _error(what: str, reason: str) -> None:
        sys.stderr.write(f"{what}: {reason}\n")

    def log_command(self, line: str) -> None:
        """Append the line to the history file."""
        entry = (line + "\n")[:_HISTORY_ENTRY_LIMIT]
        with suppress(OSError), self.history_path.open("a", encoding="utf-8") as handle:
            handle.write(entry)

    def pwd(self) -> str:
        """Print and return the current working directory."""
        try:
            cwd = os.getcwd()
        except OSError as exc:
            self._error("getcwd failed", _strerror(exc))
            return ""
        self._say(cwd)
        return cwd

    def cd(self, directory: str | None) -> None:
        """Change the working directory."""
        if directory is None:
            self._error("cd failed", "HOME is not set")
            return
        try:
            os.chdir(directory)
        except OSError as exc:
            self._error("cd failed", _strerror(exc))

    def echo(self, text: str) -> None:
        """Print text, or the value of an environment variable for $NAME."""
        if not text:
            self._say("")
        elif text.startswith("$"):
            name = text[1:]
            value = self.environ.get(name)
            if value is not None:
                self._say(value)
            else:
                self._say(f"Environment variable '{name}' not found.")
        else:
            self._say(text)

    def chprompt(self, new_prompt: str) -> None:
        """Replace the prompt."""
        if new_prompt:
            self.prompt = new_prompt[: MAX_COMMAND_LINE - 1]
            self._say(f"Prompt changed to: {self.prompt}")
        else:
            self._say("prompt failed")

    def setenv(self, name: str, value: str) -> None:
        """Set an environment variable."""
        if not name or not value:
            self._say("Usage: setenv <variable_name> <value>")
            return
        if "=" in name:
            self._error("setenv failed", "Invalid argument")
            return
        self.environ[name] = value
        self._say(f"Environment variable {name} set to {value}")

    def unsetenv(self, name: str) -> None:
        """Remove an environment variable; a missing one is not an error."""
        if not name or "=" in name:
            self._error("unsetenv failed", "Invalid argument")
            return
        self.environ.pop(name, None)
        self._say(f"Environment variable {name} unset successfully")

    def run_external(self, line: str) -> int:
        """Run the line as a program with space-separated arguments; return its status."""
        args = [token for token in line.split(" ") if token]
        if not args:
            return 0
        self.out.flush()
        try:
            fileno: int | None = self.out.fileno()
        except (AttributeError, ValueError, OSError):
            fileno = None
        env = dict(self.environ)
        try:
            if fileno is None:
                result = subprocess.run(args, env=env, stdout=subprocess.PIPE, text=True, check=False)
                self.out.write(result.stdout)
            else:
                result = subprocess.run(args, env=env, stdout=fileno, check=False)
        except OSError as exc:
            self._error("execvp failed", _strerror(exc))
            return 1
        return result.returncode

    def execute(self, line: str) -> None:
        """Log the line and carry it out."""
        self.log_command(line)
        if line == "help":
            self.out.write(help_text())
        elif line == "exit":
            self._say("Exiting shell ...")
            raise ShellExit(0)
        elif line == "clear":
            self.out.write(CLEAR_SEQUENCE)
        elif line == "pwd":
            self.pwd()
        elif line.startswith("cd"):
            directory: str | None = line[3:]
            if not directory:
                directory = self.environ.get("HOME")
            self.cd(directory)
        elif line.startswith("echo"):
            self.echo(line[5:])
        elif line.startswith("chprompt"):
            new_prompt = line[9:].lstrip(" ")
            if new_prompt:
                self.chprompt(new_prompt)
        elif line.startswith("setenv"):
            name, separator, value = line[7:].partition(" ")
            value = value.lstrip(" ")
            if separator and name and value:
                self.setenv(name, value)
            else:
                self._say("Usage: setenv <variable_name> <value>")
        elif line.startswith(("unsetenv", "unsetevn")):
            name = line[9:].lstrip(" ")
            if name:
                self.unsetenv(name)
            else:
                self._say("Usage: unsetenv <variable_name>")
        else:
            self.run_external(line)

    def run(self, lines: Iterable[str]) -> int:
        """Prompt for and execute lines until exit or end of input; return the exit code."""
        source = iter(lines)
        while True:
            self.out.write(f"{self.prompt} ")
            self.out.flush()
            line = next(source, None)
            if line is None:
                self.out.write("\n")
                return 0
            if line.endswith("\n"):
                line = line[:-1]
            try:
                self.execute(line)
            except ShellExit as stop:
                return stop.code


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell on standard input."""
    parser = argparse.ArgumentParser(description="A minimal command shell.")
    parser.add_argument("--history", default=DEFAULT_HISTORY, help="file commands are logged to")
    args = parser.parse_args(argv)
    shell = Shell(args.history)
    return shell.run(iter(sys.stdin.readline, ""))


if __name__ == "__main__":
    raise SystemExit(main())