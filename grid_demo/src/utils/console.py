"""Console prompts and integer input for interactive grid population."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

from grid_demo.src.constants import INT_MAX, INT_MIN

INVALID_VALUE_MESSAGE = "Invalid value. Try again."

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_int(text: Optional[str]) -> Optional[int]:
    """Return ``text`` as a 32-bit integer or ``None`` if it does not parse."""
    if text is None or not _INT_RE.match(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


class ConsoleIO:
    """Line-oriented console bound to an input and an output stream.

    Streams default to ``sys.stdin``/``sys.stdout`` looked up at call time, so
    redirections applied after construction (e.g. by pytest's ``capsys``) are
    honoured.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_line(self) -> str:
        """Return the next input line without its terminator.

        Raises ``EOFError`` once the input stream is exhausted.
        """
        line = self.stdin.readline()
        if line == "":
            raise EOFError("console input exhausted")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        """Prompt until a valid integer is entered and return it."""
        while True:
            self.write(prompt)
            value = parse_int(self.read_line())
            if value is not None:
                return value
            self.write_line(INVALID_VALUE_MESSAGE)


__all__ = ["ConsoleIO", "parse_int", "INT_MIN", "INT_MAX", "INVALID_VALUE_MESSAGE"]
