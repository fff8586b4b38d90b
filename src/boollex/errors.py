"""Scan error records with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ErrorKind(Enum):
    UNEXPECTED_CHARACTER = auto()
    UNTERMINATED_COMMENT = auto()


@dataclass(frozen=True, slots=True)
class ScanError:
    """A recoverable scan error, recorded alongside the token stream.

    ``str()`` gives the message with its position embedded, which is the form
    reported to users in the error list.
    """

    kind: ErrorKind
    message: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"

    def format(self, source: str, filename: str = "<input>") -> str:
        lines = source.splitlines(keepends=True)
        line_idx = self.line - 1
        col = max(self.column, 1)

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class ConfigError(Exception):
    """Raised when a config file or option holds an invalid value."""
