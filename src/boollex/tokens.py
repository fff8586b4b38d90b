"""Token kinds, token records, the keyword table and character classes."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import assert_never


class TokenKind(Enum):
    IDENTIFIER = auto()  # letter (letter | digit)*
    CONSTANT = auto()  # 0 or 1
    ASSIGNMENT = auto()  # :=

    # Keywords
    OR = auto()
    XOR = auto()
    AND = auto()
    NOT = auto()

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMICOLON = auto()  # ;

    ERROR = auto()  # unexpected character
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its 1-based line/column and 0-based offset."""

    kind: TokenKind
    text: str
    line: int
    column: int
    offset: int

    @property
    def label(self) -> str:
        return kind_label(self.kind)


KEYWORDS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "or": TokenKind.OR,
        "xor": TokenKind.XOR,
        "and": TokenKind.AND,
        "not": TokenKind.NOT,
    }
)


def lookup_keyword(text: str) -> TokenKind:
    """Return the keyword kind for an exact spelling, IDENTIFIER otherwise."""
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)


def kind_label(kind: TokenKind) -> str:
    """Return the display label shown to users for a token kind."""
    match kind:
        case TokenKind.IDENTIFIER:
            return "Identifier"
        case TokenKind.CONSTANT:
            return "Constant"
        case TokenKind.ASSIGNMENT:
            return "Assignment"
        case TokenKind.OR:
            return "Keyword (OR)"
        case TokenKind.XOR:
            return "Keyword (XOR)"
        case TokenKind.AND:
            return "Keyword (AND)"
        case TokenKind.NOT:
            return "Keyword (NOT)"
        case TokenKind.LPAREN:
            return "Left parenthesis"
        case TokenKind.RPAREN:
            return "Right parenthesis"
        case TokenKind.SEMICOLON:
            return "Semicolon"
        case TokenKind.ERROR:
            return "ERROR"
        case TokenKind.EOF:
            return "End of input"
        case _:
            assert_never(kind)


# Whitespace skipped between tokens
WHITESPACE = frozenset(" \t\r\n")


def is_letter(ch: str) -> bool:
    """Return True if ch can start an identifier (any Unicode letter or '_')."""
    return ch == "_" or ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier.

    Combining marks (Unicode category M*) continue an identifier so that a
    letter in decomposed form, e.g. ``e`` + U+0301, stays one lexeme.
    """
    if is_letter(ch) or ch.isdecimal():
        return True
    return bool(ch) and unicodedata.category(ch).startswith("M")
