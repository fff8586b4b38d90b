"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from boollex.lexer import Lexer
from boollex.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the stored tokens."""

    def _lex(source: str) -> list[Token]:
        return Lexer(source).analyze()

    return _lex


@pytest.fixture
def scan():
    """Return a helper that scans source and returns the finished Lexer."""

    def _scan(source: str) -> Lexer:
        lexer = Lexer(source)
        lexer.analyze()
        return lexer

    return _scan


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def positions(tokens: list[Token]) -> list[tuple[int, int]]:
    return [(t.line, t.column) for t in tokens]
