"""Analysis result: the finished scan handed to presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boollex.errors import ScanError
from boollex.lexer import Lexer
from boollex.tokens import Token, TokenKind


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Tokens, error messages and counts for one scanned input."""

    tokens: tuple[Token, ...]
    errors: tuple[str, ...]
    diagnostics: tuple[ScanError, ...]
    input_text: str

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def error_count(self) -> int:
        return sum(1 for t in self.tokens if t.kind == TokenKind.ERROR)

    @property
    def success_count(self) -> int:
        return self.token_count - self.error_count

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the result."""
        return {
            "tokens": [
                {
                    "kind": t.kind.name,
                    "label": t.label,
                    "text": t.text,
                    "line": t.line,
                    "column": t.column,
                }
                for t in self.tokens
            ],
            "errors": list(self.errors),
            "has_errors": self.has_errors,
            "token_count": self.token_count,
            "success_count": self.success_count,
            "error_count": self.error_count,
        }


def analyze(source: str) -> AnalysisResult:
    """Scan source with a fresh Lexer and collect the result."""
    lexer = Lexer(source)
    tokens = lexer.analyze()
    return AnalysisResult(
        tokens=tuple(tokens),
        errors=tuple(lexer.messages),
        diagnostics=tuple(lexer.errors),
        input_text=source,
    )
