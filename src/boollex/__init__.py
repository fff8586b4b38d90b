"""boollex: lexical analyzer for a small boolean-algebra language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boollex.analysis import AnalysisResult

__version__ = "0.1.0"


def analyze(source: str) -> AnalysisResult:
    """Scan source text and return tokens, error messages and counts."""
    from boollex.analysis import analyze as _analyze

    return _analyze(source)
