"""Renderers: turn an AnalysisResult into a text table, JSON or an HTML page."""

from __future__ import annotations

import json

from boollex.analysis import AnalysisResult
from boollex.tokens import TokenKind

EMPTY_INPUT_NOTICE = "Enter text to analyze"
DEFAULT_TITLE = "Lexical analysis"


def render_text(result: AnalysisResult) -> str:
    """Render an aligned token table followed by a summary and the errors."""
    rows = [("#", "kind", "text", "position")]
    for i, tok in enumerate(result.tokens, start=1):
        rows.append((str(i), tok.label, repr(tok.text), f"{tok.line}:{tok.column}"))

    widths = [max(len(row[i]) for row in rows) for i in range(3)]
    lines: list[str] = []
    if result.tokens:
        for row in rows:
            cells = [cell.ljust(width) for cell, width in zip(row, widths)]
            lines.append("  ".join([*cells, row[3]]))

    lines.append(
        f"{result.token_count} tokens "
        f"({result.success_count} ok, {result.error_count} errors)"
    )
    lines.extend(result.errors)
    return "\n".join(lines) + "\n"


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n"


def render_html(
    result: AnalysisResult,
    title: str = DEFAULT_TITLE,
    css_files: list[str] | None = None,
) -> str:
    """Render a complete standalone HTML report page."""
    parts: list[str] = ["<!DOCTYPE html>\n<html>\n<head>\n"]
    parts.append('<meta charset="utf-8">\n')
    parts.append(f"<title>{_escape_html(title)}</title>\n")
    for href in css_files or []:
        parts.append(f'<link rel="stylesheet" href="{_escape_attr(href)}">\n')
    parts.append("</head>\n<body>\n")
    parts.append(f"<h1>{_escape_html(title)}</h1>\n")

    if not result.input_text:
        parts.append(f'<p class="notice">{EMPTY_INPUT_NOTICE}</p>\n')
    else:
        parts.append(f"<pre class=\"source\">{_escape_html(result.input_text)}</pre>\n")
        parts.append(_render_summary(result))
        parts.append(_render_token_table(result))
        if result.has_errors:
            parts.append(_render_errors(result.errors))

    parts.append("</body>\n</html>\n")
    return "".join(parts)


# ---------------------------------------------------------------------------
# HTML sections
# ---------------------------------------------------------------------------


def _render_summary(result: AnalysisResult) -> str:
    return (
        '<p class="summary">'
        f"Tokens: {result.token_count}, "
        f"recognized: {result.success_count}, "
        f"errors: {result.error_count}"
        "</p>\n"
    )


def _render_token_table(result: AnalysisResult) -> str:
    parts = ['<table class="tokens">\n']
    parts.append("<tr><th>#</th><th>Kind</th><th>Lexeme</th><th>Line</th><th>Column</th></tr>\n")
    for i, tok in enumerate(result.tokens, start=1):
        cls = ' class="error"' if tok.kind == TokenKind.ERROR else ""
        parts.append(
            f"<tr{cls}><td>{i}</td><td>{_escape_html(tok.label)}</td>"
            f"<td><code>{_escape_html(tok.text)}</code></td>"
            f"<td>{tok.line}</td><td>{tok.column}</td></tr>\n"
        )
    parts.append("</table>\n")
    return "".join(parts)


def _render_errors(errors: tuple[str, ...]) -> str:
    items = "".join(f"<li>{_escape_html(msg)}</li>\n" for msg in errors)
    return f'<ul class="errors">\n{items}</ul>\n'


# ---------------------------------------------------------------------------
# HTML escaping
# ---------------------------------------------------------------------------


def _escape_html(text: str) -> str:
    """Escape text for HTML body content. Also encodes non-ASCII as entities."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ord(ch) > 0x7F:
            result.append(f"&#x{ord(ch):X};")
        else:
            result.append(ch)
    return "".join(result)


def _escape_attr(text: str) -> str:
    """Escape text for HTML attribute values."""
    return _escape_html(text).replace('"', "&quot;")
