"""Minimal LSP server for boollex: diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import PositionCodec

from boollex import __version__
from boollex.analysis import analyze
from boollex.errors import ScanError

server = LanguageServer("boollex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_diagnostic(err: ScanError, lines: list[str], codec: PositionCodec) -> Diagnostic:
    # Scanner positions are 1-based code points; the codec maps them to the
    # client's negotiated units (UTF-16 unless the client asked otherwise)
    line = err.line - 1
    col = max(err.column - 1, 0)
    rng = Range(
        start=Position(line=line, character=col),
        end=Position(line=line, character=col + 1),
    )
    return Diagnostic(
        range=codec.range_to_client_units(lines, rng),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="boollex",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per scan error."""
    doc = ls.workspace.get_text_document(uri)
    result = analyze(doc.source)
    lines = doc.lines
    codec = ls.workspace.position_codec
    diagnostics = [_to_diagnostic(err, lines, codec) for err in result.diagnostics]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
