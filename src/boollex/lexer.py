"""boollex lexer: converts source text into a flat token stream."""

from __future__ import annotations

from boollex.errors import ErrorKind, ScanError
from boollex.tokens import WHITESPACE, Token, TokenKind, is_ident_char, is_letter, lookup_keyword

# Sentinel returned by the cursor once the input is exhausted
EOF_CHAR = ""

_SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.SEMICOLON,
    "0": TokenKind.CONSTANT,
    "1": TokenKind.CONSTANT,
}


class Lexer:
    """Tokenize boolean-expression source into Token objects.

    Malformed input never aborts the scan: each bad construct becomes an
    ERROR token and/or a ScanError record, and scanning continues to the
    end of the input. A Lexer scans its source exactly once.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = -1  # offset of the current character
        self._read_pos = 0
        self._ch = EOF_CHAR
        self._line = 1
        self._col = 0
        self._tokens: list[Token] = []
        self._errors: list[ScanError] = []
        self._done = False
        self._read_char()

    @property
    def tokens(self) -> list[Token]:
        return list(self._tokens)

    @property
    def errors(self) -> list[ScanError]:
        return list(self._errors)

    @property
    def messages(self) -> list[str]:
        """Error messages with their line/column embedded."""
        return [str(err) for err in self._errors]

    def analyze(self) -> list[Token]:
        """Scan the whole source and return the tokens (EOF excluded)."""
        if self._done:
            raise RuntimeError("Lexer.analyze() called twice; create a new Lexer per input")
        self._done = True
        while True:
            tok = self.next_token()
            if tok.kind == TokenKind.EOF:
                break
            self._tokens.append(tok)
        return self.tokens

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._pos >= len(self._source):
            return
        if self._read_pos >= len(self._source):
            self._ch = EOF_CHAR
        else:
            self._ch = self._source[self._read_pos]
        self._pos = self._read_pos
        self._read_pos += 1
        self._col += 1

        if self._ch == "\n":
            self._line += 1
            self._col = 0

    def _peek_char(self) -> str:
        if self._read_pos >= len(self._source):
            return EOF_CHAR
        return self._source[self._read_pos]

    def _record(self, kind: ErrorKind, message: str) -> None:
        self._errors.append(ScanError(kind, message, self._line, self._col, self._pos))

    # ------------------------------------------------------------------
    # Trivia
    # ------------------------------------------------------------------

    def _skip_trivia(self) -> None:
        while True:
            while self._ch in WHITESPACE:
                self._read_char()
            if not self._skip_comment():
                return

    def _skip_comment(self) -> bool:
        """Consume one comment at the cursor; return False if there is none."""
        if self._ch != "/":
            return False

        nxt = self._peek_char()
        if nxt == "/":
            self._read_char()
            self._read_char()
            while self._ch != "\n" and self._ch != EOF_CHAR:
                self._read_char()
            return True

        if nxt == "*":
            self._read_char()
            self._read_char()
            while True:
                if self._ch == EOF_CHAR:
                    self._record(ErrorKind.UNTERMINATED_COMMENT, "unterminated comment")
                    return True
                if self._ch == "*" and self._peek_char() == "/":
                    self._read_char()
                    self._read_char()
                    return True
                self._read_char()

        # A lone '/' is left for the classifier to reject
        return False

    # ------------------------------------------------------------------
    # Classifier
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Skip trivia and return the next token, EOF once input is exhausted."""
        self._skip_trivia()

        line, col, offset = self._line, self._col, self._pos
        ch = self._ch

        if ch == ":":
            if self._peek_char() != "=":
                return self._unexpected()
            self._read_char()
            self._read_char()
            return Token(TokenKind.ASSIGNMENT, ":=", line, col, offset)

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._read_char()
            return Token(kind, ch, line, col, offset)

        if ch == EOF_CHAR:
            return Token(TokenKind.EOF, "", line, col, offset)

        if is_letter(ch):
            text = self._read_identifier()
            return Token(lookup_keyword(text), text, line, col, offset)

        return self._unexpected()

    def _read_identifier(self) -> str:
        start = self._pos
        while is_ident_char(self._ch):
            self._read_char()
        return self._source[start : self._pos]

    def _unexpected(self) -> Token:
        ch = self._ch
        tok = Token(TokenKind.ERROR, ch, self._line, self._col, self._pos)
        shown = f"'{ch}'" if ch.isprintable() else repr(ch)
        self._record(ErrorKind.UNEXPECTED_CHARACTER, f"unexpected character {shown}")
        self._read_char()
        return tok


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).analyze()
