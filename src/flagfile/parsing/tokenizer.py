from __future__ import annotations

"""
FlagTokenizer – character-level tokenizer for flag files.

Each call to `next_token` dispatches on a single character:

    * '#' at column 0     → COMMENT (through the end of the line, inclusive)
    * CR, LF or CR LF     → LINE_BREAK (CR LF counts once)
    * '"'                 → quoted WORD (decoded with `unquote`)
    * other non-space     → bare WORD (up to whitespace, a quote or EOF)
    * run of blanks       → WHITESPACE (line breaks excluded)
    * end of input        → EOF

Every token is returned with the position of its first character. Errors
(stream failures, unterminated or undecodable quoted words) are raised as
`ParseError` positioned where reading stopped.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from flagfile.constants import COMMENT_CHAR, CR, ESCAPE_CHAR, LF, QUOTE_CHAR
from flagfile.core.models import Position, Token, TokenKind
from flagfile.logging.helpers import get_logger, trace_io
from flagfile.parsing.cursor import EOF, CharCursor
from flagfile.parsing.errors import (
    FlagFileError,
    ParseError,
    UnexpectedEndOfInput,
)
from flagfile.parsing.source import FlagSource
from flagfile.parsing.unquote import unquote

_LINE_BREAK_CHARS = (CR, LF)

# str.isspace() also accepts the ASCII information separators; they are word
# characters in flag files.
_INFO_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _INFO_SEPARATORS


class FlagTokenizer:
    def __init__(
        self,
        cursor: CharCursor,
        *,
        source: Optional[FlagSource] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cur = cursor
        self._src = source or FlagSource()
        self._log = logger or get_logger("tokenizer")
        self._done = False

    def next_token(self) -> Tuple[Token, Position]:
        """Scan and return the next token with its start position."""
        start = self._cur.position()
        try:
            token = self._scan()
        except FlagFileError as exc:
            raise self._error(exc) from exc
        trace_io(self._log, "token", kind=token.kind.value, value=token.value, line=start.line, col=start.column)
        return token, start

    def __iter__(self) -> Iterator[Tuple[Token, Position]]:
        while not self._done:
            token, pos = self.next_token()
            if token.kind is TokenKind.EOF:
                self._done = True
            yield token, pos

    def _error(self, cause: FlagFileError) -> ParseError:
        pos = self._cur.position()
        return ParseError(line=pos.line, column=pos.column, cause=cause, file=self._src.name)

    # ------------------------------------------------------------------ #
    # Scanning
    # ------------------------------------------------------------------ #
    def _scan(self) -> Token:
        cur = self._cur
        at_line_start = cur.at_line_start
        ch = cur.advance()

        if ch == EOF:
            return Token(TokenKind.EOF)

        if at_line_start and ch == COMMENT_CHAR:
            self._skip_comment()
            return Token(TokenKind.COMMENT)

        if ch in _LINE_BREAK_CHARS:
            self._finish_line_break(ch)
            return Token(TokenKind.LINE_BREAK)

        if ch == QUOTE_CHAR:
            return self._quoted_word()

        if not _is_space(ch):
            return self._bare_word(ch)

        while True:
            nxt = cur.peek()
            if nxt == EOF or nxt in _LINE_BREAK_CHARS or not _is_space(nxt):
                return Token(TokenKind.WHITESPACE)
            cur.advance()

    def _finish_line_break(self, ch: str) -> None:
        """Complete a line break whose first character *ch* was consumed."""
        if ch == CR and self._cur.peek() == LF:
            self._cur.advance()
        self._cur.mark_line_break()

    def _skip_comment(self) -> None:
        while True:
            ch = self._cur.advance()
            if ch == EOF:
                return
            if ch in _LINE_BREAK_CHARS:
                self._finish_line_break(ch)
                return

    def _bare_word(self, first: str) -> Token:
        chars: List[str] = [first]
        while True:
            nxt = self._cur.peek()
            if nxt == EOF or nxt == QUOTE_CHAR or _is_space(nxt):
                return Token(TokenKind.WORD, "".join(chars))
            chars.append(self._cur.advance())

    def _quoted_word(self) -> Token:
        # The buffer is kept as a literal (quotes and escapes included) and
        # decoded in one go once the closing quote is seen.
        buf: List[str] = [QUOTE_CHAR]

        while True:
            ch = self._read_quoted_char()
            if ch == QUOTE_CHAR:
                buf.append(ch)
                break
            # Only a following quote pairs with a backslash; anything else
            # is read on the next pass, so in \\" the quote is escaped.
            if ch == ESCAPE_CHAR and self._cur.peek() == QUOTE_CHAR:
                buf.append(ch)
                buf.append(self._read_quoted_char())
                continue
            buf.append(ch)

        return Token(TokenKind.WORD, unquote("".join(buf)), quoted=True)

    def _read_quoted_char(self) -> str:
        ch = self._cur.advance()
        if ch == EOF:
            raise UnexpectedEndOfInput()
        if ch == LF or (ch == CR and self._cur.peek() != LF):
            self._cur.mark_line_break()
        return ch
