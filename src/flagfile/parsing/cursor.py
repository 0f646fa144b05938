from __future__ import annotations

"""Peekable character cursor over a text or byte stream.

All lookahead used by the tokenizer lives here: `peek` looks at the next
character, `advance` consumes it, and `unread` gives back the character
consumed by the last `advance` (one level only). The cursor also owns the
line/column counters; the tokenizer calls `mark_line_break` whenever it
recognises a line break so that CR, LF and CRLF are counted once.

Byte streams are decoded incrementally as UTF-8. Read failures and decode
failures are raised as `StreamReadError`.
"""

import codecs
from typing import Optional, Tuple

from flagfile.constants import READ_CHUNK
from flagfile.core.interfaces.streams import ReadableProtocol
from flagfile.core.models import Position
from flagfile.parsing.errors import StreamReadError

EOF = ""


class CharCursor:
    def __init__(self, stream: ReadableProtocol, *, chunk_size: int = READ_CHUNK, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._chunk_size = max(1, int(chunk_size))
        self._encoding = encoding
        self._decoder: Optional[codecs.IncrementalDecoder] = None
        self._buf = ""
        self._idx = 0
        self._eof = False
        # Line breaks seen and characters consumed on the current line.
        self.line = 0
        self.column = 0
        self._undo: Optional[Tuple[int, int]] = None

    # ------------------------------------------------------------------ #
    # Reading
    # ------------------------------------------------------------------ #
    def _read_chunk(self) -> str:
        try:
            raw = self._stream.read(self._chunk_size)
        except OSError as exc:
            raise StreamReadError(f"read failed: {exc}") from exc

        if isinstance(raw, (bytes, bytearray)):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder(self._encoding)(errors="strict")
            try:
                if not raw:
                    self._eof = True
                    return self._decoder.decode(b"", final=True)
                return self._decoder.decode(bytes(raw))
            except UnicodeDecodeError as exc:
                raise StreamReadError(f"invalid {self._encoding} input: {exc.reason}") from exc

        if not raw:
            self._eof = True
            return ""
        return raw

    def _fill(self) -> bool:
        """Make sure a character is available at the read index."""
        while self._idx >= len(self._buf):
            if self._eof:
                return False
            chunk = self._read_chunk()
            if not chunk:
                continue
            # Keep the last consumed character so `unread` survives a refill.
            keep = self._buf[self._idx - 1:self._idx] if self._idx else ""
            self._buf = keep + chunk
            self._idx = len(keep)
        return True

    # ------------------------------------------------------------------ #
    # Cursor API
    # ------------------------------------------------------------------ #
    def peek(self) -> str:
        """Return the next character without consuming it ('' at end of input)."""
        if not self._fill():
            return EOF
        return self._buf[self._idx]

    def advance(self) -> str:
        """Consume and return the next character ('' at end of input)."""
        if not self._fill():
            self._undo = None
            return EOF
        ch = self._buf[self._idx]
        self._undo = (self.line, self.column)
        self._idx += 1
        self.column += 1
        return ch

    def unread(self) -> None:
        """Give back the character consumed by the last `advance`."""
        if self._undo is None:
            return
        self.line, self.column = self._undo
        self._undo = None
        self._idx -= 1

    def mark_line_break(self) -> None:
        self.line += 1
        self.column = 0
        self._undo = None

    @property
    def at_line_start(self) -> bool:
        return self.column == 0

    def position(self) -> Position:
        """1-based position of the next character."""
        return Position(line=self.line + 1, column=self.column + 1)
