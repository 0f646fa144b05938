from __future__ import annotations

"""Error taxonomy for flag-file parsing.

Every failure surfaced by the parser is a `ParseError` carrying the
position (and file, when known) plus one of the underlying causes below.
The cause is also chained as ``__cause__`` so tracebacks show both.
"""

from typing import Optional


class FlagFileError(ValueError):
    """Base class for every error raised by flagfile."""


class StreamReadError(FlagFileError):
    """Raised when the underlying stream fails while being read."""


class UnexpectedEndOfInput(FlagFileError):
    """Raised when input ends in the middle of a quoted word."""

    def __init__(self, message: str = "unexpected end of input") -> None:
        super().__init__(message)


class InvalidEscapeError(FlagFileError):
    """Raised when a quoted word is not a valid string literal."""


class InvalidTokenError(FlagFileError):
    """Raised when a word the format does not support is encountered."""

    def __init__(self, token: str) -> None:
        super().__init__(f'invalid token "{token}"')
        self.token = token


class ParseError(FlagFileError):
    """A parsing error with its location.

    Attributes:
        file: The file in which the error occurred, empty when unknown.
        line: 1-based line at or near the error.
        column: 1-based column at or near the error.
        cause: The underlying error, if any.
    """

    def __init__(
        self,
        *,
        line: int,
        column: int,
        cause: Optional[BaseException] = None,
        file: str = "",
    ) -> None:
        self.file = file or ""
        self.line = line
        self.column = column
        self.cause = cause
        super().__init__(self._render())

    def _render(self) -> str:
        parts = ["flagfile: parsing error"]
        if self.file:
            parts.append(f" in {self.file}")
        parts.append(f" (line {self.line}, column {self.column})")
        if self.cause is not None:
            parts.append(f": {self.cause}")
        return "".join(parts)

    def __str__(self) -> str:
        return self._render()
