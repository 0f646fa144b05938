from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    EOF = 'eof'
    COMMENT = 'comment'
    WHITESPACE = 'whitespace'
    LINE_BREAK = 'line_break'
    WORD = 'word'


@dataclass(frozen=True)
class Token:
    """A classified lexical unit.

    Only WORD tokens carry a value; for quoted words it is the decoded
    text without the surrounding quotes.
    """
    kind: TokenKind
    value: str = ''
    quoted: bool = False


@dataclass(frozen=True)
class Position:
    """1-based line/column location inside a flag file."""
    line: int
    column: int
