from __future__ import annotations

"""FlagAssembler – turns a token stream into flag arguments.

The grammar is line oriented:

    * the first word of a line starts a new flag: ``-<word>``;
    * later words on the same line are values: the first one is joined
      with '=', the next ones with a single space when whitespace was seen
      since the previous word, and with nothing otherwise;
    * comments and whitespace never start or end a flag;
    * a bare ``-`` is rejected wherever it appears.

Repeated flag names produce repeated entries; merging them is left to the
argument parser that consumes the result.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from flagfile.constants import FLAG_PREFIX, VALUE_SEP
from flagfile.core.models import Position, Token, TokenKind
from flagfile.parsing.errors import InvalidTokenError, ParseError
from flagfile.parsing.source import FlagSource

_INVALID_BARE_WORDS = frozenset({"-"})


@dataclass
class ParseState:
    at_line_start: bool = True
    first_value_word: bool = True
    pending_whitespace: bool = False


class FlagAssembler:
    def __init__(self, *, source: Optional[FlagSource] = None) -> None:
        self._src = source or FlagSource()

    def assemble(self, tokens: Iterable[Tuple[Token, Position]]) -> List[str]:
        """Consume *tokens* up to EOF and return the flag arguments."""
        args: List[str] = []
        state = ParseState()

        for token, pos in tokens:
            kind = token.kind
            if kind is TokenKind.EOF:
                break
            if kind is TokenKind.COMMENT:
                continue
            if kind is TokenKind.WHITESPACE:
                state.pending_whitespace = True
                continue
            if kind is TokenKind.LINE_BREAK:
                state.at_line_start = True
                continue

            self._check_word(token, pos)
            if state.at_line_start:
                args.append(FLAG_PREFIX + token.value)
                state.at_line_start = False
                state.first_value_word = True
            elif state.first_value_word:
                args[-1] += VALUE_SEP + token.value
                state.first_value_word = False
            elif state.pending_whitespace:
                args[-1] += " " + token.value
            else:
                args[-1] += token.value
            state.pending_whitespace = False

        return args

    def _check_word(self, token: Token, pos: Position) -> None:
        if not token.quoted and token.value in _INVALID_BARE_WORDS:
            raise ParseError(
                line=pos.line,
                column=pos.column,
                cause=InvalidTokenError(token.value),
                file=self._src.name,
            )
