from __future__ import annotations

from typing import Iterator, Protocol, Tuple, Union, runtime_checkable

from flagfile.core.models import Position, Token


@runtime_checkable
class ReadableProtocol(Protocol):
    """Anything with a ``read(size)`` returning text or bytes."""

    def read(self, size: int = -1) -> Union[str, bytes]:
        ...


@runtime_checkable
class CharCursorProtocol(Protocol):
    """One-character lookahead over a character stream."""

    def peek(self) -> str:
        ...

    def advance(self) -> str:
        ...

    def unread(self) -> None:
        ...

    def position(self) -> Position:
        ...


@runtime_checkable
class TokenStreamProtocol(Protocol):
    """Producer of positioned tokens ending in one EOF token."""

    def next_token(self) -> Tuple[Token, Position]:
        ...

    def __iter__(self) -> Iterator[Tuple[Token, Position]]:
        ...
