from __future__ import annotations

"""Public surface for flagfile.core.

Token/position models and the protocol types shared by the parsing and
runtime layers:

    from flagfile.core import Token, TokenKind, Position
"""

from flagfile.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from flagfile.core.interfaces.streams import (
    CharCursorProtocol,
    ReadableProtocol,
    TokenStreamProtocol,
)
from flagfile.core.models import Position, Token, TokenKind

__all__ = [
    'CharCursorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'Position',
    'ReadableProtocol',
    'Token',
    'TokenKind',
    'TokenStreamProtocol',
]
