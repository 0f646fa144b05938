from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .streams import CharCursorProtocol, ReadableProtocol, TokenStreamProtocol

__all__ = [
    'CharCursorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ReadableProtocol',
    'TokenStreamProtocol',
]
