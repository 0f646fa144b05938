from flagfile.parsing.assembler import FlagAssembler, ParseState
from flagfile.parsing.cursor import CharCursor
from flagfile.parsing.errors import (
    FlagFileError,
    InvalidEscapeError,
    InvalidTokenError,
    ParseError,
    StreamReadError,
    UnexpectedEndOfInput,
)
from flagfile.parsing.parser import FlagFileParser, parse, parse_file, parse_text
from flagfile.parsing.source import FlagSource
from flagfile.parsing.tokenizer import FlagTokenizer
from flagfile.parsing.unquote import quote, unquote

__all__ = [
    'CharCursor',
    'FlagAssembler',
    'FlagFileError',
    'FlagFileParser',
    'FlagSource',
    'FlagTokenizer',
    'InvalidEscapeError',
    'InvalidTokenError',
    'ParseError',
    'ParseState',
    'StreamReadError',
    'UnexpectedEndOfInput',
    'parse',
    'parse_file',
    'parse_text',
    'quote',
    'unquote',
]
