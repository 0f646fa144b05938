"""flagfile converts flag files into command-line flag arguments.

A flag file is an alternative way to provide command-line flags. The
arguments::

    prog -enable-video -user=tim -user=dave -size=3 -message="hello<TAB>world"

can be stored as::

    # Enable video output
    enable-video

    # List of administrative users
    user tim
    user dave

    # Initial size
    size 3

    # Message for new users
    message "hello\\tworld"

>>> from flagfile import parse_text
>>> parse_text('user tim cooper\\nsize 3\\n')
['-user=tim cooper', '-size=3']
"""
from __future__ import annotations

from flagfile.cli import FlagFileCli
from flagfile.core.models import Position, Token, TokenKind
from flagfile.logging.helpers import get_logger
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
from flagfile.rendering.renderer import render_flags
from flagfile.runtime.argv import expand_argv, init, load_files

__version__ = '1.0.0'

__all__ = [
    'FlagFileCli',
    'FlagFileError',
    'FlagFileParser',
    'FlagSource',
    'InvalidEscapeError',
    'InvalidTokenError',
    'ParseError',
    'Position',
    'StreamReadError',
    'Token',
    'TokenKind',
    'UnexpectedEndOfInput',
    'expand_argv',
    'get_logger',
    'init',
    'load_files',
    'parse',
    'parse_file',
    'parse_text',
    'render_flags',
]
