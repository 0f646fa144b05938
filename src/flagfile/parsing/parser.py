from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional, Union

from flagfile.core.interfaces.streams import ReadableProtocol
from flagfile.logging.helpers import get_logger
from flagfile.parsing.assembler import FlagAssembler
from flagfile.parsing.cursor import CharCursor
from flagfile.parsing.source import FlagSource
from flagfile.parsing.tokenizer import FlagTokenizer

PathLike = Union[str, Path]


class FlagFileParser:
    """Parser for flag files.

    One instance can parse any number of sources; every call builds its own
    cursor, tokenizer and assembler, so calls share no state.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("parser")

    def parse(self, stream: ReadableProtocol, src: Optional[FlagSource] = None) -> List[str]:
        """Parse a text or binary stream into flag arguments.

        Args:
            stream: Object with a ``read(size)`` method.
            src: Origin used to tag errors; defaults to the stream's ``name``.

        Returns:
            The ordered flag arguments.

        Raises:
            ParseError: On the first malformed construct or read failure.
        """
        source = src or FlagSource.of_stream(stream)
        tokenizer = FlagTokenizer(CharCursor(stream), source=source, logger=get_logger("tokenizer"))
        args = FlagAssembler(source=source).assemble(tokenizer)
        self._log.debug("parsed %d flag argument(s) from %s", len(args), source.format())
        return args

    def parse_text(self, text: str, src: Optional[FlagSource] = None) -> List[str]:
        """Parse flag-file content held in memory."""
        return self.parse(io.StringIO(text), src)

    def parse_file(self, path: PathLike) -> List[str]:
        """Parse a flag file from disk.

        A missing file raises `FileNotFoundError` unchanged so callers can
        decide to skip it.
        """
        p = Path(path)
        with p.open("rb") as fp:
            return self.parse(fp, FlagSource(path=str(path)))

    @classmethod
    def from_file(cls, path: PathLike, *, logger: Optional[logging.Logger] = None) -> List[str]:
        """Convenience classmethod: parse a flag file in a single call."""
        return cls(logger=logger).parse_file(path)


def parse(stream: ReadableProtocol, src: Optional[FlagSource] = None) -> List[str]:
    """Return the flags read from *stream*, ready for an argument parser."""
    return FlagFileParser().parse(stream, src)


def parse_text(text: str, src: Optional[FlagSource] = None) -> List[str]:
    return FlagFileParser().parse_text(text, src)


def parse_file(path: PathLike) -> List[str]:
    """Return the flags read from the file at *path*."""
    return FlagFileParser().parse_file(path)
