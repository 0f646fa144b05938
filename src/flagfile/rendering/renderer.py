from __future__ import annotations

"""Canonical flag-file rendering.

`render_flags` is the inverse of the parser: each ``-name[=value]``
argument becomes one line holding the name and, when present, the value.
Words the tokenizer would split, drop or reject are written as quoted
literals, so parsing the rendered text yields the same argument list.
"""

from typing import Iterable, List, TextIO

from flagfile.constants import COMMENT_CHAR, FLAG_PREFIX, QUOTE_CHAR, VALUE_SEP
from flagfile.parsing.unquote import quote


def _needs_quoting(word: str, *, line_start: bool) -> bool:
    if not word or word == FLAG_PREFIX:
        return True
    if line_start and word.startswith(COMMENT_CHAR):
        return True
    return any(ch == QUOTE_CHAR or ch.isspace() or not ch.isprintable() for ch in word)


def _word(text: str, *, line_start: bool = False) -> str:
    return quote(text) if _needs_quoting(text, line_start=line_start) else text


def render_line(arg: str) -> str:
    """Render one flag argument as a flag-file line.

    Raises:
        ValueError: If *arg* does not start with '-'.
    """
    if not arg.startswith(FLAG_PREFIX):
        raise ValueError(f"not a flag argument: {arg!r}")
    name, sep, value = arg[len(FLAG_PREFIX):].partition(VALUE_SEP)
    line = _word(name, line_start=True)
    if sep:
        line += " " + _word(value)
    return line


def render_flags(args: Iterable[str]) -> str:
    """Return the canonical flag-file text for *args* ('' when empty)."""
    lines: List[str] = [render_line(a) for a in args]
    return "".join(f"{ln}\n" for ln in lines)


def write_flags(args: Iterable[str], stream: TextIO) -> None:
    stream.write(render_flags(args))
