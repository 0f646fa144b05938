from __future__ import annotations

"""unquote – strict decoding of double-quoted string literals.

`unquote` takes a literal *including* its surrounding double quotes and
returns the decoded text. Supported escapes:

    \\a \\b \\f \\n \\r \\t \\v \\\\ \\"
    \\xHH          two hex digits
    \\ooo          three octal digits, at most \\377
    \\uHHHH        four hex digits
    \\UHHHHHHHH    eight hex digits

Anything else after a backslash (``\\q``, ``\\'``, a truncated ``\\x4``)
raises `InvalidEscapeError`. Surrogates and code points above U+10FFFF
are rejected as well. Raw line breaks inside the literal are kept as-is.
"""

from typing import Dict, List

from flagfile.constants import ESCAPE_CHAR, QUOTE_CHAR
from flagfile.parsing.errors import InvalidEscapeError

_SIMPLE_ESCAPES: Dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

# escape letter -> number of hex digits
_HEX_ESCAPES: Dict[str, int] = {"x": 2, "u": 4, "U": 8}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")


def _code_point(digits: str, base: int, literal: str) -> str:
    value = int(digits, base)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise InvalidEscapeError(f"invalid code point in {literal}")
    return chr(value)


def unquote(literal: str) -> str:
    """Decode a double-quoted literal such as ``"hello\\tworld"``.

    Args:
        literal: The literal text, quotes included.

    Returns:
        The decoded value.

    Raises:
        InvalidEscapeError: When the literal is malformed.
    """
    if len(literal) < 2 or literal[0] != QUOTE_CHAR or literal[-1] != QUOTE_CHAR:
        raise InvalidEscapeError(f"invalid quoted string {literal!r}")

    body = literal[1:-1]
    out: List[str] = []
    i, n = 0, len(body)

    while i < n:
        ch = body[i]
        if ch == QUOTE_CHAR:
            raise InvalidEscapeError(f"unescaped quote in {literal!r}")
        if ch != ESCAPE_CHAR:
            out.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            raise InvalidEscapeError(f"dangling backslash in {literal!r}")
        esc = body[i + 1]
        i += 2

        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
        elif esc in _HEX_ESCAPES:
            width = _HEX_ESCAPES[esc]
            digits = body[i:i + width]
            if len(digits) != width or not set(digits) <= _HEX_DIGITS:
                raise InvalidEscapeError(f"invalid \\{esc} escape in {literal!r}")
            out.append(_code_point(digits, 16, literal))
            i += width
        elif esc in _OCT_DIGITS:
            digits = body[i - 1:i + 2]
            if len(digits) != 3 or not set(digits) <= _OCT_DIGITS or int(digits, 8) > 0o377:
                raise InvalidEscapeError(f"invalid octal escape in {literal!r}")
            out.append(chr(int(digits, 8)))
            i += 2
        else:
            raise InvalidEscapeError(f"invalid escape \\{esc} in {literal!r}")

    return "".join(out)


def quote(value: str) -> str:
    """Return *value* as a double-quoted literal that `unquote` reverses."""
    reverse = {v: k for k, v in _SIMPLE_ESCAPES.items()}
    out: List[str] = [QUOTE_CHAR]
    for i, ch in enumerate(value):
        # A flag-file reader pairs the backslash of a trailing \\ with the
        # closing quote.
        if ch == ESCAPE_CHAR and i == len(value) - 1:
            out.append("\\x5c")
        elif ch in reverse:
            out.append(ESCAPE_CHAR + reverse[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        elif not ch.isprintable():
            cp = ord(ch)
            out.append(f"\\u{cp:04x}" if cp <= 0xFFFF else f"\\U{cp:08x}")
        else:
            out.append(ch)
    out.append(QUOTE_CHAR)
    return "".join(out)
