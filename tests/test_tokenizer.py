from __future__ import annotations

import io
import unittest
from typing import List, Tuple

from flagfile.core.models import Position, Token, TokenKind
from flagfile.parsing.cursor import CharCursor
from flagfile.parsing.errors import (
    InvalidEscapeError,
    ParseError,
    StreamReadError,
    UnexpectedEndOfInput,
)
from flagfile.parsing.tokenizer import FlagTokenizer

EOF = TokenKind.EOF
COMMENT = TokenKind.COMMENT
WS = TokenKind.WHITESPACE
LB = TokenKind.LINE_BREAK
WORD = TokenKind.WORD


def _scan(text: str, *, chunk_size: int = 4096) -> List[Tuple[Token, Position]]:
    return list(FlagTokenizer(CharCursor(io.StringIO(text), chunk_size=chunk_size)))


def _kinds(text: str, **kw) -> List[TokenKind]:
    return [tok.kind for tok, _ in _scan(text, **kw)]


def _words(text: str) -> List[str]:
    return [tok.value for tok, _ in _scan(text) if tok.kind is WORD]


class _BrokenStream:
    def __init__(self, prefix: str) -> None:
        self._prefix = prefix

    def read(self, size: int = -1) -> str:
        if self._prefix:
            out, self._prefix = self._prefix, ""
            return out
        raise OSError("device went away")


# --------------------------------------------------------------------------- #
#  Cursor                                                                     #
# --------------------------------------------------------------------------- #
class CharCursorTests(unittest.TestCase):
    def test_peek_does_not_consume(self) -> None:
        cur = CharCursor(io.StringIO("ab"))
        self.assertEqual(cur.peek(), "a")
        self.assertEqual(cur.peek(), "a")
        self.assertEqual(cur.advance(), "a")
        self.assertEqual(cur.advance(), "b")
        self.assertEqual(cur.advance(), "")
        self.assertEqual(cur.peek(), "")

    def test_unread_survives_refill(self) -> None:
        cur = CharCursor(io.StringIO("ab"), chunk_size=1)
        self.assertEqual(cur.advance(), "a")
        self.assertEqual(cur.peek(), "b")
        cur.unread()
        self.assertEqual(cur.position(), Position(1, 1))
        self.assertEqual(cur.advance(), "a")
        self.assertEqual(cur.advance(), "b")

    def test_position_tracking(self) -> None:
        cur = CharCursor(io.StringIO("ab\nc"))
        cur.advance()
        cur.advance()
        self.assertEqual(cur.position(), Position(1, 3))
        cur.advance()
        cur.mark_line_break()
        self.assertEqual(cur.position(), Position(2, 1))
        self.assertTrue(cur.at_line_start)

    def test_bytes_are_decoded_across_chunks(self) -> None:
        cur = CharCursor(io.BytesIO("é".encode("utf-8")), chunk_size=1)
        self.assertEqual(cur.advance(), "é")
        self.assertEqual(cur.advance(), "")

    def test_invalid_utf8(self) -> None:
        cur = CharCursor(io.BytesIO(b"\xff"))
        with self.assertRaises(StreamReadError):
            cur.advance()


# --------------------------------------------------------------------------- #
#  Token kinds and positions                                                  #
# --------------------------------------------------------------------------- #
class TokenizerBasicTests(unittest.TestCase):
    def test_simple_line(self) -> None:
        tokens = _scan("user tim\n")
        self.assertEqual(
            [(t.kind, t.value) for t, _ in tokens],
            [(WORD, "user"), (WS, ""), (WORD, "tim"), (LB, ""), (EOF, "")],
        )
        self.assertEqual(
            [p for _, p in tokens],
            [Position(1, 1), Position(1, 5), Position(1, 6), Position(1, 9), Position(2, 1)],
        )

    def test_empty_input(self) -> None:
        self.assertEqual(_kinds(""), [EOF])

    def test_exactly_one_eof(self) -> None:
        self.assertEqual(_kinds("a b\n\n").count(EOF), 1)

    def test_whitespace_run_is_one_token(self) -> None:
        self.assertEqual(_kinds("a \t  b"), [WORD, WS, WORD, EOF])

    def test_whitespace_stops_at_line_break(self) -> None:
        self.assertEqual(_kinds("a  \nb"), [WORD, WS, LB, WORD, EOF])

    def test_unicode_words(self) -> None:
        self.assertEqual(_words("name café ünï"), ["name", "café", "ünï"])

    def test_information_separators_stay_in_words(self) -> None:
        self.assertEqual(_words("b\x1cc\x1f d"), ["b\x1cc\x1f", "d"])


class TokenizerLineBreakTests(unittest.TestCase):
    def test_crlf_is_one_break(self) -> None:
        tokens = _scan("a\r\nb")
        self.assertEqual([t.kind for t, _ in tokens], [WORD, LB, WORD, EOF])
        self.assertEqual(tokens[2][1], Position(2, 1))

    def test_lone_cr_is_one_break(self) -> None:
        tokens = _scan("a\rb")
        self.assertEqual([t.kind for t, _ in tokens], [WORD, LB, WORD, EOF])
        self.assertEqual(tokens[2][1], Position(2, 1))

    def test_lf_cr_is_two_breaks(self) -> None:
        tokens = _scan("a\n\rb")
        self.assertEqual([t.kind for t, _ in tokens], [WORD, LB, LB, WORD, EOF])
        self.assertEqual(tokens[3][1], Position(3, 1))

    def test_crlf_split_across_reads(self) -> None:
        self.assertEqual(_kinds("a\r\nb", chunk_size=1), [WORD, LB, WORD, EOF])


class TokenizerCommentTests(unittest.TestCase):
    def test_comment_consumes_line_break(self) -> None:
        tokens = _scan("# hello world\nx")
        self.assertEqual([t.kind for t, _ in tokens], [COMMENT, WORD, EOF])
        self.assertEqual(tokens[1][1], Position(2, 1))

    def test_comment_at_end_of_input(self) -> None:
        self.assertEqual(_kinds("#only"), [COMMENT, EOF])

    def test_comment_with_crlf(self) -> None:
        tokens = _scan("#c\r\nx")
        self.assertEqual([t.kind for t, _ in tokens], [COMMENT, WORD, EOF])
        self.assertEqual(tokens[1][1], Position(2, 1))

    def test_hash_after_column_zero_is_text(self) -> None:
        self.assertEqual(_words(" #x"), ["#x"])
        self.assertEqual(_words("a#b"), ["a#b"])


class TokenizerQuotedWordTests(unittest.TestCase):
    def test_standard_escapes(self) -> None:
        tokens = _scan('"hello\\tworld"')
        tok = tokens[0][0]
        self.assertEqual(tok.kind, WORD)
        self.assertEqual(tok.value, "hello\tworld")
        self.assertTrue(tok.quoted)

    def test_escaped_quote_does_not_terminate(self) -> None:
        self.assertEqual(_words('"say \\"hi\\"" x'), ['say "hi"', "x"])

    def test_backslash_pairs_only_with_a_quote(self) -> None:
        self.assertEqual(_words('"a\\\\b" c'), ["a\\b", "c"])

    def test_second_backslash_escapes_the_quote(self) -> None:
        with self.assertRaises(ParseError) as cm:
            _scan('"a\\\\"')
        self.assertIsInstance(cm.exception.cause, UnexpectedEndOfInput)

    def test_word_runs_past_backslash_quote(self) -> None:
        # The word closes at the last quote; its literal holds a bare quote.
        with self.assertRaises(ParseError) as cm:
            _scan('"a\\\\" b"')
        err = cm.exception
        self.assertIsInstance(err.cause, InvalidEscapeError)
        self.assertEqual((err.line, err.column), (1, 9))

    def test_numeric_escapes(self) -> None:
        self.assertEqual(_words('"\\x41\\101\\u00e9\\U0001F600"'), ["AAé\U0001F600"])

    def test_bare_word_stops_at_quote(self) -> None:
        tokens = _scan('hello"\\t"world')
        self.assertEqual([t.kind for t, _ in tokens], [WORD, WORD, WORD, EOF])
        self.assertEqual([t.value for t, _ in tokens[:3]], ["hello", "\t", "world"])

    def test_empty_quoted_word(self) -> None:
        self.assertEqual(_words('""'), [""])

    def test_line_break_inside_quotes(self) -> None:
        tokens = _scan('"a\nb" c')
        self.assertEqual(tokens[0][0].value, "a\nb")
        self.assertEqual(tokens[1][1], Position(2, 3))
        self.assertEqual(tokens[2][1], Position(2, 4))

    def test_crlf_and_cr_inside_quotes(self) -> None:
        tokens = _scan('"a\r\nb\rc" d')
        self.assertEqual(tokens[0][0].value, "a\r\nb\rc")
        self.assertEqual(tokens[1][1], Position(3, 3))
        self.assertEqual(tokens[2][1], Position(3, 4))


class TokenizerErrorTests(unittest.TestCase):
    def test_unterminated_quote(self) -> None:
        with self.assertRaises(ParseError) as cm:
            _scan('x "abc')
        err = cm.exception
        self.assertIsInstance(err.cause, UnexpectedEndOfInput)
        self.assertIs(err.__cause__, err.cause)
        self.assertEqual((err.line, err.column), (1, 7))

    def test_unterminated_after_backslash(self) -> None:
        with self.assertRaises(ParseError) as cm:
            _scan('"abc\\')
        self.assertIsInstance(cm.exception.cause, UnexpectedEndOfInput)

    def test_unknown_escape_is_rejected(self) -> None:
        with self.assertRaises(ParseError) as cm:
            _scan('"\\q"')
        err = cm.exception
        self.assertIsInstance(err.cause, InvalidEscapeError)
        self.assertEqual((err.line, err.column), (1, 5))

    def test_read_failure(self) -> None:
        tokenizer = FlagTokenizer(CharCursor(_BrokenStream("ab")))
        with self.assertRaises(ParseError) as cm:
            list(tokenizer)
        err = cm.exception
        self.assertIsInstance(err.cause, StreamReadError)
        self.assertEqual((err.line, err.column), (1, 3))
        self.assertIn("device went away", str(err))


if __name__ == "__main__":
    unittest.main()
