from picopath.cursors import CharCursor, TokenCursor
from picopath.errors import ErrorKind, PathError
from picopath.path_lexer import lex_path
from picopath.path_tokens import CommandToken, EofToken
from picopath.path_types import SourceLocation
import pytest


class TestCharCursor:
    def test_peek_does_not_consume(self):
        cursor = CharCursor("abc")

        assert cursor.peek_char() == "a"
        assert cursor.peek_char() == "a"
        assert cursor.peek_substring(2) == "ab"
        assert cursor.offset == 0

    def test_advance(self):
        cursor = CharCursor("abc")

        cursor.advance()
        assert cursor.peek_char() == "b"
        cursor.advance(2)
        assert cursor.is_at_end()

    def test_empty_source_is_at_end(self):
        assert CharCursor("").is_at_end()

    def test_peek_char_at_end(self):
        cursor = CharCursor("a")
        cursor.advance()

        with pytest.raises(PathError, match="unexpected end of file") as e:
            cursor.peek_char()
        assert e.value.kind is ErrorKind.LEXER

    def test_peek_substring_past_end(self):
        cursor = CharCursor("abc")
        cursor.advance()

        assert cursor.peek_substring(2) == "bc"
        with pytest.raises(PathError, match="eof reached") as e:
            cursor.peek_substring(3)
        assert e.value.kind is ErrorKind.LEXER

    @pytest.mark.parametrize(
        "expected, distance, result",
        [
            ("a", 0, True),
            ("b", 1, True),
            ("b", 0, False),
            ("c", 2, True),
            # out of range is never an error
            ("c", 3, False),
            ("c", 30, False),
            ("ab", 0, True),
            ("bc", 1, True),
            ("bcd", 1, False),
            (str.isalpha, 0, True),
            (str.isdigit, 1, False),
            (str.isalpha, 3, False),
        ],
    )
    def test_matches(self, expected, distance, result):
        assert CharCursor("abc").matches(expected, distance) is result

    def test_matches_at_end(self):
        cursor = CharCursor("ab")
        cursor.advance(2)

        assert not cursor.matches("a")
        assert not cursor.matches(lambda c: True)

    def test_matches_any(self):
        cursor = CharCursor("abc")

        assert cursor.matches_any(["x", "abc", "ab"]) == "abc"
        assert cursor.matches_any(["ab", "abc"]) == "ab"
        assert cursor.matches_any(["x", "abcd"]) is None
        assert cursor.matches_any([]) is None


class TestTokenCursor:
    def test_peek_and_advance(self):
        tokens = lex_path("M1")
        cursor = TokenCursor(tokens)

        assert cursor.peek() == CommandToken(SourceLocation(0, 1), "M")
        assert cursor.current_location() == SourceLocation(0, 1)

        cursor.advance(2)
        assert isinstance(cursor.peek(), EofToken)
        assert cursor.current_location() == SourceLocation(2, 2)

    def test_at_end(self):
        cursor = TokenCursor(lex_path("M1"))
        cursor.advance(3)

        assert cursor.is_at_end()
        assert cursor.peek() is None
        assert cursor.current_location() == SourceLocation.at(3)

    def test_peek_borrows_tokens(self):
        tokens = lex_path("M 1 2")
        cursor = TokenCursor(tokens)

        assert cursor.tokens is tokens
        assert cursor.peek() is tokens[0]
