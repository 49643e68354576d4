# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Splits svg path data into command, number and comma tokens.

Usage:
    >>> [t.text for t in lex_path("M1,2")]
    ['M', '1', ',', '2', '']
"""

from typing import List
from picopath.cursors import CharCursor
from picopath.errors import PathError, PathResult
from picopath.path_meta import is_command_letter, WHITESPACE
from picopath.path_tokens import (
    CommandToken,
    EofToken,
    NumberToken,
    PathToken,
    PuncToken,
    PuncType,
    UnknownToken,
)
from picopath.path_types import SourceLocation


_DIGITS = frozenset("0123456789")
_EXPONENT_MARKERS = frozenset("eE")
_EXPONENT_SIGNS = frozenset("-+")


def _is_digit(c: str) -> bool:
    return c in _DIGITS


def _is_number_head(c: str) -> bool:
    return c == "-" or _is_digit(c)


def _exponent_length(cursor: CharCursor, distance: int = 0) -> int:
    """Length of the e/E marker and sign starting distance ahead, 0 if none.

    Only counts when a digit follows, so "1e" and "1e-" stop before the e.
    """
    if not cursor.matches(lambda c: c in _EXPONENT_MARKERS, distance):
        return 0
    if cursor.matches(_is_digit, distance + 1):
        return 1
    if cursor.matches(lambda c: c in _EXPONENT_SIGNS, distance + 1) and cursor.matches(
        _is_digit, distance + 2
    ):
        return 2
    return 0


def _lex_number(cursor: CharCursor) -> NumberToken:
    start = cursor.offset
    cursor.advance()  # head, '-' or a digit

    seen_dot = False
    seen_exponent = False
    while not cursor.is_at_end():
        if cursor.matches(_is_digit):
            cursor.advance()
            continue

        # one optional decimal point, never inside the exponent
        if (
            cursor.matches(".")
            and not seen_dot
            and not seen_exponent
            and (cursor.matches(_is_digit, 1) or _exponent_length(cursor, 1))
        ):
            seen_dot = True
            cursor.advance()
            continue

        exponent = 0 if seen_exponent else _exponent_length(cursor)
        if exponent:
            seen_exponent = True
            cursor.advance(exponent)
            continue

        break

    return NumberToken(
        SourceLocation(start, cursor.offset), cursor.source[start : cursor.offset]
    )


def _lex_token(cursor: CharCursor) -> PathToken:
    while not cursor.is_at_end():
        start = cursor.offset
        c = cursor.peek_char()

        if c in WHITESPACE:
            cursor.advance()
            continue

        if is_command_letter(c):
            cursor.advance()
            return CommandToken(SourceLocation(start, cursor.offset), c)

        # '-' on its own isn't a number
        if _is_digit(c) or (_is_number_head(c) and cursor.matches(_is_digit, 1)):
            return _lex_number(cursor)

        if c == PuncType.COMMA.value:
            cursor.advance()
            return PuncToken(SourceLocation(start, cursor.offset), PuncType.COMMA, c)

        cursor.advance()
        return UnknownToken(SourceLocation(start, cursor.offset), c)

    return EofToken(SourceLocation.at(cursor.offset))


def lex_path(source: str) -> List[PathToken]:
    """Tokenize svg path data.

    The result always ends with exactly one EofToken. Whitespace is dropped,
    anything unrecognized becomes an UnknownToken for the parser to reject.

    Raises:
        PathError of kind LEXER if the cursor runs off the end of the source;
        no partial token list is returned in that case.
    """
    cursor = CharCursor(source)
    tokens: List[PathToken] = []
    while not cursor.is_at_end():
        tokens.append(_lex_token(cursor))

    if not tokens or not isinstance(tokens[-1], EofToken):
        tokens.append(EofToken(SourceLocation.at(cursor.offset)))
    return tokens


def try_lex_path(source: str) -> PathResult:
    try:
        return PathResult(value=lex_path(source))
    except PathError as e:
        return PathResult(error=e)
