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

"""Recursive descent parser for svg path data.

Turns the tokens from picopath.path_lexer into subpaths, each a tuple of
typed commands. The first error aborts the whole parse, there is no
recovery.
"""

from typing import Callable, List, Mapping, Optional, Sequence
from types import MappingProxyType
from picopath.cursors import TokenCursor
from picopath.errors import PathError, PathResult, parser_error
from picopath.path_lexer import lex_path
from picopath.path_meta import command_class, position
from picopath.path_tokens import CommandToken, PathToken, TokenType
from picopath.path_types import (
    ArcSegment,
    ClosePath,
    EllipticalArc,
    PathCommand,
    PathNumber,
    PathPoint,
    Position,
    Subpath,
)


# tokens that end a run of operands without being an error
_OPERANDS_END = frozenset({TokenType.COMMAND, TokenType.PUNC, TokenType.EOF})


def _error(cursor: TokenCursor, message: str) -> PathError:
    return parser_error(message, cursor.current_location())


def _number(token: PathToken) -> PathNumber:
    return PathNumber(float(token.value), token.value)


def _at_operands_end(cursor: TokenCursor) -> bool:
    token = cursor.peek()
    return token is None or token.token_type in _OPERANDS_END


def _expect_number(cursor: TokenCursor, context: str) -> PathNumber:
    token = cursor.peek()
    if token is None:
        raise _error(cursor, f"expected token when parsing {context}")
    if token.token_type is not TokenType.NUMBER:
        raise _error(cursor, f"expected number when parsing {context}")
    cursor.advance()
    return _number(token)


def _parse_point(cursor: TokenCursor) -> PathPoint:
    """x y or x,y"""
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    x = _expect_number(cursor, "point")

    token = cursor.peek()
    if token is None:
        raise _error(cursor, "expected token when parsing point")
    if token.token_type is TokenType.NUMBER:
        cursor.advance()
        return PathPoint(x, _number(token))
    if token.token_type is not TokenType.PUNC:
        raise _error(cursor, "expected number or comma delimiter when parsing point")
    cursor.advance()

    return PathPoint(x, _expect_number(cursor, "point"))


def _parse_points(cursor: TokenCursor) -> List[PathPoint]:
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    points = []
    while not _at_operands_end(cursor):
        points.append(_parse_point(cursor))
    return points


def _parse_number(cursor: TokenCursor) -> PathNumber:
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")
    return _expect_number(cursor, "number")


def _parse_numbers(cursor: TokenCursor) -> List[PathNumber]:
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    numbers = []
    while not _at_operands_end(cursor):
        token = cursor.peek()
        if token.token_type is not TokenType.NUMBER:
            raise _error(cursor, "expected number when parsing numbers")
        cursor.advance()
        numbers.append(_number(token))
    return numbers


def _parse_elliptical_arc(cursor: TokenCursor) -> ArcSegment:
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    radii = _parse_point(cursor)
    x_axis_rotation = _parse_number(cursor)
    flags = _parse_point(cursor)
    end = _parse_point(cursor)
    return ArcSegment(radii, x_axis_rotation, flags, end)


def _command_name(command_cls) -> str:
    return command_cls.command_type.name.lower().replace("_", " ")


def _points_command(command: CommandToken, cursor: TokenCursor) -> PathCommand:
    command_cls = command_class(command.value)
    cursor.advance()

    points = _parse_points(cursor)
    multiple = command_cls.points_per_segment
    if len(points) % multiple != 0:
        raise _error(
            cursor,
            f"expected points in multiples of {multiple} "
            f"when parsing {_command_name(command_cls)} command",
        )
    return command_cls(position(command.value), tuple(points))


def _numbers_command(command: CommandToken, cursor: TokenCursor) -> PathCommand:
    command_cls = command_class(command.value)
    cursor.advance()
    return command_cls(position(command.value), tuple(_parse_numbers(cursor)))


def _elliptical_arc_command(command: CommandToken, cursor: TokenCursor) -> PathCommand:
    cursor.advance()

    arcs = []
    while not _at_operands_end(cursor):
        arcs.append(_parse_elliptical_arc(cursor))

    if not arcs:
        raise _error(cursor, "expected arcs when parsing elliptical arc command")
    return EllipticalArc(position(command.value), tuple(arcs))


def _close_path_command(command: CommandToken, cursor: TokenCursor) -> PathCommand:
    del command
    cursor.advance()
    # z and Z both come out ABSOLUTE
    return ClosePath(Position.ABSOLUTE)


_CommandParser = Callable[[CommandToken, TokenCursor], PathCommand]

_COMMAND_PARSERS: Mapping[str, _CommandParser] = MappingProxyType(
    {
        "M": _points_command,
        "L": _points_command,
        "H": _numbers_command,
        "V": _numbers_command,
        "C": _points_command,
        "S": _points_command,
        "Q": _points_command,
        "T": _points_command,
        "A": _elliptical_arc_command,
        "Z": _close_path_command,
    }
)


def _parse_command(cursor: TokenCursor) -> Optional[PathCommand]:
    """The next command, or None at the Eof token."""
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    token = cursor.peek()
    if token.token_type is TokenType.EOF:
        return None
    if token.token_type is not TokenType.COMMAND:
        raise _error(cursor, "expected command when parsing command")

    parse_fn = _COMMAND_PARSERS.get(token.value.upper())
    if parse_fn is None:
        raise _error(
            cursor, f"unknown command token {token.value!r} when parsing command"
        )
    return parse_fn(token, cursor)


def _parse_subpath(cursor: TokenCursor) -> Optional[Subpath]:
    """Commands up to and including the next ClosePath, or to Eof.

    None if there are no commands left.
    """
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    commands = []
    while not cursor.is_at_end():
        command = _parse_command(cursor)
        if command is None:
            break
        commands.append(command)
        if isinstance(command, ClosePath):
            break

    if not commands:
        return None
    return tuple(commands)


def parse_subpaths(cursor: TokenCursor) -> List[Subpath]:
    if cursor.is_at_end():
        raise _error(cursor, "unexpected eof")

    subpaths = []
    while not cursor.is_at_end():
        subpath = _parse_subpath(cursor)
        if subpath is None:
            break
        subpaths.append(subpath)
    return subpaths


def parse_tokens(tokens: Sequence[PathToken]) -> List[Subpath]:
    """Parse tokens from lex_path. tokens must not change while parsing."""
    return parse_subpaths(TokenCursor(tokens))


def parse_path(source: str) -> List[Subpath]:
    """Parses svg path data into subpaths.

    Each subpath is a tuple of PathCommand, ending at a ClosePath or at the
    end of the input. Empty input gives an empty list.

    Raises:
        PathError: LEXER or PARSER kind, for the first problem found.
    """
    return parse_tokens(lex_path(source))


def try_parse_path(source: str) -> PathResult:
    """Like parse_path but returns PathResult(value, error) instead of raising."""
    try:
        return PathResult(value=parse_path(source))
    except PathError as e:
        return PathResult(error=e)
