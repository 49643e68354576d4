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

from types import MappingProxyType
from typing import Iterable, Type
from picopath.path_types import (
    ArcSegment,
    ClosePath,
    CommandType,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    PathNumber,
    PathPoint,
    Position,
    QuadraticBezierCurveTo,
    SmoothCurveTo,
    SmoothQuadraticBezierCurveTo,
    Subpath,
    VerticalLineTo,
    ntos,
)


# https://www.w3.org/TR/SVG11/paths.html#PathData
_COMMAND_CLASSES = MappingProxyType(
    {
        "M": MoveTo,
        "Z": ClosePath,
        "L": LineTo,
        "H": HorizontalLineTo,
        "V": VerticalLineTo,
        "C": CurveTo,
        "S": SmoothCurveTo,
        "Q": QuadraticBezierCurveTo,
        "T": SmoothQuadraticBezierCurveTo,
        "A": EllipticalArc,
    }
)

COMMAND_LETTERS = frozenset(
    _COMMAND_CLASSES.keys() | {k.lower() for k in _COMMAND_CLASSES}
)

WHITESPACE = frozenset(" \t\n\r")


def is_command_letter(c: str) -> bool:
    return c in COMMAND_LETTERS


def command_class(letter: str) -> Type[PathCommand]:
    if letter not in COMMAND_LETTERS:
        raise ValueError(f'Invalid path command "{letter}"')
    return _COMMAND_CLASSES[letter.upper()]


def command_type(letter: str) -> CommandType:
    return command_class(letter).command_type


def position(letter: str) -> Position:
    # uppercase is absolute, lowercase relative
    if letter not in COMMAND_LETTERS:
        raise ValueError(f'Invalid path command "{letter}"')
    return Position.ABSOLUTE if letter.isupper() else Position.RELATIVE


def _point(pt: PathPoint) -> str:
    return f"{pt.x.source},{pt.y.source}"


def _arc(arc: ArcSegment) -> str:
    return " ".join(
        (
            _point(arc.radii),
            arc.x_axis_rotation.source,
            _point(arc.flags),
            _point(arc.end),
        )
    )


def path_segment(command: PathCommand) -> str:
    """Path text for one command, operands spelled as they were parsed."""
    # put commas between coords, spaces otherwise, author readability pref
    args = []
    for operand in command.operands():
        if isinstance(operand, ArcSegment):
            args.append(_arc(operand))
        elif isinstance(operand, PathPoint):
            args.append(_point(operand))
        elif isinstance(operand, PathNumber):
            args.append(operand.source)
        else:
            raise ValueError(f"Unexpected operand {operand!r} for {command.letter}")
    return command.letter + " ".join(args)


def format_subpath(subpath: Subpath) -> str:
    return " ".join(path_segment(c) for c in subpath)


def format_path(subpaths: Iterable[Subpath]) -> str:
    return " ".join(format_subpath(s) for s in subpaths)
