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

import dataclasses
import enum
from typing import ClassVar, NamedTuple, Tuple


def ntos(n: float) -> str:
    # strip superflous .0 decimals
    return str(int(n)) if isinstance(n, float) and n.is_integer() else str(n)


class SourceLocation(NamedTuple):
    start: int = 0
    end: int = 0

    @classmethod
    def at(cls, offset: int) -> "SourceLocation":
        """Zero-width location at offset."""
        return cls(offset, offset)


class PathNumber(NamedTuple):
    """A decoded number plus the exact text it was lexed from."""

    value: float
    source: str

    @classmethod
    def of(cls, value: float) -> "PathNumber":
        return cls(float(value), ntos(value))

    def __float__(self):
        return self.value


class PathPoint(NamedTuple):
    x: PathNumber
    y: PathNumber

    @classmethod
    def of(cls, x: float, y: float) -> "PathPoint":
        return cls(PathNumber.of(x), PathNumber.of(y))

    def values(self) -> Tuple[float, float]:
        return (self.x.value, self.y.value)


class ArcSegment(NamedTuple):
    """One elliptical arc: radii, x-axis-rotation, (large-arc, sweep) flags, end."""

    radii: PathPoint
    x_axis_rotation: PathNumber
    flags: PathPoint
    end: PathPoint


class Position(enum.Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class CommandType(enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CLOSE_PATH = "Z"
    CURVE_TO = "C"
    SMOOTH_CURVE_TO = "S"
    QUADRATIC_BEZIER_CURVE_TO = "Q"
    SMOOTH_QUADRATIC_BEZIER_CURVE_TO = "T"
    ELLIPTICAL_ARC = "A"


@dataclasses.dataclass(frozen=True)
class PathCommand:
    command_type: ClassVar[CommandType]
    position: Position = Position.ABSOLUTE

    @property
    def letter(self) -> str:
        letter = self.command_type.value
        return letter if self.position is Position.ABSOLUTE else letter.lower()

    def operands(self) -> Tuple:
        return ()


@dataclasses.dataclass(frozen=True)
class _PointsCommand(PathCommand):
    # points in each repetition of the command
    points_per_segment: ClassVar[int] = 1
    points: Tuple[PathPoint, ...] = ()

    def operands(self) -> Tuple[PathPoint, ...]:
        return self.points


@dataclasses.dataclass(frozen=True)
class _NumbersCommand(PathCommand):
    numbers: Tuple[PathNumber, ...] = ()

    def operands(self) -> Tuple[PathNumber, ...]:
        return self.numbers


@dataclasses.dataclass(frozen=True)
class MoveTo(_PointsCommand):
    command_type: ClassVar[CommandType] = CommandType.MOVE_TO


@dataclasses.dataclass(frozen=True)
class LineTo(_PointsCommand):
    command_type: ClassVar[CommandType] = CommandType.LINE_TO


@dataclasses.dataclass(frozen=True)
class HorizontalLineTo(_NumbersCommand):
    command_type: ClassVar[CommandType] = CommandType.HORIZONTAL_LINE_TO


@dataclasses.dataclass(frozen=True)
class VerticalLineTo(_NumbersCommand):
    command_type: ClassVar[CommandType] = CommandType.VERTICAL_LINE_TO


@dataclasses.dataclass(frozen=True)
class CurveTo(_PointsCommand):
    command_type: ClassVar[CommandType] = CommandType.CURVE_TO
    points_per_segment: ClassVar[int] = 3


@dataclasses.dataclass(frozen=True)
class SmoothCurveTo(_PointsCommand):
    command_type: ClassVar[CommandType] = CommandType.SMOOTH_CURVE_TO
    points_per_segment: ClassVar[int] = 2


@dataclasses.dataclass(frozen=True)
class QuadraticBezierCurveTo(_PointsCommand):
    command_type: ClassVar[CommandType] = CommandType.QUADRATIC_BEZIER_CURVE_TO
    points_per_segment: ClassVar[int] = 2


@dataclasses.dataclass(frozen=True)
class SmoothQuadraticBezierCurveTo(_PointsCommand):
    command_type: ClassVar[CommandType] = CommandType.SMOOTH_QUADRATIC_BEZIER_CURVE_TO
    points_per_segment: ClassVar[int] = 2


@dataclasses.dataclass(frozen=True)
class EllipticalArc(PathCommand):
    command_type: ClassVar[CommandType] = CommandType.ELLIPTICAL_ARC
    arcs: Tuple[ArcSegment, ...] = ()

    def operands(self) -> Tuple[ArcSegment, ...]:
        return self.arcs


@dataclasses.dataclass(frozen=True)
class ClosePath(PathCommand):
    command_type: ClassVar[CommandType] = CommandType.CLOSE_PATH


Subpath = Tuple[PathCommand, ...]
