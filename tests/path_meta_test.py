from picopath.path_meta import (
    COMMAND_LETTERS,
    command_class,
    command_type,
    format_path,
    ntos,
    path_segment,
    position,
)
from picopath.path_parser import parse_path
from picopath.path_types import (
    ClosePath,
    CommandType,
    CurveTo,
    MoveTo,
    PathPoint,
    Position,
)
import pytest


def test_command_letters():
    assert COMMAND_LETTERS == set("ACHLMQSTVZachlmqstvz")


@pytest.mark.parametrize(
    "letter, expected_type, expected_position",
    [
        ("M", CommandType.MOVE_TO, Position.ABSOLUTE),
        ("m", CommandType.MOVE_TO, Position.RELATIVE),
        ("q", CommandType.QUADRATIC_BEZIER_CURVE_TO, Position.RELATIVE),
        ("T", CommandType.SMOOTH_QUADRATIC_BEZIER_CURVE_TO, Position.ABSOLUTE),
        ("a", CommandType.ELLIPTICAL_ARC, Position.RELATIVE),
        ("z", CommandType.CLOSE_PATH, Position.RELATIVE),
    ],
)
def test_letter_lookup(letter, expected_type, expected_position):
    assert command_type(letter) is expected_type
    assert position(letter) is expected_position


@pytest.mark.parametrize("letter", ["x", "", "MM", "1"])
def test_invalid_letter(letter):
    with pytest.raises(ValueError, match="Invalid path command"):
        command_class(letter)
    with pytest.raises(ValueError, match="Invalid path command"):
        position(letter)


@pytest.mark.parametrize(
    "n, expected",
    [
        (1.0, "1"),
        (-2.0, "-2"),
        (1.5, "1.5"),
        (3, "3"),
    ],
)
def test_ntos(n, expected):
    assert ntos(n) == expected


@pytest.mark.parametrize(
    "command, expected",
    [
        (MoveTo(Position.ABSOLUTE, (PathPoint.of(1, 2.5),)), "M1,2.5"),
        (MoveTo(Position.RELATIVE, ()), "m"),
        (
            CurveTo(
                Position.RELATIVE,
                (PathPoint.of(1, 2), PathPoint.of(3, 4), PathPoint.of(5, 6)),
            ),
            "c1,2 3,4 5,6",
        ),
        (ClosePath(), "Z"),
    ],
)
def test_path_segment(command, expected):
    assert path_segment(command) == expected


@pytest.mark.parametrize(
    "d, expected",
    [
        ("", ""),
        ("M 100 100 L 300 100 L 200 300 z", "M100,100 L300,100 L200,300 Z"),
        ("m1.50 -2e1 h 3 4 v-1", "m1.50,-2e1 h3 4 v-1"),
        ("a1 2 0 1 0 3 4 5,6 7 0,0 8,9", "a1,2 0 1,0 3,4 5,6 7 0,0 8,9"),
        ("M0 0 z M1 1 Q2 2 3 3", "M0,0 Z M1,1 Q2,2 3,3"),
    ],
)
def test_format_path(d, expected):
    assert format_path(parse_path(d)) == expected


@pytest.mark.parametrize(
    "d",
    [
        "M 100 100 L 300 100 L 200 300 z",
        "m-1.5e-3,2E+2 c0.25 -7 1e1-2 3.125,4 S1 2 3 4 T5 6 7 8 z",
        "M 10,10 A 5,5 0 1,1 10,10 5,5 0 1,1 20,20 H 0 V 007.50 Z m0 0",
    ],
)
def test_format_then_parse_keeps_operands(d):
    subpaths = parse_path(d)

    assert parse_path(format_path(subpaths)) == subpaths
