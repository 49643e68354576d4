from picopath.errors import (
    ErrorKind,
    PathError,
    PathResult,
    PathSourceError,
    lexer_error,
    parser_error,
)
from picopath.path_types import SourceLocation
import pytest


def test_path_error():
    e = PathError(ErrorKind.PARSER, "expected command")

    assert isinstance(e, ValueError)
    assert e.kind is ErrorKind.PARSER
    assert e.message == "expected command"
    assert str(e) == "expected command"


def test_path_error_without_message():
    e = PathError(ErrorKind.UNKNOWN)

    assert e.message is None
    assert str(e) == "unknown"


def test_source_error():
    e = PathSourceError(ErrorKind.PARSER, "expected number", SourceLocation(2, 3))

    assert isinstance(e, PathError)
    assert e.location == SourceLocation(2, 3)
    assert str(e) == "expected number at 2:3"
    assert "SourceLocation(start=2, end=3)" in repr(e)


def test_error_helpers():
    assert lexer_error("eof reached").kind is ErrorKind.LEXER
    e = parser_error("unexpected eof", SourceLocation.at(7))
    assert e.kind is ErrorKind.PARSER
    assert e.location == (7, 7)


def test_result():
    assert PathResult(value=[]).ok
    assert PathResult(value=[]).unwrap() == []

    error = PathError(ErrorKind.LEXER, "eof reached")
    result = PathResult(error=error)
    assert not result.ok
    with pytest.raises(PathError, match="eof reached"):
        result.unwrap()
