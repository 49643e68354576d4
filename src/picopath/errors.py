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

"""Failures raised while lexing or parsing path data."""

import enum
from typing import Any, NamedTuple, Optional
from picopath.path_types import SourceLocation


class ErrorKind(enum.Enum):
    UNKNOWN = "unknown"
    LEXER = "lexer"
    PARSER = "parser"


class PathError(ValueError):
    """A lexer or parser failure.

    Instances are complete once constructed: kind and message never change.
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        super().__init__(message or kind.value)
        self._kind = kind
        self._message = message

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> Optional[str]:
        return self._message

    def __repr__(self):
        return f"{type(self).__name__}({self._kind}, {self._message!r})"


class PathSourceError(PathError):
    """A PathError that knows where in the path text it happened."""

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str],
        location: SourceLocation,
    ):
        super().__init__(kind, message)
        self._location = location

    @property
    def location(self) -> SourceLocation:
        return self._location

    def __str__(self):
        start, end = self._location
        return f"{super().__str__()} at {start}:{end}"

    def __repr__(self):
        return (
            f"{type(self).__name__}({self._kind}, {self._message!r}, "
            f"{self._location!r})"
        )


def lexer_error(message: str) -> PathError:
    return PathError(ErrorKind.LEXER, message)


def parser_error(message: str, location: SourceLocation) -> PathSourceError:
    return PathSourceError(ErrorKind.PARSER, message, location)


class PathResult(NamedTuple):
    """Value-or-error pair; exactly one side is populated."""

    value: Any = None
    error: Optional[PathError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value
