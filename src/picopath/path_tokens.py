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
from typing import ClassVar, Optional
from picopath.path_types import SourceLocation


class TokenType(enum.Enum):
    COMMAND = "command"
    NUMBER = "number"
    PUNC = "punc"
    UNKNOWN = "unknown"
    EOF = "eof"


class PuncType(enum.Enum):
    COMMA = ","


@dataclasses.dataclass(frozen=True)
class PathToken:
    token_type: ClassVar[TokenType]
    location: SourceLocation

    @property
    def text(self) -> str:
        return ""


@dataclasses.dataclass(frozen=True)
class CommandToken(PathToken):
    token_type: ClassVar[TokenType] = TokenType.COMMAND
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class NumberToken(PathToken):
    token_type: ClassVar[TokenType] = TokenType.NUMBER
    # exactly as it appeared in the source
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class PuncToken(PathToken):
    token_type: ClassVar[TokenType] = TokenType.PUNC
    punc_type: PuncType = PuncType.COMMA
    value: str = ","

    @property
    def text(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class UnknownToken(PathToken):
    token_type: ClassVar[TokenType] = TokenType.UNKNOWN
    value: Optional[str] = None

    @property
    def text(self) -> str:
        return self.value or ""


@dataclasses.dataclass(frozen=True)
class EofToken(PathToken):
    token_type: ClassVar[TokenType] = TokenType.EOF
