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

"""Scanning cursors over path text and over lexed tokens.

A cursor is the private state of one lex or parse call; don't share one
between threads. Lookahead never consumes input, only advance() moves.
"""

from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar, Union
from picopath.errors import lexer_error
from picopath.path_tokens import PathToken
from picopath.path_types import SourceLocation


T = TypeVar("T")


class Cursor(Generic[T]):
    def __init__(self, items: Sequence[T]):
        self._items = items
        self.offset = 0

    def is_at_end(self) -> bool:
        return self.offset >= len(self._items)

    def advance(self, n: int = 1):
        # no bounds check, callers test is_at_end() first
        self.offset += n


class CharCursor(Cursor[str]):
    def __init__(self, source: str):
        super().__init__(source)

    @property
    def source(self) -> str:
        return self._items

    def peek_char(self) -> str:
        if self.is_at_end():
            raise lexer_error("unexpected end of file")
        return self._items[self.offset]

    def peek_substring(self, length: int) -> str:
        end = self.offset + length
        if end > len(self._items):
            raise lexer_error("eof reached")
        return self._items[self.offset : end]

    def matches(
        self, expected: Union[str, Callable[[str], bool]], distance: int = 0
    ) -> bool:
        """True if expected is found distance characters ahead.

        expected is either a literal (a single character or longer) or a
        predicate applied to one character. Out of range is simply False.
        """
        if self.is_at_end():
            return False
        if callable(expected):
            length = 1
        else:
            length = len(expected)
        start = self.offset + distance
        if start < 0 or start + length > len(self._items):
            return False
        if callable(expected):
            return bool(expected(self._items[start]))
        return self._items[start : start + length] == expected

    def matches_any(self, candidates: Iterable[str]) -> Optional[str]:
        for candidate in candidates:
            if self.matches(candidate):
                return candidate
        return None


class TokenCursor(Cursor[PathToken]):
    """Cursor over tokens produced by the lexer.

    The token sequence is borrowed; it must stay alive and unmodified for
    as long as the cursor is in use.
    """

    def __init__(self, tokens: Sequence[PathToken]):
        super().__init__(tokens)

    @property
    def tokens(self) -> Sequence[PathToken]:
        return self._items

    def peek(self) -> Optional[PathToken]:
        if self.is_at_end():
            return None
        return self._items[self.offset]

    def current_location(self) -> SourceLocation:
        if self.is_at_end():
            return SourceLocation.at(self.offset)
        return self._items[self.offset].location
