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

from picopath.errors import ErrorKind, PathError, PathResult, PathSourceError
from picopath.path_lexer import lex_path, try_lex_path
from picopath.path_meta import format_path, path_segment
from picopath.path_parser import parse_path, parse_tokens, try_parse_path


__all__ = [
    "ErrorKind",
    "PathError",
    "PathResult",
    "PathSourceError",
    "format_path",
    "lex_path",
    "parse_path",
    "parse_tokens",
    "path_segment",
    "try_lex_path",
    "try_parse_path",
]
