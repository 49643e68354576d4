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

"""Dump the tokens or commands of svg path data.

Usage:
pathdump.py "M 100 100 L 300 100 L 200 300 z"
<one line per subpath dumped to stdout>

pathdump.py --tokens "M 100 100 L 300 100 L 200 300 z"
<one line per token dumped to stdout>

pathdump.py --input_format=svg emoji_u1f469.svg
<subpaths of every path element in the file>
"""
from absl import app
from absl import flags
from absl import logging
from lxml import etree  # pytype: disable=import-error
from picopath.errors import PathError
from picopath.path_lexer import lex_path
from picopath.path_meta import format_subpath
from picopath.path_parser import parse_path
from picopath.path_tokens import PathToken
from picopath import svg_paths
import sys
from typing import Iterable, List, TextIO, Tuple


FLAGS = flags.FLAGS


flags.DEFINE_enum(
    "input_format",
    "d",
    ["d", "svg"],
    "Whether arguments are path data strings or svg files",
)
flags.DEFINE_bool("tokens", False, "Dump lexer tokens instead of parsed commands")
flags.DEFINE_bool(
    "keep_going",
    False,
    "Log inputs that fail to read, lex or parse and continue instead of stopping",
)
flags.DEFINE_string("output_file", "-", "Output file ('-' means stdout)")


def format_token(token: PathToken) -> str:
    start, end = token.location
    return f"{token.token_type.name} {token.text!r} {start}:{end}"


def _dump_d(d: str, tokens: bool) -> List[str]:
    if tokens:
        return [format_token(t) for t in lex_path(d)]
    return [format_subpath(s) for s in parse_path(d)]


def _path_data(source: str, input_format: str) -> List[Tuple[str, str]]:
    """(label, d) pairs for one input, a path data string or an svg file."""
    if input_format == "d":
        return [("", source)]
    svg_root = svg_paths.load_svg(source)
    return [
        (f"{source}#{el_id}" if el_id else source, d)
        for el_id, d in svg_paths.iter_path_data(svg_root)
    ]


def dump(
    inputs: Iterable[str],
    out: TextIO,
    input_format: str = "d",
    tokens: bool = False,
    keep_going: bool = False,
) -> bool:
    """Writes the dump of each input to out.

    Returns False if any input failed to read, lex or parse.
    """
    ok = True
    for source in inputs:
        try:
            path_data = _path_data(source, input_format)
        except (OSError, ValueError, etree.XMLSyntaxError) as e:
            ok = False
            logging.error("Unable to read %s: %s", source, e)
            if not keep_going:
                return ok
            continue

        for label, d in path_data:
            try:
                lines = _dump_d(d, tokens)
            except PathError as e:
                ok = False
                logging.error("Unable to parse %s %r: %s", label or "input", d, e)
                if not keep_going:
                    return ok
                continue
            if label:
                out.write(f"# {label}\n")
            for line in lines:
                out.write(line + "\n")
    return ok


def _run(argv):
    inputs = argv[1:]
    if not inputs:
        if FLAGS.input_format == "svg":
            raise app.UsageError("svg input needs at least one file")
        inputs = [sys.stdin.read()]
    logging.info("Dumping %d input(s)", len(inputs))

    options = dict(
        input_format=FLAGS.input_format,
        tokens=FLAGS.tokens,
        keep_going=FLAGS.keep_going,
    )
    if FLAGS.output_file == "-":
        ok = dump(inputs, sys.stdout, **options)
    else:
        with open(FLAGS.output_file, "w") as f:
            ok = dump(inputs, f, **options)

    return 0 if ok else 1


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
