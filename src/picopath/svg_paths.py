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

"""Pulls path data out of svg documents and parses it."""

from absl import logging
from lxml import etree  # pytype: disable=import-error
from typing import Generator, List, Tuple, Union
from picopath.path_parser import parse_path
from picopath.path_types import Subpath


def svgns():
    return "http://www.w3.org/2000/svg"


def splitns(name):
    qn = etree.QName(name)
    return qn.namespace, qn.localname


def strip_ns(tagname):
    return splitns(tagname)[1]


def _svg_root(root: etree.Element) -> etree.Element:
    if strip_ns(root.tag) != "svg":
        raise ValueError(f"Expected an svg root element, got {root.tag!r}")
    return root


def load_svg(filename) -> etree.Element:
    return _svg_root(etree.parse(filename).getroot())


def fromstring(string: Union[str, bytes]) -> etree.Element:
    if isinstance(string, str):
        string = string.encode("utf-8")
    return _svg_root(etree.fromstring(string))


def iter_path_data(svg_root: etree.Element) -> Generator[Tuple[str, str], None, None]:
    """Yields (id, d) for each svg path element with a d attribute.

    Document order; id is "" when the element has none.
    """
    paths = svg_root.xpath("//svg:path[@d]", namespaces={"svg": svgns()})
    logging.debug("Found %d path(s) with path data", len(paths))
    for el in paths:
        yield el.attrib.get("id", ""), el.attrib["d"]


def parse_svg_paths(
    svg_root: etree.Element,
) -> Generator[Tuple[str, List[Subpath]], None, None]:
    for el_id, d in iter_path_data(svg_root):
        yield el_id, parse_path(d)
