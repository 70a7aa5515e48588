"""md2html: convert a small markdown dialect into HTML fragments."""

from md2html.converter import convert, convert_with_nodes, parse_source, parse_to_json
from md2html.exceptions import InputError, Md2htmlError
from md2html.formatter import format_nodes
from md2html.parser import parse
from md2html.schemas import (
    Bold,
    Head,
    Image,
    Italic,
    LineBreak,
    Link,
    Node,
    StrikeThrough,
    Text,
    Underline,
)

__all__ = [
    "Bold",
    "Head",
    "Image",
    "InputError",
    "Italic",
    "LineBreak",
    "Link",
    "Md2htmlError",
    "Node",
    "StrikeThrough",
    "Text",
    "Underline",
    "convert",
    "convert_with_nodes",
    "format_nodes",
    "parse",
    "parse_source",
    "parse_to_json",
]
