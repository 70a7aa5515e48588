"""Shared schemas for md2html."""

from md2html.schemas.nodes import (
    Bold,
    Head,
    Image,
    Italic,
    LineBreak,
    Link,
    Node,
    NodeList,
    StrikeThrough,
    Text,
    Toggle,
    Underline,
)

__all__ = [
    "Bold",
    "Head",
    "Image",
    "Italic",
    "LineBreak",
    "Link",
    "Node",
    "NodeList",
    "StrikeThrough",
    "Text",
    "Toggle",
    "Underline",
]
