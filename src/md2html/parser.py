"""Scan markdown-like source text into a list of nodes."""

from __future__ import annotations

from dataclasses import dataclass

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

_MAX_HEADING_LEVEL = 6

# Doubled delimiters: style flag and toggle node for each.
_PAIRED_DELIMITERS = {
    "*": ("bold", Bold),
    "_": ("underline", Underline),
    "~": ("strike_through", StrikeThrough),
}


@dataclass
class ObjectStyle:
    """Inline style flags shared by every line of one ``parse`` call.

    A toggle left open at the end of a line is still open on the next one.
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_through: bool = False
    head: bool = False


def parse(source: str) -> list[Node]:
    """Parse ``source`` into a flat list of block and inline nodes.

    Lines starting with ``#`` become headings, blank lines become line breaks
    and every other line contributes its inline nodes to the top level.
    """
    nodes: list[Node] = []
    style = ObjectStyle()

    for line in source.split("\n"):
        trimmed = line.strip()

        if trimmed.startswith("#"):
            text = trimmed.lstrip("#")
            level = len(trimmed) - len(text)
            style.head = True
            children = parse_inline(style, text.lstrip())
            style.head = False
            nodes.append(Head(level=min(level, _MAX_HEADING_LEVEL), children=children))
        elif not trimmed:
            nodes.append(LineBreak())
        else:
            nodes.extend(parse_inline(style, trimmed))

    return nodes


def parse_inline(style: ObjectStyle, line: str) -> list[Node]:
    """Scan one line of inline markup.

    ``style`` is updated in place; pass the instance shared by the whole
    document so toggles carry over between lines.
    """
    return _LineScanner(style, line).run()


class _LineScanner:
    """Single left-to-right pass over one line.

    ``buf`` holds plain text, or the href/url once a ``](`` has been seen.
    ``label`` holds link text or image alt text while a bracket is open.
    """

    def __init__(self, style: ObjectStyle, line: str) -> None:
        self.style = style
        self.line = line
        self.nodes: list[Node] = []
        self.buf = ""
        self.label = ""
        self.capture: str | None = None
        self.in_target = False

    def run(self) -> list[Node]:
        last = " "
        for index, char in enumerate(self.line):
            following = self.line[index + 1] if index + 1 < len(self.line) else None
            if self.capture is None:
                self._scan_plain(char, last, following)
            elif self.in_target:
                self._scan_target(char)
            else:
                self._scan_label(char, last)
            last = char

        if self.capture is not None:
            self.nodes.append(Text(content=self._literal_capture()))
        else:
            self._flush(self.buf)
        return self.nodes

    def _scan_plain(self, char: str, last: str, following: str | None) -> None:
        if char in _PAIRED_DELIMITERS and last == char:
            self._toggle_pair(char)
        elif char == "*":
            self._toggle_italic(following)
        elif char == "[":
            image = last == "!"
            if image:
                self.buf = self.buf.removesuffix("!")
            self._flush(self.buf)
            self._open_capture(image)
        else:
            self.buf += char

    def _scan_label(self, char: str, last: str) -> None:
        if char == "[":
            # Unbalanced bracket: the rest of the line is plain text.
            prefix = "!" if self.capture == "image" else ""
            self.nodes.append(Text(content=f"{prefix}[{self.label}]"))
            self.capture = None
            self.label = ""
        elif char == "(" and last == "]":
            self.label = self.label.removesuffix("]")
            self.in_target = True
            self.buf = ""
        else:
            self.label += char

    def _scan_target(self, char: str) -> None:
        if char != ")":
            self.buf += char
            return

        if self.capture == "link":
            children = parse_inline(self.style, self.label)
            self.nodes.append(Link(children=children, href=self.buf))
        elif self.label:
            self.nodes.append(Image(url=self.buf, alt=self.label))
        # an image with empty alt text produces nothing
        self.capture = None
        self.in_target = False
        self.label = ""
        self.buf = ""

    def _toggle_pair(self, delimiter: str) -> None:
        attribute, toggle = _PAIRED_DELIMITERS[delimiter]
        is_open = getattr(self.style, attribute)

        text = self.buf
        if is_open and delimiter == "*":
            text = text.removeprefix(delimiter)
        self._flush(text.removesuffix(delimiter))

        self.nodes.append(toggle())
        setattr(self.style, attribute, not is_open)

    def _toggle_italic(self, following: str | None) -> None:
        if following == "*":
            # First half of "**"; the next character decides.
            self.buf += "*"
            return
        self._flush(self.buf)
        self.nodes.append(Italic())
        self.style.italic = not self.style.italic

    def _open_capture(self, image: bool) -> None:
        self.capture = "image" if image else "link"
        self.in_target = False
        self.label = ""
        self.buf = ""

    def _flush(self, text: str) -> None:
        if text:
            self.nodes.append(Text(content=text))
        self.buf = ""

    def _literal_capture(self) -> str:
        opener = "![" if self.capture == "image" else "["
        if self.in_target:
            return f"{opener}{self.label}]({self.buf}"
        return opener + self.label
