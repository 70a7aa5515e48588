"""Render parsed nodes as an HTML fragment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

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
    Toggle,
    Underline,
)

_TOGGLE_TAGS: dict[type[Toggle], str] = {
    Bold: "strong",
    Italic: "i",
    Underline: "u",
    StrikeThrough: "s",
}


@dataclass
class FormattingState:
    """Block context threaded through one ``format_nodes`` call."""

    is_head: bool = False
    is_paragraph: bool = False
    in_paragraph: bool = False


def format_nodes(nodes: Sequence[Node]) -> str:
    """Render ``nodes`` to HTML, closing a paragraph left open at the end."""
    state = FormattingState()
    html = _render(nodes, state)
    if state.in_paragraph:
        html += "</p>"
    return html


def _render(nodes: Sequence[Node], state: FormattingState) -> str:
    parts: list[str] = []
    cursor = 0

    while cursor < len(nodes):
        node = nodes[cursor]
        cursor += 1

        if isinstance(node, Text):
            parts.append(_ensure_container(state))
            parts.append(node.content)
        elif isinstance(node, Link):
            parts.append(f'<a href="{node.href}" target="_blank">{_render(node.children, state)}</a>')
        elif isinstance(node, Image):
            parts.append(_close_paragraph(state))
            parts.append(f'<img src="{node.url}" alt="{node.alt or ""}">')
        elif isinstance(node, Head):
            parts.append(_close_paragraph(state))
            state.is_head = True
            state.is_paragraph = False
            parts.append(f"<h{node.level}>{_render(node.children, state)}</h{node.level}>")
            state.is_head = False
            state.is_paragraph = True
        elif isinstance(node, LineBreak):
            parts.append("<br>")
        elif isinstance(node, Toggle):
            parts.append(_open_paragraph(state))
            closer = _find_closer(nodes, cursor, type(node))
            if closer is None:
                # Unmatched toggle: the rest of the siblings render unstyled.
                parts.append(_render(nodes[cursor:], state))
                cursor = len(nodes)
            else:
                tag = _TOGGLE_TAGS[type(node)]
                parts.append(f"<{tag}>{_render(nodes[cursor:closer], state)}</{tag}>")
                cursor = closer + 1

    return "".join(parts)


def _find_closer(nodes: Sequence[Node], start: int, kind: type[Toggle]) -> int | None:
    """Index of the next sibling toggle of exactly ``kind``, if any."""
    for index in range(start, len(nodes)):
        if type(nodes[index]) is kind:
            return index
    return None


def _ensure_container(state: FormattingState) -> str:
    """Open a paragraph unless a heading or paragraph is already open."""
    if state.is_head or state.in_paragraph:
        return ""
    state.is_paragraph = True
    state.in_paragraph = True
    state.is_head = False
    return "<p>"


def _open_paragraph(state: FormattingState) -> str:
    """Open a paragraph if none is open, even inside a heading."""
    if state.in_paragraph:
        return ""
    state.in_paragraph = True
    return "<p>"


def _close_paragraph(state: FormattingState) -> str:
    if not state.in_paragraph:
        return ""
    state.in_paragraph = False
    return "</p>"
