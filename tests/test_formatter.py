"""Tests for the HTML formatter."""

from __future__ import annotations

from md2html.formatter import format_nodes
from md2html.schemas import (
    Bold,
    Head,
    Image,
    Italic,
    LineBreak,
    Link,
    StrikeThrough,
    Text,
    Underline,
)


def T(content: str) -> Text:
    return Text(content=content)


class TestBlocks:
    """Paragraph and heading context."""

    def test_empty(self) -> None:
        assert format_nodes([]) == ""

    def test_text_opens_and_closes_paragraph(self) -> None:
        assert format_nodes([T("a")]) == "<p>a</p>"

    def test_heading(self) -> None:
        assert format_nodes([Head(level=3, children=[T("x")])]) == "<h3>x</h3>"

    def test_line_break_alone_opens_nothing(self) -> None:
        assert format_nodes([LineBreak()]) == "<br>"

    def test_line_break_does_not_close_paragraph(self) -> None:
        assert format_nodes([T("a"), LineBreak(), T("b")]) == "<p>a<br>b</p>"

    def test_heading_closes_paragraph(self) -> None:
        nodes = [T("a"), Head(level=1, children=[T("b")]), T("c")]
        assert format_nodes(nodes) == "<p>a</p><h1>b</h1><p>c</p>"

    def test_consecutive_headings(self) -> None:
        nodes = [Head(level=1, children=[T("a")]), Head(level=2, children=[T("b")])]
        assert format_nodes(nodes) == "<h1>a</h1><h2>b</h2>"

    def test_image_closes_paragraph(self) -> None:
        nodes = [T("a"), Image(url="u.png", alt="pic")]
        assert format_nodes(nodes) == '<p>a</p><img src="u.png" alt="pic">'

    def test_image_without_alt(self) -> None:
        assert format_nodes([Image(url="u.png")]) == '<img src="u.png" alt="">'

    def test_text_after_image_opens_new_paragraph(self) -> None:
        nodes = [Image(url="u.png", alt="x"), T("b")]
        assert format_nodes(nodes) == '<img src="u.png" alt="x"><p>b</p>'


class TestLinks:
    """Anchor rendering."""

    def test_link_inside_paragraph(self) -> None:
        nodes = [T("Click "), Link(children=[T("here")], href="https://example.com"), T(" now.")]
        assert format_nodes(nodes) == (
            '<p>Click <a href="https://example.com" target="_blank">here</a> now.</p>'
        )

    def test_leading_link_leaves_paragraph_to_its_text(self) -> None:
        """A link opens no container itself; its first text node does."""
        nodes = [Link(children=[T("a")], href="u")]
        assert format_nodes(nodes) == '<a href="u" target="_blank"><p>a</a></p>'

    def test_link_in_heading(self) -> None:
        nodes = [Head(level=1, children=[Link(children=[T("a")], href="u")])]
        assert format_nodes(nodes) == '<h1><a href="u" target="_blank">a</a></h1>'

    def test_styled_link_text(self) -> None:
        nodes = [Link(children=[Bold(), T("b"), Bold()], href="u")]
        assert format_nodes(nodes) == '<a href="u" target="_blank"><p><strong>b</strong></a></p>'


class TestToggles:
    """Pairing of toggle markers at render time."""

    def test_each_kind_maps_to_its_tag(self) -> None:
        for toggle, tag in ((Bold, "strong"), (Italic, "i"), (Underline, "u"), (StrikeThrough, "s")):
            assert format_nodes([toggle(), T("x"), toggle()]) == f"<p><{tag}>x</{tag}></p>"

    def test_toggle_opens_paragraph(self) -> None:
        assert format_nodes([T("a "), Bold(), T("b"), Bold(), T(" c")]) == "<p>a <strong>b</strong> c</p>"

    def test_nested_pairs(self) -> None:
        nodes = [Bold(), T("a"), Italic(), T("b"), Italic(), T("c"), Bold()]
        assert format_nodes(nodes) == "<p><strong>a<i>b</i>c</strong></p>"

    def test_other_kind_does_not_close(self) -> None:
        """A bold run ends only at the next bold toggle; the lone italic degrades."""
        nodes = [Bold(), T("a"), Italic(), T("b"), Bold()]
        assert format_nodes(nodes) == "<p><strong>ab</strong></p>"

    def test_unmatched_toggle_renders_plain(self) -> None:
        assert format_nodes([Bold(), T("bold")]) == "<p>bold</p>"

    def test_closer_is_consumed(self) -> None:
        assert format_nodes([Bold(), T("a"), Bold(), T("b")]) == "<p><strong>a</strong>b</p>"

    def test_empty_pair(self) -> None:
        assert format_nodes([Bold(), Bold()]) == "<p><strong></strong></p>"

    def test_toggle_in_heading_opens_paragraph(self) -> None:
        """Toggles only look at the paragraph flag, so a heading does not stop them."""
        nodes = [Head(level=2, children=[Bold(), T("t"), Bold()])]
        assert format_nodes(nodes) == "<h2><p><strong>t</strong></h2></p>"

    def test_paragraph_opened_in_heading_is_closed_by_next_block(self) -> None:
        nodes = [Head(level=1, children=[Bold(), T("t"), Bold()]), Image(url="u.png", alt="x")]
        assert format_nodes(nodes) == '<h1><p><strong>t</strong></h1></p><img src="u.png" alt="x">'

    def test_run_spanning_a_line_break(self) -> None:
        nodes = [Italic(), T("a"), LineBreak(), T("b"), Italic()]
        assert format_nodes(nodes) == "<p><i>a<br>b</i></p>"


def test_state_is_not_shared_between_calls() -> None:
    """A paragraph left open by one call does not leak into the next."""
    nodes = [T("a")]
    assert format_nodes(nodes) == format_nodes(nodes) == "<p>a</p>"
