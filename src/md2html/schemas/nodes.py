"""Document object model produced by the parser."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _NodeBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class Text(_NodeBase):
    """A literal run of characters."""

    kind: Literal["text"] = "text"
    content: str


class LineBreak(_NodeBase):
    """A blank source line. Rendered inline, it never ends a paragraph."""

    kind: Literal["line_break"] = "line_break"


class Toggle(_NodeBase):
    """Zero-width marker flipping one inline style.

    The parser does not pair toggles; the formatter pairs each one with the
    next sibling toggle of the same kind, if any.
    """


class Bold(Toggle):
    kind: Literal["bold"] = "bold"


class Italic(Toggle):
    kind: Literal["italic"] = "italic"


class Underline(Toggle):
    kind: Literal["underline"] = "underline"


class StrikeThrough(Toggle):
    kind: Literal["strike_through"] = "strike_through"


class Head(_NodeBase):
    """A heading and its inline content."""

    kind: Literal["head"] = "head"
    level: int = Field(..., ge=1, le=6)
    children: list[Node] = Field(default_factory=list)


class Link(_NodeBase):
    """A hyperlink; the text may carry nested inline markup."""

    kind: Literal["link"] = "link"
    children: list[Node] = Field(default_factory=list)
    href: str


class Image(_NodeBase):
    """A block-level image."""

    kind: Literal["image"] = "image"
    url: str
    alt: str | None = None


Node = Annotated[
    Union[Text, LineBreak, Bold, Italic, Underline, StrikeThrough, Head, Link, Image],
    Field(discriminator="kind"),
]

Head.model_rebuild()
Link.model_rebuild()

NodeList = TypeAdapter(list[Node])
