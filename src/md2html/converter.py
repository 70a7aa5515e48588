"""Markdown-like text to HTML conversion entry points."""

from __future__ import annotations

import logging
import time

from md2html import config
from md2html.exceptions import InputError
from md2html.formatter import format_nodes
from md2html.parser import parse
from md2html.schemas import Node, NodeList

logger = logging.getLogger(__name__)


def convert(source: str | bytes) -> str:
    """Convert markdown-like ``source`` into an HTML fragment.

    Args:
        source: The text to convert. ``bytes`` are decoded as UTF-8.

    Returns:
        The HTML fragment, without any ``<html>``/``<body>`` wrapper.

    Raises:
        InputError: If ``source`` is neither text nor valid UTF-8 bytes.
    """
    return convert_with_nodes(source)[1]


def convert_with_nodes(source: str | bytes) -> tuple[list[Node], str]:
    """Convert ``source`` and also return the top-level nodes it parsed to.

    Timings are logged when ``MD2HTML_BENCHMARK`` is set.
    """
    text = _coerce_source(source)

    if not config.MD2HTML_BENCHMARK:
        nodes = parse(text)
        return nodes, format_nodes(nodes)

    started = time.perf_counter()
    nodes = parse(text)
    parsed = time.perf_counter()
    html = format_nodes(nodes)
    finished = time.perf_counter()
    logger.info(
        "convert: %d chars -> %d nodes, parse %.3f ms, format %.3f ms",
        len(text),
        len(nodes),
        (parsed - started) * 1000,
        (finished - parsed) * 1000,
    )
    return nodes, html


def parse_source(source: str | bytes) -> list[Node]:
    """Parse ``source`` into nodes, accepting the same inputs as ``convert``."""
    return parse(_coerce_source(source))


def parse_to_json(source: str | bytes, *, indent: int | None = 2) -> str:
    """Parse ``source`` and dump the node list as JSON."""
    return NodeList.dump_json(parse_source(source), indent=indent).decode("utf-8")


def _coerce_source(source: str | bytes) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputError(f"Source is not valid UTF-8: {exc}") from exc
    raise InputError(f"Expected str or bytes, got {type(source).__name__}")
