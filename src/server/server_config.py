"""Server configuration."""

from __future__ import annotations

from md2html.config import MD2HTML_MAX_INPUT_KB

MAX_INPUT_SIZE_BYTES = MD2HTML_MAX_INPUT_KB * 1024
