"""Local configuration for md2html."""

from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_INPUT_KB = 512

_TRUTHY = {"1", "true", "yes", "on"}

# Log parse/format timings around every conversion.
MD2HTML_BENCHMARK = os.getenv("MD2HTML_BENCHMARK", "false").strip().lower() in _TRUTHY
MD2HTML_LOG_LEVEL = os.getenv("MD2HTML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

MD2HTML_MAX_INPUT_KB = int(os.getenv("MD2HTML_MAX_INPUT_KB", str(DEFAULT_MAX_INPUT_KB)))
