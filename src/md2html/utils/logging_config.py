"""Logging setup shared by the CLI and the API server."""

from __future__ import annotations

import logging

from md2html.config import MD2HTML_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _ExtraFormatter(logging.Formatter):
    """Append ``extra={...}`` fields to the rendered message."""

    _RESERVED = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        rendered = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in self._RESERVED
        }
        if not extras:
            return rendered
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{rendered} [{fields}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the root logger.

    Calling this more than once only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(level if level is not None else MD2HTML_LOG_LEVEL)
    if any(getattr(handler, "_md2html", False) for handler in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_ExtraFormatter(_LOG_FORMAT))
    handler._md2html = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
