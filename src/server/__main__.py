"""Serve the md2html API with uvicorn: ``python -m server``."""

import os

import uvicorn

from md2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    configure_logging()

    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Serving md2html API", extra={"host": host, "port": port, "reload": reload})

    # uvicorn would otherwise replace the md2html log handler with its own.
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)
