"""Run a conversion request and build the API response."""

from __future__ import annotations

from fastapi import status

from md2html.converter import convert_with_nodes
from md2html.exceptions import Md2htmlError
from md2html.utils.logging_config import get_logger
from server.models import ConvertErrorResponse, ConvertRequest, ConvertResponse, ConvertSuccessResponse

logger = get_logger(__name__)


async def process_conversion(request: ConvertRequest) -> tuple[ConvertResponse, int]:
    """Convert the request text and return the response with its HTTP status."""
    try:
        nodes, html = convert_with_nodes(request.text)
    except Md2htmlError as exc:
        _print_error(request.text, exc)
        return ConvertErrorResponse(error=str(exc)), status.HTTP_400_BAD_REQUEST

    logger.info(
        "Conversion completed",
        extra={"input_chars": len(request.text), "nodes": len(nodes), "html_chars": len(html)},
    )
    return ConvertSuccessResponse(html=html, nodes=len(nodes)), status.HTTP_200_OK


def _print_error(text: str, exc: Exception) -> None:
    logger.error(
        "Conversion failed",
        extra={"input_chars": len(text), "error": str(exc), "error_type": type(exc).__name__},
    )
