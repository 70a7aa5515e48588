"""Conversion endpoints for the API."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from md2html.parser import parse
from server.models import ConvertErrorResponse, ConvertRequest, ParseResponse
from server.query_processor import process_conversion

router = APIRouter()

COMMON_CONVERT_RESPONSES: dict[int | str, dict] = {
    400: {"model": ConvertErrorResponse, "description": "Source could not be converted"},
}


@router.post("/api/convert", responses=COMMON_CONVERT_RESPONSES)
async def api_convert(convert_request: ConvertRequest) -> JSONResponse:
    """Convert markdown-like text to an HTML fragment.

    **Parameters**

    - **convert_request** (`ConvertRequest`): the source ``text``

    **Returns**

    - **JSONResponse**: ``{"html", "nodes"}``, or ``{"error"}`` with a 400 status

    """
    response, status_code = await process_conversion(convert_request)
    return JSONResponse(content=response.model_dump(mode="json"), status_code=status_code)


@router.post("/api/parse", response_model=ParseResponse)
async def api_parse(parse_request: ConvertRequest) -> ParseResponse:
    """Return the parsed node tree of ``text`` without rendering it."""
    return ParseResponse(nodes=parse(parse_request.text))
