"""Pydantic models for the conversion API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from md2html.schemas import Node
from server.server_config import MAX_INPUT_SIZE_BYTES


def _check_size(text: str) -> str:
    if len(text.encode("utf-8")) > MAX_INPUT_SIZE_BYTES:
        err = f"text exceeds the {MAX_INPUT_SIZE_BYTES // 1024} KB input limit"
        raise ValueError(err)
    return text


class ConvertRequest(BaseModel):
    """Request model for the /api/convert and /api/parse endpoints.

    Attributes
    ----------
    text : str
        Markdown-like source to convert.

    """

    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., description="Source text to convert")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Enforce the input size limit."""
        return _check_size(v)


class ConvertSuccessResponse(BaseModel):
    """Success response model for the /api/convert endpoint.

    Attributes
    ----------
    html : str
        The generated HTML fragment.
    nodes : int
        Number of top-level nodes the parser produced.

    """

    html: str = Field(..., description="Generated HTML fragment")
    nodes: int = Field(..., ge=0, description="Top-level node count")


class ConvertErrorResponse(BaseModel):
    """Error response model for the API endpoints."""

    error: str = Field(..., description="Error message")


ConvertResponse = Union[ConvertSuccessResponse, ConvertErrorResponse]


class ParseResponse(BaseModel):
    """Parsed node tree returned by the /api/parse endpoint."""

    nodes: list[Node] = Field(default_factory=list, description="Top-level nodes")
