"""FastAPI application for md2html."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers.convert import router as convert_router

app = FastAPI(
    title="md2html",
    description="Convert a small markdown dialect into HTML fragments.",
    version="0.1.0",
)
app.include_router(convert_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
