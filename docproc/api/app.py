"""
FastAPI application.

Routes:
    GET  /health        liveness check, no auth
    POST /api/test/{x}  parse an uploaded file; x is the position-count
                        threshold for the summary
"""

from __future__ import annotations

import logging
import os
from typing import Annotated, Any

from fastapi import Depends, FastAPI, File, UploadFile
from fastapi.responses import JSONResponse

from docproc import __version__
from docproc.api.auth import require_user
from docproc.config import Settings, load_settings
from docproc.core.parser import ParseError, process_stream
from docproc.core.summary import summarize

logger = logging.getLogger(__name__)

MIB = 1024 * 1024


def problem(status: int, title: str, detail: str, **extra: Any) -> JSONResponse:
    """Build a problem-detail JSON response."""
    body = {
        "type": f"https://httpstatuses.io/{status}",
        "title": title,
        "status": status,
        "detail": detail,
        **extra,
    }
    return JSONResponse(status_code=status, content=body)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the API application.

    Args:
        settings: Settings to use; loaded from file/environment if omitted

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(title="Document Processor API", version=__version__)
    app.state.settings = settings or load_settings()

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/test/{x}")
    def process_file(
        x: int,
        user: Annotated[str, Depends(require_user)],
        file: Annotated[UploadFile | None, File()] = None,
    ) -> JSONResponse:
        current: Settings = app.state.settings
        max_bytes = current.effective_max_bytes

        size = _upload_size(file) if file is not None else 0
        if file is None or size == 0:
            logger.info("Rejected upload from %s: missing or empty", user)
            return problem(
                400, "Invalid File", "The uploaded file is missing or empty.", code="DOC-IO-002"
            )

        if max_bytes is not None and size > max_bytes:
            logger.info("Rejected upload from %s: %d bytes", user, size)
            return problem(
                400,
                "File Too Large",
                f"The uploaded file exceeds the maximum allowed size of {_format_size(max_bytes)}.",
                code="DOC-IO-001",
            )

        try:
            result = process_stream(file.file, chunk_size=current.chunk_size, max_bytes=max_bytes)
        except ParseError as e:
            logger.info("Parse failure in %s: %s", file.filename, e.failure)
            return JSONResponse(status_code=400, content=e.to_problem())
        except Exception as e:
            logger.exception("Unexpected error while processing %s", file.filename)
            return problem(500, "Internal Server Error", f"An unexpected error occurred: {e}")

        summary = summarize(result, threshold=x)
        return JSONResponse(status_code=200, content=summary.to_response())

    return app


def _format_size(size: int) -> str:
    if size < MIB:
        return f"{size} bytes"
    return f"{size // MIB} MB"


def _upload_size(file: UploadFile) -> int:
    """Size of an upload in bytes, measured if the client did not send it."""
    if file.size is not None:
        return file.size

    stream = file.file
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size
