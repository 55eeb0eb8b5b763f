"""Diff preview API endpoints"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse

from diff_backend.models.diff import DiffSummary
from diff_backend.models.preview import (
    DiffRequest,
    DiffResponse,
    DiffStreamEvent,
    SideBySideResponse,
)
from diff_backend.services.config_manager import ConfigManager
from diff_backend.services.decorations import build_decorations
from diff_backend.services.diff_generator import DiffGenerator

logger = logging.getLogger(__name__)

router = APIRouter()

diff_generator = DiffGenerator()


def validate_document(name: str, text: str, limits: dict[str, Any]) -> None:
    """Reject documents the diff engine should not be asked to compare"""
    if limits.get("rejectBinary", True) and "\x00" in text:
        logger.warning("Rejected %s document: contains NUL characters", name)
        raise HTTPException(
            status_code=400,
            detail=f"The {name} document looks like binary data",
        )

    max_bytes = limits.get("maxDocumentBytes")
    if max_bytes is not None and (isinstance(max_bytes, bool) or not isinstance(max_bytes, int)):
        logger.warning("Ignoring non-integer maxDocumentBytes limit: %r", max_bytes)
        max_bytes = None

    if max_bytes is not None:
        size = len(text.encode("utf-8", errors="surrogatepass"))
        if size > max_bytes:
            logger.warning("Rejected %s document: %d bytes > %d", name, size, max_bytes)
            raise HTTPException(
                status_code=413,
                detail=f"The {name} document is too large ({size} bytes, limit {max_bytes})",
            )


def _validate_request(request: DiffRequest) -> None:
    limits = ConfigManager.get_instance().get("limits", {})
    validate_document("original", request.original, limits)
    validate_document("modified", request.modified, limits)


@router.post("", response_model=DiffResponse)
async def create_diff(request: DiffRequest) -> DiffResponse:
    """Classify every line of both documents"""
    _validate_request(request)

    result = diff_generator.generate_diff(request.original, request.modified)
    return DiffResponse(lines=result, summary=diff_generator.summarize(result))


@router.post("/summary", response_model=DiffSummary)
async def diff_summary(request: DiffRequest) -> DiffSummary:
    """Return only the change counts"""
    _validate_request(request)

    result = diff_generator.generate_diff(request.original, request.modified)
    return diff_generator.summarize(result)


@router.post("/side-by-side", response_model=SideBySideResponse)
async def side_by_side(request: DiffRequest) -> SideBySideResponse:
    """Render the diff as prefixed text with editor decorations"""
    _validate_request(request)

    content = diff_generator.render_side_by_side(request.original, request.modified)
    result = diff_generator.generate_diff(request.original, request.modified)

    return SideBySideResponse(
        content=content,
        decorations=build_decorations(content),
        summary=diff_generator.summarize(result),
    )


@router.post("/stream")
async def diff_stream(request: DiffRequest):
    """Stream diff lines as they are classified (SSE)"""
    _validate_request(request)

    async def event_generator():
        try:
            result = diff_generator.generate_diff(request.original, request.modified)

            for line in result:
                event = DiffStreamEvent(type="line", line=line)
                yield {"event": "message", "data": event.model_dump_json()}

            event = DiffStreamEvent(type="summary", summary=diff_generator.summarize(result))
            yield {"event": "message", "data": event.model_dump_json()}

            event = DiffStreamEvent(type="done", done=True)
            yield {"event": "message", "data": event.model_dump_json()}

        except Exception as e:
            logger.exception("Diff stream failed")
            event = DiffStreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())
