"""Diff preview request/response models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffLine, DiffResult, DiffSummary, LineDecoration


class DiffRequest(BaseModel):
    """Request to compare two versions of a document"""

    original: str
    modified: str


class DiffResponse(BaseModel):
    """Structured diff with its summary"""

    lines: DiffResult
    summary: DiffSummary


class SideBySideResponse(BaseModel):
    """Flattened text rendering ready to be shown in an editor"""

    content: str
    decorations: list[LineDecoration] = []
    summary: DiffSummary


class DiffStreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "line", "summary", "done", "error"
    line: DiffLine | None = None
    summary: DiffSummary | None = None
    done: bool = False
    error: str | None = None
