"""Models module - Pydantic data models"""

from .diff import (
    LINE_PREFIXES,
    DiffLine,
    DiffLineType,
    DiffResult,
    DiffSummary,
    LineDecoration,
)
from .preview import DiffRequest, DiffResponse, DiffStreamEvent, SideBySideResponse

__all__ = [
    # Diff models
    "LINE_PREFIXES",
    "DiffLine",
    "DiffLineType",
    "DiffResult",
    "DiffSummary",
    "LineDecoration",
    # Preview API models
    "DiffRequest",
    "DiffResponse",
    "DiffStreamEvent",
    "SideBySideResponse",
]
