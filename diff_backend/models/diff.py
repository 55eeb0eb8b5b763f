"""Diff-related data models"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, RootModel


class DiffLineType(str, Enum):
    """Classification of a single diff row"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


LINE_PREFIXES: dict[DiffLineType, str] = {
    DiffLineType.ADDED: "+ ",
    DiffLineType.REMOVED: "- ",
    DiffLineType.UNCHANGED: "  ",
}


class DiffLine(BaseModel):
    """A single classified line in a diff"""

    model_config = ConfigDict(frozen=True)

    kind: DiffLineType
    content: str
    sequence_index: int  # 1-indexed position in the diff output
    original_line_number: int | None = None  # None for added lines
    new_line_number: int | None = None  # None for removed lines

    @property
    def prefix(self) -> str:
        return LINE_PREFIXES[self.kind]


class DiffResult(RootModel[list[DiffLine]]):
    """Ordered sequence of diff lines for one original/modified pair"""

    model_config = ConfigDict(frozen=True)

    root: list[DiffLine] = []

    def __iter__(self) -> Iterator[DiffLine]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> DiffLine:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)


class DiffSummary(BaseModel):
    """Change counts derived from a DiffResult"""

    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    unchanged: int = 0
    total_changes: int = 0
    has_changes: bool = False


class LineDecoration(BaseModel):
    """Whole-line highlight for one row of a side-by-side rendering"""

    line_number: int  # 1-indexed row in the rendered block
    kind: DiffLineType
    end_column: int
