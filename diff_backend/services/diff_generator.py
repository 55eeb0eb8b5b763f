"""
Diff Generator Service - Classify line changes between two document versions

Lines are matched by content membership rather than by longest common
subsequence: a line whose text appears anywhere in the other document is never
reported as a clean addition or removal. Duplicate lines therefore collapse,
and some repeated lines may be reported as unchanged at a different logical
position. Callers must tolerate this approximation.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from diff_backend.models.diff import (
    LINE_PREFIXES,
    DiffLine,
    DiffLineType,
    DiffResult,
    DiffSummary,
)

logger = logging.getLogger(__name__)

# (kind, content, original index, new index); indexes are 0-based, None when absent
_Row = tuple[DiffLineType, str, Optional[int], Optional[int]]


def split_lines(text: str) -> list[str]:
    """Split text on newlines; an empty document has no lines"""
    if not text:
        return []
    return text.split("\n")


def _classify(original_lines: list[str], new_lines: list[str]) -> Iterator[_Row]:
    """Walk both line sequences in lockstep and yield classified rows"""
    original_set = set(original_lines)
    new_set = set(new_lines)

    removed = {line for line in original_lines if line not in new_set}
    added = {line for line in new_lines if line not in original_set}

    i, j = 0, 0
    while i < len(original_lines) or j < len(new_lines):
        has_original = i < len(original_lines)
        has_new = j < len(new_lines)
        original_line = original_lines[i] if has_original else None
        new_line = new_lines[j] if has_new else None

        if has_original and has_new and original_line == new_line:
            yield DiffLineType.UNCHANGED, original_line, i, j
            i += 1
            j += 1
        elif has_original and original_line in removed:
            yield DiffLineType.REMOVED, original_line, i, None
            i += 1
        elif has_new and new_line in added:
            yield DiffLineType.ADDED, new_line, None, j
            j += 1
        else:
            # Both lines exist elsewhere in the other document
            if has_original:
                yield DiffLineType.REMOVED, original_line, i, None
            if has_new:
                yield DiffLineType.ADDED, new_line, None, j
            i += 1
            j += 1


class DiffGenerator:
    """Generate line diffs for code modifications"""

    def generate_diff(self, original_content: str, new_content: str) -> DiffResult:
        """Generate the ordered, classified line records for two documents"""
        original_lines = split_lines(original_content)
        new_lines = split_lines(new_content)

        lines: list[DiffLine] = []
        for kind, content, i, j in _classify(original_lines, new_lines):
            lines.append(
                DiffLine(
                    kind=kind,
                    content=content,
                    sequence_index=len(lines) + 1,
                    original_line_number=None if i is None else i + 1,  # 1-indexed for the editor
                    new_line_number=None if j is None else j + 1,
                )
            )

        logger.debug(
            "Diffed %d original / %d new lines into %d rows",
            len(original_lines),
            len(new_lines),
            len(lines),
        )
        return DiffResult(lines)

    def summarize(self, result: DiffResult) -> DiffSummary:
        """Count additions, deletions and unchanged lines in a single pass"""
        counts = {kind: 0 for kind in DiffLineType}
        for line in result:
            counts[line.kind] += 1

        additions = counts[DiffLineType.ADDED]
        deletions = counts[DiffLineType.REMOVED]
        total_changes = additions + deletions

        return DiffSummary(
            additions=additions,
            deletions=deletions,
            unchanged=counts[DiffLineType.UNCHANGED],
            total_changes=total_changes,
            has_changes=total_changes > 0,
        )

    def render_side_by_side(self, original_content: str, new_content: str) -> str:
        """Render a marker-prefixed text view (`+ `, `- `, two spaces) of both documents"""
        result_lines = [
            f"{LINE_PREFIXES[kind]}{content}"
            for kind, content, _, _ in _classify(
                split_lines(original_content), split_lines(new_content)
            )
        ]
        return "\n".join(result_lines)


_default_generator = DiffGenerator()


def generate_diff(original: str, modified: str) -> DiffResult:
    return _default_generator.generate_diff(original, modified)


def summarize(result: DiffResult) -> DiffSummary:
    return _default_generator.summarize(result)


def render_side_by_side(original: str, modified: str) -> str:
    return _default_generator.render_side_by_side(original, modified)
