"""
Inline decorations - Map side-by-side rows to editor highlight ranges
"""

from __future__ import annotations

from diff_backend.models.diff import LINE_PREFIXES, DiffLineType, LineDecoration

_DECORATED_KINDS = (DiffLineType.ADDED, DiffLineType.REMOVED)


def build_decorations(rendered: str) -> list[LineDecoration]:
    """Return whole-line decorations for every added/removed row of a rendering"""
    decorations = []

    for index, line in enumerate(rendered.split("\n")):
        for kind in _DECORATED_KINDS:
            if line.startswith(LINE_PREFIXES[kind]):
                decorations.append(
                    LineDecoration(
                        line_number=index + 1,
                        kind=kind,
                        end_column=len(line) + 1,
                    )
                )
                break

    return decorations
