"""
Unit tests for the summary and side-by-side presenters.
"""

import random

import pytest

from diff_backend.models.diff import DiffLineType, DiffResult, DiffSummary
from diff_backend.services.diff_generator import (
    DiffGenerator,
    generate_diff,
    render_side_by_side,
    summarize,
)

TEXT_PAIRS = [
    ("", ""),
    ("", "a\nb"),
    ("a\nb", ""),
    ("x\ny", "p\nq"),
    ("a\na", "a"),
    ("a\nb", "b\na"),
    ("a", "a\n"),
    ("\n\n", "\n"),
    ("def f():\n    return 1\n", "def f():\n    return 2\n"),
    ("import os\n\nprint(os.name)\n", "import sys\nimport os\n\nprint(os.name, sys.argv)\n"),
    ("  indented\n", "  indented\n  more\n"),
]


def random_pairs(count: int = 50, seed: int = 1234):
    """Seeded random document pairs drawn from a small alphabet of lines."""
    rng = random.Random(seed)
    vocabulary = ["", "a", "b", "c", "  x", "- y", "+ z", "d\r"]
    pairs = []
    for _ in range(count):
        original = "\n".join(rng.choices(vocabulary, k=rng.randint(0, 8)))
        modified = "\n".join(rng.choices(vocabulary, k=rng.randint(0, 8)))
        pairs.append((original, modified))
    return pairs


ALL_PAIRS = TEXT_PAIRS + random_pairs()


class TestSummarize:
    """Tests for summarize."""

    def test_empty_result(self):
        summary = summarize(generate_diff("", ""))

        assert summary == DiffSummary(
            additions=0, deletions=0, unchanged=0, total_changes=0, has_changes=False
        )

    def test_counts_each_kind(self):
        summary = summarize(generate_diff("a\nb\nc", "a\nx\nc\nd"))

        assert summary.additions == 2
        assert summary.deletions == 1
        assert summary.unchanged == 2
        assert summary.total_changes == 3
        assert summary.has_changes is True

    def test_identical_inputs_have_no_changes(self):
        summary = summarize(generate_diff("a\nb", "a\nb"))

        assert summary.unchanged == 2
        assert summary.has_changes is False

    def test_summarize_empty_diff_result_model(self):
        assert summarize(DiffResult()).has_changes is False

    @pytest.mark.parametrize("original,modified", ALL_PAIRS)
    def test_summary_consistency(self, original, modified):
        result = generate_diff(original, modified)
        summary = summarize(result)

        assert summary.total_changes == summary.additions + summary.deletions
        assert summary.has_changes == (summary.total_changes > 0)
        assert summary.additions + summary.deletions + summary.unchanged == len(result)


class TestRenderSideBySide:
    """Tests for render_side_by_side."""

    def test_empty_inputs(self):
        assert render_side_by_side("", "") == ""

    def test_prefixes(self):
        rendered = render_side_by_side("def f():\n    return 1", "def f():\n    return 2")

        assert rendered == "  def f():\n-     return 1\n+     return 2"

    def test_pure_addition(self):
        assert render_side_by_side("", "a\nb") == "+ a\n+ b"

    def test_pure_removal(self):
        assert render_side_by_side("a\nb", "") == "- a\n- b"

    def test_no_leading_or_trailing_blank_line(self):
        rendered = render_side_by_side("a\n", "a\nb\n")

        assert not rendered.startswith("\n")
        assert not rendered.endswith("\n")
        assert rendered == "  a\n+ b\n  "

    def test_method_matches_module_function(self, generator: DiffGenerator):
        assert generator.render_side_by_side("a\nb", "b\nc") == render_side_by_side("a\nb", "b\nc")

    @pytest.mark.parametrize("original,modified", ALL_PAIRS)
    def test_presenter_consistency(self, original, modified):
        """Marker counts in the rendering match the structured summary."""
        rendered = render_side_by_side(original, modified)
        summary = summarize(generate_diff(original, modified))

        rendered_lines = rendered.split("\n") if rendered else []
        assert sum(1 for line in rendered_lines if line.startswith("+ ")) == summary.additions
        assert sum(1 for line in rendered_lines if line.startswith("- ")) == summary.deletions

    @pytest.mark.parametrize("original,modified", ALL_PAIRS)
    def test_rendering_matches_prefix_mapping(self, original, modified):
        """The rendering equals prefix-mapping over the structured result."""
        result = generate_diff(original, modified)

        expected = "\n".join(f"{line.prefix}{line.content}" for line in result)
        assert render_side_by_side(original, modified) == expected

    def test_prefix_property(self):
        result = generate_diff("a", "b")

        assert [(line.kind, line.prefix) for line in result] == [
            (DiffLineType.REMOVED, "- "),
            (DiffLineType.ADDED, "+ "),
        ]
