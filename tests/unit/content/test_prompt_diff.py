"""Unit tests for system prompt diffs."""

from callguard.content.prompt_diff import DiffLineType, diff_prompts, diff_stats


class TestDiffPrompts:
    """Tests for diff_prompts."""

    def test_both_empty(self) -> None:
        assert diff_prompts(None, "") == []

    def test_identical(self) -> None:
        lines = diff_prompts("a\nb", "a\nb")
        assert [line.type for line in lines] == [DiffLineType.UNCHANGED] * 2
        assert not diff_stats(lines).changed

    def test_changed_line_is_removed_then_added(self) -> None:
        lines = diff_prompts("greet\nsell", "greet\nupsell")
        assert [(line.type, line.content) for line in lines] == [
            (DiffLineType.UNCHANGED, "greet"),
            (DiffLineType.REMOVED, "sell"),
            (DiffLineType.ADDED, "upsell"),
        ]
        assert [line.line_number for line in lines] == [1, 2, 3]

    def test_appended_and_truncated_lines(self) -> None:
        grown = diff_prompts("a", "a\nb")
        assert grown[-1].type is DiffLineType.ADDED
        shrunk = diff_prompts("a\nb", "a")
        assert shrunk[-1].type is DiffLineType.REMOVED

    def test_new_prompt_from_nothing(self) -> None:
        lines = diff_prompts(None, "a")
        assert [(line.type, line.content) for line in lines] == [
            (DiffLineType.REMOVED, ""),
            (DiffLineType.ADDED, "a"),
        ]


class TestDiffStats:
    """Tests for diff_stats."""

    def test_counts(self) -> None:
        stats = diff_stats(diff_prompts("a\nb\nc", "a\nx"))
        assert (stats.added, stats.removed, stats.unchanged) == (1, 2, 1)
        assert stats.changed
