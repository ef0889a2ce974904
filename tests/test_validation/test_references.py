"""Tests for issue reference scanning and merging."""

import pytest

from gh_issue_check.validation.references import (
    is_empty,
    merge_references,
    scan_references,
)


class TestScanReferences:
    """Test scan_references function."""

    def test_scan_keeps_order_and_duplicates(self) -> None:
        """Matches are returned left to right with duplicates."""
        assert scan_references("Fixes #12 and #7, see #12") == ["#12", "#7", "#12"]

    @pytest.mark.parametrize(
        "text",
        [None, "", "no refs here", "# 12 is not a reference", "issue #abc", "#"],
    )
    def test_scan_without_references(self, text: str | None) -> None:
        """Absent text and text without #<digits> yield nothing."""
        assert scan_references(text) == []

    def test_scan_reference_inside_word(self) -> None:
        """Any #<digits> substring counts, wherever it appears."""
        assert scan_references("PR#5 closes GH-#6") == ["#5", "#6"]

    def test_scan_ascii_digits_only(self) -> None:
        """Non-ASCII digits are not part of a reference."""
        assert scan_references("see #١٢") == []

    def test_scan_multiline(self) -> None:
        """References are found across lines."""
        message = "Refactor config\n\nRefs #101\nCloses #102"
        assert scan_references(message) == ["#101", "#102"]


class TestMergeReferences:
    """Test merge_references and is_empty functions."""

    def test_merge_deduplicates_first_occurrence(self) -> None:
        """Duplicates collapse to their first position."""
        merged = merge_references(scan_references("Fixes #12 and #7, see #12"))
        assert merged == ["#12", "#7"]

    def test_merge_across_sources(self) -> None:
        """Sources are concatenated in argument order."""
        merged = merge_references(["#3", "#1"], None, ["#1", "#2", "#3"])
        assert merged == ["#3", "#1", "#2"]

    def test_merge_all_absent(self) -> None:
        """Inputs without references merge to an empty set."""
        merged = merge_references(
            scan_references(None), scan_references(""), scan_references("no refs here")
        )
        assert merged == []
        assert is_empty(merged)

    def test_merge_no_inputs(self) -> None:
        """Merging nothing yields an explicit empty list."""
        assert merge_references() == []

    def test_is_empty(self) -> None:
        """Non-empty sets are reported as such."""
        assert is_empty(None)
        assert not is_empty(["#1"])

    def test_literal_equality(self) -> None:
        """Dedup compares tokens literally, not by numeric value."""
        assert merge_references(["#7", "#07"]) == ["#7", "#07"]

