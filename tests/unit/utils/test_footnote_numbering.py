#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for footnote numbering."""

import pytest

from md2bbcode.utils.footnotes import FootnoteNumbering, normalize_footnote_label


@pytest.mark.unit
def test_normalize_footnote_label() -> None:
    assert normalize_footnote_label("  My\tNOTE ") == "my note"


@pytest.mark.unit
class TestFootnoteNumbering:
    """Tests for FootnoteNumbering."""

    def test_first_seen_order(self) -> None:
        notes = FootnoteNumbering()
        assert [notes.number_for(label) for label in ("z", "a", "z", "m")] == [1, 2, 1, 3]

    def test_labels_normalized(self) -> None:
        notes = FootnoteNumbering()
        assert notes.number_for("My  Note") == notes.number_for("my note")

    def test_custom_start(self) -> None:
        assert FootnoteNumbering(start=10).number_for("a") == 10

    def test_definitions_sorted_by_number(self) -> None:
        notes = FootnoteNumbering()
        notes.add_definition(2, "second")
        notes.add_definition(1, "first")
        assert list(notes.iter_definitions()) == [(1, "first"), (2, "second")]
        assert len(notes) == 2

    def test_redefinition_replaces(self) -> None:
        notes = FootnoteNumbering()
        notes.add_definition(1, "old")
        notes.add_definition(1, "new")
        assert list(notes.iter_definitions()) == [(1, "new")]
