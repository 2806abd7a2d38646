#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for non-UCS-2 character detection."""

import logging

import pytest

from md2bbcode.utils.encoding import collect_encoding_warnings, format_encoding_warning, iter_non_ucs2_characters


@pytest.mark.unit
class TestEncodingChecks:
    """Tests for the UCS-2 helpers."""

    def test_bmp_characters_pass(self) -> None:
        assert list(iter_non_ucs2_characters("café ☃ �")) == []

    def test_boundary(self) -> None:
        assert list(iter_non_ucs2_characters("\ufffd\ufffe\uffff")) == ["\ufffe", "\uffff"]

    def test_in_order(self) -> None:
        assert list(iter_non_ucs2_characters("\U0001f600 a \U0001f4a9")) == ["\U0001f600", "\U0001f4a9"]

    def test_message_format(self) -> None:
        assert format_encoding_warning("\U0001f600") == "Non-UCS-2 character in output: '\U0001f600' (U+1f600)"

    def test_collect_logs_each_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="md2bbcode"):
            warnings = collect_encoding_warnings("\U0001f600\U0001f600")
        assert len(warnings) == 2
        assert len([r for r in caplog.records if "Non-UCS-2" in r.getMessage()]) == 2
