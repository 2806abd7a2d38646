#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for smart punctuation."""

import pytest

from md2bbcode.utils.text import smarten_punctuation


@pytest.mark.unit
class TestSmartenPunctuation:
    """Tests for smarten_punctuation."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a -- b", "a – b"),
            ("a --- b", "a — b"),
            ("wait...", "wait…"),
            ('"quoted"', "“quoted”"),
            ("'single'", "‘single’"),
            ("don't", "don’t"),
            ('("x")', "(“x”)"),
            ("plain", "plain"),
            ("", ""),
        ],
    )
    def test_substitutions(self, text: str, expected: str) -> None:
        assert smarten_punctuation(text) == expected

    def test_previous_character_decides_direction(self) -> None:
        assert smarten_punctuation('"', previous="word") == "”"
        assert smarten_punctuation('"', previous=" ") == "“"

    def test_quote_after_dash_opens(self) -> None:
        assert smarten_punctuation('--"x"') == "–“x”"
