#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helper utilities used by the md2bbcode renderer and command line."""

from md2bbcode.utils.encoding import collect_encoding_warnings, format_encoding_warning, iter_non_ucs2_characters
from md2bbcode.utils.escape import escape_bbcode, escape_bbcode_attribute, escape_bbcode_url, neutralize_closing_tag
from md2bbcode.utils.footnotes import FootnoteNumbering, normalize_footnote_label
from md2bbcode.utils.text import smarten_punctuation

__all__ = [
    "collect_encoding_warnings",
    "format_encoding_warning",
    "iter_non_ucs2_characters",
    "escape_bbcode",
    "escape_bbcode_attribute",
    "escape_bbcode_url",
    "neutralize_closing_tag",
    "FootnoteNumbering",
    "normalize_footnote_label",
    "smarten_punctuation",
]
