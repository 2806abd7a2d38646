#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/utils/text.py
"""Typographic text utilities.

Provides the "smart punctuation" substitution applied to Markdown text before
it is written as BBCode: dashes, ellipses and curly quotes.

"""

from __future__ import annotations

import re

from md2bbcode.constants import (
    ELLIPSIS,
    EM_DASH,
    EN_DASH,
    LEFT_DOUBLE_QUOTE,
    LEFT_SINGLE_QUOTE,
    RIGHT_DOUBLE_QUOTE,
    RIGHT_SINGLE_QUOTE,
)

_DASHES_AND_ELLIPSIS = re.compile(r"---|--|\.\.\.")

_REPLACEMENTS = {
    "---": EM_DASH,
    "--": EN_DASH,
    "...": ELLIPSIS,
}

# A quote following one of these (or nothing) opens rather than closes
_OPENING_CONTEXT = frozenset("([{<-/" + EM_DASH + EN_DASH + LEFT_DOUBLE_QUOTE + LEFT_SINGLE_QUOTE)


def _opens_quote(previous: str) -> bool:
    return not previous or previous.isspace() or previous in _OPENING_CONTEXT


def smarten_punctuation(text: str, previous: str = "") -> str:
    """Replace ASCII punctuation with typographic equivalents.

    ``---`` becomes an em dash, ``--`` an en dash and ``...`` an ellipsis.
    Straight quotes become left quotes at the start of text, after whitespace
    or after opening punctuation, and right quotes everywhere else, which also
    turns apostrophes inside words into right single quotes.

    Parameters
    ----------
    text : str
        Text to transform
    previous : str, default ""
        Character that precedes ``text`` in the document, used to decide the
        direction of a leading quote. Empty at the start of a block.

    Returns
    -------
    str
        Text with typographic punctuation

    Examples
    --------
        >>> smarten_punctuation('He said "hi" -- twice...') == 'He said “hi” – twice…'
        True
        >>> smarten_punctuation("it's") == "it’s"
        True
        >>> smarten_punctuation('"', previous="a") == "”"
        True

    """
    if not text:
        return text

    text = _DASHES_AND_ELLIPSIS.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    if '"' not in text and "'" not in text:
        return text

    result: list[str] = []
    prev = previous[-1:] if previous else ""
    for char in text:
        if char == '"':
            char = LEFT_DOUBLE_QUOTE if _opens_quote(prev) else RIGHT_DOUBLE_QUOTE
        elif char == "'":
            char = LEFT_SINGLE_QUOTE if _opens_quote(prev) else RIGHT_SINGLE_QUOTE
        result.append(char)
        prev = char
    return "".join(result)


__all__ = ["smarten_punctuation"]
