#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/utils/encoding.py
"""Character encoding checks for BBCode output.

XenForo keeps post bodies in columns that only hold the Basic Multilingual
Plane, so characters at or above U+FFFE (emoji, most historic scripts) may be
mangled or rejected when posted. These helpers find such characters so they
can be reported without changing the output.
"""

from __future__ import annotations

import logging
from typing import Iterator

from md2bbcode.constants import UCS2_LIMIT

logger = logging.getLogger(__name__)


def iter_non_ucs2_characters(text: str) -> Iterator[str]:
    """Yield every character of ``text`` at or above U+FFFE, in order.

    Parameters
    ----------
    text : str
        Text to scan

    Examples
    --------
        >>> list(iter_non_ucs2_characters("ok \\U0001F600"))
        ['😀']

    """
    for char in text:
        if ord(char) >= UCS2_LIMIT:
            yield char


def format_encoding_warning(char: str) -> str:
    """Describe a character the dialect cannot store.

    Examples
    --------
        >>> format_encoding_warning("\\U0001F600")
        "Non-UCS-2 character in output: '😀' (U+1f600)"

    """
    return f"Non-UCS-2 character in output: '{char}' (U+{ord(char):x})"


def collect_encoding_warnings(text: str) -> list[str]:
    """Return one warning per non-UCS-2 character in ``text``.

    Each warning is also logged at WARNING level.
    """
    warnings: list[str] = []
    for char in iter_non_ucs2_characters(text):
        message = format_encoding_warning(char)
        logger.warning(message)
        warnings.append(message)
    return warnings


__all__ = ["iter_non_ucs2_characters", "format_encoding_warning", "collect_encoding_warnings"]
