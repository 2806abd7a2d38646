#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/utils/escape.py
"""BBCode-specific text escaping utilities.

BBCode has no backslash escape. A literal ``[b]`` in text would be read as a
tag by the forum, so brackets are neutralized by separating them from their
neighbours with a zero-width space. The forum then displays the brackets but
never sees a tag.

All functions here are idempotent: escaping escaped text changes nothing.

"""

from __future__ import annotations

import re
from urllib.parse import quote

from md2bbcode.constants import SUPPORTED_DIALECTS, ZERO_WIDTH_SPACE, BBCodeDialect
from md2bbcode.exceptions import UnknownDialectError

_OPEN_BRACKET = re.compile(r"\[(?!" + ZERO_WIDTH_SPACE + ")")
_CLOSE_BRACKET = re.compile(r"(?<!" + ZERO_WIDTH_SPACE + r")\]")

# Characters that would end the tag a URL is embedded in. "%" is left alone so
# already-encoded URLs pass through unchanged.
_URL_SAFE = "/:?#@!$&'()*+,;=%~-._"


def _check_dialect(dialect: str) -> None:
    if dialect not in SUPPORTED_DIALECTS:
        raise UnknownDialectError(dialect, SUPPORTED_DIALECTS)


def escape_bbcode(text: str, dialect: BBCodeDialect) -> str:
    r"""Neutralize BBCode tag delimiters in text content.

    A zero-width space is placed after every ``[`` and before every ``]``
    unless one is already there. Both XenForo and ProBoards render the
    brackets normally but cannot match them as a tag.

    Parameters
    ----------
    text : str
        Text to escape
    dialect : {"xenforo", "proboards"}
        Target BBCode dialect

    Returns
    -------
    str
        Text that cannot be parsed as BBCode markup

    Raises
    ------
    UnknownDialectError
        If the dialect is not supported

    Examples
    --------
        >>> escape_bbcode("[b]x[/b]", "xenforo") == "[\u200bb\u200b]x[\u200b/b\u200b]"
        True
        >>> once = escape_bbcode("a [link]", "proboards")
        >>> escape_bbcode(once, "proboards") == once
        True

    """
    _check_dialect(dialect)
    if not text or ("[" not in text and "]" not in text):
        return text

    result = _OPEN_BRACKET.sub("[" + ZERO_WIDTH_SPACE, text)
    return _CLOSE_BRACKET.sub(ZERO_WIDTH_SPACE + "]", result)


def escape_bbcode_url(url: str, quoted: bool = False) -> str:
    """Percent-encode characters that would terminate a BBCode URL attribute.

    Parameters
    ----------
    url : str
        URL to embed in a tag such as ``[url=...]`` or ``[a href="..."]``
    quoted : bool, default False
        Whether the attribute value is wrapped in double quotes

    Returns
    -------
    str
        URL safe to place inside the tag

    Examples
    --------
        >>> escape_bbcode_url("https://example.com/a]b")
        'https://example.com/a%5Db'
        >>> escape_bbcode_url('https://example.com/"x"', quoted=True)
        'https://example.com/%22x%22'

    """
    if not url:
        return url
    return quote(url, safe=_URL_SAFE if quoted else _URL_SAFE + '"')


def escape_bbcode_attribute(value: str, dialect: BBCodeDialect) -> str:
    """Escape a free-text value placed inside a double-quoted tag attribute.

    Double quotes become single quotes and brackets are neutralized.
    """
    if not value:
        return value
    return escape_bbcode(value.replace('"', "'"), dialect)


def neutralize_closing_tag(text: str, tag_name: str) -> str:
    """Break up occurrences of ``[/tag_name`` inside raw tag content.

    Content of tags such as XenForo's ``[code]`` is not parsed by the forum,
    except for the closing tag itself. Inserting a zero-width space after the
    bracket keeps a literal ``[/code]`` from ending the block early.

    Parameters
    ----------
    text : str
        Raw content
    tag_name : str
        Name of the enclosing tag (case-insensitive)

    Returns
    -------
    str
        Content without any sequence that closes the enclosing tag

    """
    if not text or "[" not in text:
        return text
    pattern = re.compile(r"\[(?=/" + re.escape(tag_name) + r")", re.IGNORECASE)
    return pattern.sub("[" + ZERO_WIDTH_SPACE, text)


__all__ = [
    "escape_bbcode",
    "escape_bbcode_url",
    "escape_bbcode_attribute",
    "neutralize_closing_tag",
]
