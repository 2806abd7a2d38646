#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2bbcode/options/bbcode.py
"""Configuration options for BBCode rendering.

This module defines the options class for converting a Markdown event stream
into XenForo or ProBoards BBCode.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2bbcode.constants import (
    DEFAULT_CODE_BLOCK_LANGUAGE,
    DEFAULT_ENCODING_WARNINGS,
    DEFAULT_FOOTNOTES,
    DEFAULT_SMART_PUNCTUATION,
    DEFAULT_STRIKETHROUGH,
    DEFAULT_TABLES,
    DEFAULT_TASKLISTS,
)
from md2bbcode.options.base import BaseRendererOptions


@dataclass(frozen=True)
class BBCodeRendererOptions(BaseRendererOptions):
    """Configuration options for Markdown-to-BBCode rendering.

    Every GFM extension is off by default. An event belonging to a disabled
    extension is still accepted but degrades to plain text.

    Parameters
    ----------
    encoding_warnings : bool, default False
        Report characters at or above U+FFFE in XenForo output. The
        characters are kept; only warnings are produced. Ignored for ProBoards.
    footnotes : bool, default False
        Render footnote references as numbered markers and collect their
        definitions after the main content. When False the Markdown source
        form (``[^label]``) is kept.
    strikethrough : bool, default False
        Render struck-through text with ``[s]``. When False the text is
        emitted without markup.
    smart_punctuation : bool, default False
        Replace straight quotes, ``--``, ``---`` and ``...`` with their
        typographic equivalents outside code.
    tables : bool, default False
        Render tables with BBCode table tags. When False each row becomes a
        pipe-delimited line of text.
    tasklists : bool, default False
        Render task list checkboxes as ballot box glyphs.
    code_block_language : bool, default False
        Carry a fenced code block's language into the code tag where the
        dialect supports it (XenForo ``[code=python]``).

    Examples
    --------
    Basic usage:
        >>> from md2bbcode.renderers.bbcode import BBCodeRenderer
        >>> options = BBCodeRendererOptions(tables=True, footnotes=True)
        >>> renderer = BBCodeRenderer("xenforo", options)

    Deriving a variant:
        >>> options.create_updated(tables=False).tables
        False

    """

    encoding_warnings: bool = field(
        default=DEFAULT_ENCODING_WARNINGS,
        metadata={
            "help": "Warn about characters XenForo cannot store (U+FFFE and above)",
            "importance": "core",
        },
    )
    footnotes: bool = field(
        default=DEFAULT_FOOTNOTES,
        metadata={
            "help": "Render footnotes as numbered markers with trailing definitions",
            "cli_short": "-f",
            "importance": "core",
        },
    )
    strikethrough: bool = field(
        default=DEFAULT_STRIKETHROUGH,
        metadata={
            "help": "Render ~~strikethrough~~ with [s] tags",
            "cli_short": "-s",
            "importance": "core",
        },
    )
    smart_punctuation: bool = field(
        default=DEFAULT_SMART_PUNCTUATION,
        metadata={"help": "Use curly quotes, en/em dashes and ellipses", "importance": "core"},
    )
    tables: bool = field(
        default=DEFAULT_TABLES,
        metadata={
            "help": "Render tables with [table] tags instead of pipe-delimited text",
            "cli_short": "-t",
            "importance": "core",
        },
    )
    tasklists: bool = field(
        default=DEFAULT_TASKLISTS,
        metadata={"help": "Render task list checkboxes as ballot box glyphs", "importance": "core"},
    )
    code_block_language: bool = field(
        default=DEFAULT_CODE_BLOCK_LANGUAGE,
        metadata={
            "help": "Include the fence language in code tags where the dialect allows it",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
