"""md2bbcode - Convert Markdown into forum BBCode.

md2bbcode turns a Markdown document into BBCode for two forum platforms,
XenForo and ProBoards. Markdown is parsed with mistune into a flat stream of
events, which a renderer folds into dialect-correct BBCode while keeping an
explicit stack of open formatting contexts.

Key Features
------------
- XenForo and ProBoards dialects from a single tag table
- Optional GFM extensions: tables, footnotes, strikethrough, task lists
- Smart punctuation (curly quotes, dashes, ellipses)
- Warnings for characters XenForo cannot store
- Literal brackets neutralized so text is never read as a tag

Examples
--------
Convert Markdown text:

    >>> from md2bbcode import markdown_to_bbcode
    >>> markdown_to_bbcode("**bold**", "proboards").output
    '[b]bold[/b]'

Render an event stream built by hand:

    >>> from md2bbcode import convert
    >>> from md2bbcode.events import Paragraph, Strong, Emphasis, Text, wrap_block, wrap_inline
    >>> events = wrap_block(Paragraph(), wrap_inline(Strong(), wrap_inline(Emphasis(), [Text("hi")])))
    >>> convert(events, "xenforo").output
    '[b][i]hi[/i][/b]'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2bbcode requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.3.0"

from md2bbcode.api import convert, markdown_to_bbcode  # noqa: E402
from md2bbcode.constants import SUPPORTED_DIALECTS, BBCodeDialect  # noqa: E402
from md2bbcode.exceptions import (  # noqa: E402
    FileError,
    InvalidOptionsError,
    MalformedEventStreamError,
    Md2BBCodeError,
    MissingTagMappingError,
    ParsingError,
    RenderingError,
    UnknownDialectError,
    ValidationError,
)
from md2bbcode.options import BBCodeRendererOptions, MarkdownParserOptions  # noqa: E402
from md2bbcode.parsers import MarkdownEventSource  # noqa: E402
from md2bbcode.renderers import BBCodeRenderer  # noqa: E402
from md2bbcode.result import ConversionResult  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "markdown_to_bbcode",
    "BBCodeDialect",
    "SUPPORTED_DIALECTS",
    "BBCodeRendererOptions",
    "MarkdownParserOptions",
    "MarkdownEventSource",
    "BBCodeRenderer",
    "ConversionResult",
    "Md2BBCodeError",
    "ValidationError",
    "InvalidOptionsError",
    "UnknownDialectError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "MalformedEventStreamError",
    "MissingTagMappingError",
]
