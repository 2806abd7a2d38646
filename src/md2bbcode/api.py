#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/api.py
"""High-level conversion functions.

``convert`` renders an event stream that was produced elsewhere;
``markdown_to_bbcode`` parses Markdown text first, configuring the parser
from the render options so disabled extensions are never recognized.

"""

from __future__ import annotations

import logging
from typing import Iterable

from md2bbcode.constants import BBCodeDialect
from md2bbcode.events import MarkdownEvent
from md2bbcode.options.bbcode import BBCodeRendererOptions
from md2bbcode.options.markdown import MarkdownParserOptions
from md2bbcode.parsers.markdown import MarkdownEventSource
from md2bbcode.renderers.bbcode import BBCodeRenderer
from md2bbcode.result import ConversionResult

logger = logging.getLogger(__name__)


def convert(
    events: Iterable[MarkdownEvent],
    dialect: BBCodeDialect,
    options: BBCodeRendererOptions | None = None,
) -> ConversionResult:
    """Render a Markdown event stream to BBCode.

    Parameters
    ----------
    events : iterable of MarkdownEvent
        Event stream, consumed once
    dialect : {"xenforo", "proboards"}
        Target forum dialect
    options : BBCodeRendererOptions, optional
        Rendering options (all extensions off by default)

    Returns
    -------
    ConversionResult
        BBCode output and encoding warnings

    Raises
    ------
    UnknownDialectError
        If the dialect is not supported
    InvalidOptionsError
        If options are not BBCodeRendererOptions
    MalformedEventStreamError
        If the Start/End events do not balance

    Examples
    --------
        >>> from md2bbcode.events import BlockStart, BlockEnd, Paragraph, Text
        >>> events = [BlockStart(Paragraph()), Text("a [b] c"), BlockEnd(Paragraph())]
        >>> convert(events, "proboards").output == "a [\\u200bb\\u200b] c"
        True

    """
    return BBCodeRenderer(dialect, options).convert(events)


def markdown_to_bbcode(
    markdown: str,
    dialect: BBCodeDialect,
    options: BBCodeRendererOptions | None = None,
) -> ConversionResult:
    """Convert Markdown text to BBCode.

    Parameters
    ----------
    markdown : str
        Markdown source
    dialect : {"xenforo", "proboards"}
        Target forum dialect
    options : BBCodeRendererOptions, optional
        Rendering options. The Markdown parser recognizes exactly the GFM
        extensions enabled here.

    Returns
    -------
    ConversionResult
        BBCode output and encoding warnings

    Raises
    ------
    ParsingError
        If the Markdown cannot be parsed
    UnknownDialectError
        If the dialect is not supported

    Examples
    --------
        >>> markdown_to_bbcode("*hi* [there](https://example.com)", "xenforo").output
        '[i]hi[/i] [url=https://example.com]there[/url]'

    """
    renderer = BBCodeRenderer(dialect, options)
    parser_options = MarkdownParserOptions.from_render_options(renderer.options)
    logger.debug("Parsing Markdown with %s", parser_options)
    source = MarkdownEventSource(parser_options)
    return renderer.convert(source.iter_events(markdown))


__all__ = ["convert", "markdown_to_bbcode"]
