#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Event sources that turn input documents into Markdown event streams."""

from md2bbcode.parsers.markdown import MarkdownEventSource

__all__ = ["MarkdownEventSource"]
