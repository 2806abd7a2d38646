#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2bbcode.

Options are frozen dataclasses. Use ``create_updated`` (or the
``create_updated_options`` helper) to derive a modified copy.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from md2bbcode.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2bbcode.options.bbcode import BBCodeRendererOptions
from md2bbcode.options.markdown import MarkdownParserOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = BBCodeRendererOptions(tables=True)
    >>> updated = create_updated_options(original, footnotes=True)
    >>> original.footnotes, updated.footnotes, updated.tables
    (False, True, True)

    """
    return replace(options, **kwargs)


__all__ = [
    "CloneFrozenMixin",
    "BaseRendererOptions",
    "BaseParserOptions",
    "BBCodeRendererOptions",
    "MarkdownParserOptions",
    "create_updated_options",
]
