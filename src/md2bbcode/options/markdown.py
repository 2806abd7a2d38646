#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the options that decide which GFM extensions the Markdown
event source recognizes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2bbcode.options.base import BaseParserOptions
from md2bbcode.options.bbcode import BBCodeRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-event parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()

    @classmethod
    def from_render_options(cls, options: BBCodeRendererOptions) -> "MarkdownParserOptions":
        """Parse exactly the extensions the renderer is going to honor.

        Parameters
        ----------
        options : BBCodeRendererOptions
            Renderer options whose extension flags are mirrored

        Returns
        -------
        MarkdownParserOptions
            Parser options with matching extension switches

        Examples
        --------
            >>> opts = MarkdownParserOptions.from_render_options(BBCodeRendererOptions(tables=True))
            >>> opts.parse_tables, opts.parse_footnotes
            (True, False)

        """
        return cls(
            parse_tables=options.tables,
            parse_footnotes=options.footnotes,
            parse_task_lists=options.tasklists,
            parse_strikethrough=options.strikethrough,
        )
