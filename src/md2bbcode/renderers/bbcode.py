#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/renderers/bbcode.py
"""BBCode rendering from a Markdown event stream.

This module provides the BBCodeRenderer class, which folds a stream of
:mod:`md2bbcode.events` into XenForo or ProBoards BBCode. The renderer keeps an
explicit stack of open formatting contexts instead of recursing, so nesting
depth is bounded by the document and not by the interpreter's call stack.

Disabled GFM extensions degrade to plain text: tables become pipe-delimited
lines, footnotes keep their ``[^label]`` source form, strikethrough loses its
markup and task markers disappear.

"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from md2bbcode.constants import NO_BREAK_SPACE, TASK_CHECKED, TASK_UNCHECKED, BBCodeDialect
from md2bbcode.dialects import DialectProfile, footnote_marker, get_dialect, tag_for
from md2bbcode.events import (
    BlockEnd,
    BlockKind,
    BlockStart,
    CodeBlock,
    FootnoteDefinition,
    FootnoteReference,
    Html,
    InlineCode,
    InlineEnd,
    InlineKind,
    InlineStart,
    Kind,
    LineBreak,
    ListItem,
    MarkdownEvent,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    TaskMarker,
    Text,
    ThematicBreak,
)
from md2bbcode.exceptions import MalformedEventStreamError
from md2bbcode.options.bbcode import BBCodeRendererOptions
from md2bbcode.renderers.base import BaseRenderer
from md2bbcode.result import ConversionResult
from md2bbcode.utils.encoding import collect_encoding_warnings
from md2bbcode.utils.escape import escape_bbcode, escape_bbcode_attribute, neutralize_closing_tag
from md2bbcode.utils.footnotes import FootnoteNumbering
from md2bbcode.utils.text import smarten_punctuation

logger = logging.getLogger(__name__)

_CLOSING_TAG_NAME = re.compile(r"\[/(\w+)")
_HTML_TAG = re.compile(r"<[^>]*>")
# Matched against the original fragment: lower-casing can change string length
_BR_TAG = re.compile(r"<br(?:[\s/>]|$)", re.IGNORECASE)
_DETAILS_OPEN = re.compile(r"<details(?:\s[^>]*)?>", re.IGNORECASE)
_DETAILS_CLOSE = re.compile(r"</details\s*>", re.IGNORECASE)
_SUMMARY_OPEN = re.compile(r"<summary(?:\s[^>]*)?>", re.IGNORECASE)
_SUMMARY_CLOSE = re.compile(r"</summary", re.IGNORECASE)


@dataclass
class _OpenContext:
    """One entry of the formatting-context stack."""

    kind: Kind
    close: str = ""
    raw_tag: Optional[str] = None
    code: bool = False
    suppress: bool = False
    saved_output: Optional[list[str]] = None
    footnote_number: Optional[int] = None


class BBCodeRenderer(BaseRenderer):
    """Render a Markdown event stream to BBCode.

    Parameters
    ----------
    dialect : {"xenforo", "proboards"}
        Target forum dialect
    options : BBCodeRendererOptions or None, default = None
        Rendering options

    Examples
    --------
    Basic usage:

        >>> from md2bbcode.events import Paragraph, Strong, Text, wrap_block, wrap_inline
        >>> events = wrap_block(Paragraph(), wrap_inline(Strong(), [Text("hi")]))
        >>> BBCodeRenderer("xenforo").render_to_string(events)
        '[b]hi[/b]'

    """

    def __init__(self, dialect: BBCodeDialect, options: BBCodeRendererOptions | None = None):
        """Initialize the BBCode renderer with a dialect and options."""
        BaseRenderer._validate_options_type(options, BBCodeRendererOptions, "bbcode")
        options = options or BBCodeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: BBCodeRendererOptions = options
        self.profile: DialectProfile = get_dialect(dialect)
        self.dialect: BBCodeDialect = self.profile.name

        self._event_handlers: dict[type, Callable[[Any], None]] = {
            BlockStart: self._handle_start,
            InlineStart: self._handle_start,
            BlockEnd: self._handle_end,
            InlineEnd: self._handle_end,
            Text: self._handle_text,
            LineBreak: self._handle_line_break,
            SoftBreak: self._handle_soft_break,
            ThematicBreak: self._handle_thematic_break,
            FootnoteReference: self._handle_footnote_reference,
            TaskMarker: self._handle_task_marker,
            Html: self._handle_html,
        }
        self._openers: dict[type, Callable[[Any], None]] = {
            Paragraph: self._open_paragraph,
            ListItem: self._open_list_item,
            Table: self._open_table_part,
            TableHead: self._open_table_part,
            TableRow: self._open_table_part,
            TableCell: self._open_table_part,
            FootnoteDefinition: self._open_footnote_definition,
            Strikethrough: self._open_strikethrough,
        }
        self._closers: dict[type, Callable[[_OpenContext], None]] = {
            ListItem: self._close_list_item,
            Table: self._close_table,
            TableHead: self._close_table_head,
            FootnoteDefinition: self._close_footnote_definition,
        }
        self._reset()

    def _reset(self) -> None:
        self._stack: list[_OpenContext] = []
        self._main_output: list[str] = []
        self._output: list[str] = self._main_output
        self._prev_char = ""
        self._suppress_paragraph_break = False
        self._table_column = 0
        self._table_body_open = False
        self._footnotes = FootnoteNumbering()
        self._summary: Optional[list[str]] = None

    def convert(self, events: Iterable[MarkdownEvent]) -> ConversionResult:
        """Render an event stream to BBCode.

        Parameters
        ----------
        events : iterable of MarkdownEvent
            Event stream, consumed once

        Returns
        -------
        ConversionResult
            BBCode stripped of surrounding whitespace, and any encoding warnings

        Raises
        ------
        MalformedEventStreamError
            If an End does not match the innermost open context, an End
            arrives with nothing open, a Start carries a kind of the wrong
            category, or the stream ends with contexts still open

        """
        self._reset()
        logger.debug("Rendering %s BBCode", self.dialect)
        try:
            for event in events:
                handler = self._event_handlers.get(type(event))
                if handler is None:
                    raise self._malformed(f"Unsupported event {event!r}", event)
                handler(event)

            if self._stack:
                raise self._malformed("Event stream ended with unclosed contexts")
            if self._summary is not None:
                logger.warning("Unterminated <summary> element at end of document")
                self._finish_summary()

            footnote_count = len(self._footnotes)
            output = self._assemble()
        finally:
            self._reset()

        logger.debug("Rendered %d characters with %d footnote definitions", len(output), footnote_count)
        warnings: list[str] = []
        if self.options.encoding_warnings and self.profile.ucs2_only:
            warnings = collect_encoding_warnings(output)
        return ConversionResult(output=output, warnings=tuple(warnings))

    def _assemble(self) -> str:
        body = "".join(self._main_output)
        if len(self._footnotes):
            definitions = "\n".join(text for _number, text in self._footnotes.iter_definitions())
            body = f"{body.rstrip()}\n\n{definitions}"
        return body.strip()

    # ------------------------------------------------------------------
    # Output and stack helpers
    # ------------------------------------------------------------------

    def _emit(self, fragment: str) -> None:
        # Markup inside a <summary> title is dropped; its text is captured separately
        if not fragment or self._summary is not None:
            return
        self._output.append(fragment)
        self._suppress_paragraph_break = False

    def _push(self, kind: Kind, **fields: Any) -> _OpenContext:
        context = _OpenContext(kind=kind, **fields)
        self._stack.append(context)
        return context

    def _malformed(self, message: str, event: MarkdownEvent | None = None) -> MalformedEventStreamError:
        open_contexts = [context.kind.name for context in self._stack]
        logger.debug("Malformed event stream: %s (open: %s)", message, open_contexts)
        return MalformedEventStreamError(message, event=event, open_contexts=open_contexts)

    def _trim_trailing_whitespace(self) -> None:
        while self._output:
            trimmed = self._output[-1].rstrip()
            if trimmed:
                self._output[-1] = trimmed
                return
            self._output.pop()

    def _top(self) -> Optional[_OpenContext]:
        return self._stack[-1] if self._stack else None

    def _in_suppressed_context(self) -> bool:
        top = self._top()
        return top is not None and top.suppress

    # ------------------------------------------------------------------
    # Start / End
    # ------------------------------------------------------------------

    def _handle_start(self, event: BlockStart | InlineStart) -> None:
        kind = event.kind
        expected = BlockKind if isinstance(event, BlockStart) else InlineKind
        if not isinstance(kind, expected):
            raise self._malformed(f"{type(event).__name__} carries {type(kind).__name__}", event)

        if self._in_suppressed_context():
            self._push(kind, suppress=True)
            return
        if isinstance(kind, BlockKind):
            self._prev_char = ""

        opener = self._openers.get(type(kind), self._open_tagged)
        opener(kind)

    def _handle_end(self, event: BlockEnd | InlineEnd) -> None:
        kind = event.kind
        expected = BlockKind if isinstance(event, BlockEnd) else InlineKind
        if not isinstance(kind, expected):
            raise self._malformed(f"{type(event).__name__} carries {type(kind).__name__}", event)
        top = self._top()
        if top is None:
            raise self._malformed(f"{type(event).__name__}({kind.name}) with no open context", event)
        if not top.kind.matches(kind):
            raise self._malformed(f"{type(event).__name__}({kind.name}) does not close {top.kind.name}", event)

        self._stack.pop()
        if top.suppress:
            return
        closer = self._closers.get(type(top.kind), self._close_tagged)
        closer(top)
        if isinstance(kind, BlockKind):
            self._prev_char = ""

    def _open_tagged(self, kind: Kind) -> None:
        spec = tag_for(kind, self.dialect, with_language=self.options.code_block_language)
        raw_tag = None
        if spec.rule.raw_content:
            match = _CLOSING_TAG_NAME.search(spec.close)
            raw_tag = match.group(1) if match else None
        self._emit(spec.open)
        self._push(
            kind,
            close=spec.close,
            raw_tag=raw_tag,
            code=isinstance(kind, (CodeBlock, InlineCode)),
            suppress=spec.rule.suppress_content,
        )

    def _close_tagged(self, context: _OpenContext) -> None:
        self._emit(context.close)

    def _open_paragraph(self, kind: Paragraph) -> None:
        spec = tag_for(kind, self.dialect)
        if self._suppress_paragraph_break:
            # First paragraph of a list item or footnote continues the marker's line
            self._suppress_paragraph_break = False
        else:
            self._emit(spec.open)
        self._push(kind, close=spec.close)

    def _open_list_item(self, kind: ListItem) -> None:
        spec = tag_for(kind, self.dialect)
        self._emit(spec.open)
        self._push(kind, close=spec.close if spec.rule.explicit_item_close else "")
        self._suppress_paragraph_break = True

    def _close_list_item(self, context: _OpenContext) -> None:
        self._trim_trailing_whitespace()
        self._emit(context.close)

    def _open_strikethrough(self, kind: Strikethrough) -> None:
        if self.options.strikethrough:
            self._open_tagged(kind)
        else:
            self._push(kind)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _open_table_part(self, kind: Kind) -> None:
        if not self.options.tables:
            self._open_table_passthrough(kind)
            return
        if isinstance(kind, Table):
            self._table_body_open = False
        elif isinstance(kind, TableRow) and not self._table_body_open:
            self._emit(self.profile.table_body_open)
            self._table_body_open = True
        self._open_tagged(kind)

    def _open_table_passthrough(self, kind: Kind) -> None:
        close = ""
        if isinstance(kind, Table):
            self._emit("\n")
            close = "\n"
        elif isinstance(kind, (TableHead, TableRow)):
            self._emit("\n")
            self._table_column = 0
            close = " |"
        elif isinstance(kind, TableCell):
            self._emit("| " if self._table_column == 0 else " | ")
            self._table_column += 1
        self._push(kind, close=close)

    def _close_table_head(self, context: _OpenContext) -> None:
        self._emit(context.close)
        if not self.options.tables:
            self._emit("\n|" + "---|" * self._table_column)

    def _close_table(self, context: _OpenContext) -> None:
        if self.options.tables and self._table_body_open:
            self._emit(self.profile.table_body_close)
            self._table_body_open = False
        self._emit(context.close)

    # ------------------------------------------------------------------
    # Footnotes
    # ------------------------------------------------------------------

    def _open_footnote_definition(self, kind: FootnoteDefinition) -> None:
        if not self.options.footnotes:
            self._emit("\n" + escape_bbcode(f"[^{kind.identifier}]: ", self.dialect))
            self._push(kind, close="\n")
            self._suppress_paragraph_break = True
            return

        number = self._footnotes.number_for(kind.identifier)
        spec = tag_for(kind, self.dialect, marker=footnote_marker(number))
        saved_output = self._output
        self._output = []
        self._emit(spec.open)
        self._push(kind, close=spec.close, saved_output=saved_output, footnote_number=number)
        self._suppress_paragraph_break = True

    def _close_footnote_definition(self, context: _OpenContext) -> None:
        self._emit(context.close)
        if context.saved_output is None or context.footnote_number is None:
            return
        rendered = "".join(self._output).strip()
        self._output = context.saved_output
        self._footnotes.add_definition(context.footnote_number, rendered)

    def _handle_footnote_reference(self, event: FootnoteReference) -> None:
        if self._in_suppressed_context():
            return
        if self.options.footnotes:
            number = self._footnotes.number_for(event.identifier)
            self._emit(self.profile.footnote_reference.format(marker=footnote_marker(number)))
        else:
            self._emit(escape_bbcode(f"[^{event.identifier}]", self.dialect))
        self._prev_char = "]"

    # ------------------------------------------------------------------
    # Leaf events
    # ------------------------------------------------------------------

    def _handle_text(self, event: Text) -> None:
        content = event.content
        if not content or self._in_suppressed_context():
            return
        if self._summary is not None:
            self._summary.append(content)
            return

        top = self._top()
        if top is not None and top.raw_tag:
            self._emit(neutralize_closing_tag(content, top.raw_tag))
            return

        if self.options.smart_punctuation and not any(context.code for context in self._stack):
            content = smarten_punctuation(content, self._prev_char)
        self._prev_char = content[-1]
        self._emit(escape_bbcode(content, self.dialect))

    def _handle_line_break(self, event: LineBreak | None = None) -> None:
        if self._in_suppressed_context():
            return
        if self._summary is not None:
            self._summary.append(" ")
            return
        self._emit(self.profile.line_break)
        self._prev_char = "\n"

    def _handle_soft_break(self, event: SoftBreak) -> None:
        if self._in_suppressed_context():
            return
        if self._summary is not None:
            self._summary.append(" ")
            return
        self._emit(self.profile.soft_break)
        self._prev_char = " "

    def _handle_thematic_break(self, event: ThematicBreak) -> None:
        self._emit(self.profile.horizontal_rule)
        self._prev_char = ""

    def _handle_task_marker(self, event: TaskMarker) -> None:
        if not self.options.tasklists or self._in_suppressed_context():
            return
        self._emit((TASK_CHECKED if event.checked else TASK_UNCHECKED) + NO_BREAK_SPACE)
        self._prev_char = NO_BREAK_SPACE

    # ------------------------------------------------------------------
    # Raw HTML
    # ------------------------------------------------------------------

    def _handle_html(self, event: Html) -> None:
        if self._in_suppressed_context():
            return
        if event.block:
            for line in event.content.splitlines():
                self._html_fragment(line, block=True)
        else:
            self._html_fragment(event.content, block=False)

    def _html_fragment(self, raw: str, block: bool) -> None:
        fragment = raw.strip()
        if not fragment:
            return
        lowered = fragment.lower()

        if self._summary is not None:
            summary_end = _SUMMARY_CLOSE.search(fragment)
            if summary_end is None:
                self._summary.append(_HTML_TAG.sub("", fragment))
                return
            end = summary_end.start()
            self._summary.append(_HTML_TAG.sub("", fragment[:end]))
            self._finish_summary()
            close_at = fragment.find(">", end)
            self._html_remainder(fragment[close_at + 1 :] if close_at != -1 else "", block)
            return

        if lowered.startswith("<!"):
            logger.debug("Dropping HTML comment: %s", fragment)
            return

        mapped = self.profile.html_tags.get(lowered)
        if mapped is not None:
            self._emit(mapped)
            return

        if _BR_TAG.match(fragment):
            self._handle_line_break()
            return

        details = _DETAILS_OPEN.match(fragment)
        if details is not None:
            if self.profile.spoiler is not None:
                self._emit(self.profile.spoiler.open)
            else:
                logger.warning("%s does not support <details>; rendering its content inline", self.dialect)
            self._html_remainder(fragment[details.end() :], block)
            return

        details_end = _DETAILS_CLOSE.match(fragment)
        if details_end is not None:
            if self.profile.spoiler is not None:
                self._emit(self.profile.spoiler.close)
            self._html_remainder(fragment[details_end.end() :], block)
            return

        summary = _SUMMARY_OPEN.match(fragment)
        if summary is not None:
            self._summary = []
            self._html_remainder(fragment[summary.end() :], block)
            return

        if lowered == "</summary>":
            return

        if lowered.startswith("<"):
            logger.warning("Unrecognised HTML tag: %s", fragment)
        if block:
            self._emit(escape_bbcode(fragment, self.dialect) + "\n")
        else:
            self._emit(escape_bbcode(raw, self.dialect))

    def _html_remainder(self, rest: str, block: bool) -> None:
        if rest.strip():
            self._html_fragment(rest, block)

    def _finish_summary(self) -> None:
        title = html.unescape(" ".join("".join(self._summary or []).split()))
        self._summary = None
        if self.profile.spoiler is not None:
            self._emit(escape_bbcode_attribute(title, self.dialect) + self.profile.spoiler.title_end)
        elif title:
            strong = tag_for(Strong(), self.dialect)
            self._emit(f"\n{strong.open}{escape_bbcode(title, self.dialect)}{strong.close}\n")


__all__ = ["BBCodeRenderer"]
