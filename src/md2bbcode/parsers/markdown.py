#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/parsers/markdown.py
"""Markdown to event stream parser.

This module turns Markdown text into the flat event stream consumed by the
BBCode renderer, using mistune to build the token tree. The tree is walked
with an explicit work stack rather than recursion, and events are produced
lazily as the caller iterates.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Union

import mistune

from md2bbcode.events import (
    BlockEnd,
    BlockQuote,
    BlockStart,
    CodeBlock,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Html,
    Image,
    InlineCode,
    InlineEnd,
    InlineStart,
    LineBreak,
    Link,
    List,
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
    wrap_block,
    wrap_inline,
)
from md2bbcode.exceptions import ParsingError
from md2bbcode.options.markdown import MarkdownParserOptions
from md2bbcode.utils.footnotes import normalize_footnote_label

logger = logging.getLogger(__name__)

Token = dict[str, Any]
WorkItem = Union[Token, MarkdownEvent]


def _attrs(token: Token) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


def _children(token: Token) -> list[Token]:
    children = token.get("children", [])
    return [child for child in children if isinstance(child, dict)] if isinstance(children, list) else []


def _plain_text(tokens: list[Token]) -> str:
    """Concatenate the text of a token subtree, ignoring markup."""
    parts: list[str] = []
    pending = list(reversed(tokens))
    while pending:
        token = pending.pop()
        if token.get("type") in ("text", "codespan"):
            parts.append(token.get("raw", ""))
        elif token.get("type") in ("softbreak", "linebreak"):
            parts.append(" ")
        pending.extend(reversed(_children(token)))
    return "".join(parts)


class MarkdownEventSource:
    """Produce a Markdown event stream from text.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Which GFM extensions to recognize

    Examples
    --------
        >>> source = MarkdownEventSource()
        >>> [type(e).__name__ for e in source.iter_events("**hi**")]
        ['BlockStart', 'InlineStart', 'Text', 'InlineEnd', 'BlockEnd']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the event source with parser options."""
        self.options = options or MarkdownParserOptions()
        self._handlers: dict[str, Callable[[Token], list[WorkItem]]] = {
            # Block-level tokens
            "paragraph": self._expand_paragraph,
            "block_text": self._expand_paragraph,
            "heading": self._expand_heading,
            "block_code": self._expand_code_block,
            "block_quote": self._expand_block_quote,
            "list": self._expand_list,
            "list_item": self._expand_list_item,
            "task_list_item": self._expand_list_item,
            "table": self._expand_table,
            "table_head": self._expand_table_head,
            "table_body": self._expand_children,
            "table_row": self._expand_table_row,
            "table_cell": self._expand_table_cell,
            "thematic_break": lambda token: [ThematicBreak()],
            "block_html": self._expand_block_html,
            "blank_line": lambda token: [],
            "footnotes": self._expand_children,
            "footnote_item": self._expand_footnote_item,
            # Inline tokens
            "text": lambda token: [Text(token.get("raw", ""))] if token.get("raw") else [],
            "emphasis": lambda token: self._wrap_inline(Emphasis(), token),
            "strong": lambda token: self._wrap_inline(Strong(), token),
            "strikethrough": lambda token: self._wrap_inline(Strikethrough(), token),
            "codespan": self._expand_codespan,
            "link": self._expand_link,
            "image": self._expand_image,
            "linebreak": self._expand_linebreak,
            "softbreak": lambda token: [SoftBreak()],
            "inline_html": lambda token: [Html(token.get("raw", ""))],
            "footnote_ref": self._expand_footnote_ref,
        }

    def _create_markdown(self) -> mistune.Markdown:
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        # Token tree only; rendering is done by the BBCode renderer
        return mistune.create_markdown(plugins=plugins, renderer=None)

    def parse_tokens(self, text: str) -> list[Token]:
        """Parse Markdown into mistune's token tree.

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown = self._create_markdown()
        try:
            tokens, _state = markdown.parse(text)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="mistune", original_error=e) from e
        if not isinstance(tokens, list):
            raise ParsingError(f"Unexpected token tree of type {type(tokens).__name__}", parsing_stage="mistune")
        return tokens

    def iter_events(self, text: str) -> Iterator[MarkdownEvent]:
        """Yield the events of a Markdown document in document order.

        Parsing happens when iteration starts.

        Parameters
        ----------
        text : str
            Markdown source

        Yields
        ------
        MarkdownEvent
            Balanced Start/End pairs around content events

        Raises
        ------
        ParsingError
            If the Markdown cannot be parsed

        """
        pending: list[WorkItem] = list(reversed(self.parse_tokens(text)))
        while pending:
            item = pending.pop()
            if isinstance(item, MarkdownEvent):
                yield item
                continue
            pending.extend(reversed(self._expand(item)))

    def _expand(self, token: Token) -> list[WorkItem]:
        token_type = token.get("type", "")
        handler = self._handlers.get(token_type)
        if handler is not None:
            return handler(token)

        logger.debug("Unhandled mistune token %r; keeping its text", token_type)
        if "raw" in token:
            return [Text(token["raw"])] if token["raw"] else []
        return list(_children(token))

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _expand_children(self, token: Token) -> list[WorkItem]:
        return list(_children(token))

    def _expand_paragraph(self, token: Token) -> list[WorkItem]:
        return list(wrap_block(Paragraph(), _children(token)))

    def _expand_heading(self, token: Token) -> list[WorkItem]:
        level = _attrs(token).get("level", 1)
        level = min(max(int(level), 1), 6)
        return list(wrap_block(Heading(level=level), _children(token)))

    def _expand_code_block(self, token: Token) -> list[WorkItem]:
        info = (_attrs(token).get("info") or "").strip()
        language = info.split()[0] if info else None
        raw = token.get("raw", "")
        return list(wrap_block(CodeBlock(language=language), [Text(raw)] if raw else []))

    def _expand_block_quote(self, token: Token) -> list[WorkItem]:
        return list(wrap_block(BlockQuote(), _children(token)))

    def _expand_list(self, token: Token) -> list[WorkItem]:
        attrs = _attrs(token)
        kind = List(ordered=bool(attrs.get("ordered", False)), start=int(attrs.get("start", 1) or 1))
        return list(wrap_block(kind, _children(token)))

    def _expand_list_item(self, token: Token) -> list[WorkItem]:
        children = _children(token)
        attrs = _attrs(token)
        if token.get("type") != "task_list_item" or "checked" not in attrs:
            return list(wrap_block(ListItem(), children))

        # The checkbox belongs at the start of the item's first paragraph
        marker = TaskMarker(checked=bool(attrs["checked"]))
        items: list[WorkItem] = [BlockStart(ListItem())]
        if children and children[0].get("type") in ("paragraph", "block_text"):
            items.extend(wrap_block(Paragraph(), [marker, *_children(children[0])]))
            items.extend(children[1:])
        else:
            items.append(marker)
            items.extend(children)
        items.append(BlockEnd(ListItem()))
        return items

    def _expand_table(self, token: Token) -> list[WorkItem]:
        return list(wrap_block(Table(), _children(token)))

    def _expand_table_head(self, token: Token) -> list[WorkItem]:
        return list(wrap_block(TableHead(), _children(token)))

    def _expand_table_row(self, token: Token) -> list[WorkItem]:
        return list(wrap_block(TableRow(), _children(token)))

    def _expand_table_cell(self, token: Token) -> list[WorkItem]:
        header = bool(_attrs(token).get("head", False))
        return list(wrap_block(TableCell(header=header), _children(token)))

    def _expand_block_html(self, token: Token) -> list[WorkItem]:
        raw = token.get("raw", "")
        return [Html(raw, block=True)] if raw else []

    def _expand_footnote_item(self, token: Token) -> list[WorkItem]:
        attrs = _attrs(token)
        # mistune changes the label's case between releases
        identifier = normalize_footnote_label(str(attrs.get("key", attrs.get("label", ""))))
        return list(wrap_block(FootnoteDefinition(identifier=identifier), _children(token)))

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    @staticmethod
    def _wrap_inline(kind: Any, token: Token) -> list[WorkItem]:
        return list(wrap_inline(kind, _children(token)))

    def _expand_codespan(self, token: Token) -> list[WorkItem]:
        return list(wrap_inline(InlineCode(), [Text(token.get("raw", ""))]))

    def _expand_link(self, token: Token) -> list[WorkItem]:
        attrs = _attrs(token)
        link = Link(url=attrs.get("url", ""), title=attrs.get("title"))
        # The end only needs to name the kind
        return [InlineStart(link), *_children(token), InlineEnd(Link())]

    def _expand_image(self, token: Token) -> list[WorkItem]:
        attrs = _attrs(token)
        image = Image(url=attrs.get("url", ""), alt=_plain_text(_children(token)), title=attrs.get("title"))
        return [InlineStart(image), InlineEnd(image)]

    def _expand_linebreak(self, token: Token) -> list[WorkItem]:
        return [SoftBreak() if _attrs(token).get("soft") else LineBreak()]

    def _expand_footnote_ref(self, token: Token) -> list[WorkItem]:
        attrs = _attrs(token)
        identifier = token.get("raw") or attrs.get("label") or attrs.get("key") or ""
        return [FootnoteReference(identifier=normalize_footnote_label(str(identifier)))]


__all__ = ["MarkdownEventSource"]
