#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/events.py
"""Markdown event types consumed by the BBCode renderer.

A parsed Markdown document is represented as a flat, ordered stream of events
rather than a tree. Structural elements appear as a Start/End pair around
their content; leaf content (text, breaks, markers) appears as single events.

Kinds
-----
Block kinds describe structural containers:
    - Paragraph, Heading, BlockQuote, CodeBlock
    - List, ListItem, Table, TableHead, TableRow, TableCell
    - FootnoteDefinition

Inline kinds describe text formatting:
    - Emphasis, Strong, Strikethrough, InlineCode
    - Link, Image

Events
------
    - BlockStart / BlockEnd wrap a block kind
    - InlineStart / InlineEnd wrap an inline kind
    - Text, LineBreak, SoftBreak, ThematicBreak
    - FootnoteReference, TaskMarker, Html

Start and End events must nest like brackets. A matching End only needs to
name the same kind type as its Start; the renderer uses the attributes of the
Start it opened.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union


class Kind:
    """Base class for block and inline kinds."""

    @property
    def name(self) -> str:
        """Return the kind name used in tag lookups and diagnostics."""
        return type(self).__name__

    def matches(self, other: "Kind") -> bool:
        """Check whether ``other`` closes a context opened with this kind.

        Parameters
        ----------
        other : Kind
            Kind carried by an End event

        Returns
        -------
        bool
            True if both kinds are of the same type

        """
        return type(self) is type(other)


class BlockKind(Kind):
    """Base class for block-level kinds."""


class InlineKind(Kind):
    """Base class for inline kinds."""


# ---------------------------------------------------------------------------
# Block kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Paragraph(BlockKind):
    """Paragraph of inline content."""


@dataclass(frozen=True)
class Heading(BlockKind):
    """Heading (h1-h6).

    Parameters
    ----------
    level : int, default 1
        Heading level (1-6, where 1 is most important)

    """

    level: int = 1

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class BlockQuote(BlockKind):
    """Block quotation."""


@dataclass(frozen=True)
class CodeBlock(BlockKind):
    """Fenced or indented code block.

    Parameters
    ----------
    language : str or None, default None
        Language tag from the fence info string

    """

    language: Optional[str] = None


@dataclass(frozen=True)
class List(BlockKind):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default False
        Whether the list is numbered
    start : int, default 1
        First item number of an ordered list

    """

    ordered: bool = False
    start: int = 1


@dataclass(frozen=True)
class ListItem(BlockKind):
    """Single list item."""


@dataclass(frozen=True)
class Table(BlockKind):
    """GFM table."""


@dataclass(frozen=True)
class TableHead(BlockKind):
    """Header row of a table; contains header cells directly."""


@dataclass(frozen=True)
class TableRow(BlockKind):
    """Body row of a table."""


@dataclass(frozen=True)
class TableCell(BlockKind):
    """Table cell.

    Parameters
    ----------
    header : bool, default False
        Whether this is a header cell

    """

    header: bool = False


@dataclass(frozen=True)
class FootnoteDefinition(BlockKind):
    """Footnote definition body.

    Parameters
    ----------
    identifier : str, default ""
        Footnote label as written in the source (``[^label]``)

    """

    identifier: str = ""


# ---------------------------------------------------------------------------
# Inline kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Emphasis(InlineKind):
    """Emphasized (italic) text."""


@dataclass(frozen=True)
class Strong(InlineKind):
    """Strong (bold) text."""


@dataclass(frozen=True)
class Strikethrough(InlineKind):
    """Struck-through text (GFM extension)."""


@dataclass(frozen=True)
class InlineCode(InlineKind):
    """Inline code span."""


@dataclass(frozen=True)
class Link(InlineKind):
    """Hyperlink around inline content.

    Parameters
    ----------
    url : str, default ""
        Link destination
    title : str or None, default None
        Optional link title

    """

    url: str = ""
    title: Optional[str] = None


@dataclass(frozen=True)
class Image(InlineKind):
    """Image reference.

    Any Text events between the Start and End of an image are its alt text in
    source form; renderers use ``alt`` instead.

    Parameters
    ----------
    url : str, default ""
        Image source URL
    alt : str, default ""
        Alternative text
    title : str or None, default None
        Optional image title

    """

    url: str = ""
    alt: str = ""
    title: Optional[str] = None


BLOCK_KINDS: tuple[type[BlockKind], ...] = (
    Paragraph,
    Heading,
    BlockQuote,
    CodeBlock,
    List,
    ListItem,
    Table,
    TableHead,
    TableRow,
    TableCell,
    FootnoteDefinition,
)

INLINE_KINDS: tuple[type[InlineKind], ...] = (
    Emphasis,
    Strong,
    Strikethrough,
    InlineCode,
    Link,
    Image,
)

ALL_KINDS: tuple[type[Kind], ...] = BLOCK_KINDS + INLINE_KINDS


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class MarkdownEvent:
    """Base class for all events in a Markdown event stream."""


@dataclass(frozen=True)
class BlockStart(MarkdownEvent):
    """Opening of a block context."""

    kind: BlockKind


@dataclass(frozen=True)
class BlockEnd(MarkdownEvent):
    """Closing of a block context."""

    kind: BlockKind


@dataclass(frozen=True)
class InlineStart(MarkdownEvent):
    """Opening of an inline context."""

    kind: InlineKind


@dataclass(frozen=True)
class InlineEnd(MarkdownEvent):
    """Closing of an inline context."""

    kind: InlineKind


@dataclass(frozen=True)
class Text(MarkdownEvent):
    """Literal text content."""

    content: str


@dataclass(frozen=True)
class LineBreak(MarkdownEvent):
    """Hard line break."""


@dataclass(frozen=True)
class SoftBreak(MarkdownEvent):
    """Soft line break (a newline inside a paragraph in the source)."""


@dataclass(frozen=True)
class ThematicBreak(MarkdownEvent):
    """Horizontal rule."""


@dataclass(frozen=True)
class FootnoteReference(MarkdownEvent):
    """Reference to a footnote definition."""

    identifier: str


@dataclass(frozen=True)
class TaskMarker(MarkdownEvent):
    """Checkbox at the start of a task list item."""

    checked: bool = False


@dataclass(frozen=True)
class Html(MarkdownEvent):
    """Raw HTML, inline or block.

    Parameters
    ----------
    content : str
        HTML source
    block : bool, default False
        Whether this came from an HTML block rather than inline HTML

    """

    content: str
    block: bool = False


StartEvent = Union[BlockStart, InlineStart]
EndEvent = Union[BlockEnd, InlineEnd]


def wrap_block(kind: BlockKind, children: Iterable[MarkdownEvent]) -> Iterator[MarkdownEvent]:
    """Yield ``children`` surrounded by a BlockStart/BlockEnd pair.

    Parameters
    ----------
    kind : BlockKind
        Kind of the block
    children : iterable of MarkdownEvent
        Events inside the block

    Examples
    --------
        >>> list(wrap_block(Paragraph(), [Text("hi")]))
        [BlockStart(kind=Paragraph()), Text(content='hi'), BlockEnd(kind=Paragraph())]

    """
    yield BlockStart(kind)
    yield from children
    yield BlockEnd(kind)


def wrap_inline(kind: InlineKind, children: Iterable[MarkdownEvent]) -> Iterator[MarkdownEvent]:
    """Yield ``children`` surrounded by an InlineStart/InlineEnd pair."""
    yield InlineStart(kind)
    yield from children
    yield InlineEnd(kind)


__all__ = [
    "Kind",
    "BlockKind",
    "InlineKind",
    "Paragraph",
    "Heading",
    "BlockQuote",
    "CodeBlock",
    "List",
    "ListItem",
    "Table",
    "TableHead",
    "TableRow",
    "TableCell",
    "FootnoteDefinition",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "InlineCode",
    "Link",
    "Image",
    "BLOCK_KINDS",
    "INLINE_KINDS",
    "ALL_KINDS",
    "MarkdownEvent",
    "BlockStart",
    "BlockEnd",
    "InlineStart",
    "InlineEnd",
    "Text",
    "LineBreak",
    "SoftBreak",
    "ThematicBreak",
    "FootnoteReference",
    "TaskMarker",
    "Html",
    "StartEvent",
    "EndEvent",
    "wrap_block",
    "wrap_inline",
]
