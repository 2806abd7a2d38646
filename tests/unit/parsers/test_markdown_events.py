#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the mistune-backed Markdown event source.

Tests cover:
- Block structure (paragraphs, headings, lists, quotes, code, rules)
- Inline structure (emphasis, links, images, code spans, breaks)
- GFM extensions and their parser switches
- Raw HTML
- Error wrapping and lazy parsing

"""

import pytest

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
    InlineEnd,
    InlineStart,
    LineBreak,
    Link,
    List,
    ListItem,
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
from md2bbcode.exceptions import ParsingError
from md2bbcode.options import MarkdownParserOptions
from md2bbcode.parsers.markdown import MarkdownEventSource


def events_of(markdown: str, **options: bool):
    return list(MarkdownEventSource(MarkdownParserOptions(**options)).iter_events(markdown))


def kinds_of(events):
    return [event.kind for event in events if isinstance(event, (BlockStart, InlineStart))]


def text_of(events) -> str:
    return "".join(event.content for event in events if isinstance(event, Text))


def assert_balanced(events) -> None:
    stack = []
    for event in events:
        if isinstance(event, (BlockStart, InlineStart)):
            stack.append(event.kind)
        elif isinstance(event, (BlockEnd, InlineEnd)):
            assert stack and stack.pop().matches(event.kind)
    assert stack == []


@pytest.mark.unit
class TestBlockEvents:
    """Tests for block-level structure."""

    def test_paragraph_with_strong(self) -> None:
        assert events_of("**hi**") == [
            BlockStart(Paragraph()),
            InlineStart(Strong()),
            Text("hi"),
            InlineEnd(Strong()),
            BlockEnd(Paragraph()),
        ]

    def test_heading_level(self) -> None:
        events = events_of("### Title")
        assert events[0] == BlockStart(Heading(level=3))
        assert text_of(events) == "Title"

    def test_unordered_list(self) -> None:
        events = events_of("- a\n- b")
        assert events[0] == BlockStart(List(ordered=False, start=1))
        assert kinds_of(events).count(ListItem()) == 2
        assert text_of(events) == "ab"
        assert_balanced(events)

    def test_ordered_list_start(self) -> None:
        events = events_of("3. a\n4. b")
        assert events[0] == BlockStart(List(ordered=True, start=3))

    def test_block_quote(self) -> None:
        events = events_of("> quoted")
        assert kinds_of(events) == [BlockQuote(), Paragraph()]

    def test_fenced_code_language(self) -> None:
        events = events_of("```python extra\nprint(1)\n```")
        code = CodeBlock(language="python")
        assert events == [BlockStart(code), Text("print(1)\n"), BlockEnd(code)]

    def test_code_without_language(self) -> None:
        events = events_of("```\nx\n```")
        assert events[0] == BlockStart(CodeBlock(language=None))

    def test_thematic_break(self) -> None:
        events = events_of("a\n\n---\n\nb")
        assert ThematicBreak() in events

    def test_block_html(self) -> None:
        events = events_of("<details>\n<summary>Title</summary>\n\nHidden\n\n</details>")
        html_events = [event for event in events if isinstance(event, Html)]
        assert html_events and all(event.block for event in html_events)
        assert "<summary>Title</summary>" in html_events[0].content


@pytest.mark.unit
class TestInlineEvents:
    """Tests for inline structure."""

    def test_emphasis(self) -> None:
        assert kinds_of(events_of("*a*")) == [Paragraph(), Emphasis()]

    def test_link_attributes(self) -> None:
        events = events_of('[text](https://example.com "Title")')
        assert events[1] == InlineStart(Link(url="https://example.com", title="Title"))
        assert InlineEnd(Link()) in events
        assert_balanced(events)

    def test_image_alt_from_children(self) -> None:
        events = events_of("![a *pic*](https://example.com/p.png)")
        image = Image(url="https://example.com/p.png", alt="a pic")
        assert events[1:3] == [InlineStart(image), InlineEnd(image)]

    def test_code_span(self) -> None:
        events = events_of("`x`")
        assert Text("x") in events
        assert_balanced(events)

    def test_soft_and_hard_breaks(self) -> None:
        assert SoftBreak() in events_of("a\nb")
        assert LineBreak() in events_of("a  \nb")

    def test_inline_html(self) -> None:
        events = events_of("x<sup>2</sup>")
        assert Html("<sup>") in events
        assert Html("</sup>") in events


@pytest.mark.unit
class TestExtensions:
    """Tests for GFM extensions and their switches."""

    def test_strikethrough(self) -> None:
        assert Strikethrough() in kinds_of(events_of("~~gone~~"))

    def test_strikethrough_disabled(self) -> None:
        events = events_of("~~gone~~", parse_strikethrough=False)
        assert Strikethrough() not in kinds_of(events)
        assert text_of(events) == "~~gone~~"

    def test_table(self) -> None:
        events = events_of("| a | b |\n|---|---|\n| 1 | 2 |")
        kinds = kinds_of(events)
        assert kinds[:2] == [Table(), TableHead()]
        assert kinds.count(TableCell(header=True)) == 2
        assert kinds.count(TableCell(header=False)) == 2
        assert kinds.count(TableRow()) == 1
        assert text_of(events) == "ab12"
        assert_balanced(events)

    def test_table_disabled(self) -> None:
        events = events_of("| a | b |\n|---|---|\n| 1 | 2 |", parse_tables=False)
        assert Table() not in kinds_of(events)

    def test_footnotes(self) -> None:
        events = events_of("Text[^note]\n\n[^note]: The note.")
        assert FootnoteReference("note") in events
        assert BlockStart(FootnoteDefinition(identifier="note")) in events
        assert_balanced(events)

    def test_footnote_labels_case_folded(self) -> None:
        events = events_of("Text[^Note]\n\n[^NOTE]: The note.")
        assert FootnoteReference("note") in events
        assert BlockStart(FootnoteDefinition(identifier="note")) in events

    def test_footnote_definitions_come_last(self) -> None:
        events = events_of("[^1]: First.\n\nText[^1]")
        definition = events.index(BlockStart(FootnoteDefinition(identifier="1")))
        assert events.index(FootnoteReference("1")) < definition

    def test_task_list(self) -> None:
        events = events_of("- [x] done\n- [ ] todo")
        assert events[:4] == [
            BlockStart(List(ordered=False, start=1)),
            BlockStart(ListItem()),
            BlockStart(Paragraph()),
            TaskMarker(checked=True),
        ]
        assert TaskMarker(checked=False) in events
        assert text_of(events) == "donetodo"
        assert_balanced(events)

    def test_task_list_disabled(self) -> None:
        events = events_of("- [x] done", parse_task_lists=False)
        assert not any(isinstance(event, TaskMarker) for event in events)
        assert text_of(events) == "[x] done"


@pytest.mark.unit
class TestEventSourceBehaviour:
    """Tests for laziness and error wrapping."""

    def test_iteration_is_lazy(self, monkeypatch) -> None:
        source = MarkdownEventSource()

        class _Broken:
            def parse(self, text):
                raise ValueError("boom")

        monkeypatch.setattr(source, "_create_markdown", lambda: _Broken())
        events = source.iter_events("text")
        with pytest.raises(ParsingError) as exc_info:
            next(events)
        assert exc_info.value.parsing_stage == "mistune"
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_empty_document(self) -> None:
        assert events_of("") == []

    def test_sample_document_is_balanced(self, sample_markdown: str) -> None:
        assert_balanced(events_of(sample_markdown))
