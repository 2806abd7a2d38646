#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Property-based tests for the BBCode renderer.

Tests cover:
- Well-formed event streams always render
- Dropping any Start or End event always fails
- Visible text does not depend on the dialect
- Disabled extensions never produce their tags

"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2bbcode.constants import ZERO_WIDTH_SPACE
from md2bbcode.events import (
    BlockEnd,
    BlockQuote,
    BlockStart,
    CodeBlock,
    Emphasis,
    Heading,
    InlineCode,
    InlineEnd,
    InlineStart,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Text,
    wrap_block,
    wrap_inline,
)
from md2bbcode.exceptions import MalformedEventStreamError
from md2bbcode.options import BBCodeRendererOptions
from md2bbcode.renderers.bbcode import BBCodeRenderer

# Tags as emitted by the renderer; escaped brackets carry a zero-width space and never match
_TAG = re.compile(r"\[[^\]" + ZERO_WIDTH_SPACE + r"]*\]")

words = st.text(alphabet="abcxyz ", min_size=1, max_size=8)


def _flatten(groups):
    return [event for group in groups for event in group]


text_events = words.map(lambda s: [Text(s)])
code_spans = words.map(lambda s: list(wrap_inline(InlineCode(), [Text(s)])))
inline_kinds = st.sampled_from([Strong(), Emphasis(), Strikethrough(), Link(url="https://example.com/x")])

inlines = st.recursive(
    st.one_of(text_events, code_spans),
    lambda children: st.tuples(inline_kinds, st.lists(children, min_size=1, max_size=3)).map(
        lambda pair: list(wrap_inline(pair[0], _flatten(pair[1])))
    ),
    max_leaves=8,
)
inline_runs = st.lists(inlines, min_size=1, max_size=4).map(_flatten)

paragraphs = inline_runs.map(lambda events: list(wrap_block(Paragraph(), events)))
headings = st.tuples(st.integers(min_value=1, max_value=6), inline_runs).map(
    lambda pair: list(wrap_block(Heading(level=pair[0]), pair[1]))
)
code_blocks = words.map(lambda s: list(wrap_block(CodeBlock(), [Text(s + "\n")])))


def _containers(children):
    quotes = st.lists(children, min_size=1, max_size=3).map(
        lambda groups: list(wrap_block(BlockQuote(), _flatten(groups)))
    )
    list_items = st.lists(children, min_size=1, max_size=2).map(
        lambda groups: list(wrap_block(ListItem(), _flatten(groups)))
    )
    lists = st.tuples(st.booleans(), st.lists(list_items, min_size=1, max_size=3)).map(
        lambda pair: list(wrap_block(List(ordered=pair[0]), _flatten(pair[1])))
    )
    return st.one_of(quotes, lists)


blocks = st.recursive(st.one_of(paragraphs, headings, code_blocks), _containers, max_leaves=6)
documents = st.lists(blocks, min_size=1, max_size=4).map(_flatten)

dialects = st.sampled_from(["xenforo", "proboards"])
flag_sets = st.builds(
    BBCodeRendererOptions,
    footnotes=st.booleans(),
    strikethrough=st.booleans(),
    smart_punctuation=st.booleans(),
    tables=st.booleans(),
    tasklists=st.booleans(),
    code_block_language=st.booleans(),
)


def _visible(output: str) -> str:
    return "".join(_TAG.sub("", output).split())


@pytest.mark.unit
@pytest.mark.fuzzing
class TestRendererProperties:
    """Property-based tests over generated event streams."""

    @given(documents, dialects, flag_sets)
    def test_well_formed_streams_render(self, events, dialect, options) -> None:
        output = BBCodeRenderer(dialect, options).render_to_string(events)
        assert output == output.strip()

    @given(documents, dialects, st.data())
    def test_dropping_a_start_or_end_fails(self, events, dialect, data) -> None:
        positions = [
            index
            for index, event in enumerate(events)
            if isinstance(event, (BlockStart, BlockEnd, InlineStart, InlineEnd))
        ]
        drop = data.draw(st.sampled_from(positions))
        broken = events[:drop] + events[drop + 1 :]
        with pytest.raises(MalformedEventStreamError):
            BBCodeRenderer(dialect).convert(broken)

    @given(documents)
    def test_visible_text_is_dialect_independent(self, events) -> None:
        xenforo = BBCodeRenderer("xenforo").render_to_string(events)
        proboards = BBCodeRenderer("proboards").render_to_string(events)
        expected = "".join("".join(event.content for event in events if isinstance(event, Text)).split())
        assert _visible(xenforo) == expected
        assert _visible(proboards) == expected

    @given(documents, dialects)
    def test_rendering_is_deterministic(self, events, dialect) -> None:
        renderer = BBCodeRenderer(dialect)
        assert renderer.render_to_string(events) == renderer.render_to_string(events)


def _cells(header: bool):
    return st.lists(words, min_size=1, max_size=4).map(
        lambda texts: _flatten(list(wrap_block(TableCell(header=header), [Text(t)])) for t in texts)
    )


tables = st.tuples(_cells(True), st.lists(_cells(False), max_size=3)).map(
    lambda pair: list(
        wrap_block(
            Table(),
            list(wrap_block(TableHead(), pair[0])) + _flatten(list(wrap_block(TableRow(), row)) for row in pair[1]),
        )
    )
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestDisabledExtensionProperties:
    """Disabled extensions never produce their markup."""

    @given(tables, dialects)
    def test_disabled_tables_have_no_table_tags(self, events, dialect) -> None:
        output = BBCodeRenderer(dialect).render_to_string(events)
        for tag in ("[table", "[tr", "[td", "[th", "[tbody", "[thead"):
            assert tag not in output

    @given(tables, dialects)
    def test_enabled_tables_are_wrapped(self, events, dialect) -> None:
        output = BBCodeRenderer(dialect, BBCodeRendererOptions(tables=True)).render_to_string(events)
        assert output.startswith("[table]")
        assert output.endswith("[/table]")

    @given(documents, dialects)
    def test_disabled_strikethrough_has_no_tags(self, events, dialect) -> None:
        output = BBCodeRenderer(dialect).render_to_string(events)
        assert "[s]" not in output
        assert "[/s]" not in output
