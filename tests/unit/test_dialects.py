#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the dialect tag table."""

import pytest

from md2bbcode.constants import SUPPORTED_DIALECTS
from md2bbcode.dialects import DIALECTS, TagRule, footnote_marker, get_dialect, table_key, tag_for
from md2bbcode.events import (
    ALL_KINDS,
    CodeBlock,
    FootnoteDefinition,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Strong,
    TableCell,
)
from md2bbcode.exceptions import UnknownDialectError


@pytest.mark.unit
class TestDialectProfiles:
    """Tests for the dialect registry."""

    def test_every_dialect_registered(self) -> None:
        assert set(DIALECTS) == set(SUPPORTED_DIALECTS)

    @pytest.mark.parametrize("dialect", SUPPORTED_DIALECTS)
    def test_every_kind_has_a_tag(self, dialect: str) -> None:
        for kind_type in ALL_KINDS:
            assert tag_for(kind_type(), dialect) is not None

    def test_get_dialect_case_insensitive(self) -> None:
        assert get_dialect("PROBOARDS").name == "proboards"

    def test_get_dialect_unknown(self) -> None:
        with pytest.raises(UnknownDialectError) as exc_info:
            get_dialect("smf")
        assert exc_info.value.dialect == "smf"
        assert "xenforo" in exc_info.value.message

    def test_only_xenforo_is_ucs2(self) -> None:
        assert get_dialect("xenforo").ucs2_only
        assert not get_dialect("proboards").ucs2_only

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            get_dialect("xenforo").tags["Strong"] = None  # type: ignore[index]


@pytest.mark.unit
class TestTagLookup:
    """Tests for table_key and tag_for."""

    def test_table_keys(self) -> None:
        assert table_key(List()) == "List"
        assert table_key(List(ordered=True)) == "OrderedList"
        assert table_key(TableCell(header=True)) == "TableHeaderCell"
        assert table_key(Strong()) == "Strong"

    @pytest.mark.parametrize("level,size", [(1, 7), (2, 6), (3, 5), (4, 4), (5, 3), (6, 3)])
    def test_heading_sizes(self, level: int, size: int) -> None:
        assert f'[size="{size}"]' in tag_for(Heading(level=level), "xenforo").open
        assert f'[font size="{size}"]' in tag_for(Heading(level=level), "proboards").open

    def test_list_items_closed_explicitly_on_proboards(self) -> None:
        assert tag_for(ListItem(), "proboards").rule.explicit_item_close
        assert not tag_for(ListItem(), "xenforo").rule.explicit_item_close

    def test_code_raw_only_on_xenforo(self) -> None:
        assert tag_for(CodeBlock(), "xenforo").rule.raw_content
        assert not tag_for(CodeBlock(), "proboards").rule.raw_content

    def test_code_language(self) -> None:
        kind = CodeBlock(language="c++ extra")
        assert tag_for(kind, "xenforo", with_language=True).open == "[code=c++]"
        assert tag_for(kind, "xenforo").open == "[code]"

    def test_code_language_stripped_of_tag_characters(self) -> None:
        assert tag_for(CodeBlock(language="py]x"), "xenforo", with_language=True).open == "[code=pyx]"

    def test_link_url_quoted_on_proboards(self) -> None:
        assert tag_for(Link(url='https://e.com/"x"'), "proboards").open == '[a href="https://e.com/%22x%22"]'

    def test_quoting_follows_the_rule(self) -> None:
        assert tag_for(Link(url="https://e.com"), "xenforo").rule == TagRule()
        assert tag_for(Link(url="https://e.com"), "proboards").rule == TagRule(quoted_attribute=True)
        assert tag_for(Link(url="https://e.com/a b"), "xenforo").open == "[url=https://e.com/a%20b]"

    def test_image_alt_escaped(self) -> None:
        spec = tag_for(Image(url="a.png", alt='say "hi"'), "proboards")
        assert spec.open == '[img src="a.png" alt="say \'hi\'"]'
        assert spec.rule.suppress_content

    def test_footnote_definition_marker(self) -> None:
        marker = footnote_marker(2)
        assert tag_for(FootnoteDefinition("n"), "xenforo", marker=marker).open == f"\n{marker}: "

    def test_footnote_marker_glyphs(self) -> None:
        assert footnote_marker(5) == "⌜5⌝"
