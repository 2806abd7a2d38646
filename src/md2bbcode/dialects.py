#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/dialects.py
"""BBCode dialect definitions and the tag table.

Each supported forum platform accepts a slightly different BBCode. This module
records, per dialect, the opening and closing markup of every block and inline
kind together with the structural rules the renderer needs (whether attribute
values are quoted, whether list items are closed explicitly, whether the forum
parses the tag's content).

Supported Dialects
------------------
- XenForo: ``[url=...]``, ``[list=1]`` with unclosed ``[*]`` items, ``[code]``
  whose content is not parsed, ``[size=...]``; stores posts as UCS-2.
- ProBoards: HTML-like tags (``[a href="..."]``, ``[ul]``/``[ol]``/``[li]``,
  ``[thead]``/``[tbody]``, ``[font size=...]``, ``[hr]``).

The table is checked for completeness when the module is imported: every kind
in :data:`md2bbcode.events.ALL_KINDS` must have an entry for every dialect.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from md2bbcode.constants import (
    FOOTNOTE_CLOSE,
    FOOTNOTE_OPEN,
    HEADING_FONT_SIZES,
    HORIZONTAL_RULE_FALLBACK,
    SUPPORTED_DIALECTS,
    BBCodeDialect,
)
from md2bbcode.events import ALL_KINDS, CodeBlock, FootnoteDefinition, Heading, Image, Kind, Link, List, TableCell
from md2bbcode.exceptions import MissingTagMappingError, UnknownDialectError
from md2bbcode.utils.escape import escape_bbcode_attribute, escape_bbcode_url

logger = logging.getLogger(__name__)

# Code fence languages are reduced to characters that cannot end the tag
_LANGUAGE_CHARS = re.compile(r"[^\w+#.-]")


@dataclass(frozen=True)
class TagRule:
    """Structural rules attached to a tag.

    Parameters
    ----------
    quoted_attribute : bool, default False
        Attribute values are wrapped in double quotes
    explicit_item_close : bool, default False
        The tag must be closed explicitly (``[li]...[/li]``) rather than being
        ended implicitly by the next item (``[*]``)
    raw_content : bool, default False
        The forum does not parse markup inside the tag, so its text content is
        emitted without escaping
    suppress_content : bool, default False
        The tag is self-contained and any text content is dropped (images,
        whose alt text is carried by the kind)

    """

    quoted_attribute: bool = False
    explicit_item_close: bool = False
    raw_content: bool = False
    suppress_content: bool = False


@dataclass(frozen=True)
class TagSpec:
    """Opening and closing markup of one kind in one dialect.

    ``open`` and ``close`` may be templates with ``{size}``, ``{url}``,
    ``{alt}``, ``{language}`` or ``{marker}`` placeholders while stored in the
    table; :func:`tag_for` always returns them filled in.
    """

    open: str
    close: str
    rule: TagRule = field(default_factory=TagRule)
    open_with_attribute: Optional[str] = None


@dataclass(frozen=True)
class SpoilerMarkup:
    """Markup used to turn ``<details>``/``<summary>`` into a spoiler."""

    open: str
    title_end: str
    close: str


@dataclass(frozen=True)
class DialectProfile:
    """Everything the renderer needs to know about one BBCode dialect.

    Parameters
    ----------
    name : {"xenforo", "proboards"}
        Dialect identifier
    tags : mapping of str to TagSpec
        Tag table keyed by :func:`table_key`
    horizontal_rule : str
        Markup for a thematic break
    footnote_reference : str
        Template for a footnote reference, with a ``{marker}`` placeholder
    table_body_open, table_body_close : str
        Markup around the body rows of a table (empty if the dialect has no
        separate table body)
    html_tags : mapping of str to str
        Lower-cased HTML tags with a direct BBCode equivalent
    spoiler : SpoilerMarkup or None
        Spoiler markup for ``<details>``, or None if the dialect has none
    ucs2_only : bool
        Whether the forum stores posts in a UCS-2 column

    """

    name: BBCodeDialect
    tags: Mapping[str, TagSpec]
    horizontal_rule: str
    footnote_reference: str
    table_body_open: str = ""
    table_body_close: str = ""
    line_break: str = "\n"
    soft_break: str = " "
    html_tags: Mapping[str, str] = field(default_factory=dict)
    spoiler: Optional[SpoilerMarkup] = None
    ucs2_only: bool = False


_INLINE_HTML_TAGS = {
    "<del>": "[s]",
    "</del>": "[/s]",
    "<s>": "[s]",
    "</s>": "[/s]",
    "<sup>": "[sup]",
    "</sup>": "[/sup]",
    "<sub>": "[sub]",
    "</sub>": "[/sub]",
    "<b>": "[b]",
    "</b>": "[/b]",
    "<strong>": "[b]",
    "</strong>": "[/b]",
    "<i>": "[i]",
    "</i>": "[/i]",
    "<em>": "[i]",
    "</em>": "[/i]",
    "<u>": "[u]",
    "</u>": "[/u]",
}

_FOOTNOTE_DEFINITION = TagSpec("\n{marker}: ", "\n")

_XENFORO_TAGS = {
    "Paragraph": TagSpec("\n", "\n"),
    "Heading": TagSpec(
        '\n[size="{size}"][b][u]',
        "[/u][/b][/size]\n",
        TagRule(quoted_attribute=True),
    ),
    "BlockQuote": TagSpec("[quote]", "[/quote]"),
    "CodeBlock": TagSpec(
        "[code]",
        "[/code]\n",
        TagRule(raw_content=True),
        open_with_attribute="[code={language}]",
    ),
    "List": TagSpec("[list]", "\n[/list]"),
    "OrderedList": TagSpec("[list=1]", "\n[/list]"),
    "ListItem": TagSpec("\n[*]", ""),
    "Table": TagSpec("[table]", "[/table]"),
    "TableHead": TagSpec("[tr]", "[/tr]"),
    "TableRow": TagSpec("[tr]", "[/tr]"),
    "TableCell": TagSpec("[td]", "[/td]"),
    "TableHeaderCell": TagSpec("[th]", "[/th]"),
    "FootnoteDefinition": _FOOTNOTE_DEFINITION,
    "Emphasis": TagSpec("[i]", "[/i]"),
    "Strong": TagSpec("[b]", "[/b]"),
    "Strikethrough": TagSpec("[s]", "[/s]"),
    "InlineCode": TagSpec("[font=Courier New]", "[/font]"),
    "Link": TagSpec("[url={url}]", "[/url]"),
    "Image": TagSpec("[img]{url}[/img]", "", TagRule(suppress_content=True)),
}

_PROBOARDS_TAGS = {
    "Paragraph": TagSpec("\n", "\n"),
    "Heading": TagSpec(
        '\n\n[font size="{size}"][b][u]',
        "[/u][/b][/font]\n\n",
        TagRule(quoted_attribute=True),
    ),
    "BlockQuote": TagSpec("[blockquote]", "[/blockquote]"),
    "CodeBlock": TagSpec("\n[pre]", "[/pre]\n"),
    "List": TagSpec("\n[ul]", "\n[/ul]"),
    "OrderedList": TagSpec("\n[ol]", "\n[/ol]"),
    "ListItem": TagSpec("\n[li]", "[/li]", TagRule(explicit_item_close=True)),
    "Table": TagSpec("[table]", "\n[/table]"),
    "TableHead": TagSpec("\n  [thead][tr]", "[/tr][/thead]"),
    "TableRow": TagSpec("[tr]", "[/tr]"),
    "TableCell": TagSpec("[td]", "[/td]"),
    "TableHeaderCell": TagSpec("[th]", "[/th]"),
    "FootnoteDefinition": _FOOTNOTE_DEFINITION,
    "Emphasis": TagSpec("[i]", "[/i]"),
    "Strong": TagSpec("[b]", "[/b]"),
    "Strikethrough": TagSpec("[s]", "[/s]"),
    "InlineCode": TagSpec("[tt]", "[/tt]"),
    "Link": TagSpec('[a href="{url}"]', "[/a]", TagRule(quoted_attribute=True)),
    "Image": TagSpec(
        '[img src="{url}" alt="{alt}"]',
        "",
        TagRule(quoted_attribute=True, suppress_content=True),
    ),
}

# Kinds whose attributes select between several table entries
_KEYS_BY_KIND: dict[type[Kind], tuple[str, ...]] = {
    List: ("List", "OrderedList"),
    TableCell: ("TableCell", "TableHeaderCell"),
}


def table_key(kind: Kind) -> str:
    """Return the tag table key for ``kind``.

    Examples
    --------
        >>> table_key(List(ordered=True))
        'OrderedList'
        >>> table_key(TableCell(header=False))
        'TableCell'

    """
    if isinstance(kind, List):
        return "OrderedList" if kind.ordered else "List"
    if isinstance(kind, TableCell):
        return "TableHeaderCell" if kind.header else "TableCell"
    return kind.name


def _check_complete(name: str, tags: Mapping[str, TagSpec]) -> Mapping[str, TagSpec]:
    for kind_type in ALL_KINDS:
        for key in _KEYS_BY_KIND.get(kind_type, (kind_type.__name__,)):
            if key not in tags:
                raise MissingTagMappingError(key, name)
    return MappingProxyType(dict(tags))


def _build_profiles() -> Mapping[str, DialectProfile]:
    xenforo = DialectProfile(
        name="xenforo",
        tags=_check_complete("xenforo", _XENFORO_TAGS),
        horizontal_rule="\n" + HORIZONTAL_RULE_FALLBACK + "\n",
        footnote_reference="{marker}",
        html_tags=MappingProxyType({**_INLINE_HTML_TAGS, "<blockquote>": "[quote]", "</blockquote>": "[/quote]"}),
        spoiler=SpoilerMarkup(open='\n[spoiler="', title_end='"]', close="[/spoiler]\n"),
        ucs2_only=True,
    )
    proboards = DialectProfile(
        name="proboards",
        tags=_check_complete("proboards", _PROBOARDS_TAGS),
        horizontal_rule="\n[hr]\n",
        footnote_reference="[sup]{marker}[/sup]",
        table_body_open="\n  [tbody]",
        table_body_close="\n  [/tbody]",
        html_tags=MappingProxyType(
            {**_INLINE_HTML_TAGS, "<blockquote>": "[blockquote]", "</blockquote>": "[/blockquote]"}
        ),
    )
    profiles = {"xenforo": xenforo, "proboards": proboards}
    for dialect in SUPPORTED_DIALECTS:
        if dialect not in profiles:
            raise MissingTagMappingError("*", dialect)
    return MappingProxyType(profiles)


DIALECTS: Mapping[str, DialectProfile] = _build_profiles()


def get_dialect(dialect: str) -> DialectProfile:
    """Return the profile of a supported dialect.

    Parameters
    ----------
    dialect : str
        Dialect name, case-insensitive

    Returns
    -------
    DialectProfile
        The dialect's tag table and markup

    Raises
    ------
    UnknownDialectError
        If the dialect is not supported

    """
    profile = DIALECTS.get(dialect.lower()) if isinstance(dialect, str) else None
    if profile is None:
        raise UnknownDialectError(str(dialect), SUPPORTED_DIALECTS)
    return profile


def footnote_marker(label: object) -> str:
    """Return the marker used for a footnote label or number.

    Examples
    --------
        >>> footnote_marker(3) == "\\u231c3\\u231d"
        True

    """
    return f"{FOOTNOTE_OPEN}{label}{FOOTNOTE_CLOSE}"


def _clean_language(language: str) -> str:
    return _LANGUAGE_CHARS.sub("", language.strip().split()[0]) if language.strip() else ""


def tag_for(
    kind: Kind,
    dialect: str,
    *,
    with_language: bool = False,
    marker: Optional[str] = None,
) -> TagSpec:
    """Look up the markup for ``kind`` in ``dialect``.

    Attribute placeholders are filled from the kind: heading sizes from the
    level, URLs (percent-encoded so they cannot end the tag) from links and
    images, and alt text (escaped) from images.

    Parameters
    ----------
    kind : Kind
        Block or inline kind
    dialect : str
        Dialect name
    with_language : bool, default False
        Use the attribute form of the code tag (``[code=python]``) when the
        kind is a code block with a language and the dialect allows it
    marker : str, optional
        Footnote marker for a footnote definition. Defaults to the marker
        built from the definition's own label.

    Returns
    -------
    TagSpec
        Filled-in opening and closing markup with the tag's rule

    Raises
    ------
    UnknownDialectError
        If the dialect is not supported

    Examples
    --------
        >>> from md2bbcode.events import Strong
        >>> tag_for(Strong(), "xenforo").open
        '[b]'
        >>> tag_for(Heading(level=2), "proboards").close
        '[/u][/b][/font]\\n\\n'
        >>> tag_for(Link(url="https://example.com"), "proboards").open
        '[a href="https://example.com"]'

    """
    profile = get_dialect(dialect)
    spec = profile.tags[table_key(kind)]
    rule = spec.rule
    opening = spec.open

    values: dict[str, object] = {}
    if isinstance(kind, Heading):
        values["size"] = HEADING_FONT_SIZES[kind.level]
    elif isinstance(kind, (Link, Image)):
        values["url"] = escape_bbcode_url(kind.url, quoted=rule.quoted_attribute)
        if isinstance(kind, Image):
            values["alt"] = escape_bbcode_attribute(kind.alt, profile.name)
    elif isinstance(kind, FootnoteDefinition):
        values["marker"] = marker if marker is not None else footnote_marker(kind.identifier)
    elif isinstance(kind, CodeBlock) and with_language and kind.language and spec.open_with_attribute:
        language = _clean_language(kind.language)
        if language:
            opening = spec.open_with_attribute
            values["language"] = language

    if values:
        opening = opening.format(**values)
    return TagSpec(open=opening, close=spec.close, rule=rule)


__all__ = [
    "TagRule",
    "TagSpec",
    "SpoilerMarkup",
    "DialectProfile",
    "DIALECTS",
    "get_dialect",
    "table_key",
    "tag_for",
    "footnote_marker",
]
