#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utilities for numbering footnotes and collecting their rendered bodies."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple


def normalize_footnote_label(label: str) -> str:
    """Return the matching key of a footnote label.

    Runs of whitespace collapse to one space and case is folded, so labels
    Markdown treats as the same footnote compare equal.

    Examples
    --------
        >>> normalize_footnote_label("My  NOTE")
        'my note'

    """
    return " ".join(label.split()).casefold()


@dataclass
class FootnoteNumbering:
    """Assign stable numbers to footnote labels and hold rendered definitions.

    Numbers follow the order in which labels are first seen, whether through a
    reference or a definition. Labels are matched case-insensitively, the way
    Markdown matches reference labels.

    Examples
    --------
        >>> notes = FootnoteNumbering()
        >>> notes.number_for("b"), notes.number_for("a"), notes.number_for("B")
        (1, 2, 1)

    """

    start: int = 1
    _counter: itertools.count = field(init=False, repr=False)
    _numbers: Dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _definitions: Dict[int, str] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the counter after dataclass initialization."""
        self._counter = itertools.count(self.start)

    def number_for(self, identifier: str) -> int:
        """Return the number of ``identifier``, assigning the next one if new."""
        key = normalize_footnote_label(identifier)
        if key not in self._numbers:
            self._numbers[key] = next(self._counter)
        return self._numbers[key]

    def add_definition(self, number: int, rendered: str) -> None:
        """Store the rendered body of footnote ``number``.

        A second definition for the same number replaces the first.
        """
        self._definitions[number] = rendered

    def iter_definitions(self) -> Iterator[Tuple[int, str]]:
        """Yield ``(number, rendered)`` pairs in number order."""
        for number in sorted(self._definitions):
            yield number, self._definitions[number]

    def __len__(self) -> int:
        return len(self._definitions)
