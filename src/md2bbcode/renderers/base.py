#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2bbcode/renderers/base.py
"""Base classes for event stream renderers.

This module defines the abstract base class for renderers that fold a
Markdown event stream into output text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from md2bbcode.events import MarkdownEvent
from md2bbcode.exceptions import InvalidOptionsError
from md2bbcode.options.base import BaseRendererOptions
from md2bbcode.result import ConversionResult


class BaseRenderer(ABC):
    """Abstract base class for event stream renderers.

    Subclasses implement :meth:`convert`; string output is built on top of
    it.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def convert(self, events: Iterable[MarkdownEvent]) -> ConversionResult:
        """Consume ``events`` and return the rendered output with warnings.

        Parameters
        ----------
        events : iterable of MarkdownEvent
            Event stream, consumed once

        Returns
        -------
        ConversionResult
            Rendered text and warnings

        Raises
        ------
        MalformedEventStreamError
            If Start and End events do not balance

        """

    def render_to_string(self, events: Iterable[MarkdownEvent]) -> str:
        """Render ``events`` and return only the output text."""
        return self.convert(events).output

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
