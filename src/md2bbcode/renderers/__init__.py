#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that fold Markdown event streams into output markup."""

from md2bbcode.renderers.base import BaseRenderer
from md2bbcode.renderers.bbcode import BBCodeRenderer

__all__ = ["BaseRenderer", "BBCodeRenderer"]
