#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2bbcode.

This module centralizes literal types, default option values and the
typographic characters used by the conversion engine.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - Default values for renderer options
3. Glyphs - Characters emitted in place of markup the forums lack
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BBCodeDialect = Literal["xenforo", "proboards"]

SUPPORTED_DIALECTS: tuple[BBCodeDialect, ...] = ("xenforo", "proboards")

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_ENCODING_WARNINGS = False
DEFAULT_FOOTNOTES = False
DEFAULT_STRIKETHROUGH = False
DEFAULT_SMART_PUNCTUATION = False
DEFAULT_TABLES = False
DEFAULT_TASKLISTS = False
DEFAULT_CODE_BLOCK_LANGUAGE = False

# Heading levels 1-6 mapped onto forum font sizes
HEADING_FONT_SIZES: dict[int, int] = {1: 7, 2: 6, 3: 5, 4: 4, 5: 3, 6: 3}

# XenForo stores posts in UCS-2 columns; anything at or above this is unsafe
UCS2_LIMIT = 0xFFFE

# =============================================================================
# Glyphs
# =============================================================================

ZERO_WIDTH_SPACE = "\u200b"
NO_BREAK_SPACE = "\u00a0"

FOOTNOTE_OPEN = "\u231c"  # TOP LEFT CORNER
FOOTNOTE_CLOSE = "\u231d"  # TOP RIGHT CORNER

TASK_CHECKED = "\u2611"  # BALLOT BOX WITH CHECK
TASK_UNCHECKED = "\u2610"  # BALLOT BOX

HORIZONTAL_RULE_FALLBACK = "\u2501" * 32

EN_DASH = "\u2013"
EM_DASH = "\u2014"
ELLIPSIS = "\u2026"
LEFT_DOUBLE_QUOTE = "\u201c"
RIGHT_DOUBLE_QUOTE = "\u201d"
LEFT_SINGLE_QUOTE = "\u2018"
RIGHT_SINGLE_QUOTE = "\u2019"
