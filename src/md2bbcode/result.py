#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Result type returned by a BBCode conversion."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConversionResult:
    """Output of one successful conversion.

    Parameters
    ----------
    output : str
        BBCode markup, stripped of leading and trailing whitespace
    warnings : tuple of str, default ()
        Non-fatal problems found in the output, in document order

    """

    output: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        """Return True if the conversion produced any warning."""
        return bool(self.warnings)

    def __str__(self) -> str:
        return self.output
