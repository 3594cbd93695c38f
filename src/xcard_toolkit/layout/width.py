"""
Module: layout.width

Purpose:
    Estimate the horizontal extent of a string in "character units"
    without font metrics. Full-width characters count as one unit,
    narrow (Latin-1) characters as roughly half.

Key Functions:
    - estimate_width(): Width of a string
    - char_width(): Width of a single character

Used By:
    - layout.units: Unit width budgets
    - layout.heights: Line counts
"""

from __future__ import annotations

WIDE_CHAR_WIDTH = 1.0
NARROW_CHAR_WIDTH = 0.53
# Highest code point treated as narrow
NARROW_MAX_CODEPOINT = 0xFF


def char_width(ch: str) -> float:
    """Estimated width of one character."""
    return WIDE_CHAR_WIDTH if ord(ch) > NARROW_MAX_CODEPOINT else NARROW_CHAR_WIDTH


def estimate_width(text: str) -> float:
    """
    Estimate rendered width of ``text`` in character units.

    Example:
        >>> estimate_width("ab你")
        2.06
    """
    return sum(char_width(ch) for ch in text)
