"""
Module: layout.units

Purpose:
    Turn a text span into an ordered stream of packable units:
    sentence-like chunks no wider than a width budget, separated by
    explicit paragraph-break units.

Key Functions:
    - iter_units(): Lazy unit stream for a text span
    - unitize(): List form of iter_units()
    - split_sentences(): Sentence-like chunks of one paragraph
    - split_long_unit(): Subdivide a chunk wider than the budget

Algorithm:
    1. Normalize line endings, trim, split into paragraphs
    2. Split paragraphs at sentence-terminal punctuation
    3. Emit PARAGRAPH_BREAK between paragraphs
    4. Subdivide over-wide chunks: by words when the chunk has spaces,
       otherwise by width with a preference for ending on punctuation

Dependencies:
    - layout.width: estimate_width, char_width

Used By:
    - layout.paginator: Unit stream for packing
"""

from __future__ import annotations

import re
from typing import Iterator, List

from .width import char_width, estimate_width

PARAGRAPH_BREAK = "\n"

_PARAGRAPH_SPLIT = re.compile(r"\n+")
# A run of non-terminal text with its trailing terminals, or a bare
# run of terminals (only possible at the start of a paragraph)
_SENTENCE = re.compile(r"[^。．！？!?.]+[。．！？!?.]*|[。．！？!?.]+")
_BREAK_MARK = re.compile(r"[，。、；：！？!?.\s]")

# A punctuation break must land past this share of the slice
MIN_BREAK_RATIO = 0.4


def split_sentences(paragraph: str) -> List[str]:
    """
    Split a paragraph into trimmed sentence-like chunks.

    Example:
        >>> split_sentences("Hello world. How are you? Fine")
        ['Hello world.', 'How are you?', 'Fine']
    """
    chunks = [c.strip() for c in _SENTENCE.findall(paragraph)]
    chunks = [c for c in chunks if c]
    return chunks or [paragraph]


def _cut_end(text: str, start: int, max_width: float) -> int:
    """
    Offset where a slice starting at ``start`` reaches ``max_width``.

    Always advances by at least one character.
    """
    end = start
    width = 0.0
    while end < len(text):
        width += char_width(text[end])
        if width > max_width:
            break
        end += 1
    return max(end, start + 1)


def _split_words(unit: str, max_width: float) -> List[str]:
    result: List[str] = []
    current = ""
    for word in unit.split():
        candidate = f"{current} {word}" if current else word
        if estimate_width(candidate) <= max_width:
            current = candidate
            continue
        if current:
            result.append(current)
        if estimate_width(word) > max_width:
            # Hard cut; ignores grapheme clusters
            start = 0
            while start < len(word):
                end = _cut_end(word, start, max_width)
                result.append(word[start:end])
                start = end
            current = ""
        else:
            current = word
    if current:
        result.append(current)
    return result


def _split_by_width(unit: str, max_width: float) -> List[str]:
    result: List[str] = []
    start = 0
    while start < len(unit):
        end = _cut_end(unit, start, max_width)
        if end < len(unit):
            piece = unit[start:end]
            last_mark = -1
            for i in range(len(piece) - 1, -1, -1):
                if _BREAK_MARK.match(piece[i]):
                    last_mark = i
                    break
            if last_mark > (end - start) * MIN_BREAK_RATIO:
                end = start + last_mark + 1
        result.append(unit[start:end])
        start = end
    return result


def split_long_unit(unit: str, max_width: float) -> List[str]:
    """
    Subdivide ``unit`` into pieces no wider than ``max_width``.

    Units that already fit are returned as a single piece. Units with
    spaces are packed word by word; words that are still too wide are cut
    at the width budget. Units without spaces are cut at the width budget,
    backing off to the last punctuation mark when it lies past 40% of
    the slice.

    Args:
        unit: Text chunk
        max_width: Width budget in character units

    Returns:
        Ordered, non-empty pieces
    """
    if estimate_width(unit) <= max_width:
        return [unit]
    if " " in unit:
        return _split_words(unit, max_width)
    return _split_by_width(unit, max_width)


def iter_units(text: str, max_unit_width: float) -> Iterator[str]:
    """
    Yield packable units for a text span.

    Yields sentence-derived chunks no wider than ``max_unit_width`` and
    PARAGRAPH_BREAK between paragraphs (never first or last).
    """
    clean = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not clean:
        return

    paragraphs = [p.strip() for p in _PARAGRAPH_SPLIT.split(clean)]
    paragraphs = [p for p in paragraphs if p]

    for idx, paragraph in enumerate(paragraphs):
        for sentence in split_sentences(paragraph):
            yield from split_long_unit(sentence, max_unit_width)
        if idx != len(paragraphs) - 1:
            yield PARAGRAPH_BREAK


def unitize(text: str, max_unit_width: float) -> List[str]:
    """List of units for ``text``; see iter_units()."""
    return list(iter_units(text, max_unit_width))
