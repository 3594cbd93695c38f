"""
Module: layout.paginator

Purpose:
    Pack segmented content into bounded-height pages.
    Text is packed unit by unit; images that do not fit are sliced
    across page boundaries.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    Greedy, single forward pass, written as a fold over the event
    stream (text units and image segments) with an immutable
    accumulator of (finished pages, current page items, pending break):
    1. Merge each text unit into the trailing text item of the page
    2. If the estimated page height overflows, start a new page and
       place the unit alone; subdivide units that overflow an empty page
    3. Place images whole when they fit; otherwise fill the page with a
       slice and continue the rest of the image on following pages

Dependencies:
    - layout.segmenter: segment
    - layout.units: iter_units, split_long_unit
    - layout.heights: Height estimation
    - layout.config: PaginationConstraints

Used By:
    - cli: Page plan output
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Any, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from xcard_toolkit.core.models import (
    ContentSegment,
    ImageDimensions,
    ImageItem,
    ImageSegment,
    Page,
    PageItem,
    TextItem,
    TextSegment,
)

from .config import PaginationConstraints
from .heights import content_height, image_full_height, media_gap_before, page_content_height
from .segmenter import segment
from .units import PARAGRAPH_BREAK, iter_units, split_long_unit
from .width import estimate_width

logger = logging.getLogger(__name__)

_Event = Union[str, ImageSegment]


class _State(NamedTuple):
    """Accumulator threaded through the fold."""

    pages: Tuple[Tuple[PageItem, ...], ...]
    items: Tuple[PageItem, ...]
    pending_break: bool


@dataclass(frozen=True)
class _Run:
    """Read-only inputs of one pagination run."""

    images: Sequence[Any]
    image_dims: Mapping[int, ImageDimensions]
    constraints: PaginationConstraints

    def fits(self, items: Sequence[PageItem]) -> bool:
        return page_content_height(items, self.constraints) <= self.constraints.max_page_height


def paginate(
    content: Optional[str],
    images: Sequence[Any],
    image_dims: Optional[Mapping[int, ImageDimensions]] = None,
    constraints: Optional[PaginationConstraints] = None,
) -> List[Page]:
    """
    Split content and images into pages.

    Never raises for valid constraints and always returns at least one
    page (a single empty page for empty content).

    Args:
        content: Raw content with ``[image N]`` markers
        images: Image list (opaque references)
        image_dims: Natural size per 0-based image index; missing entries
            use a small default height
        constraints: Page budget (default: 3:4 card)

    Returns:
        Pages in reading order, indexed from 0

    Example:
        >>> pages = paginate("Hello world. [image1] Goodbye.", ["a.png"],
        ...                  {0: ImageDimensions(800, 400)})
        >>> [type(i).__name__ for i in pages[0].items]
        ['TextItem', 'ImageItem', 'TextItem']
    """
    constraints = constraints or PaginationConstraints()
    run = _Run(
        images=images,
        image_dims=image_dims or {},
        constraints=constraints,
    )

    segments = segment(content or "", len(images))
    events = _events(segments, constraints.max_unit_width)
    state = reduce(lambda acc, event: _step(acc, event, run), events, _State((), (), False))
    state = _flush(state)

    pages = [Page(index=i, items=items) for i, items in enumerate(state.pages)]
    if not pages:
        pages = [Page(index=0)]

    logger.info(f"Paginated {len(segments)} segments onto {len(pages)} pages")
    return pages


def _events(segments: Sequence[ContentSegment], max_unit_width: float) -> Iterator[_Event]:
    for seg in segments:
        if isinstance(seg, TextSegment):
            yield from iter_units(seg.value, max_unit_width)
        else:
            yield seg


def _step(state: _State, event: _Event, run: _Run) -> _State:
    if isinstance(event, ImageSegment):
        return _place_image(state, event, run)
    return _place_text(state, event, run)


def _flush(state: _State) -> _State:
    if not state.items:
        return state._replace(pending_break=False)
    return _State(state.pages + (state.items,), (), False)


def _merge_text(items: Tuple[PageItem, ...], unit: str, pending_break: bool) -> Tuple[PageItem, ...]:
    """Append ``unit`` to the trailing text item, or as a new text item."""
    if items and isinstance(items[-1], TextItem):
        previous = items[-1].value
        if previous.endswith(PARAGRAPH_BREAK):
            separator = ""
        elif pending_break:
            separator = PARAGRAPH_BREAK
        else:
            separator = " "
        return items[:-1] + (TextItem(f"{previous}{separator}{unit}"),)
    return items + (TextItem(unit),)


def _place_text(state: _State, unit: str, run: _Run) -> _State:
    if unit == PARAGRAPH_BREAK:
        trailing_text = bool(state.items) and isinstance(state.items[-1], TextItem)
        return state._replace(pending_break=trailing_text)

    candidate = _merge_text(state.items, unit, state.pending_break)
    if run.fits(candidate):
        return _State(state.pages, candidate, False)

    if state.items:
        state = _flush(state)
        alone = (TextItem(unit),)
        if run.fits(alone):
            return _State(state.pages, alone, False)

    return _subdivide(state, unit, run)


def _subdivide(state: _State, unit: str, run: _Run) -> _State:
    """Place a unit that overflows an empty page as smaller pieces."""
    budget = run.constraints.subdivide_width
    logger.warning(
        f"Unit of width {estimate_width(unit):.1f} overflows an empty page; "
        f"subdividing at width {budget}"
    )
    pages, items = state.pages, state.items
    for piece in split_long_unit(unit, budget):
        candidate = items + (TextItem(piece),)
        if items and not run.fits(candidate):
            pages = pages + (items,)
            items = (TextItem(piece),)
        else:
            items = candidate
    return _State(pages, items, False)


def _place_image(state: _State, seg: ImageSegment, run: _Run) -> _State:
    constraints = run.constraints
    ref = run.images[seg.image_index]
    dims = run.image_dims.get(seg.image_index)
    full_height = image_full_height(dims, constraints.content_width)
    content_max = constraints.content_max_height

    pages, items = state.pages, state.items
    remaining = full_height
    clip_top = 0

    while remaining > 0:
        used = content_height(items, constraints.max_chars_per_line, constraints.language)
        available = content_max - used - media_gap_before(items)
        if available <= 0 and items:
            pages = pages + (items,)
            items = ()
            continue

        if available > 0:
            slice_height = min(available, remaining)
        else:
            logger.warning(
                f"No content room on page {len(pages)}; placing remaining "
                f"{remaining}px of image {seg.image_index + 1} in one piece"
            )
            slice_height = remaining

        if slice_height == full_height:
            item = ImageItem(ref=ref, image_index=seg.image_index, full_height=full_height)
        else:
            item = ImageItem(
                ref=ref,
                image_index=seg.image_index,
                full_height=full_height,
                clip_top=clip_top,
                clip_height=slice_height,
            )
            logger.debug(
                f"Image {seg.image_index + 1}: slice [{clip_top}, {clip_top + slice_height}) "
                f"of {full_height}px on page {len(pages)}"
            )
        items = items + (item,)
        clip_top += slice_height
        remaining -= slice_height
        if remaining > 0:
            pages = pages + (items,)
            items = ()

    return _State(pages, items, False)
