"""
Module: layout.segmenter

Purpose:
    Split raw content into text spans and image references using the
    inline ``[image N]`` marker syntax, and keep marker numbers and the
    image list consistent when either changes.

Key Functions:
    - segment(): Content -> ordered ContentSegments
    - reconcile_markers(): Renumber markers and rebuild the image list
    - insert_image(): Add an image with a marker at a cursor position
    - remove_image(): Drop an image and its markers

Dependencies:
    - re (std)
    - xcard_toolkit.core.models: TextSegment, ImageSegment

Used By:
    - layout.paginator: Segments content before packing
    - cli: Reconciles markers before pagination
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Sequence, Tuple

from xcard_toolkit.core.models import ContentSegment, ImageSegment, TextSegment

from .config import MAX_IMAGES

logger = logging.getLogger(__name__)

# "[image3]" or "[image 3]"; N is 1-based
MARKER_PATTERN = re.compile(r"\[image ?(\d+)\]")
MARKER_TEMPLATE = "[image{number}]"


def format_marker(number: int) -> str:
    """Canonical marker text for a 1-based image number."""
    return MARKER_TEMPLATE.format(number=number)


def segment(content: str, image_count: int) -> List[ContentSegment]:
    """
    Split content into text and image segments.

    Markers whose number is outside ``1..image_count`` are not resolved
    and stay part of the surrounding text. Empty text spans are omitted.

    Args:
        content: Raw content string
        image_count: Number of images currently available

    Returns:
        Segments in document order

    Example:
        >>> segment("Hi [image1] there [image9]", 1)
        [TextSegment(value='Hi '), ImageSegment(image_index=0),
         TextSegment(value=' there [image9]')]
    """
    segments: List[ContentSegment] = []
    last_end = 0

    for match in MARKER_PATTERN.finditer(content):
        number = int(match.group(1))
        if not 1 <= number <= image_count:
            continue
        if match.start() > last_end:
            segments.append(TextSegment(content[last_end:match.start()]))
        segments.append(ImageSegment(number - 1))
        last_end = match.end()

    if last_end < len(content):
        segments.append(TextSegment(content[last_end:]))

    return segments


def reconcile_markers(
    content: str,
    images: Sequence[Any],
) -> Tuple[str, List[Any]]:
    """
    Make marker numbers and the image list mutually consistent.

    Surviving markers (those pointing at an existing image) are
    renumbered 1..k in order of appearance and the image list is rebuilt
    in that order. Out-of-range markers are removed from the text; images
    no marker refers to are dropped. Running it on its own output is a
    no-op.

    Args:
        content: Raw content string
        images: Current image list (opaque references)

    Returns:
        (content, images) - unchanged values when already consistent
    """
    new_images = list(images)
    # Removing a stale marker can splice its neighbours into a new marker
    changed = True
    while changed:
        content, new_images, changed = _reconcile_pass(content, new_images)
    return content, new_images


def _reconcile_pass(content: str, images: List[Any]) -> Tuple[str, List[Any], bool]:
    matches = list(MARKER_PATTERN.finditer(content))
    valid = [m for m in matches if 1 <= int(m.group(1)) <= len(images)]
    new_images = [images[int(m.group(1)) - 1] for m in valid]

    needs_sync = (
        len(valid) != len(matches)
        or len(new_images) != len(images)
        or any(int(m.group(1)) != i + 1 for i, m in enumerate(valid))
    )
    if not needs_sync:
        return content, images, False

    parts: List[str] = []
    last_end = 0
    marker_number = 0
    for match in matches:
        parts.append(content[last_end:match.start()])
        if 1 <= int(match.group(1)) <= len(images):
            marker_number += 1
            parts.append(format_marker(marker_number))
        last_end = match.end()
    parts.append(content[last_end:])

    logger.debug(
        f"Reconciled markers: {len(matches)} found, {len(valid)} kept, "
        f"{len(images)} -> {len(new_images)} images"
    )
    return "".join(parts), new_images, True


def insert_image(
    content: str,
    images: Sequence[Any],
    image: Any,
    position: Optional[int] = None,
) -> Tuple[str, List[Any]]:
    """
    Insert a marker for a new image at ``position`` and append the image.

    Args:
        content: Raw content string
        images: Current image list
        image: New image reference
        position: Cursor offset in ``content`` (None = end)

    Returns:
        Reconciled (content, images). Unchanged when MAX_IMAGES is reached.
    """
    if len(images) >= MAX_IMAGES:
        logger.warning(f"Image limit reached ({MAX_IMAGES}); ignoring new image")
        return content, list(images)

    pos = len(content) if position is None else max(0, min(position, len(content)))
    marker = format_marker(len(images) + 1)
    new_content = content[:pos] + marker + content[pos:]
    return reconcile_markers(new_content, [*images, image])


def remove_image(
    content: str,
    images: Sequence[Any],
    index: int,
) -> Tuple[str, List[Any]]:
    """
    Remove the image at 0-based ``index`` and every marker pointing at it.

    Raises:
        IndexError: If index is out of range
    """
    if not 0 <= index < len(images):
        raise IndexError(f"image index out of range: {index}")

    removed_number = index + 1

    def _shift(match: re.Match[str]) -> str:
        number = int(match.group(1))
        if number == removed_number:
            return ""
        if removed_number < number <= len(images):
            return format_marker(number - 1)
        return match.group(0)

    new_content = MARKER_PATTERN.sub(_shift, content)
    new_images = [img for i, img in enumerate(images) if i != index]
    return reconcile_markers(new_content, new_images)
