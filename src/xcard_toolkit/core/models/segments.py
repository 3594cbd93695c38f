"""
Module: segments

Purpose:
    Content segments produced by the segmenter - an ordered stream of
    literal text spans and resolved image references, in document order.

Key Classes:
    - TextSegment: Literal text between/around markers
    - ImageSegment: Resolved reference to an entry of the image list

Dependencies:
    - dataclasses (std)

Used By:
    - layout.segmenter: Produces segments
    - layout.paginator: Consumes segments
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class TextSegment:
    """
    Literal text span.

    Attributes:
        value: Raw text, exactly as it appears in the content string
            (including any unresolved marker text)
    """

    kind: ClassVar[str] = "text"

    value: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True, slots=True)
class ImageSegment:
    """
    Resolved image reference.

    Attributes:
        image_index: 0-based index into the image list
            (the marker number minus one)

    Example:
        >>> ImageSegment(image_index=0)  # from "[image1]"
        ImageSegment(image_index=0)
    """

    kind: ClassVar[str] = "image"

    image_index: int

    def __post_init__(self) -> None:
        """Validate index on construction."""
        if self.image_index < 0:
            raise ValueError(f"image_index must be >= 0: {self.image_index}")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "image_index": self.image_index}


ContentSegment = Union[TextSegment, ImageSegment]
