"""
Module: dimensions

Purpose:
    Natural (intrinsic) pixel size of a decoded image.

Key Classes:
    - ImageDimensions: width/height pair with serialization helpers

Dependencies:
    - dataclasses (std)

Used By:
    - images.provider: Produces dimensions from decoded images
    - layout.heights: Scales images to the content width
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ImageDimensions:
    """
    Natural image size in pixels.

    Dimensions are not validated on construction: a decoder may report
    zero-sized images, and the height estimator treats those the same as
    an image that has not been decoded yet.

    Attributes:
        width: Natural width in pixels
        height: Natural height in pixels

    Example:
        >>> dims = ImageDimensions(800, 400)
        >>> dims.aspect
        0.5
    """

    width: int
    height: int

    @property
    def is_known(self) -> bool:
        """True when both sides are positive and usable for scaling."""
        return self.width > 0 and self.height > 0

    @property
    def aspect(self) -> float:
        """Height divided by width (0.0 when unknown)."""
        if not self.is_known:
            return 0.0
        return self.height / self.width

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> ImageDimensions:
        return cls(width=int(data["width"]), height=int(data["height"]))
