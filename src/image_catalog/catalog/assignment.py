"""
Module: catalog.assignment

Purpose:
    Explicit positional pairing of images with frame/label regions.
    Image i goes to frame i and label i; the three sequences must already
    be in the same order (page order, then reading order).

Key Functions:
    - assign(): Validate lengths and build the pairing

Key Classes:
    - Assignment: One image with its frame and label

Dependencies:
    - core.models: CatalogImage, Region, RegionRole

Used By:
    - catalog.builder: Image and label passes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from image_catalog.core.models import CatalogImage, Region, RegionRole


@dataclass(frozen=True)
class Assignment:
    """
    One image paired with its frame and caption (immutable).

    Attributes:
        index: Position in the catalog (0-indexed)
        image: Image to place
        frame: imageFrame region receiving the image
        label: imageLabel region receiving the caption
    """

    index: int
    image: CatalogImage
    frame: Region
    label: Region

    @property
    def page_index(self) -> int:
        return self.frame.page_index


def assign(
    images: Sequence[CatalogImage],
    frames: Sequence[Region],
    labels: Sequence[Region],
) -> tuple[Assignment, ...]:
    """
    Pair images with frames and labels by position.

    Requires ``len(images) <= len(frames) == len(labels)``. Frames and
    labels past the last image are left out of the result untouched.

    Args:
        images: Images in catalog order
        frames: imageFrame regions in page then reading order
        labels: imageLabel regions in the same order

    Returns:
        One Assignment per image, in order

    Raises:
        ValueError: If lengths are inconsistent, a region has the wrong
            role, or a frame and its label sit on different pages
    """
    if len(frames) != len(labels):
        raise ValueError(f"Frame/label count mismatch: {len(frames)} frames, {len(labels)} labels")
    if len(images) > len(frames):
        raise ValueError(f"Not enough frames: {len(images)} images, {len(frames)} frames")

    assignments = []
    for i, image in enumerate(images):
        frame, label = frames[i], labels[i]
        if frame.role is not RegionRole.IMAGE_FRAME:
            raise ValueError(f"Region at {i} is a {frame.role.value}, expected imageFrame")
        if label.role is not RegionRole.IMAGE_LABEL:
            raise ValueError(f"Region at {i} is a {label.role.value}, expected imageLabel")
        if frame.page_index != label.page_index:
            raise ValueError(
                f"Frame and label {i} are on different pages "
                f"({frame.page_index} vs {label.page_index})"
            )
        assignments.append(Assignment(index=i, image=image, frame=frame, label=label))
    return tuple(assignments)
