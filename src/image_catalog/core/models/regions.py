"""
Module: regions

Purpose:
    Region roles, template region specs and the mutable document Region.

Key Classes:
    - RegionRole: Role tag carried by every region
    - Justification / VerticalJustification: Text alignment
    - FitMode: How placed content sits inside a frame
    - RegionSpec: Immutable template description of a region
    - Region: Addressable, mutable region in a document

Dependencies:
    - core.models.bounds: Bounds

Used By:
    - layout.template: Builds RegionSpecs
    - output surfaces: Create and mutate Regions
    - catalog.builder: Pairs frames and labels with images
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .bounds import Bounds


class RegionRole(str, Enum):
    """Role tag attached to a region."""

    HEADER = "header"
    FOOTER = "footer"
    COLUMN_LABEL = "columnLabel"
    IMAGE_FRAME = "imageFrame"
    IMAGE_LABEL = "imageLabel"


class Justification(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalJustification(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class FitMode(str, Enum):
    NONE = "none"
    PROPORTIONAL = "proportional"


# Footer placeholder, replaced with the page number at render time.
PAGE_NUMBER_MARKER = "\x18"


@dataclass(frozen=True)
class RegionSpec:
    """
    Template description of one region (immutable).

    Attributes:
        role: Role tag
        bounds: Placement on the page
        text: Initial text content (None for image frames)
        justification: Horizontal text alignment
        vertical_justification: Vertical text alignment
        allow_overrides: Whether each page gets its own editable copy
    """

    role: RegionRole
    bounds: Bounds
    text: Optional[str] = None
    justification: Justification = Justification.LEFT
    vertical_justification: VerticalJustification = VerticalJustification.CENTER
    allow_overrides: bool = False


@dataclass
class Region:
    """
    A placed region in a document (mutable).

    Regions on the master have ``page_index`` None. Per-page copies made by
    an override carry the index of their page and a reference back to the
    master region they were copied from.

    Attributes:
        region_id: Unique id within the document
        role: Role tag
        bounds: Placement on the page
        page_index: Owning page (0-indexed) or None for master regions
        text: Text content
        image_path: Placed image file, if any
        justification: Horizontal text alignment
        vertical_justification: Vertical text alignment
        fit: How placed content is fitted
        content_bounds: Fitted content rectangle once known
        allow_overrides: Whether pages get their own copy
        source_id: Master region id this copy was made from
    """

    region_id: int
    role: RegionRole
    bounds: Bounds
    page_index: Optional[int] = None
    text: Optional[str] = None
    image_path: Optional[Path] = None
    justification: Justification = Justification.LEFT
    vertical_justification: VerticalJustification = VerticalJustification.CENTER
    fit: FitMode = FitMode.NONE
    content_bounds: Optional[Bounds] = None
    allow_overrides: bool = False
    source_id: Optional[int] = None
    metadata: dict = field(default_factory=dict)

    @property
    def is_master(self) -> bool:
        return self.page_index is None

    @property
    def is_empty(self) -> bool:
        """True when neither an image nor text has been placed."""
        return self.image_path is None and not self.text

    def clear(self) -> None:
        """Remove placed content."""
        self.image_path = None
        self.text = None
        self.fit = FitMode.NONE
        self.content_bounds = None
