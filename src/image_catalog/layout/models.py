"""
Module: layout.models

Purpose:
    Data models produced by the layout engine.
    Immutable dataclasses for grid cells and the page template.

Key Classes:
    - Cell: One grid position with content and optional caption bounds
    - TemplateSpec: Complete set of regions replicated onto every page

Dependencies:
    - core.models: Bounds, RegionRole, RegionSpec

Used By:
    - layout.grid: Creates Cells
    - layout.template: Creates TemplateSpec
    - catalog.builder: Materializes TemplateSpec on a surface
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from image_catalog.core.models import Bounds, RegionRole, RegionSpec


@dataclass(frozen=True)
class Cell:
    """
    One grid position (immutable).

    Attributes:
        row: Row index, 0 = topmost
        col: Column index, 0 = leftmost
        cols: Number of columns in the grid (for reading-order index)
        footprint: Full cell rectangle
        content: Content rectangle (the whole footprint without captions)
        caption: Caption band directly below content, if requested

    Example:
        >>> cell.index  # row 1, col 2 in a 3-column grid
        5
    """

    row: int
    col: int
    cols: int
    footprint: Bounds
    content: Bounds
    caption: Optional[Bounds] = None

    @property
    def index(self) -> int:
        """Position in reading order (row-major, top-left first)."""
        return self.row * self.cols + self.col

    @property
    def has_caption(self) -> bool:
        return self.caption is not None


@dataclass(frozen=True)
class TemplateSpec:
    """
    Page template (immutable).

    Regions are ordered: header, column labels (left to right), footer,
    then one imageFrame/imageLabel pair per grid cell in reading order.

    Attributes:
        page_width: Page width in page units
        page_height: Page height in page units
        unit_pt: Points per page unit
        rows: Image grid rows
        cols: Image grid columns
        regions: All template regions
    """

    page_width: float
    page_height: float
    unit_pt: float
    rows: int
    cols: int
    regions: tuple[RegionSpec, ...]

    @property
    def frames_per_page(self) -> int:
        """Number of image frames on each page."""
        return self.rows * self.cols

    def regions_by_role(self, role: RegionRole) -> tuple[RegionSpec, ...]:
        """Template regions with the given role, in template order."""
        return tuple(r for r in self.regions if r.role is role)

    @property
    def overridable_regions(self) -> tuple[RegionSpec, ...]:
        return tuple(r for r in self.regions if r.allow_overrides)
