"""
Module: output.surface

Purpose:
    Abstract interface for the document/rendering surface the catalog
    builder draws on. The builder never touches document internals; it
    only uses the capabilities declared here, so any backend (in-memory
    model, PDF, a desktop-publishing bridge) can be substituted.

Key Classes:
    - RenderSurface: Abstract base class for surfaces
    - Document: Handle for one document (master + ordered pages)
    - Page: Ordered container of regions
    - SurfaceError: Exception raised when a surface cannot honour a call

Dependencies:
    - core.models: Bounds, Region, RegionRole, Justification

Used By:
    - output.memory: In-memory implementation
    - catalog.builder: Catalog construction
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set

from image_catalog.core.models import (
    Bounds,
    Justification,
    Region,
    RegionRole,
    VerticalJustification,
)


class SurfaceError(Exception):
    """A surface could not perform the requested operation."""
    pass


@dataclass
class Page:
    """
    Ordered container of regions.

    The master page has ``index`` None; document pages are 0-indexed.

    Attributes:
        index: Page position in the document, or None for the master
        regions: Regions owned by this page, in creation order
        overridden: Ids of master regions this page has its own copy of
    """

    index: Optional[int]
    regions: List[Region] = field(default_factory=list)
    overridden: Set[int] = field(default_factory=set)

    @property
    def is_master(self) -> bool:
        return self.index is None

    @property
    def number(self) -> Optional[int]:
        """1-indexed page number as printed in the footer."""
        return None if self.index is None else self.index + 1


@dataclass
class Document:
    """
    Handle for one document.

    Page regions are also kept in a per-role registry in creation order,
    so looking regions up by role never scans the whole document.

    Attributes:
        doc_id: Surface-assigned identifier
        page_width: Page width in page units
        page_height: Page height in page units
        unit_pt: Points per page unit
        facing_pages: Whether pages are laid out as spreads
        master: Master page holding template regions
        pages: Document pages in order
    """

    doc_id: int
    page_width: float
    page_height: float
    unit_pt: float
    facing_pages: bool = True
    master: Page = field(default_factory=lambda: Page(index=None))
    pages: List[Page] = field(default_factory=list)
    registry: Dict[RegionRole, List[Region]] = field(default_factory=dict)
    next_region_id: int = 0

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def allocate_id(self) -> int:
        region_id = self.next_region_id
        self.next_region_id += 1
        return region_id


class RenderSurface(ABC):
    """
    Abstract document/rendering surface.

    Coordinates are page units with y growing downward. Implementations
    raise SurfaceError when an operation cannot be honoured (missing or
    unreadable image, wrong region kind, unknown page).
    """

    @abstractmethod
    def create_document(
        self,
        page_width: Optional[float] = None,
        page_height: Optional[float] = None,
        unit_pt: Optional[float] = None,
    ) -> Document:
        """Create an empty document (master page only, no pages)."""

    @abstractmethod
    def set_page_count(self, doc: Document, count: int) -> None:
        """Grow or shrink the document to exactly ``count`` pages."""

    @abstractmethod
    def set_facing_pages(self, doc: Document, facing: bool) -> None:
        """Turn spreads on or off."""

    @abstractmethod
    def add_region(
        self,
        doc: Document,
        target: Page,
        bounds: Bounds,
        role: RegionRole,
        initial_content: Optional[str] = None,
        *,
        justification: Justification = Justification.LEFT,
        vertical_justification: VerticalJustification = VerticalJustification.CENTER,
        allow_overrides: bool = False,
    ) -> Region:
        """Add a region to the master or a page and return its handle."""

    @abstractmethod
    def override_regions_for_page(self, doc: Document, page: Page) -> List[Region]:
        """
        Give ``page`` its own copy of every overridable master region.

        Returns:
            The copies made, in master order
        """

    @abstractmethod
    def find_regions_by_role(self, doc: Document, role: RegionRole) -> List[Region]:
        """Page regions with a role, in page order then reading order."""

    @abstractmethod
    def place_image_in_frame(self, frame: Region, path: Path) -> None:
        """Place an image file into a frame region."""

    @abstractmethod
    def fit_proportionally(self, frame: Region) -> None:
        """Fit placed content into its frame, preserving aspect ratio."""

    @abstractmethod
    def set_region_text(self, region: Region, text: str) -> None:
        """Replace the text content of a region."""

    @abstractmethod
    def set_justification(self, region: Region, alignment: Justification) -> None:
        """Set horizontal text alignment of a region."""
