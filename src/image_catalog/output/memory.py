"""
Module: output.memory

Purpose:
    In-memory implementation of RenderSurface. Holds the whole document
    model (master, pages, regions, role registry) without drawing
    anything. Used directly as a test double and as the base class of the
    PDF surface.

Key Classes:
    - InMemorySurface: Document model backed by plain Python objects

Dependencies:
    - output.surface: RenderSurface, Document, Page, SurfaceError
    - layout.grid: fit_proportionally

Used By:
    - output.pdf: PdfSurface subclasses it
    - tests: Fake renderer for builder scenarios
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

from image_catalog.core.models import (
    Bounds,
    FitMode,
    Justification,
    Region,
    RegionRole,
    VerticalJustification,
)
from image_catalog.layout.config import DEFAULT_PAGE_HEIGHT, DEFAULT_PAGE_WIDTH, DEFAULT_UNIT_PT
from image_catalog.layout.grid import fit_proportionally

from .surface import Document, Page, RenderSurface, SurfaceError

logger = logging.getLogger(__name__)


class InMemorySurface(RenderSurface):
    """
    Surface that only records what would be drawn.

    Attributes:
        documents: Every document created, in creation order

    Example:
        >>> surface = InMemorySurface()
        >>> doc = surface.create_document()
        >>> surface.set_page_count(doc, 2)
        >>> doc.page_count
        2
    """

    def __init__(
        self,
        page_width: float = DEFAULT_PAGE_WIDTH,
        page_height: float = DEFAULT_PAGE_HEIGHT,
        unit_pt: float = DEFAULT_UNIT_PT,
    ) -> None:
        self._page_width = page_width
        self._page_height = page_height
        self._unit_pt = unit_pt
        self.documents: List[Document] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Documents and pages
    # ─────────────────────────────────────────────────────────────────────────

    def create_document(
        self,
        page_width: Optional[float] = None,
        page_height: Optional[float] = None,
        unit_pt: Optional[float] = None,
    ) -> Document:
        doc = Document(
            doc_id=len(self.documents),
            page_width=page_width if page_width is not None else self._page_width,
            page_height=page_height if page_height is not None else self._page_height,
            unit_pt=unit_pt if unit_pt is not None else self._unit_pt,
        )
        self.documents.append(doc)
        logger.debug(f"Created document {doc.doc_id} ({doc.page_width:g}x{doc.page_height:g})")
        return doc

    def set_page_count(self, doc: Document, count: int) -> None:
        if count < 0:
            raise SurfaceError(f"Page count must be non-negative: {count}")

        while len(doc.pages) > count:
            removed = doc.pages.pop()
            for role, regions in doc.registry.items():
                doc.registry[role] = [r for r in regions if r.page_index != removed.index]
        while len(doc.pages) < count:
            doc.pages.append(Page(index=len(doc.pages)))

    def set_facing_pages(self, doc: Document, facing: bool) -> None:
        doc.facing_pages = facing

    # ─────────────────────────────────────────────────────────────────────────
    # Regions
    # ─────────────────────────────────────────────────────────────────────────

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
        self._check_page(doc, target)
        region = Region(
            region_id=doc.allocate_id(),
            role=role,
            bounds=bounds,
            page_index=target.index,
            text=initial_content,
            justification=justification,
            vertical_justification=vertical_justification,
            allow_overrides=allow_overrides,
        )
        target.regions.append(region)
        if not target.is_master:
            self._register(doc, region)
        return region

    def override_regions_for_page(self, doc: Document, page: Page) -> List[Region]:
        self._check_page(doc, page)
        if page.is_master:
            raise SurfaceError("Master regions cannot be overridden on the master itself")

        copies = []
        for master_region in doc.master.regions:
            if not master_region.allow_overrides:
                continue
            if master_region.region_id in page.overridden:
                continue
            copy = replace(
                master_region,
                region_id=doc.allocate_id(),
                page_index=page.index,
                source_id=master_region.region_id,
                metadata=dict(master_region.metadata),
            )
            page.regions.append(copy)
            page.overridden.add(master_region.region_id)
            self._register(doc, copy)
            copies.append(copy)

        logger.debug(f"Overrode {len(copies)} master regions on page {page.number}")
        return copies

    def find_regions_by_role(self, doc: Document, role: RegionRole) -> List[Region]:
        # Registry lists are in creation order; sort restores page order
        # when pages were overridden out of sequence.
        regions = doc.registry.get(role, [])
        return sorted(regions, key=lambda r: (r.page_index, r.region_id))

    def master_regions_for_page(self, doc: Document, page: Page) -> List[Region]:
        """Master regions shown on a page that has no copy of them."""
        return [r for r in doc.master.regions if r.region_id not in page.overridden]

    # ─────────────────────────────────────────────────────────────────────────
    # Content
    # ─────────────────────────────────────────────────────────────────────────

    def place_image_in_frame(self, frame: Region, path: Path) -> None:
        if frame.role is not RegionRole.IMAGE_FRAME:
            raise SurfaceError(f"Region {frame.region_id} is a {frame.role.value}, not an image frame")
        path = Path(path)
        if not path.is_file():
            raise SurfaceError(f"Image file not found: {path}")

        frame.clear()
        size = self.measure(path)
        frame.image_path = path
        if size is not None:
            frame.metadata["pixel_size"] = size

    def fit_proportionally(self, frame: Region) -> None:
        if frame.image_path is None:
            raise SurfaceError(f"Frame {frame.region_id} has no content to fit")
        frame.fit = FitMode.PROPORTIONAL
        size = frame.metadata.get("pixel_size")
        if size is not None:
            frame.content_bounds = fit_proportionally(frame.bounds, *size)

    def set_region_text(self, region: Region, text: str) -> None:
        if region.role is RegionRole.IMAGE_FRAME:
            raise SurfaceError(f"Region {region.region_id} is an image frame and holds no text")
        region.text = text

    def set_justification(self, region: Region, alignment: Justification) -> None:
        region.justification = Justification(alignment)

    def measure(self, path: Path) -> Optional[Tuple[int, int]]:
        """
        Natural (width, height) of an image, if the surface can tell.

        The in-memory surface never opens files, so it returns None and
        fitted content bounds stay unknown.
        """
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _check_page(self, doc: Document, page: Page) -> None:
        if page is doc.master:
            return
        if page.index is None or page.index >= len(doc.pages) or doc.pages[page.index] is not page:
            raise SurfaceError(f"Page {page.index} does not belong to document {doc.doc_id}")

    def _register(self, doc: Document, region: Region) -> None:
        doc.registry.setdefault(region.role, []).append(region)
