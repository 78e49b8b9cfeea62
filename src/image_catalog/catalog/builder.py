"""
Module: catalog.builder

Purpose:
    Build a catalog document on a render surface: enough pages for every
    image, each materialized from the page template, then one image and
    one caption per frame/label pair in order.

Key Functions:
    - page_count(): Pages needed for n images

Key Classes:
    - CatalogBuilder: Materializes the template and fills it
    - BuildResult: Document plus pairing and failure report
    - EmptyInputError: Nothing to catalog
    - PlacementError: One image that could not be placed

Algorithm:
    1. pages = ceil(len(images) / frames_per_page)
    2. Master regions from the template, pages added, overridable
       regions copied onto each page
    3. Frames F and labels L collected in page then reading order
    4. images[i] -> F[i] (placed, fitted proportionally)
       images[i] -> L[i] (caption = display name)
    Frames past the last image stay empty.

Dependencies:
    - output.surface: RenderSurface, SurfaceError
    - layout.models: TemplateSpec
    - catalog.assignment: assign

Used By:
    - controller: Build pipeline
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence

from image_catalog.core.models import CatalogImage, Justification, RegionRole
from image_catalog.layout.models import TemplateSpec
from image_catalog.output.surface import Document, RenderSurface, SurfaceError

from .assignment import Assignment, assign

logger = logging.getLogger(__name__)

# Appended to the caption of an image that could not be placed
UNPLACED_MARK = " (not placed)"


class EmptyInputError(Exception):
    """No images to put in the catalog."""
    pass


class PlacementError(Exception):
    """
    One image could not be placed.

    Recorded per item rather than raised; the rest of the batch carries on.

    Attributes:
        image: Image that failed
        frame_index: Position of its frame in the catalog
        reason: Surface-reported cause
    """

    def __init__(self, image: CatalogImage, frame_index: int, reason: str) -> None:
        super().__init__(f"{image.filename} (frame {frame_index}): {reason}")
        self.image = image
        self.frame_index = frame_index
        self.reason = reason


def page_count(image_count: int, per_page: int) -> int:
    """
    Number of pages needed to hold ``image_count`` images.

    Examples:
        >>> page_count(10, 9)
        2
        >>> page_count(9, 9)
        1
    """
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1: {per_page}")
    if image_count < 0:
        raise ValueError(f"image_count must be non-negative: {image_count}")
    return math.ceil(image_count / per_page)


@dataclass
class BuildResult:
    """
    Outcome of one catalog build.

    Attributes:
        document: Document built on the surface
        page_count: Pages in the document
        frames_per_page: Frames per page from the template
        assignments: Image/frame/label pairing, in catalog order
        failures: Images that could not be placed

    Example:
        >>> result = builder.build(images, template)
        >>> result.placed_count, result.empty_frame_count
        (10, 8)
    """

    document: Document
    page_count: int
    frames_per_page: int
    assignments: tuple[Assignment, ...]
    failures: List[PlacementError] = field(default_factory=list)

    @property
    def total_frames(self) -> int:
        return self.page_count * self.frames_per_page

    @property
    def placed_count(self) -> int:
        """Images successfully placed."""
        return len(self.assignments) - len(self.failures)

    @property
    def empty_frame_count(self) -> int:
        """Frames holding no image (unused or failed)."""
        return self.total_frames - self.placed_count

    @property
    def ok(self) -> bool:
        return not self.failures


class CatalogBuilder:
    """
    Fills a render surface with a catalog.

    Attributes:
        surface: Surface the document is created on

    Example:
        >>> builder = CatalogBuilder(InMemorySurface())
        >>> result = builder.build(images, build_template(LayoutConfig()))
        >>> result.page_count
        2
    """

    def __init__(self, surface: RenderSurface) -> None:
        self.surface = surface

    def build(self, images: Sequence[CatalogImage], template: TemplateSpec) -> BuildResult:
        """
        Build the catalog document.

        Args:
            images: Images in catalog order
            template: Page template

        Returns:
            BuildResult with the document, pairing and any failures

        Raises:
            EmptyInputError: If images is empty (no document is created)
        """
        if not images:
            raise EmptyInputError("No images to catalog")

        per_page = template.frames_per_page
        pages = page_count(len(images), per_page)
        logger.info(f"Building catalog: {len(images)} images on {pages} pages ({per_page} per page)")

        doc = self._materialize(template, pages)

        frames = self.surface.find_regions_by_role(doc, RegionRole.IMAGE_FRAME)
        labels = self.surface.find_regions_by_role(doc, RegionRole.IMAGE_LABEL)
        expected = pages * per_page
        if not len(frames) == len(labels) == expected:
            raise RuntimeError(
                f"Surface returned {len(frames)} frames and {len(labels)} labels, "
                f"expected {expected} of each"
            )

        assignments = assign(images, frames, labels)
        failures = self._place_images(assignments)
        self._place_labels(assignments, {f.frame_index for f in failures})

        result = BuildResult(
            document=doc,
            page_count=pages,
            frames_per_page=per_page,
            assignments=assignments,
            failures=failures,
        )
        logger.info(
            f"Placed {result.placed_count}/{len(images)} images, "
            f"{result.empty_frame_count} empty frames"
        )
        return result

    def _materialize(self, template: TemplateSpec, pages: int) -> Document:
        """Create the document, its master regions and its pages."""
        surface = self.surface
        doc = surface.create_document(
            page_width=template.page_width,
            page_height=template.page_height,
            unit_pt=template.unit_pt,
        )
        surface.set_facing_pages(doc, False)

        for spec in template.regions:
            surface.add_region(
                doc,
                doc.master,
                spec.bounds,
                spec.role,
                spec.text,
                justification=spec.justification,
                vertical_justification=spec.vertical_justification,
                allow_overrides=spec.allow_overrides,
            )

        surface.set_page_count(doc, pages)
        for page in doc.pages:
            surface.override_regions_for_page(doc, page)
        return doc

    def _place_images(self, assignments: Sequence[Assignment]) -> List[PlacementError]:
        failures: List[PlacementError] = []
        for a in assignments:
            try:
                self.surface.place_image_in_frame(a.frame, a.image.path)
                self.surface.fit_proportionally(a.frame)
            except SurfaceError as e:
                a.frame.clear()
                failure = PlacementError(a.image, a.index, str(e))
                failures.append(failure)
                logger.warning(f"Could not place {failure}")
                continue
            a.frame.metadata["source"] = str(a.image.path)
            logger.debug(f"Placed {a.image.filename} in frame {a.index}")
        return failures

    def _place_labels(self, assignments: Sequence[Assignment], failed: set) -> None:
        for a in assignments:
            text = a.image.display_name
            if a.index in failed:
                text += UNPLACED_MARK
            self.surface.set_region_text(a.label, text)
            self.surface.set_justification(a.label, Justification.CENTER)
            a.label.metadata["source"] = str(a.image.path)
