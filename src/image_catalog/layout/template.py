"""
Module: layout.template

Purpose:
    Build the fixed page template replicated onto every catalog page:
    a title header, a band of column labels, a grid of image frames with
    captions, and a page-number footer.

Key Functions:
    - build_template(): Main entry point
    - band_bounds(): Outer rectangles of the four bands

Algorithm:
    With margin m, page width W and height H:
    1. header        [m, m, m + header_height, W - m]
    2. column labels directly below the header, partitioned 1 x cols
    3. footer        [H - m - footer_height, m, H - m, W - m]
    4. image grid    between the column labels and the footer,
                     partitioned rows x cols with a caption band

Dependencies:
    - layout.config: LayoutConfig
    - layout.grid: partition, InvalidGridError
    - core.models: Bounds, RegionSpec, RegionRole

Used By:
    - controller: Build pipeline
    - catalog.builder: Materializes the template on a surface
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from image_catalog.core.models import (
    Bounds,
    Justification,
    PAGE_NUMBER_MARKER,
    RegionRole,
    RegionSpec,
    VerticalJustification,
)

from .config import LayoutConfig
from .grid import InvalidGridError, partition
from .models import TemplateSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateBands:
    """Outer rectangles of the header, column-label, grid and footer bands."""

    header: Bounds
    column_labels: Bounds
    image_grid: Bounds
    footer: Bounds


def _band(name: str, top: float, left: float, bottom: float, right: float) -> Bounds:
    try:
        return Bounds(top, left, bottom, right)
    except ValueError as e:
        raise InvalidGridError(
            f"{name} band is empty ({top:g}, {left:g}, {bottom:g}, {right:g}); "
            "check margins and band heights against the page size"
        ) from e


def band_bounds(config: LayoutConfig) -> TemplateBands:
    """
    Compute the four band rectangles for a layout.

    Raises:
        InvalidGridError: If any band is empty for this page size
    """
    m = config.margin
    right = config.page_width - m
    header_bottom = m + config.header_height
    labels_bottom = header_bottom + config.column_label_height
    footer_top = config.page_height - m - config.footer_height

    return TemplateBands(
        header=_band("Header", m, m, header_bottom, right),
        column_labels=_band("Column label", header_bottom, m, labels_bottom, right),
        image_grid=_band("Image grid", labels_bottom, m, footer_top, right),
        footer=_band("Footer", footer_top, m, config.page_height - m, right),
    )


def build_template(config: LayoutConfig) -> TemplateSpec:
    """
    Build the page template for a layout.

    Column labels are filled strictly left to right: partition() already
    returns cells in reading order, so label i lands in column i.

    Args:
        config: Layout configuration

    Returns:
        TemplateSpec with header, column labels, footer and one
        imageFrame/imageLabel pair per grid cell

    Raises:
        InvalidGridError: If the bands or grids have non-positive geometry.
            Raised before any region is produced.

    Example:
        >>> template = build_template(LayoutConfig())
        >>> template.frames_per_page
        9
        >>> len(template.regions_by_role(RegionRole.IMAGE_LABEL))
        9
    """
    bands = band_bounds(config)

    # Compute every grid up front so nothing is emitted for a bad layout
    label_cells = partition(
        bands.column_labels,
        rows=1,
        cols=config.cols,
        spacing=config.gutter,
    )
    image_cells = partition(
        bands.image_grid,
        rows=config.rows,
        cols=config.cols,
        spacing=config.gutter,
        caption_height=config.caption_height,
    )

    regions: List[RegionSpec] = [
        RegionSpec(
            role=RegionRole.HEADER,
            bounds=bands.header,
            text=config.title,
            justification=Justification.LEFT,
            vertical_justification=VerticalJustification.CENTER,
        )
    ]

    for cell, label in zip(label_cells, config.resolved_column_labels):
        regions.append(RegionSpec(
            role=RegionRole.COLUMN_LABEL,
            bounds=cell.content,
            text=label,
            justification=Justification.CENTER,
        ))

    regions.append(RegionSpec(
        role=RegionRole.FOOTER,
        bounds=bands.footer,
        text=PAGE_NUMBER_MARKER,
        justification=Justification.CENTER,
        vertical_justification=VerticalJustification.CENTER,
    ))

    for cell in image_cells:
        regions.append(RegionSpec(
            role=RegionRole.IMAGE_FRAME,
            bounds=cell.content,
            allow_overrides=True,
        ))
        if cell.caption is not None:
            regions.append(RegionSpec(
                role=RegionRole.IMAGE_LABEL,
                bounds=cell.caption,
                text="",
                justification=Justification.CENTER,
                allow_overrides=True,
            ))

    template = TemplateSpec(
        page_width=config.page_width,
        page_height=config.page_height,
        unit_pt=config.unit_pt,
        rows=config.rows,
        cols=config.cols,
        regions=tuple(regions),
    )
    logger.debug(
        f"Built template with {len(template.regions)} regions, "
        f"{template.frames_per_page} frames per page"
    )
    return template
