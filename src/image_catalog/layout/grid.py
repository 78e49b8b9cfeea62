"""
Module: layout.grid

Purpose:
    Pure grid geometry. Partitions an outer rectangle into rows x columns
    of evenly sized cells separated by a uniform gutter, optionally
    splitting each cell into a content area and a caption band.

Key Functions:
    - cell_size(): Derived cell width/height for a grid
    - partition(): Ordered cells of a grid
    - fit_proportionally(): Aspect-preserving, centered fit inside a frame

Algorithm:
    cell_width  = (outer_width  - (cols - 1) * spacing) / cols
    cell_height = (outer_height - (rows - 1) * spacing) / rows
    Cell (r, c) starts at outer.left + c * (cell_width + spacing),
    outer.top + r * (cell_height + spacing).

Dependencies:
    - core.models.bounds: Bounds
    - layout.models: Cell

Used By:
    - layout.template: Column-label band and image grid
    - output.pdf: Proportional fit of placed images
"""

from __future__ import annotations

import logging
from typing import Tuple

from image_catalog.core.models import Bounds

from .models import Cell

logger = logging.getLogger(__name__)


class InvalidGridError(ValueError):
    """Grid geometry is non-positive or inconsistent with its bounds."""
    pass


def cell_size(
    outer: Bounds,
    rows: int,
    cols: int,
    spacing: float = 1.0,
) -> Tuple[float, float]:
    """
    Compute the width and height of one grid cell.

    Args:
        outer: Rectangle to partition
        rows: Number of rows (>= 1)
        cols: Number of columns (>= 1)
        spacing: Gutter between neighbouring cells (>= 0)

    Returns:
        (cell_width, cell_height)

    Raises:
        InvalidGridError: If counts/spacing are out of range or a derived
            dimension is not positive
    """
    if rows < 1 or cols < 1:
        raise InvalidGridError(f"Grid needs at least one row and column: {rows}x{cols}")
    if spacing < 0:
        raise InvalidGridError(f"Grid spacing must be non-negative: {spacing}")

    width = (outer.width - (cols - 1) * spacing) / cols
    height = (outer.height - (rows - 1) * spacing) / rows
    if width <= 0:
        raise InvalidGridError(
            f"Cell width is {width:g}: {cols} columns with spacing {spacing:g} "
            f"do not fit in width {outer.width:g}"
        )
    if height <= 0:
        raise InvalidGridError(
            f"Cell height is {height:g}: {rows} rows with spacing {spacing:g} "
            f"do not fit in height {outer.height:g}"
        )
    return width, height


def partition(
    outer: Bounds,
    rows: int,
    cols: int,
    spacing: float = 1.0,
    caption_height: float = 0.0,
) -> tuple[Cell, ...]:
    """
    Partition a rectangle into an evenly spaced grid of cells.

    Cells are returned in reading order: row-major, top row first, left
    column first. Index i is the i-th cell a reader meets, so index 0 is
    the top-left cell and the last index is the bottom-right cell.

    When caption_height > 0, each cell's content occupies the top
    ``cell_height - caption_height`` of the cell and the caption occupies
    the bottom band, abutting the content with no gutter between them.

    Args:
        outer: Rectangle to partition
        rows: Number of rows (>= 1)
        cols: Number of columns (>= 1)
        spacing: Gutter between neighbouring cells (>= 0)
        caption_height: Caption band height per cell (0 = no caption)

    Returns:
        Tuple of rows * cols Cells

    Raises:
        InvalidGridError: If any derived dimension is not positive

    Example:
        >>> cells = partition(Bounds(0, 0, 32, 32), rows=3, cols=3, spacing=1)
        >>> cells[0].content.right
        10.0
        >>> cells[8].content.top, cells[8].content.bottom
        (22.0, 32)
    """
    width, height = cell_size(outer, rows, cols, spacing)
    if caption_height < 0:
        raise InvalidGridError(f"Caption height must be non-negative: {caption_height}")
    if caption_height >= height:
        raise InvalidGridError(
            f"Caption height {caption_height:g} leaves no room for content "
            f"in cells of height {height:g}"
        )

    cells = []
    for row in range(rows):
        top = outer.top + row * (height + spacing)
        # Snap the last row/column to the outer edge so rounding never
        # leaves a sliver or overshoots.
        bottom = outer.bottom if row == rows - 1 else top + height
        for col in range(cols):
            left = outer.left + col * (width + spacing)
            right = outer.right if col == cols - 1 else left + width
            footprint = Bounds(top, left, bottom, right)

            if caption_height > 0:
                content, caption = footprint.split_bottom(caption_height)
            else:
                content, caption = footprint, None

            cells.append(Cell(
                row=row,
                col=col,
                cols=cols,
                footprint=footprint,
                content=content,
                caption=caption,
            ))

    logger.debug(
        f"Partitioned {outer.width:g}x{outer.height:g} into {rows}x{cols} cells "
        f"of {width:g}x{height:g}"
    )
    return tuple(cells)


def fit_proportionally(
    frame: Bounds,
    content_width: float,
    content_height: float,
) -> Bounds:
    """
    Scale content to fit inside a frame, preserving its aspect ratio.

    The content is scaled so its longer relative side touches the frame,
    then centered; the leftover space is split evenly on both sides.

    Args:
        frame: Frame rectangle
        content_width: Natural content width (any unit)
        content_height: Natural content height (same unit)

    Returns:
        Bounds of the fitted content, inside ``frame``

    Raises:
        ValueError: If a content dimension is not positive

    Example:
        >>> fit_proportionally(Bounds(0, 0, 10, 20), 100, 100).to_list()
        [0.0, 5.0, 10.0, 15.0]
    """
    if content_width <= 0 or content_height <= 0:
        raise ValueError(
            f"Content size must be positive: {content_width}x{content_height}"
        )
    scale = min(frame.width / content_width, frame.height / content_height)
    fitted_width = content_width * scale
    fitted_height = content_height * scale
    left = frame.left + (frame.width - fitted_width) / 2
    top = frame.top + (frame.height - fitted_height) / 2
    return Bounds(top, left, top + fitted_height, left + fitted_width)
