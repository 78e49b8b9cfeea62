"""
Module: output.pdf

Purpose:
    Render a catalog document to PDF using ReportLab.
    Extends the in-memory surface: placement validates images with Pillow
    so unreadable files fail at placement time, and save() draws every
    page (master text, fitted images, captions) onto a canvas.

Key Classes:
    - PdfSurface: In-memory document model that can be saved as PDF

Dependencies:
    - reportlab: PDF generation
    - PIL: Image loading and measurement
    - output.memory: InMemorySurface

Used By:
    - controller: Build pipeline
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageOps
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from image_catalog.core.models import (
    Bounds,
    FitMode,
    Justification,
    PAGE_NUMBER_MARKER,
    Region,
    RegionRole,
    VerticalJustification,
)
from image_catalog.layout.grid import fit_proportionally

from .memory import InMemorySurface
from .surface import Document, Page, SurfaceError

logger = logging.getLogger(__name__)

# Text configuration
DEFAULT_FONT = "Helvetica"
MAX_FONT_SIZE = 10.0
MIN_FONT_SIZE = 4.0
LINE_SPACING = 1.2
TEXT_PADDING_PT = 2.0

OUTLINE_GRAY = 0.75


class PdfSurface(InMemorySurface):
    """
    Surface that renders its documents to PDF.

    Example:
        >>> surface = PdfSurface()
        >>> doc = surface.create_document()
        >>> ...  # build the catalog
        >>> surface.save(doc, Path("catalog.pdf"))
    """

    def __init__(
        self,
        *args,
        font_name: str = DEFAULT_FONT,
        draw_frame_outlines: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.font_name = font_name
        self.draw_frame_outlines = draw_frame_outlines

    # ─────────────────────────────────────────────────────────────────────────
    # Placement
    # ─────────────────────────────────────────────────────────────────────────

    def measure(self, path: Path) -> Optional[Tuple[int, int]]:
        """
        Decode an image with Pillow and return its oriented (width, height).

        Raises:
            SurfaceError: If Pillow cannot read the file
        """
        try:
            with Image.open(path) as img:
                img.load()
                img = ImageOps.exif_transpose(img)
                return img.size
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
            raise SurfaceError(f"Cannot read image {path.name}: {e}") from e

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def save(self, doc: Document, output_path: Path) -> Path:
        """
        Render a document to a PDF file.

        Each page shows the master regions it has not overridden (header,
        column labels, footer with its page number resolved) followed by
        its own regions (image frames and captions).

        Args:
            doc: Document built on this surface
            output_path: Path to write PDF

        Returns:
            The path written

        Raises:
            OSError: If the PDF cannot be written
        """
        if doc.page_count == 0:
            logger.warning("Document has no pages, creating empty PDF")

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        page_size = (doc.page_width * doc.unit_pt, doc.page_height * doc.unit_pt)
        c = canvas.Canvas(str(output_path), pagesize=page_size)
        c.setTitle(output_path.stem)

        for page in doc.pages:
            self._render_page(c, doc, page)
            c.showPage()

        c.save()
        logger.info(f"Rendered {doc.page_count} pages to {output_path}")
        return output_path

    def _render_page(self, c: canvas.Canvas, doc: Document, page: Page) -> None:
        regions: List[Region] = self.master_regions_for_page(doc, page) + page.regions
        for region in regions:
            if region.role is RegionRole.IMAGE_FRAME:
                self._draw_frame(c, doc, region)
            else:
                text = region.text or ""
                if PAGE_NUMBER_MARKER in text:
                    text = text.replace(PAGE_NUMBER_MARKER, str(page.number))
                self._draw_text(c, doc, region, text)

    def _draw_frame(self, c: canvas.Canvas, doc: Document, frame: Region) -> None:
        if self.draw_frame_outlines:
            x, y, w, h = _to_pdf_rect(doc, frame.bounds)
            c.saveState()
            c.setStrokeGray(OUTLINE_GRAY)
            c.setLineWidth(0.5)
            c.rect(x, y, w, h, stroke=1, fill=0)
            c.restoreState()

        if frame.image_path is None:
            return

        try:
            with Image.open(frame.image_path) as img:
                img = ImageOps.exif_transpose(img)
                reader = _pil_to_reader(img)
                size = img.size
        except (OSError, SyntaxError, ValueError) as e:
            # File changed between placement and save
            logger.warning(f"Skipping unreadable image {frame.image_path}: {e}")
            return

        if frame.fit is FitMode.PROPORTIONAL:
            target = frame.content_bounds or fit_proportionally(frame.bounds, *size)
        else:
            target = frame.bounds

        x, y, w, h = _to_pdf_rect(doc, target)
        c.drawImage(reader, x, y, width=w, height=h, mask="auto")

    def _draw_text(self, c: canvas.Canvas, doc: Document, region: Region, text: str) -> None:
        if not text:
            return

        x, y, w, h = _to_pdf_rect(doc, region.bounds)
        lines = text.split("\n")
        font_size = _fit_font_size(c, lines, self.font_name, w, h)
        leading = font_size * LINE_SPACING
        block_height = leading * (len(lines) - 1) + font_size

        if region.vertical_justification is VerticalJustification.TOP:
            first_baseline = y + h - TEXT_PADDING_PT - font_size
        elif region.vertical_justification is VerticalJustification.BOTTOM:
            first_baseline = y + TEXT_PADDING_PT + block_height - font_size
        else:
            first_baseline = y + (h + block_height) / 2 - font_size

        c.saveState()
        c.setFont(self.font_name, font_size)
        c.setFillColorRGB(0, 0, 0)
        for i, line in enumerate(lines):
            baseline = first_baseline - i * leading
            if region.justification is Justification.CENTER:
                c.drawCentredString(x + w / 2, baseline, line)
            elif region.justification is Justification.RIGHT:
                c.drawRightString(x + w - TEXT_PADDING_PT, baseline, line)
            else:
                c.drawString(x + TEXT_PADDING_PT, baseline, line)
        c.restoreState()


def _to_pdf_rect(doc: Document, bounds: Bounds) -> Tuple[float, float, float, float]:
    """
    Convert top-down page-unit bounds to a bottom-up PDF rectangle.

    Returns:
        (x, y, width, height) in points, (x, y) being the lower-left corner
    """
    unit = doc.unit_pt
    page_height_pt = doc.page_height * unit
    return (
        bounds.left * unit,
        page_height_pt - bounds.bottom * unit,
        bounds.width * unit,
        bounds.height * unit,
    )


def _fit_font_size(
    c: canvas.Canvas,
    lines: List[str],
    font_name: str,
    width_pt: float,
    height_pt: float,
) -> float:
    """Largest font size (capped) at which every line fits the box."""
    usable_height = max(height_pt - 2 * TEXT_PADDING_PT, MIN_FONT_SIZE)
    size = min(MAX_FONT_SIZE, usable_height / (LINE_SPACING * len(lines)))

    usable_width = max(width_pt - 2 * TEXT_PADDING_PT, 1.0)
    widest = max(c.stringWidth(line, font_name, size) for line in lines)
    if widest > usable_width:
        size = size * usable_width / widest
    return max(size, MIN_FONT_SIZE)


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    if img.mode not in ("RGB", "RGBA", "L"):
        img = img.convert("RGBA" if "A" in img.getbands() else "RGB")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)
