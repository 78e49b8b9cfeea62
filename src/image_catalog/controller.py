"""
Module: controller

Purpose:
    Orchestrate the complete catalog pipeline.
    List images → Build template → Build catalog → Render PDF → Metadata

Key Functions:
    - build_catalog(): Main entry point for building a catalog

Key Classes:
    - CatalogConfig: Configuration for one run
    - CatalogResult: Complete run result
    - CatalogError: Exception for output failures

Dependencies:
    - catalog: File listing and catalog building
    - layout: Page template
    - output: PDF surface

Used By:
    - image_catalog.cli: Command-line entry point
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from . import __version__
from .catalog import (
    BuildResult,
    CatalogBuilder,
    EmptyInputError,
    list_image_files,
    load_catalog_images,
)
from .layout import LayoutConfig, build_template
from .output import PdfSurface

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "catalog.pdf"
METADATA_NAME = "catalog_metadata.json"


class CatalogError(Exception):
    """Error writing catalog output."""
    pass


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for one catalog run (immutable).

    Attributes:
        image_dir: Folder holding the images
        output_path: PDF to write (default: image_dir/catalog.pdf)
        layout: Page layout
        strict_extensions: Require extensions at the end of filenames
        write_metadata: Write catalog_metadata.json beside the PDF
        draw_frame_outlines: Outline every image frame in the PDF

    Example:
        >>> config = CatalogConfig(image_dir=Path("~/scans").expanduser())
        >>> config.resolved_output_path.name
        'catalog.pdf'
    """

    image_dir: Path
    output_path: Optional[Path] = None
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    strict_extensions: bool = False
    write_metadata: bool = True
    draw_frame_outlines: bool = False

    @property
    def resolved_output_path(self) -> Path:
        if self.output_path is not None:
            return Path(self.output_path)
        return Path(self.image_dir) / DEFAULT_OUTPUT_NAME


@dataclass(frozen=True)
class CatalogResult:
    """
    Complete run result (immutable).

    Attributes:
        pdf_path: Generated PDF
        metadata_path: Metadata JSON, if written
        build: Builder result (pairing, failures, document)
        metadata: Metadata dictionary
    """

    pdf_path: Path
    metadata_path: Optional[Path]
    build: BuildResult
    metadata: dict

    @property
    def page_count(self) -> int:
        return self.build.page_count

    @property
    def image_count(self) -> int:
        return len(self.build.assignments)

    @property
    def failures(self):
        return self.build.failures


def build_catalog(
    config: CatalogConfig,
    *,
    surface: Optional[PdfSurface] = None,
) -> CatalogResult:
    """
    Build a catalog from start to finish.

    Pipeline:
    1. List image files in the folder
    2. Build the page template (geometry checked before any document)
    3. Build the catalog document
    4. Render to PDF
    5. (Optional) Write metadata

    Args:
        config: Run configuration
        surface: Surface to build on (default: a new PdfSurface)

    Returns:
        CatalogResult with paths, pairing and failures

    Raises:
        FileNotFoundError / NotADirectoryError: Bad image folder
        EmptyInputError: No image files in the folder
        InvalidGridError: Layout does not fit the page
        CatalogError: Output could not be written

    Example:
        >>> result = build_catalog(CatalogConfig(image_dir=Path("scans")))
        >>> print(f"{result.image_count} images on {result.page_count} pages")
    """
    start_time = time.perf_counter()
    image_dir = Path(config.image_dir)
    logger.info(f"Starting catalog for {image_dir}")

    # 1. Images
    paths = list_image_files(image_dir, strict=config.strict_extensions)
    if not paths:
        raise EmptyInputError(f"No image files found in {image_dir}")
    images = load_catalog_images(paths)
    logger.info(f"Found {len(images)} images")

    # 2. Template
    template = build_template(config.layout)

    # 3. Catalog
    if surface is None:
        surface = PdfSurface(draw_frame_outlines=config.draw_frame_outlines)
    build = CatalogBuilder(surface).build(images, template)

    # 4. PDF
    pdf_path = config.resolved_output_path
    try:
        surface.save(build.document, pdf_path)
    except OSError as e:
        raise CatalogError(f"Failed to write PDF {pdf_path}: {e}") from e

    # 5. Metadata
    metadata = _build_metadata(config, build)
    metadata_path = None
    if config.write_metadata:
        metadata_path = pdf_path.with_name(METADATA_NAME)
        _write_metadata(metadata_path, metadata)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Catalog generation completed in {elapsed:.2f}s")

    return CatalogResult(
        pdf_path=pdf_path,
        metadata_path=metadata_path,
        build=build,
        metadata=metadata,
    )


def _build_metadata(config: CatalogConfig, build: BuildResult) -> dict:
    """
    Build the metadata dictionary for a catalog.

    Contains the layout used, page counts and a manifest entry per image
    (1-indexed page, frame position on that page, caption, status).
    """
    failed = {f.frame_index: f.reason for f in build.failures}
    per_page = build.frames_per_page

    manifest = []
    for a in build.assignments:
        entry = {
            "file": str(a.image.path),
            "display_name": a.image.display_name,
            "page": a.index // per_page + 1,  # 1-indexed for humans
            "frame": a.index % per_page,
            "status": "failed" if a.index in failed else "placed",
        }
        if a.index in failed:
            entry["error"] = failed[a.index]
        manifest.append(entry)

    return {
        "generated_at": datetime.now().isoformat(),
        "builder_version": __version__,
        "image_dir": str(config.image_dir),
        "strict_extensions": config.strict_extensions,
        "layout": config.layout.to_dict(),
        "image_count": len(build.assignments),
        "page_count": build.page_count,
        "frames_per_page": per_page,
        "placed_count": build.placed_count,
        "empty_frame_count": build.empty_frame_count,
        "manifest": manifest,
    }


def _write_metadata(metadata_path: Path, metadata: dict) -> None:
    """
    Write metadata JSON.

    Raises:
        CatalogError: If writing fails
    """
    try:
        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2)
        logger.debug(f"Wrote metadata to {metadata_path}")
    except OSError as e:
        raise CatalogError(f"Failed to write metadata: {e}") from e
