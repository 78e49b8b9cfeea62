"""
Module: catalog

Purpose:
    Find the input images and build the catalog document.

Key Functions:
    - list_image_files(): Filtered, sorted image files in a folder
    - choose_folder(): Interactive folder prompt
    - assign(): Positional image/frame/label pairing
    - page_count(): Pages needed for n images

Key Classes:
    - CatalogBuilder: Materializes the template and places images
    - BuildResult: Build outcome
    - Assignment: One image with its frame and label

Used By:
    - image_catalog.controller: Build pipeline
    - image_catalog.cli: Command-line entry point
"""

from .sources import (
    IMAGE_EXTENSIONS,
    UserCancelled,
    choose_folder,
    is_image_candidate,
    list_image_files,
    load_catalog_images,
)
from .assignment import Assignment, assign
from .builder import (
    UNPLACED_MARK,
    BuildResult,
    CatalogBuilder,
    EmptyInputError,
    PlacementError,
    page_count,
)

__all__ = [
    # Sources
    "IMAGE_EXTENSIONS",
    "UserCancelled",
    "choose_folder",
    "is_image_candidate",
    "list_image_files",
    "load_catalog_images",
    # Pairing
    "Assignment",
    "assign",
    # Builder
    "UNPLACED_MARK",
    "BuildResult",
    "CatalogBuilder",
    "EmptyInputError",
    "PlacementError",
    "page_count",
]
