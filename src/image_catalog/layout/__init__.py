"""
Module: layout

Purpose:
    Grid geometry and the catalog page template.
    Converts a LayoutConfig into positioned, role-tagged template regions.

Key Functions:
    - partition(): Split a rectangle into an evenly spaced grid
    - fit_proportionally(): Aspect-preserving fit inside a frame
    - build_template(): Build the page template

Key Classes:
    - LayoutConfig: Configuration for the page layout
    - Cell: One grid position
    - TemplateSpec: Regions replicated onto every page
    - InvalidGridError: Non-positive or inconsistent geometry

Used By:
    - image_catalog.controller: Build pipeline
    - image_catalog.catalog.builder: Page materialization
"""

from .config import LayoutConfig, page_size_in_units
from .models import Cell, TemplateSpec
from .grid import InvalidGridError, cell_size, partition, fit_proportionally
from .template import build_template, band_bounds

__all__ = [
    # Config
    "LayoutConfig",
    "page_size_in_units",
    # Models
    "Cell",
    "TemplateSpec",
    # Functions
    "cell_size",
    "partition",
    "fit_proportionally",
    "build_template",
    "band_bounds",
    # Errors
    "InvalidGridError",
]
