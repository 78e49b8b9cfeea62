"""
Core data models: page geometry, regions and catalog images.
"""

from .bounds import Bounds
from .images import CatalogImage, display_name
from .regions import (
    FitMode,
    Justification,
    PAGE_NUMBER_MARKER,
    Region,
    RegionRole,
    RegionSpec,
    VerticalJustification,
)

__all__ = [
    "Bounds",
    "CatalogImage",
    "display_name",
    "FitMode",
    "Justification",
    "PAGE_NUMBER_MARKER",
    "Region",
    "RegionRole",
    "RegionSpec",
    "VerticalJustification",
]
