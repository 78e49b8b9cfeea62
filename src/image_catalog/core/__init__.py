"""
Image Catalog Core Package

Shared data models used by the layout engine, the catalog builder and the
render surfaces.

Geometry is expressed in page units with the y axis growing downward, so
``Bounds.top`` is always the smaller vertical coordinate. Template-level
objects (Bounds, RegionSpec, CatalogImage) are frozen; document-level
Regions are mutable because their content changes as images and captions
are placed.
"""

from .models import Bounds, CatalogImage, Region, RegionRole, RegionSpec

__all__ = [
    "Bounds",
    "CatalogImage",
    "Region",
    "RegionRole",
    "RegionSpec",
]
