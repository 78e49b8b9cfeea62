"""
Module: output

Purpose:
    Render surfaces for catalog documents.
    The builder talks only to the RenderSurface interface; surfaces own
    the document model and turn it into output.

Key Classes:
    - RenderSurface: Abstract surface interface
    - InMemorySurface: Document model without drawing (test double)
    - PdfSurface: In-memory model rendered with ReportLab

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - image_catalog.catalog.builder: Catalog construction
    - image_catalog.controller: Pipeline orchestration
"""

from .surface import Document, Page, RenderSurface, SurfaceError
from .memory import InMemorySurface
from .pdf import PdfSurface

__all__ = [
    "Document",
    "Page",
    "RenderSurface",
    "SurfaceError",
    "InMemorySurface",
    "PdfSurface",
]
